"""Flat-table export of leave requests to CSV or Excel."""
import csv
import io
import logging
from io import BytesIO
from pathlib import Path
from typing import Iterable, List, Union

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from leavedesk.models.leave_request import LeaveStatus
from leavedesk.schemas import LeaveRequestRecord

logger = logging.getLogger(__name__)

EXPORT_HEADERS = [
    "ID",
    "Employee Name",
    "Start Date",
    "End Date",
    "Leave Type",
    "Reason",
    "Status",
    "Admin Comments",
    "Requested Date",
    "Total Days",
]

CSV_MEDIA_TYPE = "text/csv"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def export_row(record: LeaveRequestRecord) -> list:
    return [
        record.id,
        record.employee_name or "",
        record.start_date.strftime("%Y-%m-%d"),
        record.end_date.strftime("%Y-%m-%d"),
        record.leave_type or "",
        record.reason or "",
        record.status.value,
        record.admin_comment or "",
        record.requested_at.strftime("%Y-%m-%d %H:%M"),
        record.total_days,
    ]


def write_csv(records: Iterable[LeaveRequestRecord], stream) -> int:
    """Write the header and one row per record; returns the row count."""
    writer = csv.writer(stream, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
    writer.writerow(EXPORT_HEADERS)
    count = 0
    for record in records:
        writer.writerow(export_row(record))
        count += 1
    return count


def export_csv(records: Iterable[LeaveRequestRecord]) -> str:
    buffer = io.StringIO()
    write_csv(records, buffer)
    return buffer.getvalue()


def build_workbook(records: Iterable[LeaveRequestRecord]) -> Workbook:
    wb = Workbook()
    ws = wb.active
    ws.title = "Leave Requests"

    header_fill = PatternFill(start_color="ADD8E6", end_color="ADD8E6", fill_type="solid")
    header_font = Font(bold=True)
    center = Alignment(horizontal="center", vertical="center")
    bottom_border = Border(bottom=Side(style="thin"))

    status_styles = {
        LeaveStatus.APPROVED.value: (
            PatternFill(start_color="90EE90", end_color="90EE90", fill_type="solid"),
            Font(color="006400"),
        ),
        LeaveStatus.DENIED.value: (
            PatternFill(start_color="FFB6C1", end_color="FFB6C1", fill_type="solid"),
            Font(color="8B0000"),
        ),
        LeaveStatus.PENDING.value: (
            PatternFill(start_color="FFFFE0", end_color="FFFFE0", fill_type="solid"),
            Font(color="FF8C00"),
        ),
    }

    for col, header in enumerate(EXPORT_HEADERS, 1):
        cell = ws.cell(row=1, column=col, value=header)
        cell.fill, cell.font, cell.alignment, cell.border = header_fill, header_font, center, bottom_border

    row_num = 2
    for record in records:
        values = export_row(record)
        for col, value in enumerate(values, 1):
            ws.cell(row=row_num, column=col, value=value)

        status_cell = ws.cell(row=row_num, column=EXPORT_HEADERS.index("Status") + 1)
        style = status_styles.get(status_cell.value)
        if style:
            status_cell.fill, status_cell.font = style
        row_num += 1

    # Column widths
    for col, width in zip("ABCDEFGHIJ", [8, 24, 12, 12, 18, 40, 12, 35, 18, 11]):
        ws.column_dimensions[col].width = width

    return wb


def export_xlsx(records: Iterable[LeaveRequestRecord]) -> BytesIO:
    excel_file = BytesIO()
    build_workbook(records).save(excel_file)
    excel_file.seek(0)
    return excel_file


def save_export(records: List[LeaveRequestRecord], file_path: Union[str, Path]) -> Path:
    """Write records to ``file_path``; ``.xlsx`` selects Excel, anything else CSV."""
    path = Path(file_path)
    if path.suffix.lower() == ".xlsx":
        build_workbook(records).save(path)
    else:
        with path.open("w", newline="", encoding="utf-8") as stream:
            write_csv(records, stream)
    logger.info("Exported %d leave requests to %s", len(records), path)
    return path
