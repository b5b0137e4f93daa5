from fastapi import APIRouter, Depends, HTTPException, status, Query
from fastapi.responses import Response, StreamingResponse
from typing import Optional
from datetime import date, datetime
from leavedesk.core.date_filters import get_date_range
from leavedesk.core.exceptions import LeaveDeskError
from leavedesk.models.leave_request import LeaveStatus
from leavedesk.schemas import Identity
from leavedesk.services.export import CSV_MEDIA_TYPE, XLSX_MEDIA_TYPE, export_csv, export_xlsx
from leavedesk.services.lifecycle import LeaveRequestManager
from leavedesk.api.dependencies import get_leave_manager, require_admin
from leavedesk.api.errors import http_error

router = APIRouter(prefix="/admin/reports", tags=["Admin - Reports"])


@router.get("/leave-requests/export")
def export_leave_requests(
    export_format: str = Query("csv", alias="format", pattern="^(csv|xlsx)$"),
    status_filter: Optional[LeaveStatus] = Query(None, alias="status"),
    from_date: Optional[date] = Query(None),
    to_date: Optional[date] = Query(None),
    date_range: Optional[str] = Query(None),
    manager: LeaveRequestManager = Depends(get_leave_manager),
    _: Identity = Depends(require_admin)
):
    """Export leave requests to CSV or Excel (admin only)."""
    if date_range and date_range != "custom":
        try:
            from_date, to_date = get_date_range(date_range)
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(exc)
            )

    try:
        records = manager.list_all(status_filter, from_date, to_date)
    except LeaveDeskError as exc:
        raise http_error(exc)

    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    if export_format == "xlsx":
        filename = f"LeaveRequests_{stamp}.xlsx"
        return StreamingResponse(
            export_xlsx(records),
            media_type=XLSX_MEDIA_TYPE,
            headers={"Content-Disposition": f"attachment; filename={filename}"}
        )

    filename = f"LeaveRequests_{stamp}.csv"
    return Response(
        content=export_csv(records),
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )
