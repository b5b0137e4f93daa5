from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Enum as SQLEnum
from datetime import datetime
import enum
from leavedesk.db.session import Base
from leavedesk.core.date_filters import inclusive_days


class LeaveStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    DENIED = "DENIED"


# Offered to the UI; the stored tag is free-form
LEAVE_TYPES = [
    "Annual Leave",
    "Sick Leave",
    "Personal Leave",
    "Maternity Leave",
    "Paternity Leave",
    "Other",
]


class LeaveRequest(Base):
    __tablename__ = "leave_requests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True)
    employee_name = Column(String(100), nullable=False)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False, index=True)
    leave_type = Column(String(50), nullable=False)
    reason = Column(String(500), nullable=False)
    status = Column(SQLEnum(LeaveStatus, length=50), nullable=False, default=LeaveStatus.PENDING, index=True)
    admin_comment = Column(String(500), nullable=True)

    requested_at = Column(DateTime, default=datetime.now, nullable=False, index=True)
    processed_at = Column(DateTime, nullable=True)
    processed_by = Column(String(100), nullable=True)

    @property
    def total_days(self) -> int:
        return inclusive_days(self.start_date, self.end_date)
