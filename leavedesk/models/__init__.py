# Import all models here so Base.metadata sees both tables
from leavedesk.models.user import User, UserRole
from leavedesk.models.leave_request import LeaveRequest, LeaveStatus, LEAVE_TYPES

__all__ = [
    "User",
    "UserRole",
    "LeaveRequest",
    "LeaveStatus",
    "LEAVE_TYPES",
]
