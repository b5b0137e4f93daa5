from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime
from leavedesk.models.user import UserRole
from leavedesk.models.leave_request import LeaveStatus


# ============= Identity Schemas =============
class Identity(BaseModel):
    """The authenticated user, held for the duration of a session."""
    id: int
    username: str
    name: str
    role: UserRole

    class Config:
        from_attributes = True
        frozen = True


class UserLogin(BaseModel):
    username: str
    password: str


class MessageResponse(BaseModel):
    message: str


# ============= Leave Request Schemas =============
class LeaveRequestCreate(BaseModel):
    start_date: date
    end_date: date
    leave_type: str = Field(default="Annual Leave", min_length=1, max_length=50)
    reason: str = Field(..., max_length=500)


class LeaveRequestRecord(BaseModel):
    id: int
    user_id: int
    employee_name: str
    start_date: date
    end_date: date
    leave_type: str
    reason: str
    status: LeaveStatus
    admin_comment: Optional[str] = None
    requested_at: datetime
    processed_at: Optional[datetime] = None
    processed_by: Optional[str] = None
    total_days: int

    class Config:
        from_attributes = True


# ============= Approval Schemas =============
class DecisionRequest(BaseModel):
    comment: Optional[str] = Field(default=None, max_length=500)


class BulkDecisionRequest(BaseModel):
    ids: List[int] = Field(..., min_length=1)
    comment: Optional[str] = Field(default=None, max_length=500)


class BulkDecisionFailure(BaseModel):
    id: int
    code: str
    reason: str


class BulkDecisionResponse(BaseModel):
    processed: int
    failed: List[BulkDecisionFailure]
