from fastapi import APIRouter, Depends, status
from typing import List
from leavedesk.core.exceptions import LeaveDeskError
from leavedesk.models.leave_request import LEAVE_TYPES
from leavedesk.schemas import Identity, LeaveRequestCreate, LeaveRequestRecord
from leavedesk.services.lifecycle import LeaveRequestManager
from leavedesk.api.dependencies import get_current_identity, get_leave_manager
from leavedesk.api.errors import http_error

router = APIRouter(prefix="/leave-requests", tags=["Leave Requests"])


@router.get("/leave-types", response_model=List[str])
def list_leave_types():
    """Leave types offered by the request form."""
    return LEAVE_TYPES


@router.get("", response_model=List[LeaveRequestRecord])
def list_leave_requests(
    manager: LeaveRequestManager = Depends(get_leave_manager),
    identity: Identity = Depends(get_current_identity)
):
    """List leave requests for the current user, newest first."""
    try:
        return manager.list_for_owner(identity.id)
    except LeaveDeskError as exc:
        raise http_error(exc)


@router.post("", response_model=LeaveRequestRecord, status_code=status.HTTP_201_CREATED)
def create_leave_request(
    leave_create: LeaveRequestCreate,
    manager: LeaveRequestManager = Depends(get_leave_manager),
    identity: Identity = Depends(get_current_identity)
):
    """Submit a new leave request."""
    try:
        return manager.submit(
            identity,
            leave_create.start_date,
            leave_create.end_date,
            leave_create.leave_type,
            leave_create.reason
        )
    except LeaveDeskError as exc:
        raise http_error(exc)


@router.get("/{leave_request_id}", response_model=LeaveRequestRecord)
def get_leave_request(
    leave_request_id: int,
    manager: LeaveRequestManager = Depends(get_leave_manager),
    identity: Identity = Depends(get_current_identity)
):
    """Get one of the current user's leave requests."""
    try:
        return manager.get_for_owner(leave_request_id, identity.id)
    except LeaveDeskError as exc:
        raise http_error(exc)
