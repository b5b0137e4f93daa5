from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from leavedesk.core.exceptions import LeaveDeskError
from leavedesk.models.leave_request import LeaveStatus
from leavedesk.schemas import (
    Identity,
    LeaveRequestRecord,
    DecisionRequest,
    BulkDecisionRequest,
    BulkDecisionResponse,
)
from leavedesk.services.lifecycle import Decision, LeaveRequestManager
from leavedesk.api.dependencies import get_leave_manager, require_admin
from leavedesk.api.errors import http_error

router = APIRouter(prefix="/admin/approvals", tags=["Admin - Approvals"])


def _bulk(manager: LeaveRequestManager, bulk_data: BulkDecisionRequest, decision: Decision, admin: Identity):
    processed, failed = manager.decide_many(bulk_data.ids, decision, admin, bulk_data.comment)
    return {
        "processed": len(processed),
        "failed": [
            {"id": request_id, "code": exc.code.value, "reason": exc.message}
            for request_id, exc in failed
        ],
    }


@router.get("/leaves", response_model=List[LeaveRequestRecord])
def list_leaves(
    status_filter: Optional[LeaveStatus] = Query(None, alias="status"),
    manager: LeaveRequestManager = Depends(get_leave_manager),
    _: Identity = Depends(require_admin)
):
    """List all leave requests, optionally by status (admin only)."""
    try:
        return manager.list_all(status_filter)
    except LeaveDeskError as exc:
        raise http_error(exc)


@router.post("/leaves/bulk-approve", response_model=BulkDecisionResponse)
def bulk_approve_leaves(
    bulk_data: BulkDecisionRequest,
    manager: LeaveRequestManager = Depends(get_leave_manager),
    admin: Identity = Depends(require_admin)
):
    """Bulk approve PENDING leave requests (admin only)."""
    return _bulk(manager, bulk_data, Decision.APPROVE, admin)


@router.post("/leaves/bulk-deny", response_model=BulkDecisionResponse)
def bulk_deny_leaves(
    bulk_data: BulkDecisionRequest,
    manager: LeaveRequestManager = Depends(get_leave_manager),
    admin: Identity = Depends(require_admin)
):
    """Bulk deny PENDING leave requests (admin only)."""
    return _bulk(manager, bulk_data, Decision.DENY, admin)


@router.post("/leaves/{leave_request_id}/approve", response_model=LeaveRequestRecord)
def approve_leave(
    leave_request_id: int,
    decision_data: DecisionRequest,
    manager: LeaveRequestManager = Depends(get_leave_manager),
    admin: Identity = Depends(require_admin)
):
    """Approve a leave request (admin only)."""
    try:
        return manager.decide(leave_request_id, Decision.APPROVE, admin, decision_data.comment)
    except LeaveDeskError as exc:
        raise http_error(exc)


@router.post("/leaves/{leave_request_id}/deny", response_model=LeaveRequestRecord)
def deny_leave(
    leave_request_id: int,
    decision_data: DecisionRequest,
    manager: LeaveRequestManager = Depends(get_leave_manager),
    admin: Identity = Depends(require_admin)
):
    """Deny a leave request (admin only)."""
    try:
        return manager.decide(leave_request_id, Decision.DENY, admin, decision_data.comment)
    except LeaveDeskError as exc:
        raise http_error(exc)
