from fastapi import Depends, HTTPException, Request, status
from leavedesk.models.user import UserRole
from leavedesk.schemas import Identity
from leavedesk.services.auth import Authenticator
from leavedesk.services.lifecycle import LeaveRequestManager


def get_authenticator(request: Request) -> Authenticator:
    """The process-wide authenticator created at application start."""
    return request.app.state.authenticator


def get_leave_manager(request: Request) -> LeaveRequestManager:
    return request.app.state.leave_manager


def get_current_identity(authenticator: Authenticator = Depends(get_authenticator)) -> Identity:
    identity = authenticator.current_identity
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in"
        )
    return identity


def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    if identity.role != UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required"
        )
    return identity
