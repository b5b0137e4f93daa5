from fastapi import APIRouter, Depends
from leavedesk.core.exceptions import AuthError
from leavedesk.schemas import UserLogin, Identity, MessageResponse
from leavedesk.services.auth import Authenticator
from leavedesk.api.dependencies import get_authenticator, get_current_identity
from leavedesk.api.errors import http_error

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=Identity)
def login(user_login: UserLogin, authenticator: Authenticator = Depends(get_authenticator)):
    """Login endpoint; the identity becomes this process's session."""
    try:
        return authenticator.login(user_login.username, user_login.password)
    except AuthError as exc:
        raise http_error(exc)


@router.get("/me", response_model=Identity)
def get_me(identity: Identity = Depends(get_current_identity)):
    """Get current session identity."""
    return identity


@router.post("/logout", response_model=MessageResponse)
def logout(authenticator: Authenticator = Depends(get_authenticator)):
    authenticator.logout()
    return {"message": "Successfully logged out"}
