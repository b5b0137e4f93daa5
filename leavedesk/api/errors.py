from fastapi import HTTPException, status
from leavedesk.core.exceptions import (
    AuthError,
    AuthErrorCode,
    LeaveDeskError,
    LeaveValidationError,
    LifecycleError,
    LifecycleErrorCode,
)

AUTH_STATUS = {
    AuthErrorCode.NOT_FOUND: status.HTTP_401_UNAUTHORIZED,
    AuthErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    AuthErrorCode.STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}

LIFECYCLE_STATUS = {
    LifecycleErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    LifecycleErrorCode.NOT_PENDING: status.HTTP_400_BAD_REQUEST,
    LifecycleErrorCode.STORE_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def http_error(exc: LeaveDeskError) -> HTTPException:
    """Translate a typed service failure into the HTTP response shown to the user."""
    if isinstance(exc, AuthError):
        status_code = AUTH_STATUS[exc.code]
    elif isinstance(exc, LifecycleError):
        status_code = LIFECYCLE_STATUS[exc.code]
    elif isinstance(exc, LeaveValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=status_code, detail=exc.to_dict())
