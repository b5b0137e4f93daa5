import logging
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from leavedesk.core.exceptions import AuthError, AuthErrorCode
from leavedesk.core.security import verify_password
from leavedesk.models.user import User, UserRole
from leavedesk.schemas import Identity

logger = logging.getLogger(__name__)


class Authenticator:
    """Verifies credentials and holds the single session identity of this process.

    The identity is a snapshot taken at login; it is handed explicitly to the
    lifecycle manager rather than read from module state.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory
        self._current: Optional[Identity] = None

    def login(self, username: str, password: str) -> Identity:
        """Authenticate an active user by case-insensitive username.

        Raises ``AuthError`` with NOT_FOUND (no active user of that name),
        INVALID_CREDENTIALS (password mismatch) or STORE_UNAVAILABLE.
        """
        lookup = (username or "").lower()
        try:
            with self._session_factory() as db:
                user = db.query(User).filter(
                    func.lower(User.username) == lookup,
                    User.is_active.is_(True)
                ).first()
                if user is not None:
                    password_hash = user.password_hash
                    identity = Identity.model_validate(user)
        except SQLAlchemyError as exc:
            logger.exception("User lookup failed during login for %r", lookup)
            raise AuthError(
                AuthErrorCode.STORE_UNAVAILABLE,
                "The user store is unavailable. Please try again later."
            ) from exc

        if user is None:
            logger.info("Login failed for %r: no active user", lookup)
            raise AuthError(AuthErrorCode.NOT_FOUND, "Invalid username or password")

        if not verify_password(password or "", password_hash):
            logger.info("Login failed for %r: wrong password", lookup)
            raise AuthError(AuthErrorCode.INVALID_CREDENTIALS, "Invalid username or password")

        self._current = identity
        logger.info("User %s (id=%s, role=%s) logged in", identity.username, identity.id, identity.role.value)
        return identity

    def logout(self) -> None:
        if self._current is not None:
            logger.info("User %s logged out", self._current.username)
        self._current = None

    @property
    def current_identity(self) -> Optional[Identity]:
        return self._current

    def is_authenticated(self) -> bool:
        return self._current is not None

    def has_role(self, role: UserRole) -> bool:
        return self._current is not None and self._current.role == role
