"""Schema creation and first-run seed data."""
import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from leavedesk.core.security import get_password_hash
from leavedesk.db.session import Base
from leavedesk.models.user import User, UserRole

logger = logging.getLogger(__name__)

# Development convenience only. These credentials are published; change or
# deactivate them before the store holds real data.
DEFAULT_USERS = [
    {
        "username": "admin",
        "name": "Administrator",
        "email": "admin@company.com",
        "password": "admin123",
        "role": UserRole.ADMIN,
    },
    {
        "username": "john.doe",
        "name": "John Doe",
        "email": "john.doe@company.com",
        "password": "password123",
        "role": UserRole.EMPLOYEE,
    },
]


def create_schema(engine: Engine) -> None:
    # Registers both tables on Base.metadata
    import leavedesk.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def seed_database(session_factory: sessionmaker) -> int:
    """Create the default accounts if the store has no users at all.

    Returns the number of users created.
    """
    with session_factory.begin() as db:
        if db.query(User.id).first() is not None:
            logger.info("Users already present, skipping seed")
            return 0

        for account in DEFAULT_USERS:
            db.add(User(
                username=account["username"],
                name=account["name"],
                email=account["email"],
                password_hash=get_password_hash(account["password"]),
                role=account["role"],
                is_active=True
            ))

    logger.warning(
        "Seeded default accounts %s. These are DEVELOPMENT credentials and not a security boundary.",
        ", ".join(f"{a['username']}/{a['password']} ({a['role'].value})" for a in DEFAULT_USERS)
    )
    return len(DEFAULT_USERS)


def init_db(engine: Engine, session_factory: sessionmaker, seed: Optional[bool] = True) -> None:
    create_schema(engine)
    if seed:
        seed_database(session_factory)
