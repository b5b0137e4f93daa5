from sqlalchemy import Column, Integer, String, Boolean, DateTime, Index, Enum as SQLEnum, func
from datetime import datetime
import enum
from leavedesk.db.session import Base


class UserRole(str, enum.Enum):
    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(SQLEnum(UserRole, length=20), nullable=False, default=UserRole.EMPLOYEE)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.now, nullable=False)

    # Usernames compare case-insensitively, so "jdoe" and "JDOE" are the same account
    __table_args__ = (
        Index("ix_users_username_lower", func.lower(username), unique=True),
    )
