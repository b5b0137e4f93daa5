"""Typed failures returned to the presentation layer.

Each service operation has a single failure channel: the validator returns a
``LeaveValidationError`` value, the authenticator raises ``AuthError`` and the
lifecycle manager raises ``LifecycleError`` (or ``LeaveValidationError`` from
``submit``). Store exceptions never leak past the service boundary.
"""
import enum
from datetime import date
from typing import Optional


class AuthErrorCode(str, enum.Enum):
    NOT_FOUND = "NOT_FOUND"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


class ValidationErrorCode(str, enum.Enum):
    START_DATE_IN_PAST = "START_DATE_IN_PAST"
    END_BEFORE_START = "END_BEFORE_START"
    OVERLAPS_EXISTING = "OVERLAPS_EXISTING"
    DURATION_TOO_LONG = "DURATION_TOO_LONG"
    REASON_REQUIRED = "REASON_REQUIRED"


class LifecycleErrorCode(str, enum.Enum):
    NOT_FOUND = "NOT_FOUND"
    NOT_PENDING = "NOT_PENDING"
    STORE_ERROR = "STORE_ERROR"


class LeaveDeskError(Exception):
    def __init__(self, code: enum.Enum, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code.value, "message": self.message}


class AuthError(LeaveDeskError):
    code: AuthErrorCode


class LifecycleError(LeaveDeskError):
    code: LifecycleErrorCode


class LeaveValidationError(LeaveDeskError):
    code: ValidationErrorCode

    def __init__(
        self,
        code: ValidationErrorCode,
        message: str,
        conflict_start: Optional[date] = None,
        conflict_end: Optional[date] = None,
        max_days: Optional[int] = None,
    ):
        super().__init__(code, message)
        self.conflict_start = conflict_start
        self.conflict_end = conflict_end
        self.max_days = max_days

    @classmethod
    def start_date_in_past(cls) -> "LeaveValidationError":
        return cls(ValidationErrorCode.START_DATE_IN_PAST, "Start date cannot be in the past.")

    @classmethod
    def end_before_start(cls) -> "LeaveValidationError":
        return cls(ValidationErrorCode.END_BEFORE_START, "End date cannot be before start date.")

    @classmethod
    def overlaps_existing(cls, start: date, end: date) -> "LeaveValidationError":
        return cls(
            ValidationErrorCode.OVERLAPS_EXISTING,
            f"You have an overlapping leave request from {start:%Y-%m-%d} to {end:%Y-%m-%d}",
            conflict_start=start,
            conflict_end=end,
        )

    @classmethod
    def duration_too_long(cls, max_days: int) -> "LeaveValidationError":
        return cls(
            ValidationErrorCode.DURATION_TOO_LONG,
            f"Leave request cannot exceed {max_days} days.",
            max_days=max_days,
        )

    @classmethod
    def reason_required(cls) -> "LeaveValidationError":
        return cls(ValidationErrorCode.REASON_REQUIRED, "Please provide a reason for your leave request.")

    def to_dict(self) -> dict:
        detail = super().to_dict()
        if self.conflict_start is not None:
            detail["conflict_start"] = self.conflict_start.isoformat()
            detail["conflict_end"] = self.conflict_end.isoformat()
        if self.max_days is not None:
            detail["max_days"] = self.max_days
        return detail
