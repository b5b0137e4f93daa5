"""Admissibility checks for a proposed leave request.

``validate_leave_request`` is pure: the caller supplies the requester's
existing requests and the current date, nothing is read from the store.
Checks run in a fixed order and the first failure is returned.
"""
from datetime import date
from typing import Iterable, Optional

from leavedesk.core.date_filters import inclusive_days, ranges_overlap
from leavedesk.core.exceptions import LeaveValidationError
from leavedesk.models.leave_request import LeaveStatus

DEFAULT_MAX_LEAVE_DAYS = 30


def find_overlap(candidate, existing_requests: Iterable):
    """Return the first live request of the same user whose dates intersect the candidate's."""
    for existing in existing_requests:
        if existing.status == LeaveStatus.DENIED:
            continue
        if candidate.id is not None and existing.id == candidate.id:
            continue
        if ranges_overlap(existing.start_date, existing.end_date, candidate.start_date, candidate.end_date):
            return existing
    return None


def validate_leave_request(
    candidate,
    existing_requests: Iterable,
    max_days: int = DEFAULT_MAX_LEAVE_DAYS,
    today: Optional[date] = None,
) -> Optional[LeaveValidationError]:
    """Return the first failing check for ``candidate``, or None if it is admissible."""
    today = today or date.today()

    if candidate.start_date < today:
        return LeaveValidationError.start_date_in_past()

    if candidate.end_date < candidate.start_date:
        return LeaveValidationError.end_before_start()

    conflict = find_overlap(candidate, existing_requests)
    if conflict is not None:
        return LeaveValidationError.overlaps_existing(conflict.start_date, conflict.end_date)

    if inclusive_days(candidate.start_date, candidate.end_date) > max_days:
        return LeaveValidationError.duration_too_long(max_days)

    if not candidate.reason or not candidate.reason.strip():
        return LeaveValidationError.reason_required()

    return None
