"""Leave request state machine: PENDING -> APPROVED | DENIED, nothing after.

Each operation runs in its own short transaction. ``submit`` serializes on the
owner's user row (on SQLite, on the write lock taken at BEGIN) while it
validates and inserts; ``decide`` writes with a conditional UPDATE so a
request already processed by another client is never overwritten.
"""
import enum
import logging
from datetime import date, datetime
from typing import Callable, Iterable, List, Optional, Tuple

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from leavedesk.core.exceptions import LeaveValidationError, LifecycleError, LifecycleErrorCode
from leavedesk.models.leave_request import LeaveRequest, LeaveStatus
from leavedesk.models.user import User
from leavedesk.schemas import Identity, LeaveRequestRecord
from leavedesk.services.validation import DEFAULT_MAX_LEAVE_DAYS, validate_leave_request

logger = logging.getLogger(__name__)


class Decision(str, enum.Enum):
    APPROVE = "APPROVE"
    DENY = "DENY"


DECISION_STATUS = {
    Decision.APPROVE: LeaveStatus.APPROVED,
    Decision.DENY: LeaveStatus.DENIED,
}


def _store_error(action: str, exc: Exception) -> LifecycleError:
    logger.error("Store failure while trying to %s: %s", action, exc, exc_info=exc)
    return LifecycleError(
        LifecycleErrorCode.STORE_ERROR,
        f"Could not {action}: the leave request store is unavailable."
    )


class LeaveRequestManager:
    def __init__(
        self,
        session_factory: sessionmaker,
        max_days: int = DEFAULT_MAX_LEAVE_DAYS,
        today: Callable[[], date] = date.today,
        now: Callable[[], datetime] = datetime.now,
    ):
        self._session_factory = session_factory
        self.max_days = max_days
        self._today = today
        self._now = now

    def submit(
        self,
        owner: Identity,
        start_date: date,
        end_date: date,
        leave_type: str,
        reason: str,
    ) -> LeaveRequestRecord:
        """Validate and persist a new PENDING request for ``owner``.

        Raises ``LeaveValidationError`` (nothing persisted) or
        ``LifecycleError(STORE_ERROR)``.
        """
        candidate = LeaveRequest(
            user_id=owner.id,
            employee_name=owner.name,
            start_date=start_date,
            end_date=end_date,
            leave_type=(leave_type or "").strip(),
            reason=(reason or "").strip(),
            status=LeaveStatus.PENDING,
            requested_at=self._now(),
        )

        try:
            with self._session_factory.begin() as db:
                owner_row = db.query(User.id).filter(User.id == owner.id).with_for_update().first()
                if owner_row is None:
                    raise LifecycleError(LifecycleErrorCode.STORE_ERROR, f"User {owner.id} does not exist.")

                existing = db.query(LeaveRequest).filter(
                    LeaveRequest.user_id == owner.id,
                    LeaveRequest.status != LeaveStatus.DENIED
                ).all()

                error = validate_leave_request(candidate, existing, max_days=self.max_days, today=self._today())
                if error is not None:
                    raise error

                db.add(candidate)
                db.flush()
                record = LeaveRequestRecord.model_validate(candidate)
        except LeaveValidationError as exc:
            logger.info("Leave request from user %s rejected: %s", owner.id, exc.code.value)
            raise
        except SQLAlchemyError as exc:
            raise _store_error("submit the leave request", exc) from exc

        logger.info(
            "User %s submitted leave request %s (%s to %s)",
            owner.id, record.id, record.start_date, record.end_date
        )
        return record

    def decide(
        self,
        request_id: int,
        decision: Decision,
        decider: Identity,
        comment: Optional[str] = None,
    ) -> LeaveRequestRecord:
        """Move a PENDING request to APPROVED or DENIED.

        Raises ``LifecycleError`` with NOT_FOUND, NOT_PENDING or STORE_ERROR.
        """
        new_status = DECISION_STATUS[Decision(decision)]

        try:
            with self._session_factory.begin() as db:
                # Compare-and-swap: only a row still PENDING at write time changes
                result = db.execute(
                    update(LeaveRequest)
                    .where(
                        LeaveRequest.id == request_id,
                        LeaveRequest.status == LeaveStatus.PENDING
                    )
                    .values(
                        status=new_status,
                        admin_comment=comment,
                        processed_at=self._now(),
                        processed_by=decider.name,
                    )
                    .execution_options(synchronize_session=False)
                )
                leave_request = db.get(LeaveRequest, request_id)
                if leave_request is None:
                    raise LifecycleError(LifecycleErrorCode.NOT_FOUND, "Leave request not found")

                if result.rowcount != 1:
                    logger.warning(
                        "Leave request %s not processed by %s: already %s",
                        request_id, decider.username, leave_request.status.value
                    )
                    raise LifecycleError(
                        LifecycleErrorCode.NOT_PENDING,
                        f"Only PENDING leave requests can be processed, current status: {leave_request.status.value}"
                    )

                record = LeaveRequestRecord.model_validate(leave_request)
        except SQLAlchemyError as exc:
            raise _store_error("update the leave request", exc) from exc

        logger.info("Leave request %s %s by %s", request_id, new_status.value, decider.username)
        return record

    def decide_many(
        self,
        request_ids: Iterable[int],
        decision: Decision,
        decider: Identity,
        comment: Optional[str] = None,
    ) -> Tuple[List[LeaveRequestRecord], List[Tuple[int, LifecycleError]]]:
        """Apply ``decide`` to each id independently; one failure does not stop the rest."""
        processed = []
        failed = []
        for request_id in request_ids:
            try:
                processed.append(self.decide(request_id, decision, decider, comment))
            except LifecycleError as exc:
                failed.append((request_id, exc))
        return processed, failed

    def get_for_owner(self, request_id: int, owner_id: int) -> LeaveRequestRecord:
        try:
            with self._session_factory() as db:
                leave_request = db.query(LeaveRequest).filter(
                    LeaveRequest.id == request_id,
                    LeaveRequest.user_id == owner_id
                ).first()
                if leave_request is None:
                    raise LifecycleError(LifecycleErrorCode.NOT_FOUND, "Leave request not found")
                return LeaveRequestRecord.model_validate(leave_request)
        except SQLAlchemyError as exc:
            raise _store_error("load the leave request", exc) from exc

    def list_for_owner(self, owner_id: int) -> List[LeaveRequestRecord]:
        """Requests of one user, most recently requested first."""
        try:
            with self._session_factory() as db:
                leave_requests = db.query(LeaveRequest).filter(
                    LeaveRequest.user_id == owner_id
                ).order_by(LeaveRequest.requested_at.desc(), LeaveRequest.id.desc()).all()
                return [LeaveRequestRecord.model_validate(lr) for lr in leave_requests]
        except SQLAlchemyError as exc:
            raise _store_error("load leave requests", exc) from exc

    def list_all(
        self,
        status_filter: Optional[LeaveStatus] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> List[LeaveRequestRecord]:
        """All requests, most recently requested first.

        ``from_date``/``to_date`` keep requests whose dates intersect the window.
        """
        try:
            with self._session_factory() as db:
                query = db.query(LeaveRequest)
                if status_filter:
                    query = query.filter(LeaveRequest.status == status_filter)
                if from_date:
                    query = query.filter(LeaveRequest.end_date >= from_date)
                if to_date:
                    query = query.filter(LeaveRequest.start_date <= to_date)

                leave_requests = query.order_by(LeaveRequest.requested_at.desc(), LeaveRequest.id.desc()).all()
                return [LeaveRequestRecord.model_validate(lr) for lr in leave_requests]
        except SQLAlchemyError as exc:
            raise _store_error("load leave requests", exc) from exc
