"""
Vacation request lifecycle.

    pending --resolve(approved)--> approved
    pending --resolve(rejected)--> rejected

Terminal states have no outgoing transitions; resolving twice raises
IllegalTransition and leaves the record untouched.
"""
import logging
from datetime import date, datetime, timezone
from typing import Callable

from sqlalchemy import update
from sqlalchemy.orm import Session

from hr_portal.core.directory import Directory
from hr_portal.core.errors import (
    IllegalTransition,
    InvalidInput,
    NotFound,
    PermissionDenied,
    PreconditionFailed,
)
from hr_portal.models.enums import VacationStatus, VacationType
from hr_portal.models.vacation_request import VacationRequest

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_date(value: date | str, field: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"Invalid {field}: expected YYYY-MM-DD")


def _as_type(value: VacationType | str) -> VacationType:
    try:
        return VacationType(value)
    except ValueError:
        raise InvalidInput(f"Unknown request type: {value!r}")


def _as_outcome(value: VacationStatus | str) -> VacationStatus:
    try:
        outcome = VacationStatus(value)
    except ValueError:
        raise InvalidInput(f"Unknown status: {value!r}")
    match outcome:
        case VacationStatus.APPROVED | VacationStatus.REJECTED:
            return outcome
        case VacationStatus.PENDING:
            raise InvalidInput("A request can only be resolved to approved or rejected")


class VacationWorkflow:
    def __init__(self, db: Session, directory: Directory, clock: Callable[[], datetime] = _utcnow):
        self.db = db
        self.directory = directory
        self.clock = clock

    def get_or_404(self, request_id: int) -> VacationRequest:
        req = self.db.get(VacationRequest, request_id)
        if not req:
            raise NotFound(f"Vacation request {request_id} not found")
        return req

    def create(
        self,
        requester_id: int,
        request_type: VacationType | str,
        reason: str,
        start_date: date | str,
        end_date: date | str,
    ) -> VacationRequest:
        request_type = _as_type(request_type)
        if not reason or not reason.strip():
            raise InvalidInput("Reason is required")
        start = _as_date(start_date, "start_date")
        end = _as_date(end_date, "end_date")
        if end < start:
            raise InvalidInput("end_date must not be before start_date")

        requester = self.directory.get_or_404(requester_id)
        manager = self.directory.manager_of_team(requester.team)
        if not manager:
            logger.warning("No manager for team %r; cannot route request from user %s", requester.team, requester.id)
            raise PreconditionFailed(f"Team {requester.team!r} has no manager")

        now = self.clock()
        req = VacationRequest(
            user_id=requester.id,
            user_name=requester.name,
            user_team=requester.team,
            type=request_type,
            reason=reason,
            start_date=start,
            end_date=end,
            status=VacationStatus.PENDING,
            manager_id=manager.id,
            manager_name=manager.name,
            created_at=now,
            updated_at=now,
        )
        self.db.add(req)
        self.db.flush()

        logger.info(
            "Vacation request %s created by user %s, routed to manager %s",
            req.id, requester.id, manager.id,
        )
        return req

    def requests_for(self, user_id: int) -> list[VacationRequest]:
        return (
            self.db.query(VacationRequest)
            .filter(VacationRequest.user_id == user_id)
            .order_by(VacationRequest.id.asc())
            .all()
        )

    def pending_for(self, manager_id: int) -> list[VacationRequest]:
        return (
            self.db.query(VacationRequest)
            .filter(
                VacationRequest.manager_id == manager_id,
                VacationRequest.status == VacationStatus.PENDING,
            )
            .order_by(VacationRequest.id.asc())
            .all()
        )

    def resolve(
        self,
        request_id: int,
        outcome: VacationStatus | str,
        comment: str | None = None,
        *,
        resolver_id: int | None = None,
    ) -> VacationRequest:
        """
        Move a pending request to approved/rejected.

        When resolver_id is given it must be the manager the request was routed to.
        The status check and the write are a single conditional UPDATE, so of two
        racing calls exactly one succeeds.
        """
        outcome = _as_outcome(outcome)
        req = self.get_or_404(request_id)

        if resolver_id is not None and resolver_id != req.manager_id:
            raise PermissionDenied("Only the assigned manager can resolve this request")

        values = {"status": outcome, "updated_at": self.clock()}
        if comment:
            values["manager_comment"] = comment

        result = self.db.execute(
            update(VacationRequest)
            .where(
                VacationRequest.id == request_id,
                VacationRequest.status == VacationStatus.PENDING,
            )
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        self.db.refresh(req)

        if result.rowcount == 0:
            logger.warning(
                "Refused to resolve vacation request %s as %s: already %s",
                request_id, outcome.value, req.status.value,
            )
            raise IllegalTransition(f"Vacation request {request_id} is already {req.status.value}")

        logger.info("Vacation request %s resolved as %s by manager %s", req.id, outcome.value, req.manager_id)
        return req
