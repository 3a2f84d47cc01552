from fastapi import APIRouter, Depends, Query, status

from hr_portal.core.audit import log_event
from hr_portal.core.deps import get_workflow
from hr_portal.core.errors import PermissionDenied
from hr_portal.core.rbac import require_roles
from hr_portal.core.security import get_current_user
from hr_portal.core.vacation_workflow import VacationWorkflow
from hr_portal.core.visibility import assert_can_view_full
from hr_portal.models.enums import UserRole
from hr_portal.models.user import User
from hr_portal.models.vacation_request import VacationRequest
from hr_portal.schemas.vacation import (
    VacationRequestCreate,
    VacationRequestOut,
    VacationRequestResolve,
)

router = APIRouter(prefix="/vacation", tags=["vacation"])


def to_out(r: VacationRequest) -> VacationRequestOut:
    return VacationRequestOut(
        id=r.id,
        user_id=r.user_id,
        user_name=r.user_name,
        user_team=r.user_team,
        type=r.type,
        reason=r.reason,
        start_date=r.start_date,
        end_date=r.end_date,
        status=r.status,
        manager_id=r.manager_id,
        manager_name=r.manager_name,
        manager_comment=r.manager_comment,
        created_at=r.created_at,
        updated_at=r.updated_at,
    )


@router.get("/requests", response_model=list[VacationRequestOut])
def list_requests(
    user_id: int | None = Query(default=None, description="Requester; defaults to the caller"),
    workflow: VacationWorkflow = Depends(get_workflow),
    current_user: User = Depends(get_current_user),
):
    """Requests filed by one user, any status, oldest first."""
    subject = workflow.directory.get_or_404(user_id if user_id is not None else current_user.id)
    assert_can_view_full(current_user, subject)
    return [to_out(r) for r in workflow.requests_for(subject.id)]


@router.get("/pending", response_model=list[VacationRequestOut])
def list_pending(
    manager_id: int | None = Query(default=None, description="Resolver; defaults to the caller"),
    workflow: VacationWorkflow = Depends(get_workflow),
    current_user: User = Depends(require_roles(UserRole.MANAGER)),
):
    """Pending requests routed to the calling manager."""
    if manager_id is not None and manager_id != current_user.id:
        raise PermissionDenied("Managers can only list their own pending requests")
    return [to_out(r) for r in workflow.pending_for(current_user.id)]


@router.post("/requests", response_model=VacationRequestOut, status_code=status.HTTP_201_CREATED)
def create_request(
    payload: VacationRequestCreate,
    workflow: VacationWorkflow = Depends(get_workflow),
    current_user: User = Depends(get_current_user),
):
    r = workflow.create(
        current_user.id,
        payload.type,
        payload.reason,
        payload.start_date,
        payload.end_date,
    )
    log_event(
        db=workflow.db,
        actor=current_user,
        action="VACATION_REQUEST_CREATED",
        entity_type="vacation_request",
        entity_id=r.id,
        metadata={
            "manager_id": r.manager_id,
            "type": r.type.value,
            "start_date": r.start_date.isoformat(),
            "end_date": r.end_date.isoformat(),
        },
    )
    return to_out(r)


@router.get("/requests/{request_id}", response_model=VacationRequestOut)
def get_request(
    request_id: int,
    workflow: VacationWorkflow = Depends(get_workflow),
    current_user: User = Depends(get_current_user),
):
    r = workflow.get_or_404(request_id)
    assert_can_view_full(current_user, workflow.directory.get_or_404(r.user_id))
    return to_out(r)


@router.put("/requests/{request_id}/status", response_model=VacationRequestOut)
def resolve_request(
    request_id: int,
    payload: VacationRequestResolve,
    workflow: VacationWorkflow = Depends(get_workflow),
    current_user: User = Depends(get_current_user),
):
    """Approve or reject. Only the manager the request was routed to may call this, once."""
    r = workflow.resolve(
        request_id,
        payload.status,
        payload.manager_comment,
        resolver_id=current_user.id,
    )
    log_event(
        db=workflow.db,
        actor=current_user,
        action="VACATION_REQUEST_RESOLVED",
        entity_type="vacation_request",
        entity_id=r.id,
        metadata={"from": "pending", "to": r.status.value, "comment": r.manager_comment},
    )
    return to_out(r)
