from fastapi import APIRouter, Depends

from hr_portal.core.deps import get_workflow
from hr_portal.core.security import get_current_user
from hr_portal.core.vacation_workflow import VacationWorkflow
from hr_portal.core.visibility import project_user
from hr_portal.api.vacations import to_out
from hr_portal.models.user import User
from hr_portal.schemas.user import UserFullOut
from hr_portal.schemas.vacation import VacationRequestOut

router = APIRouter(prefix="/me", tags=["auth"])


@router.get("", response_model=UserFullOut)
def me(current_user: User = Depends(get_current_user)):
    """Current user's own profile, including compensation and documents."""
    return project_user(current_user, current_user)


@router.get("/vacation-requests", response_model=list[VacationRequestOut])
def my_vacation_requests(
    current_user: User = Depends(get_current_user),
    workflow: VacationWorkflow = Depends(get_workflow),
):
    return [to_out(r) for r in workflow.requests_for(current_user.id)]
