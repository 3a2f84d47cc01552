from fastapi import APIRouter, Depends, Query

from hr_portal.core.audit import log_event
from hr_portal.core.deps import get_directory
from hr_portal.core.directory import Directory
from hr_portal.core.errors import NotFound, PermissionDenied
from hr_portal.core.security import get_current_user
from hr_portal.core.visibility import project_user, project_users
from hr_portal.models.enums import UserRole
from hr_portal.models.user import User
from hr_portal.schemas.pagination import PaginatedResponse, PaginationMeta
from hr_portal.schemas.user import AvatarUpdate, UserFullOut, UserPublicOut

router = APIRouter(prefix="/users", tags=["users"])

UserOut = UserFullOut | UserPublicOut


def assert_owner(current_user: User, user_id: int) -> None:
    if current_user.id != user_id:
        raise PermissionDenied("Only the profile owner can do this")


@router.get("")
def list_users(
    limit: int = Query(default=100, ge=1, le=500, description="Maximum number of results"),
    offset: int = Query(default=0, ge=0, description="Number of results to skip"),
    include_pagination: bool = Query(default=False, description="Include pagination metadata"),
    directory: Directory = Depends(get_directory),
    current_user: User = Depends(get_current_user),
):
    """
    All users, in id order. Compensation/documents are only included where
    the caller may see them.

    Use ?include_pagination=true to get pagination metadata.
    """
    total = directory.count_users()
    items = project_users(current_user, directory.list_users(limit=limit, offset=offset))

    if include_pagination:
        return PaginatedResponse(
            items=items,
            pagination=PaginationMeta(
                total=total,
                limit=limit,
                offset=offset,
                has_more=(offset + len(items) < total),
            ),
        )
    return items


@router.get("/teams", response_model=list[str])
def list_teams(
    directory: Directory = Depends(get_directory),
    _: User = Depends(get_current_user),
):
    return directory.teams()


@router.get("/team/{team}", response_model=list[UserOut])
def team_members(
    team: str,
    directory: Directory = Depends(get_directory),
    current_user: User = Depends(get_current_user),
):
    members = directory.members_of_team(team)
    if not members:
        raise NotFound(f"Team {team!r} not found")
    return project_users(current_user, members)


@router.get("/team/{team}/manager", response_model=UserOut)
def team_manager(
    team: str,
    directory: Directory = Depends(get_directory),
    current_user: User = Depends(get_current_user),
):
    manager = directory.manager_of_team(team)
    if not manager:
        raise NotFound(f"Team {team!r} has no manager")
    return project_user(current_user, manager)


@router.get("/manager/{manager_id}/subordinates", response_model=list[UserOut])
def subordinates(
    manager_id: int,
    directory: Directory = Depends(get_directory),
    current_user: User = Depends(get_current_user),
):
    manager = directory.find_by_id(manager_id)
    if not manager or manager.role != UserRole.MANAGER:
        raise NotFound(f"Manager {manager_id} not found")
    return project_users(current_user, directory.subordinates_of(manager_id))


@router.get("/{user_id}", response_model=UserOut)
def get_user(
    user_id: int,
    directory: Directory = Depends(get_directory),
    current_user: User = Depends(get_current_user),
):
    return project_user(current_user, directory.get_or_404(user_id))


@router.put("/{user_id}/avatar", response_model=UserFullOut)
def replace_avatar(
    user_id: int,
    payload: AvatarUpdate,
    directory: Directory = Depends(get_directory),
    current_user: User = Depends(get_current_user),
):
    assert_owner(current_user, user_id)
    user = directory.replace_avatar(directory.get_or_404(user_id), payload.avatar)
    log_event(
        db=directory.db,
        actor=current_user,
        action="AVATAR_CHANGED",
        entity_type="user",
        entity_id=user.id,
    )
    return project_user(current_user, user)


@router.delete("/{user_id}/avatar", response_model=UserFullOut)
def remove_avatar(
    user_id: int,
    directory: Directory = Depends(get_directory),
    current_user: User = Depends(get_current_user),
):
    assert_owner(current_user, user_id)
    user = directory.replace_avatar(directory.get_or_404(user_id), None)
    log_event(
        db=directory.db,
        actor=current_user,
        action="AVATAR_REMOVED",
        entity_type="user",
        entity_id=user.id,
    )
    return project_user(current_user, user)
