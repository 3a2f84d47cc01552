from fastapi import APIRouter, Depends

from hr_portal.core.audit import log_event
from hr_portal.core.deps import get_rating_book
from hr_portal.core.errors import NotFound
from hr_portal.core.ratings import RatingBook
from hr_portal.core.security import get_current_user
from hr_portal.core.visibility import assert_can_view_full
from hr_portal.models.employee_rating import EmployeeRating
from hr_portal.models.user import User
from hr_portal.schemas.rating import RatingOut, RatingUpsert

router = APIRouter(prefix="/users/{user_id}/rating", tags=["ratings"])


def to_out(r: EmployeeRating) -> RatingOut:
    return RatingOut(
        id=r.id,
        employee_id=r.employee_id,
        manager_id=r.manager_id,
        manager_name=r.manager_name,
        rating=r.rating,
        comment=r.comment,
        characteristic=r.characteristic,
        created_at=r.created_at,
        updated_at=r.updated_at,
    )


@router.get("", response_model=RatingOut)
def get_rating(
    user_id: int,
    book: RatingBook = Depends(get_rating_book),
    current_user: User = Depends(get_current_user),
):
    subject = book.directory.get_or_404(user_id)
    assert_can_view_full(current_user, subject)
    row = book.get_for(subject.id)
    if not row:
        raise NotFound(f"No rating for user {user_id}")
    return to_out(row)


@router.put("", response_model=RatingOut)
def upsert_rating(
    user_id: int,
    payload: RatingUpsert,
    book: RatingBook = Depends(get_rating_book),
    current_user: User = Depends(get_current_user),
):
    row = book.upsert(
        current_user,
        user_id,
        rating=payload.rating,
        comment=payload.comment,
        characteristic=payload.characteristic,
    )
    log_event(
        db=book.db,
        actor=current_user,
        action="RATING_SAVED",
        entity_type="employee_rating",
        entity_id=row.id,
        metadata={"employee_id": row.employee_id, "rating": row.rating},
    )
    return to_out(row)


@router.delete("")
def delete_rating(
    user_id: int,
    book: RatingBook = Depends(get_rating_book),
    current_user: User = Depends(get_current_user),
):
    row = book.delete(current_user, user_id)
    log_event(
        db=book.db,
        actor=current_user,
        action="RATING_DELETED",
        entity_type="employee_rating",
        entity_id=row.id,
        metadata={"employee_id": row.employee_id},
    )
    return {"status": "deleted", "employee_id": user_id}
