from sqlalchemy.orm import Session

from hr_portal.core.directory import Directory
from hr_portal.core.errors import InvalidInput, NotFound, PermissionDenied
from hr_portal.models.employee_rating import EmployeeRating
from hr_portal.models.enums import UserRole
from hr_portal.models.user import User

MIN_RATING = 1
MAX_RATING = 10


class RatingBook:
    """One rating per employee, kept by a manager of the employee's team."""

    def __init__(self, db: Session, directory: Directory):
        self.db = db
        self.directory = directory

    def get_for(self, employee_id: int) -> EmployeeRating | None:
        return (
            self.db.query(EmployeeRating)
            .filter(EmployeeRating.employee_id == employee_id)
            .one_or_none()
        )

    def _assert_can_rate(self, manager: User, employee: User) -> None:
        match manager.role:
            case UserRole.MANAGER:
                pass
            case UserRole.EMPLOYEE:
                raise PermissionDenied("Only managers can rate employees")
        if manager.id == employee.id:
            raise PermissionDenied("Managers cannot rate themselves")
        if manager.team != employee.team:
            raise PermissionDenied("Managers can only rate members of their own team")

    def upsert(
        self,
        manager: User,
        employee_id: int,
        *,
        rating: int,
        comment: str = "",
        characteristic: str = "",
    ) -> EmployeeRating:
        employee = self.directory.get_or_404(employee_id)
        self._assert_can_rate(manager, employee)
        if not (MIN_RATING <= rating <= MAX_RATING):
            raise InvalidInput(f"Rating must be between {MIN_RATING} and {MAX_RATING}")

        row = self.get_for(employee.id)
        if row is None:
            row = EmployeeRating(employee_id=employee.id)
            self.db.add(row)

        row.manager_id = manager.id
        row.manager_name = manager.name
        row.rating = rating
        row.comment = comment
        row.characteristic = characteristic
        self.db.flush()
        self.db.refresh(row)
        return row

    def delete(self, manager: User, employee_id: int) -> EmployeeRating:
        employee = self.directory.get_or_404(employee_id)
        self._assert_can_rate(manager, employee)
        row = self.get_for(employee.id)
        if row is None:
            raise NotFound(f"No rating for user {employee_id}")
        self.db.delete(row)
        self.db.flush()
        return row
