from sqlalchemy.orm import Session

from hr_portal.models.enums import UserRole
from hr_portal.models.user import User

IVAN = "ivan@zinda.ai"
DALER = "daler@zinda.ai"
ALEX = "alex@zinda.ai"
DENIS = "denis@zinda.ai"


def as_user(email: str) -> dict[str, str]:
    return {"X-User-Email": email}


def create_user(
    db: Session,
    email: str,
    name: str = "User",
    *,
    role: UserRole = UserRole.EMPLOYEE,
    team: str = "qa",
    salary: float = 1000,
    bonus: float = 100,
) -> User:
    u = User(
        name=name,
        role=role,
        team=team,
        email=email,
        phone="+998900000000",
        salary=salary,
        bonus=bonus,
    )
    db.add(u)
    db.commit()
    db.refresh(u)
    return u
