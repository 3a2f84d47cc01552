"""
Demo roster loaded at startup. Two teams, one manager each.
"""
import logging
from datetime import date, datetime

from sqlalchemy.orm import Session

from hr_portal.models.document import Document
from hr_portal.models.enums import DocumentType, UserRole, VacationStatus, VacationType
from hr_portal.models.user import User
from hr_portal.models.vacation_request import VacationRequest

logger = logging.getLogger(__name__)

SEED_USERS = [
    {
        "id": 1,
        "name": "Иван Иванов",
        "role": UserRole.EMPLOYEE,
        "team": "frontend",
        "email": "ivan@zinda.ai",
        "phone": "+998901234567",
        "salary": 1200,
        "bonus": 200,
        "avatar": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=150&h=150&fit=crop&crop=face",
        "linkedin": "linkedin.com/ivan",
        "telegram": "@ivan",
        "documents": [
            {"id": 1, "name": "Passport.pdf", "type": DocumentType.PASSPORT, "uploaded_at": "2025-01-01T10:00:00+00:00"},
        ],
    },
    {
        "id": 2,
        "name": "Далер Алямов",
        "role": UserRole.MANAGER,
        "team": "frontend",
        "email": "daler@zinda.ai",
        "phone": "+998901234568",
        "salary": 2000,
        "bonus": 400,
        "avatar": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=150&h=150&fit=crop&crop=face",
        "linkedin": "linkedin.com/@daler_alyamov",
        "telegram": "@daler_alyamov",
        "documents": [
            {"id": 2, "name": "Contract.pdf", "type": DocumentType.CONTRACT, "uploaded_at": "2025-01-01T11:00:00+00:00"},
        ],
    },
    {
        "id": 3,
        "name": "Алексей Сидоров",
        "role": UserRole.EMPLOYEE,
        "team": "backend",
        "email": "alex@zinda.ai",
        "phone": "+998901234569",
        "salary": 1500,
        "bonus": 300,
        "avatar": None,
        "linkedin": "linkedin.com/alex",
        "telegram": "@alex",
        "documents": [],
    },
    {
        "id": 4,
        "name": "Денис",
        "role": UserRole.MANAGER,
        "team": "backend",
        "email": "denis@zinda.ai",
        "phone": "+998901234570",
        "salary": 2200,
        "bonus": 450,
        "avatar": "https://images.unsplash.com/photo-1494790108755-2616b612b786?w=150&h=150&fit=crop&crop=face",
        "linkedin": "linkedin.com/denis",
        "telegram": "@denis",
        "documents": [],
    },
]

SEED_VACATION_REQUESTS = [
    {
        "id": 1,
        "user_id": 1,
        "user_name": "Иван Иванов",
        "user_team": "frontend",
        "type": VacationType.VACATION,
        "reason": "Летний отпуск с семьей",
        "start_date": "2025-07-15",
        "end_date": "2025-07-30",
        "status": VacationStatus.PENDING,
        "manager_id": 2,
        "manager_name": "Далер",
        "created_at": "2025-01-01T09:00:00+00:00",
        "updated_at": "2025-01-01T09:00:00+00:00",
    },
    {
        "id": 2,
        "user_id": 3,
        "user_name": "Алексей Сидоров",
        "user_team": "backend",
        "type": VacationType.SICK,
        "reason": "Болезнь",
        "start_date": "2025-01-10",
        "end_date": "2025-01-12",
        "status": VacationStatus.APPROVED,
        "manager_id": 4,
        "manager_name": "Денис",
        "created_at": "2025-01-08T10:00:00+00:00",
        "updated_at": "2025-01-09T14:00:00+00:00",
        "manager_comment": "Одобрено. Выздоравливайте!",
    },
    {
        "id": 3,
        "user_id": 3,
        "user_name": "Алексей Сидоров",
        "user_team": "backend",
        "type": VacationType.VACATION,
        "reason": "Отпуск по личным обстоятельствам",
        "start_date": "2025-08-01",
        "end_date": "2025-08-15",
        "status": VacationStatus.PENDING,
        "manager_id": 4,
        "manager_name": "Денис",
        "created_at": "2025-01-15T11:00:00+00:00",
        "updated_at": "2025-01-15T11:00:00+00:00",
    },
]


def seed_demo_data(db: Session) -> bool:
    """Insert the demo roster. No-op (returns False) if any user already exists."""
    if db.query(User.id).first() is not None:
        logger.info("Users already present; skipping seed")
        return False

    for raw in SEED_USERS:
        data = dict(raw)
        docs = data.pop("documents")
        db.add(User(**data))
        db.flush()
        for d in docs:
            db.add(
                Document(
                    id=d["id"],
                    user_id=data["id"],
                    name=d["name"],
                    type=d["type"],
                    url=f"/uploads/{data['id']}/{d['name']}",
                    uploaded_at=datetime.fromisoformat(d["uploaded_at"]),
                )
            )

    for raw in SEED_VACATION_REQUESTS:
        data = dict(raw)
        data["start_date"] = date.fromisoformat(data["start_date"])
        data["end_date"] = date.fromisoformat(data["end_date"])
        data["created_at"] = datetime.fromisoformat(data["created_at"])
        data["updated_at"] = datetime.fromisoformat(data["updated_at"])
        db.add(VacationRequest(**data))

    db.flush()
    logger.info("Seeded %d users and %d vacation requests", len(SEED_USERS), len(SEED_VACATION_REQUESTS))
    return True
