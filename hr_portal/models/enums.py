import enum

import sqlalchemy as sa


class UserRole(str, enum.Enum):
    EMPLOYEE = "employee"
    MANAGER = "manager"


class DocumentType(str, enum.Enum):
    PASSPORT = "passport"
    CONTRACT = "contract"
    OTHER = "other"


class VacationType(str, enum.Enum):
    VACATION = "vacation"
    SICK = "sick"
    PERSONAL = "personal"
    OTHER = "other"


class VacationStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


def enum_column(enum_cls: type[enum.Enum], name: str) -> sa.Enum:
    """String-backed enum column with a CHECK constraint on the stored values."""
    return sa.Enum(
        enum_cls,
        name=name,
        native_enum=False,
        create_constraint=True,
        length=20,
        values_callable=lambda members: [m.value for m in members],
    )
