from datetime import date, datetime

from sqlalchemy import Date, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hr_portal.db.base import Base
from hr_portal.db.types import UTCDateTime
from hr_portal.models.enums import VacationStatus, VacationType, enum_column


class VacationRequest(Base):
    __tablename__ = "vacation_requests"
    # ids are never reused
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True)

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="RESTRICT"), index=True, nullable=False)
    # Snapshots taken at creation; intentionally stale if the user is renamed later
    user_name: Mapped[str] = mapped_column(String(200), nullable=False)
    user_team: Mapped[str] = mapped_column(String(100), nullable=False)

    type: Mapped[VacationType] = mapped_column(enum_column(VacationType, "ck_vacation_requests_type"), nullable=False)
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    status: Mapped[VacationStatus] = mapped_column(
        enum_column(VacationStatus, "ck_vacation_requests_status"),
        nullable=False,
        default=VacationStatus.PENDING,
    )

    manager_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="RESTRICT"), index=True, nullable=False)
    manager_name: Mapped[str] = mapped_column(String(200), nullable=False)
    manager_comment: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
