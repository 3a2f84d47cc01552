from datetime import datetime, timezone

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hr_portal.db.base import Base
from hr_portal.db.types import UTCDateTime
from hr_portal.models.enums import DocumentType, enum_column


class Document(Base):
    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[DocumentType] = mapped_column(enum_column(DocumentType, "ck_documents_type"), nullable=False)
    # metadata only: no bytes are stored anywhere
    url: Mapped[str | None] = mapped_column(String(2000), nullable=True)

    uploaded_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    owner = relationship("User", back_populates="documents")
