from datetime import datetime
from pydantic import BaseModel, Field

from hr_portal.models.enums import DocumentType, UserRole


class SocialLinks(BaseModel):
    linkedin: str | None = None
    telegram: str | None = None


class DocumentOut(BaseModel):
    id: int
    name: str
    type: DocumentType
    uploaded_at: datetime
    url: str | None = None


class DocumentCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    type: DocumentType
    url: str | None = Field(default=None, max_length=2000)


class UserPublicOut(BaseModel):
    """Identity/contact fields; visible to every authenticated viewer."""
    id: int
    name: str
    role: UserRole
    team: str
    email: str
    phone: str
    avatar: str | None = None
    social: SocialLinks


class UserFullOut(UserPublicOut):
    """Adds compensation and documents (self or manager only)."""
    salary: float
    bonus: float
    total_compensation: float
    documents: list[DocumentOut]


class AvatarUpdate(BaseModel):
    # URL or data: URI produced by the frontend picker
    avatar: str = Field(min_length=1)
