"""
Field-level disclosure rules for user data.

Identity and contact fields are visible to every authenticated viewer.
Compensation and documents are visible to the subject themselves and to any
manager. No other module decides what a viewer may see.
"""
from hr_portal.core.errors import PermissionDenied
from hr_portal.models.enums import UserRole
from hr_portal.models.user import User
from hr_portal.schemas.user import DocumentOut, SocialLinks, UserFullOut, UserPublicOut


def can_view_full(viewer: User, subject: User) -> bool:
    if viewer.id == subject.id:
        return True
    match viewer.role:
        case UserRole.MANAGER:
            return True
        case UserRole.EMPLOYEE:
            return False
    raise ValueError(f"Unknown role: {viewer.role!r}")


def assert_can_view_full(viewer: User, subject: User) -> None:
    if not can_view_full(viewer, subject):
        raise PermissionDenied("Not allowed to view this user's private data")


def document_to_out(d) -> DocumentOut:
    return DocumentOut(
        id=d.id,
        name=d.name,
        type=d.type,
        uploaded_at=d.uploaded_at,
        url=d.url,
    )


def _public_fields(subject: User) -> dict:
    return dict(
        id=subject.id,
        name=subject.name,
        role=subject.role,
        team=subject.team,
        email=subject.email,
        phone=subject.phone,
        avatar=subject.avatar,
        social=SocialLinks(linkedin=subject.linkedin, telegram=subject.telegram),
    )


def project_user(viewer: User, subject: User) -> UserPublicOut | UserFullOut:
    if not can_view_full(viewer, subject):
        return UserPublicOut(**_public_fields(subject))
    return UserFullOut(
        **_public_fields(subject),
        salary=subject.salary,
        bonus=subject.bonus,
        total_compensation=subject.total_compensation,
        documents=[document_to_out(d) for d in subject.documents],
    )


def project_users(viewer: User, subjects: list[User]) -> list[UserPublicOut | UserFullOut]:
    return [project_user(viewer, s) for s in subjects]
