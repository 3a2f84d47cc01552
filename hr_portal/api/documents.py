from fastapi import APIRouter, Depends, status

from hr_portal.api.users import assert_owner
from hr_portal.core.audit import log_event
from hr_portal.core.deps import get_directory
from hr_portal.core.directory import Directory
from hr_portal.core.security import get_current_user
from hr_portal.core.visibility import assert_can_view_full, document_to_out
from hr_portal.models.user import User
from hr_portal.schemas.user import DocumentCreate, DocumentOut

router = APIRouter(prefix="/users/{user_id}/documents", tags=["documents"])


@router.get("", response_model=list[DocumentOut])
def list_documents(
    user_id: int,
    directory: Directory = Depends(get_directory),
    current_user: User = Depends(get_current_user),
):
    subject = directory.get_or_404(user_id)
    assert_can_view_full(current_user, subject)
    return [document_to_out(d) for d in subject.documents]


@router.post("", response_model=DocumentOut, status_code=status.HTTP_201_CREATED)
def add_document(
    user_id: int,
    payload: DocumentCreate,
    directory: Directory = Depends(get_directory),
    current_user: User = Depends(get_current_user),
):
    """Record document metadata. File bytes are not stored."""
    owner = directory.get_or_404(user_id)
    assert_owner(current_user, owner.id)

    doc = directory.append_document(owner, name=payload.name, doc_type=payload.type, url=payload.url)
    log_event(
        db=directory.db,
        actor=current_user,
        action="DOCUMENT_ADDED",
        entity_type="document",
        entity_id=doc.id,
        metadata={"user_id": owner.id, "name": doc.name, "type": doc.type.value},
    )
    return document_to_out(doc)
