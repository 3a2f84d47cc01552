from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from hr_portal.core.rbac import require_roles
from hr_portal.db.session import get_db
from hr_portal.models.audit_event import AuditEvent
from hr_portal.models.enums import UserRole
from hr_portal.schemas.audit import AuditEventOut

router = APIRouter(prefix="/audit", tags=["audit"])


@router.get("", response_model=list[AuditEventOut])
def list_audit_events(
    entity_type: str | None = Query(default=None),
    entity_id: int | None = Query(default=None),
    limit: int = Query(default=50, ge=1, le=200),
    db: Session = Depends(get_db),
    _=Depends(require_roles(UserRole.MANAGER)),
):
    q = db.query(AuditEvent)

    if entity_type:
        q = q.filter(AuditEvent.entity_type == entity_type)
    if entity_id is not None:
        q = q.filter(AuditEvent.entity_id == entity_id)

    rows = q.order_by(AuditEvent.id.desc()).limit(limit).all()

    return [
        AuditEventOut(
            id=r.id,
            actor_user_id=r.actor_user_id,
            action=r.action,
            entity_type=r.entity_type,
            entity_id=r.entity_id,
            metadata=r.event_metadata,
            created_at=r.created_at,
        )
        for r in rows
    ]
