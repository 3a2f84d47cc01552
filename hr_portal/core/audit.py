import logging
from typing import Any

from sqlalchemy.orm import Session

from hr_portal.models.audit_event import AuditEvent
from hr_portal.models.user import User

logger = logging.getLogger(__name__)


def log_event(
    *,
    db: Session,
    actor: User | None,
    action: str,
    entity_type: str,
    entity_id: int,
    metadata: dict[str, Any] | None = None,
):
    event = AuditEvent(
        actor_user_id=actor.id if actor else None,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        event_metadata=metadata,
    )
    db.add(event)
    logger.debug("audit %s %s:%s by %s", action, entity_type, entity_id, event.actor_user_id)
