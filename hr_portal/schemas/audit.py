from datetime import datetime
from typing import Any
from pydantic import BaseModel


class AuditEventOut(BaseModel):
    id: int
    actor_user_id: int | None
    action: str
    entity_type: str
    entity_id: int
    metadata: dict[str, Any] | None
    created_at: datetime
