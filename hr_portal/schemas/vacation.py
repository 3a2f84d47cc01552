from datetime import date, datetime
from typing import Literal
from pydantic import BaseModel, Field

from hr_portal.models.enums import VacationStatus, VacationType


class VacationRequestCreate(BaseModel):
    type: VacationType
    reason: str = Field(min_length=1, max_length=2000)
    start_date: date
    end_date: date


class VacationRequestResolve(BaseModel):
    status: Literal["approved", "rejected"]
    manager_comment: str | None = Field(default=None, max_length=2000)


class VacationRequestOut(BaseModel):
    id: int
    user_id: int
    user_name: str
    user_team: str
    type: VacationType
    reason: str
    start_date: date
    end_date: date
    status: VacationStatus
    manager_id: int
    manager_name: str
    manager_comment: str | None = None
    created_at: datetime
    updated_at: datetime
