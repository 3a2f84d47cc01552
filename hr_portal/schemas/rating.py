from datetime import datetime
from pydantic import BaseModel, Field


class RatingUpsert(BaseModel):
    rating: int = Field(ge=1, le=10)
    comment: str = Field(default="", max_length=2000)
    characteristic: str = Field(default="", max_length=4000)


class RatingOut(BaseModel):
    id: int
    employee_id: int
    manager_id: int
    manager_name: str
    rating: int
    comment: str
    characteristic: str
    created_at: datetime
    updated_at: datetime
