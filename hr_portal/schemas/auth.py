from pydantic import BaseModel, Field

from hr_portal.schemas.user import UserFullOut


class LoginRequest(BaseModel):
    email: str = Field(min_length=3, max_length=320)


class LoginResponse(BaseModel):
    user: UserFullOut
    token: str
