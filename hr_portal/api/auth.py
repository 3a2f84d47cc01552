import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from hr_portal.core.config import settings
from hr_portal.core.deps import get_directory
from hr_portal.core.directory import Directory
from hr_portal.core.errors import InvalidInput
from hr_portal.core.security import issue_token
from hr_portal.core.visibility import project_user
from hr_portal.db.session import get_db
from hr_portal.schemas.auth import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    directory: Directory = Depends(get_directory),
):
    """
    Stub login: corporate email domain + directory lookup, no password.
    Returns the caller's own profile and an opaque bearer token.
    """
    email = payload.email.strip()
    if not email.endswith(f"@{settings.CORPORATE_EMAIL_DOMAIN}"):
        raise InvalidInput(f"Use your corporate @{settings.CORPORATE_EMAIL_DOMAIN} email")

    user = directory.find_by_email(email)
    if not user:
        logger.warning("Login failed for unknown email %s", email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")

    token = issue_token(db, user)
    logger.info("User %s logged in", user.id)
    return LoginResponse(user=project_user(user, user), token=token)
