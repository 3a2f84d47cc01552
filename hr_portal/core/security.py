import secrets

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from hr_portal.core.directory import Directory
from hr_portal.db.session import get_db
from hr_portal.models.auth_session import AuthSession
from hr_portal.models.user import User


def issue_token(db: Session, user: User) -> str:
    token = secrets.token_urlsafe(32)
    db.add(AuthSession(token=token, user_id=user.id))
    db.flush()
    return token


def _user_from_bearer(db: Session, authorization: str) -> User:
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=401, detail="Invalid Authorization header")
    row = db.get(AuthSession, token.strip())
    user = db.get(User, row.user_id) if row else None
    if not user:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    return user


def get_current_user(
    authorization: str | None = Header(default=None),
    x_user_email: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the caller from either:
      Authorization: Bearer <token>   (issued by POST /auth/login)
      X-User-Email: ivan@zinda.ai     (DEV AUTH)
    """
    if authorization:
        return _user_from_bearer(db, authorization)

    if not x_user_email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization or X-User-Email header",
        )

    user = Directory(db).find_by_email(x_user_email)
    if not user:
        raise HTTPException(status_code=401, detail="Unknown user")
    return user
