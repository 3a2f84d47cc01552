from fastapi import Depends, HTTPException, status

from hr_portal.core.security import get_current_user
from hr_portal.models.enums import UserRole
from hr_portal.models.user import User


def require_roles(*required: UserRole):
    """
    Usage:
      Depends(require_roles(UserRole.MANAGER))
      Depends(require_roles(UserRole.MANAGER, UserRole.EMPLOYEE))  # any-of
    """
    required_set = set(required)

    def _dep(user: User = Depends(get_current_user)) -> User:
        if user.role not in required_set:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Forbidden. Requires one of: {sorted(r.value for r in required_set)}",
            )
        return user

    return _dep
