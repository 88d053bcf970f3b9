from __future__ import annotations

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from config.database import get_db
from models.user import User, RoleEnum
from utils.errors import AuthenticationError
from utils.security import decode_token


# -------------------------------
# Required authentication
# -------------------------------
def get_current_user(
    db: Session = Depends(get_db),
    Authorization: str | None = Header(None),
) -> User:
    """Resolve the user behind the Bearer token (token required)."""
    if not Authorization or not Authorization.lower().startswith("bearer "):
        raise AuthenticationError("Missing Authorization Bearer header")

    token = Authorization.split(" ", 1)[1].strip()

    try:
        payload = decode_token(token)
    except ValueError as exc:
        raise AuthenticationError(str(exc))

    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Token has no 'sub' claim")

    user = db.get(User, user_id)
    if not user:
        raise AuthenticationError("User not found")

    return user


# -------------------------------
# Role checks
# -------------------------------
def require_admin(user: User = Depends(get_current_user)) -> User:
    if user.role != RoleEnum.admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required")
    return user
