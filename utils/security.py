# utils/security.py
from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from dotenv import load_dotenv, find_dotenv
from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTClaimsError, JWTError
from passlib.context import CryptContext
from passlib.exc import UnknownHashError

# Load .env from the project root
load_dotenv(find_dotenv(usecwd=True))

JWT_SECRET: str = os.getenv("JWT_SECRET", "workout-tracker-dev-secret")
JWT_ALG: str = os.getenv("JWT_ALG", "HS256")
JWT_EXPIRATION_DAYS: int = int(os.getenv("JWT_EXPIRATION_DAYS", "7"))
JWT_ISSUER: Optional[str] = os.getenv("JWT_ISSUER") or None
JWT_AUDIENCE: Optional[str] = os.getenv("JWT_AUDIENCE") or None

# No native dependencies and no 72 byte limit
pwd_ctx = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_ctx.hash(password)


def verify_password(plain: str, hashed: Optional[str]) -> bool:
    if not hashed:
        return False
    try:
        return pwd_ctx.verify(plain, hashed)
    except UnknownHashError:
        return False


def create_token(
    data: Dict[str, Any],
    expires_in: Optional[timedelta] = None,
    issuer: Optional[str] = JWT_ISSUER,
    audience: Optional[str] = JWT_AUDIENCE,
) -> str:
    """
    Create a signed JWT. ``data`` must contain at least ``sub`` (the user id).
    """
    now = datetime.now(timezone.utc)
    if expires_in is None:
        expires_in = timedelta(days=JWT_EXPIRATION_DAYS)

    if "sub" in data:
        data = {**data, "sub": str(data["sub"])}

    payload: Dict[str, Any] = {
        **data,
        "iat": now,
        "nbf": now,
        "exp": now + expires_in,
    }
    if issuer:
        payload["iss"] = issuer
    if audience:
        payload["aud"] = audience

    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALG)


def decode_token(
    token: str,
    issuer: Optional[str] = JWT_ISSUER,
    audience: Optional[str] = JWT_AUDIENCE,
    leeway_seconds: int = 10,
) -> Dict[str, Any]:
    """
    Validate and decode a JWT. Raises ValueError with a readable message when
    the token is expired or invalid.
    """
    try:
        payload = jwt.decode(
            token,
            JWT_SECRET,
            algorithms=[JWT_ALG],
            issuer=issuer,
            audience=audience,
            options={"require_exp": True, "require_iat": True, "verify_aud": audience is not None, "leeway": leeway_seconds},
        )
    except ExpiredSignatureError as exc:
        raise ValueError("Token has expired") from exc
    except JWTClaimsError as exc:
        raise ValueError(f"Invalid token claims: {exc}") from exc
    except JWTError as exc:
        raise ValueError("Invalid token") from exc

    if "sub" in payload:
        payload["sub"] = str(payload["sub"])
    return payload
