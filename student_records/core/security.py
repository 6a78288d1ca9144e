from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from student_records.core.settings import settings


def _now() -> datetime:
    return datetime.now(UTC)


def create_token(
    sub: str, type_: str, expires_delta: timedelta, **claims: Any
) -> str:
    now = _now()
    payload: dict[str, Any] = {
        "sub": sub,  # user id (string)
        "type": type_,  # "access" | "verify"
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
        **claims,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALG)


def create_access_token(sub: str) -> str:
    return create_token(
        sub, "access", timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )


def create_verification_token(user_id: int, email: str) -> str:
    return create_token(
        str(user_id),
        "verify",
        timedelta(hours=settings.VERIFY_TOKEN_EXPIRE_HOURS),
        email=email,
    )


def decode_token(token: str, expected_type: str) -> dict:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALG])
    except JWTError as e:
        raise ValueError("Invalid token.") from e
    if payload.get("type") != expected_type:
        raise ValueError("Invalid token type.")
    return payload
