"""JWT helpers and the (permissive) caller identity resolution."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from gmgn_server.core.config import Settings, get_settings


class TokenError(Exception):
    """Raised when a bearer token cannot be decoded."""


def _encode(subject: str, email: str, token_type: str, expires_delta: timedelta, settings: Settings) -> str:
    payload = {
        "sub": subject,
        "email": email,
        "type": token_type,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def create_access_token(
    user_id: str,
    email: str,
    settings: Optional[Settings] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    settings = settings or get_settings()
    expire_delta = expires_delta or timedelta(minutes=settings.security.access_token_expire_minutes)
    return _encode(user_id, email, "access", expire_delta, settings)


def create_refresh_token(user_id: str, email: str, settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    expire_delta = timedelta(minutes=settings.security.refresh_token_expire_minutes)
    return _encode(user_id, email, "refresh", expire_delta, settings)


def decode_token(token: str, settings: Optional[Settings] = None) -> dict:
    settings = settings or get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise TokenError("Could not validate credentials") from exc
    if not payload.get("sub"):
        raise TokenError("token missing subject")
    return payload


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization[len("Bearer ") :].strip()
    return token or None


def resolve_user_id(
    explicit_user_id: Optional[str],
    authorization: Optional[str],
    settings: Optional[Settings] = None,
) -> str:
    """Pick the user a request acts for.

    Order: explicit ``userId`` parameter, then a valid bearer token, then the
    demo user. Invalid tokens are ignored rather than rejected.
    """
    settings = settings or get_settings()
    if explicit_user_id:
        return explicit_user_id
    token = bearer_token(authorization)
    if token:
        try:
            return decode_token(token, settings)["sub"]
        except TokenError:
            pass
    return settings.default_user_id


__all__ = [
    "TokenError",
    "bearer_token",
    "create_access_token",
    "create_refresh_token",
    "decode_token",
    "resolve_user_id",
]
