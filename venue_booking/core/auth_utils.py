from datetime import datetime, timedelta, timezone

from jose import jwt, JWTError

from venue_booking.core.config import JWT_ALGORITHM, JWT_SECRET
from venue_booking.core.errors import Unauthorized
from venue_booking.models.enums import TenantRole

ACCESS_TOKEN_EXPIRE_MINUTES = 60


# -------- CREATE TOKEN --------
def create_access_token(data: dict, expires_minutes: int | None = None):
    """Issue a JWT the way the identity provider does (used by tooling and tests)."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=expires_minutes if expires_minutes else ACCESS_TOKEN_EXPIRE_MINUTES
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, JWT_SECRET, algorithm=JWT_ALGORITHM)


# -------- DECODE TOKEN --------
def decode_token(token: str):
    if not JWT_SECRET:
        raise Unauthorized("Authentication is not configured")

    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except JWTError:
        raise Unauthorized("Invalid or expired token")

    if "sub" not in payload or "role" not in payload:
        raise Unauthorized("Invalid token payload")

    return payload


def resolve_customer_id(token: str) -> str:
    payload = decode_token(token)
    if payload["role"] != TenantRole.CUSTOMER.value:
        raise Unauthorized("Invalid role")
    return str(payload["sub"])
