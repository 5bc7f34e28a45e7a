# backend/trip_api/core/security.py

import jwt
import bcrypt
from datetime import datetime, timedelta, timezone
from typing import Optional

from trip_api.core.config_loader import settings


ALGORITHM = "HS256"

# bcrypt only hashes the first 72 bytes; bcrypt>=5 rejects longer input
MAX_PASSWORD_BYTES = 72


# ---------------------------------------------------------------------------
# PASSWORD HASHING
# ---------------------------------------------------------------------------
def get_password_hash(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def verify_password(password: str, hashed: str) -> bool:
    if password_too_long(password):
        return False
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))


# ---------------------------------------------------------------------------
# JWT CREATION
# ---------------------------------------------------------------------------
def create_access_token(subject: str, expires_minutes: Optional[int] = None) -> str:
    """
    Default expiration comes from settings (7 days).
    """
    if expires_minutes is None:
        expires_minutes = settings.access_token_expire_minutes

    now = datetime.now(timezone.utc)
    payload = {
        "sub": subject,
        "exp": now + timedelta(minutes=expires_minutes),
        "iat": now,
    }

    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=ALGORITHM)


# ---------------------------------------------------------------------------
# JWT VERIFY
# ---------------------------------------------------------------------------
def decode_token(token: str) -> Optional[dict]:
    try:
        return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.PyJWTError:
        return None
