"""Credentials — bcrypt password hashing and JWT bearer tokens.

Invariants:
    - Passwords are only ever stored as bcrypt hashes
    - Tokens carry {"user": {"id", "username"}} and expire after token_expiry_days
    - Every decode failure (bad signature, expired, malformed) → AuthenticationError

Design Decisions:
    - bcrypt directly (no passlib wrapper): one algorithm, nothing to negotiate
    - PyJWT HS256 with a shared secret: single service, no key distribution
"""

from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from bootcamp.core.domain_types import AdminId, AdminIdentity
from bootcamp.core.errors import AuthenticationError


def hash_password(password: str, rounds: int = 10) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


def issue_token(
    identity: AdminIdentity,
    secret: str,
    expiry_days: int = 2,
    algorithm: str = "HS256",
    now: datetime | None = None,
) -> str:
    """Sign the admin identity into a bearer token."""
    now = now or datetime.now(timezone.utc)
    payload = {
        "user": {"id": identity.id, "username": identity.username},
        "iat": now,
        "exp": now + timedelta(days=expiry_days),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_token(
    token: str, secret: str, algorithm: str = "HS256",
) -> AdminIdentity:
    """Decode a bearer token back into the admin identity."""
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except jwt.PyJWTError:
        raise AuthenticationError("Invalid token")
    user = payload.get("user")
    if not isinstance(user, dict) or "id" not in user or "username" not in user:
        raise AuthenticationError("Invalid token")
    return AdminIdentity(id=AdminId(int(user["id"])), username=str(user["username"]))
