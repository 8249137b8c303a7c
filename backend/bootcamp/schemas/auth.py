"""Auth Schemas — admin credentials and the public admin representation.

Invariants:
    - username: at least 3 chars; password: at least 6 chars, at most 72 UTF-8 bytes
    - AdminResponse has no password field
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

BCRYPT_MAX_BYTES = 72


class AdminCredentials(BaseModel):
    """Signup / login body."""
    username: str = Field(min_length=3, max_length=150)
    password: str = Field(min_length=6, max_length=72)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Please provide a username")
        return v

    @field_validator("password")
    @classmethod
    def fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"password must be at most {BCRYPT_MAX_BYTES} bytes")
        return v


class AdminResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    created_at: datetime | None = None
