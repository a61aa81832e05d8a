"""User Schemas — Pydantic models for the /usuarios endpoints.

Invariants:
    - UserCreate: all four fields required, non-empty strings
    - UserCreate.email: a bare address (no display name), passed on unchanged
    - No trimming here: normalization belongs to the service
    - UserResponse timestamps serialize as ISO-8601 with a UTC offset

Design Decisions:
    - Strict str fields: numbers or nulls rejected instead of coerced
    - email checked with email-validator on the raw value, not EmailStr:
      EmailStr parses "Name <addr>" and returns a rewritten address
    - from_attributes: responses built straight from ORM rows
"""

from datetime import datetime, timezone

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class UserCreate(BaseModel):
    """Create-user request body."""
    nombre: StrictStr = Field(min_length=1)
    apellido: StrictStr = Field(min_length=1)
    email: StrictStr
    reparto: StrictStr = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def check_email_syntax(cls, v: str) -> str:
        # surrounding whitespace is the service's to trim
        try:
            validate_email(v.strip(), check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"value is not a valid email address: {e}") from e
        return v


class UserResponse(BaseModel):
    """User as returned by GET /usuarios."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    apellido: str
    email: str
    reparto: str
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Stores without zone support (SQLite) return naive UTC values."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
