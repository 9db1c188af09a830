"""Signed-in user entity."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from src.core.clock import utc_now


class UserRole(str, Enum):
    """Account roles. Informational only."""

    ADMIN = "admin"
    USER = "user"


class User(BaseModel):
    """An authenticated account, without its password."""

    id: str
    email: str
    name: str
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=utc_now)
    last_login: datetime | None = None
