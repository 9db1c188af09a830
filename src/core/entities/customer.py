"""Customer domain entity."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.core.clock import utc_now


class Customer(BaseModel):
    """A customer that orders are placed for."""

    id: str
    name: str
    email: str
    phone: str
    address: str
    company: str | None = None
    created_at: datetime = Field(default_factory=utc_now)
