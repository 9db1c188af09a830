"""Invoice domain entity."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field

from src.core.clock import utc_now
from src.core.entities.order import OrderItem


class InvoiceStatus(str, Enum):
    """Invoice lifecycle states."""

    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


class Invoice(BaseModel):
    """
    An invoice derived from exactly one order.

    Items, amounts and customer contact fields are copied when the
    invoice is created and never refreshed from the source records.
    """

    id: str
    order_id: str  # FK → orders.id
    customer_id: str  # FK → customers.id
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_address: str
    items: list[OrderItem] = Field(default_factory=list)
    subtotal: float = 0.0
    tax: float = 0.0
    total: float = 0.0
    status: InvoiceStatus = InvoiceStatus.DRAFT
    due_date: date
    notes: str | None = None
    invoice_number: str
    created_at: datetime = Field(default_factory=utc_now)
