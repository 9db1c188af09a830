"""Order domain entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator

from src.core.clock import utc_now
from src.core.money import compute_line_total


class OrderStatus(str, Enum):
    """Order lifecycle states."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class OrderItem(BaseModel):
    """A single line item on an order (and, copied, on its invoice)."""

    id: str
    name: str
    description: str = ""
    quantity: int
    price: float  # unit price
    total: float = 0.0  # quantity * price

    @model_validator(mode="after")
    def compute_total(self) -> "OrderItem":
        """Derive total from quantity and unit price."""
        self.total = compute_line_total(self.quantity, self.price)
        return self


class Order(BaseModel):
    """A customer order with derived subtotal, tax and total."""

    id: str
    customer_id: str  # FK → customers.id
    customer_name: str  # snapshot at creation/edit time
    items: list[OrderItem] = Field(default_factory=list)
    subtotal: float = 0.0
    tax: float = 0.0
    total: float = 0.0
    status: OrderStatus = OrderStatus.PENDING
    notes: str | None = None
    created_at: datetime = Field(default_factory=utc_now)
