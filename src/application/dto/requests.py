"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

from datetime import date

from pydantic import BaseModel, Field

from src.core.entities.invoice import InvoiceStatus
from src.core.entities.order import OrderStatus


class CustomerRequest(BaseModel):
    """Create or replace a customer."""

    name: str = Field(..., min_length=1, examples=["PT Maju Jaya"])
    email: str = Field(..., min_length=1, examples=["finance@majujaya.co.id"])
    phone: str = Field(..., min_length=1, examples=["0812-3456-7890"])
    address: str = Field(..., min_length=1, examples=["Jl. Sudirman No. 1, Jakarta"])
    company: str | None = Field(default=None, description="Company name, if any")


class OrderItemRequest(BaseModel):
    """A requested order line. Totals are always computed server-side."""

    name: str = Field(..., min_length=1, examples=["Product photography"])
    description: str = Field(default="", description="Optional line description")
    quantity: int = Field(..., ge=1, examples=[2])
    price: float = Field(..., ge=0, description="Unit price in Rupiah", examples=[50000])


class SaveOrderRequest(BaseModel):
    """Create or replace an order."""

    customer_id: str = Field(..., description="Existing customer ID")
    items: list[OrderItemRequest] = Field(default_factory=list)
    status: OrderStatus = Field(default=OrderStatus.PENDING)
    notes: str | None = Field(default=None)


class SaveInvoiceRequest(BaseModel):
    """Create or replace an invoice derived from an order."""

    order_id: str = Field(..., description="Order backing the invoice")
    due_date: date = Field(..., examples=["2026-11-18"])
    status: InvoiceStatus = Field(default=InvoiceStatus.DRAFT)
    notes: str | None = Field(default=None)


class LoginRequest(BaseModel):
    """Credentials for the fixed account list."""

    email: str = Field(..., examples=["admin@studiokatalika.com"])
    password: str = Field(..., min_length=1)
