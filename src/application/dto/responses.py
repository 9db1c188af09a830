"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from src.core.entities.customer import Customer
from src.core.entities.invoice import Invoice
from src.core.entities.order import Order
from src.core.entities.report import ReportData
from src.core.entities.user import User


class CustomerListResponse(BaseModel):
    """Customers matching an optional search term."""

    customers: list[Customer]
    total: int


class OrderListResponse(BaseModel):
    """Orders matching an optional search term."""

    orders: list[Order]
    total: int


class InvoiceListResponse(BaseModel):
    """Invoices matching an optional search term."""

    invoices: list[Invoice]
    total: int


class DeleteResponse(BaseModel):
    """Acknowledges a delete by id."""

    id: str
    deleted: bool = True
    orphaned_references: int = Field(
        default=0,
        description="Records still pointing at the deleted one",
    )


class ReportResponse(BaseModel):
    """Financial report for a date range and status filter."""

    start_date: date
    end_date: date
    status: str
    report: ReportData


class ShareLinkResponse(BaseModel):
    """WhatsApp share text and link for an invoice."""

    invoice_id: str
    phone: str
    message: str
    url: str


class LoginResponse(BaseModel):
    """Signed-in user."""

    user: User


class ProviderHealthResponse(BaseModel):
    """Provider health status."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ProviderHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. INVOICE_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
