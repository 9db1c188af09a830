"""Financial report value objects."""

from datetime import date

from pydantic import BaseModel, Field, model_validator

from src.core.entities.invoice import Invoice
from src.core.entities.order import Order


class DateRange(BaseModel):
    """Inclusive calendar range; the end day counts up to its last instant."""

    start: date
    end: date

    @model_validator(mode="after")
    def check_order(self) -> "DateRange":
        if self.end < self.start:
            raise ValueError("end must not be before start")
        return self


class MonthlyRevenue(BaseModel):
    """Paid revenue for one creation month."""

    month: str
    revenue: float = 0.0
    invoices: int = 0


class StatusBreakdown(BaseModel):
    """Count and amount of invoices sharing a stored status."""

    status: str
    count: int = 0
    amount: float = 0.0


class ReportData(BaseModel):
    """Aggregated figures over a filtered set of invoices."""

    total_revenue: float = 0.0
    paid_invoices: int = 0
    pending_invoices: int = 0
    overdue_invoices: int = 0
    total_outstanding: float = 0.0
    average_invoice_value: float = 0.0
    monthly_revenue: list[MonthlyRevenue] = Field(default_factory=list)
    status_breakdown: list[StatusBreakdown] = Field(default_factory=list)
    recent_transactions: list[Invoice] = Field(default_factory=list)


class DashboardSummary(BaseModel):
    """Headline counters for the landing page."""

    total_customers: int = 0
    active_orders: int = 0
    total_invoices: int = 0
    total_revenue: float = 0.0
    recent_orders: list[Order] = Field(default_factory=list)
    pending_invoices: list[Invoice] = Field(default_factory=list)
