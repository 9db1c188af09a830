"""Core domain entities."""

from src.core.entities.customer import Customer
from src.core.entities.invoice import Invoice, InvoiceStatus
from src.core.entities.order import Order, OrderItem, OrderStatus
from src.core.entities.report import (
    DashboardSummary,
    DateRange,
    MonthlyRevenue,
    ReportData,
    StatusBreakdown,
)
from src.core.entities.user import User, UserRole

__all__ = [
    # Customer entities
    "Customer",
    # Order entities
    "Order",
    "OrderItem",
    "OrderStatus",
    # Invoice entities
    "Invoice",
    "InvoiceStatus",
    # Report entities
    "DateRange",
    "ReportData",
    "MonthlyRevenue",
    "StatusBreakdown",
    "DashboardSummary",
    # User entities
    "User",
    "UserRole",
]
