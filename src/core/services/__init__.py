"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/interfaces/*
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.auth_service import AuthService
from src.core.services.dashboard import build_dashboard
from src.core.services.identity import (
    InvoiceNumberGenerator,
    SequentialIdGenerator,
    TimestampIdGenerator,
)
from src.core.services.invoice_engine import (
    InvoiceEngine,
    available_orders,
    find_conflicting_invoice,
    index_invoices_by_order,
)
from src.core.services.order_engine import (
    LineItemInput,
    OrderEngine,
    OrderTotals,
    compute_order_totals,
)
from src.core.services.record_filters import (
    filter_customers,
    filter_invoices,
    filter_orders,
)
from src.core.services.report_aggregator import (
    build_report,
    default_date_range,
    is_overdue,
)
from src.core.services.report_export import render_report_text, report_filename
from src.core.services.share_message import build_share_message, build_whatsapp_url

__all__ = [
    # Identity
    "TimestampIdGenerator",
    "SequentialIdGenerator",
    "InvoiceNumberGenerator",
    # Order Engine
    "OrderEngine",
    "LineItemInput",
    "OrderTotals",
    "compute_order_totals",
    # Invoice Engine
    "InvoiceEngine",
    "available_orders",
    "find_conflicting_invoice",
    "index_invoices_by_order",
    # Reporting
    "build_report",
    "default_date_range",
    "is_overdue",
    "render_report_text",
    "report_filename",
    # Supporting views
    "build_dashboard",
    "filter_customers",
    "filter_orders",
    "filter_invoices",
    "build_share_message",
    "build_whatsapp_url",
    # Auth
    "AuthService",
]
