"""Landing page counters."""

from collections.abc import Sequence

from src.core.entities.customer import Customer
from src.core.entities.invoice import Invoice, InvoiceStatus
from src.core.entities.order import Order, OrderStatus
from src.core.entities.report import DashboardSummary

RECENT_LIMIT = 5


def build_dashboard(
    customers: Sequence[Customer],
    orders: Sequence[Order],
    invoices: Sequence[Invoice],
    recent_limit: int = RECENT_LIMIT,
) -> DashboardSummary:
    """Count records and pick the first few orders and sent invoices."""
    sent = [inv for inv in invoices if inv.status == InvoiceStatus.SENT]
    return DashboardSummary(
        total_customers=len(customers),
        active_orders=sum(1 for o in orders if o.status != OrderStatus.COMPLETED),
        total_invoices=len(invoices),
        total_revenue=sum(inv.total for inv in invoices if inv.status == InvoiceStatus.PAID),
        recent_orders=list(orders[:recent_limit]),
        pending_invoices=sent[:recent_limit],
    )
