"""
Reporting Aggregator.

Recomputes financial figures from the full invoice collection for a
date range and status filter. Pure: the same inputs always give the
same report and nothing is written back.
"""

from collections.abc import Iterable
from datetime import UTC, date, datetime, time
from typing import Literal

from src.core.clock import utc_now
from src.core.entities.invoice import Invoice, InvoiceStatus
from src.core.entities.report import (
    DateRange,
    MonthlyRevenue,
    ReportData,
    StatusBreakdown,
)
from src.core.services.formatting import format_month_label

ALL_STATUSES = "all"
RECENT_TRANSACTIONS_LIMIT = 10

StatusFilter = InvoiceStatus | Literal["all"]


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def default_date_range(today: date | None = None) -> DateRange:
    """First day of the current month through today."""
    today = today or utc_now().date()
    return DateRange(start=today.replace(day=1), end=today)


def in_date_range(invoice: Invoice, date_range: DateRange) -> bool:
    """True when the invoice was created within the range, end day inclusive."""
    start = datetime.combine(date_range.start, time.min, tzinfo=UTC)
    end = datetime.combine(date_range.end, time.max, tzinfo=UTC)
    return start <= _as_utc(invoice.created_at) <= end


def is_overdue(invoice: Invoice, now: datetime) -> bool:
    """
    Sent and past its due date.

    A derived view for reporting; the stored status is left alone.
    """
    if invoice.status != InvoiceStatus.SENT:
        return False
    due = datetime.combine(invoice.due_date, time.min, tzinfo=UTC)
    return due < _as_utc(now)


def _matches_status(invoice: Invoice, status_filter: StatusFilter) -> bool:
    if status_filter == ALL_STATUSES:
        return True
    return invoice.status == InvoiceStatus(status_filter)


def build_report(
    invoices: Iterable[Invoice],
    date_range: DateRange,
    status_filter: StatusFilter = ALL_STATUSES,
    now: datetime | None = None,
    recent_limit: int = RECENT_TRANSACTIONS_LIMIT,
) -> ReportData:
    """
    Aggregate invoices into a ReportData.

    Args:
        invoices: The full invoice collection in insertion order.
        date_range: Creation-date window; the end day is inclusive.
        status_filter: A stored status, or ``"all"`` to keep everything.
        now: Reference moment for the overdue view. Defaults to now.
        recent_limit: How many filtered invoices to list as recent.

    Returns:
        Revenue (paid), outstanding (sent), counts, average value,
        monthly revenue, status breakdown and recent transactions.
    """
    now = now or utc_now()

    filtered = [
        invoice
        for invoice in invoices
        if in_date_range(invoice, date_range) and _matches_status(invoice, status_filter)
    ]

    paid = [inv for inv in filtered if inv.status == InvoiceStatus.PAID]
    sent = [inv for inv in filtered if inv.status == InvoiceStatus.SENT]
    overdue = [inv for inv in filtered if is_overdue(inv, now)]

    total_revenue = sum(inv.total for inv in paid)
    total_outstanding = sum(inv.total for inv in sent)
    average_invoice_value = (
        sum(inv.total for inv in filtered) / len(filtered) if filtered else 0.0
    )

    # Dicts keep first-seen order
    monthly: dict[str, MonthlyRevenue] = {}
    for invoice in paid:
        label = format_month_label(_as_utc(invoice.created_at))
        entry = monthly.setdefault(label, MonthlyRevenue(month=label))
        entry.revenue += invoice.total
        entry.invoices += 1

    breakdown: dict[str, StatusBreakdown] = {}
    for invoice in filtered:
        key = invoice.status.value
        entry = breakdown.setdefault(key, StatusBreakdown(status=key))
        entry.count += 1
        entry.amount += invoice.total

    return ReportData(
        total_revenue=total_revenue,
        paid_invoices=len(paid),
        pending_invoices=len(sent),
        overdue_invoices=len(overdue),
        total_outstanding=total_outstanding,
        average_invoice_value=average_invoice_value,
        monthly_revenue=list(monthly.values()),
        status_breakdown=list(breakdown.values()),
        recent_transactions=filtered[:recent_limit],
    )
