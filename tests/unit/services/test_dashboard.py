"""Tests for the dashboard summary."""

from src.core.entities import InvoiceStatus, OrderStatus
from src.core.services.dashboard import build_dashboard


def test_counts_and_revenue(sample_customer, sample_order, make_invoice):
    completed = sample_order.model_copy(update={"id": "o2", "status": OrderStatus.COMPLETED})
    invoices = [
        make_invoice(status=InvoiceStatus.PAID, total=100000),
        make_invoice(status=InvoiceStatus.PAID, total=50000),
        make_invoice(status=InvoiceStatus.SENT, total=70000),
        make_invoice(status=InvoiceStatus.DRAFT, total=10000),
    ]

    summary = build_dashboard([sample_customer], [sample_order, completed], invoices)

    assert summary.total_customers == 1
    assert summary.active_orders == 1
    assert summary.total_invoices == 4
    assert summary.total_revenue == 150000
    assert [o.id for o in summary.recent_orders] == ["o1", "o2"]
    assert [i.total for i in summary.pending_invoices] == [70000]


def test_lists_are_capped(sample_order, make_invoice):
    orders = [sample_order.model_copy(update={"id": f"o{n}"}) for n in range(8)]
    invoices = [make_invoice(status=InvoiceStatus.SENT) for _ in range(8)]

    summary = build_dashboard([], orders, invoices)

    assert len(summary.recent_orders) == 5
    assert len(summary.pending_invoices) == 5
    assert summary.recent_orders[0].id == "o0"


def test_empty():
    summary = build_dashboard([], [], [])
    assert summary.total_revenue == 0
    assert summary.recent_orders == []
