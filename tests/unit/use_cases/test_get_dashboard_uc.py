"""Tests for GetDashboardUseCase."""

from unittest.mock import AsyncMock

from src.application.use_cases.get_dashboard import GetDashboardUseCase
from src.core.entities import InvoiceStatus


class TestGetDashboardUseCase:
    async def test_counts_collections(self, seeded_store, make_invoice):
        await seeded_store.save_invoices(
            [make_invoice(status=InvoiceStatus.PAID), make_invoice(status=InvoiceStatus.SENT)]
        )

        summary = await GetDashboardUseCase(record_store=seeded_store).execute()

        assert summary.total_customers == 1
        assert summary.active_orders == 1
        assert summary.total_invoices == 2
        assert summary.total_revenue == 144300
        assert [i.id for i in summary.pending_invoices] == ["i2"]

    async def test_reads_each_collection_once(self):
        store = AsyncMock()
        store.get_customers.return_value = []
        store.get_orders.return_value = []
        store.get_invoices.return_value = []

        summary = await GetDashboardUseCase(record_store=store).execute()

        assert summary.total_invoices == 0
        store.get_customers.assert_awaited_once()
        store.get_orders.assert_awaited_once()
        store.get_invoices.assert_awaited_once()
