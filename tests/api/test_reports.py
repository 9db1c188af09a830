"""API tests for report endpoints."""

import pytest

from src.core.entities import InvoiceStatus


@pytest.fixture
async def invoiced_store(memory_store, make_invoice):
    await memory_store.save_invoices(
        [
            make_invoice(status=InvoiceStatus.PAID, total=100000),
            make_invoice(status=InvoiceStatus.SENT, total=40000),
        ]
    )
    return memory_store


PERIOD = {"start_date": "2026-10-01", "end_date": "2026-10-31"}


class TestReportsApi:
    async def test_report(self, async_client, invoiced_store):
        response = await async_client.get("/api/reports", params=PERIOD)

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "all"
        assert data["report"]["total_revenue"] == 100000
        assert data["report"]["total_outstanding"] == 40000
        assert data["report"]["average_invoice_value"] == 70000

    async def test_status_filter(self, async_client, invoiced_store):
        response = await async_client.get("/api/reports", params={**PERIOD, "status": "paid"})

        assert response.json()["report"]["pending_invoices"] == 0

    async def test_unknown_status(self, async_client, invoiced_store):
        response = await async_client.get("/api/reports", params={"status": "archived"})

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    async def test_reversed_range(self, async_client, invoiced_store):
        params = {"start_date": "2026-10-31", "end_date": "2026-10-01"}

        response = await async_client.get("/api/reports", params=params)

        assert response.status_code == 400

    async def test_export(self, async_client, invoiced_store):
        response = await async_client.get("/api/reports/export", params=PERIOD)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert (
            'filename="financial-report-2026-10-01-2026-10-31.txt"'
            in response.headers["content-disposition"]
        )
        assert "Total Revenue: Rp 100.000" in response.text
