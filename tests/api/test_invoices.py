"""API tests for invoice endpoints."""

INVOICE = {"order_id": "o1", "due_date": "2026-11-18", "notes": "Net 30"}


class TestInvoicesApi:
    async def test_create_invoice(self, async_client, seeded_store):
        response = await async_client.post("/api/invoices", json=INVOICE)

        assert response.status_code == 201
        data = response.json()
        assert data["invoice_number"].startswith("INV-")
        assert data["status"] == "draft"
        assert data["total"] == 144300
        assert data["due_date"] == "2026-11-18"

    async def test_second_invoice_for_order_rejected(self, async_client, seeded_store):
        await async_client.post("/api/invoices", json=INVOICE)

        response = await async_client.post("/api/invoices", json=INVOICE)

        assert response.status_code == 400
        assert response.json()["error_code"] == "DUPLICATE_INVOICE"
        assert len(await seeded_store.get_invoices()) == 1

    async def test_available_orders(self, async_client, seeded_store):
        data = (await async_client.get("/api/invoices/available-orders")).json()
        assert [o["id"] for o in data["orders"]] == ["o1"]

        invoice = (await async_client.post("/api/invoices", json=INVOICE)).json()

        data = (await async_client.get("/api/invoices/available-orders")).json()
        assert data["total"] == 0
        data = (
            await async_client.get(
                "/api/invoices/available-orders",
                params={"editing_invoice_id": invoice["id"]},
            )
        ).json()
        assert data["total"] == 1

    async def test_update_keeps_number(self, async_client, seeded_store):
        invoice = (await async_client.post("/api/invoices", json=INVOICE)).json()

        response = await async_client.put(
            f"/api/invoices/{invoice['id']}", json={**INVOICE, "status": "paid"}
        )

        assert response.status_code == 200
        assert response.json()["invoice_number"] == invoice["invoice_number"]
        assert response.json()["status"] == "paid"

    async def test_list_and_delete(self, async_client, seeded_store, sample_invoice):
        await seeded_store.save_invoices([sample_invoice])

        data = (await async_client.get("/api/invoices", params={"search": "0001"})).json()
        assert data["total"] == 1

        response = await async_client.delete("/api/invoices/i1")
        assert response.status_code == 200
        assert await seeded_store.get_invoices() == []

    async def test_missing_invoice(self, async_client):
        response = await async_client.get("/api/invoices/nope")

        assert response.status_code == 404
        assert response.json()["error_code"] == "INVOICE_NOT_FOUND"

    async def test_pdf_download(self, async_client, seeded_store, sample_invoice):
        await seeded_store.save_invoices([sample_invoice])

        response = await async_client.get("/api/invoices/i1/pdf")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert 'filename="INV-202610-0001.pdf"' in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")

    async def test_pdf_missing_invoice(self, async_client):
        response = await async_client.get("/api/invoices/nope/pdf")
        assert response.status_code == 404

    async def test_share_link(self, async_client, seeded_store, sample_invoice):
        await seeded_store.save_invoices([sample_invoice])

        response = await async_client.get("/api/invoices/i1/share")

        assert response.status_code == 200
        data = response.json()
        assert data["phone"] == "6281234567890"
        assert data["url"].startswith("https://wa.me/6281234567890?text=")
