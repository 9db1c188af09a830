"""API tests for order endpoints."""

import pytest

ORDER = {
    "customer_id": "c1",
    "items": [
        {"name": "Photo session", "quantity": 2, "price": 50000},
        {"name": "Album", "quantity": 1, "price": 30000},
    ],
    "notes": "Wedding",
}


class TestOrdersApi:
    async def test_create_computes_totals(self, async_client, seeded_store):
        response = await async_client.post("/api/orders", json=ORDER)

        assert response.status_code == 201
        data = response.json()
        assert data["customer_name"] == "Budi Santoso"
        assert data["subtotal"] == 130000
        assert data["tax"] == pytest.approx(14300)
        assert data["total"] == pytest.approx(144300)
        assert data["status"] == "pending"
        assert len(await seeded_store.get_orders()) == 2

    async def test_unknown_customer(self, async_client, seeded_store):
        response = await async_client.post("/api/orders", json={**ORDER, "customer_id": "x"})

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"
        assert len(await seeded_store.get_orders()) == 1

    async def test_empty_items(self, async_client, seeded_store):
        response = await async_client.post("/api/orders", json={**ORDER, "items": []})

        assert response.status_code == 400
        assert response.json()["detail"] == "An order needs at least one item"

    async def test_zero_quantity_rejected_by_schema(self, async_client, seeded_store):
        body = {**ORDER, "items": [{"name": "Album", "quantity": 0, "price": 30000}]}

        response = await async_client.post("/api/orders", json=body)

        assert response.status_code == 422

    async def test_update_status(self, async_client, seeded_store):
        response = await async_client.put("/api/orders/o1", json={**ORDER, "status": "completed"})

        assert response.status_code == 200
        assert response.json()["id"] == "o1"
        assert response.json()["status"] == "completed"

    async def test_list_get_delete(self, async_client, seeded_store):
        assert (await async_client.get("/api/orders")).json()["total"] == 1
        assert (await async_client.get("/api/orders/o1")).json()["customer_id"] == "c1"

        response = await async_client.delete("/api/orders/o1")
        assert response.status_code == 200
        assert response.json()["orphaned_references"] == 0

        response = await async_client.get("/api/orders/o1")
        assert response.status_code == 404
        assert response.json()["error_code"] == "ORDER_NOT_FOUND"
