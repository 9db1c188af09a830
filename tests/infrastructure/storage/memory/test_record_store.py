"""Tests for InMemoryRecordStore."""

import json

from src.infrastructure.storage.memory import InMemoryRecordStore


class TestInMemoryRecordStore:
    async def test_empty(self, memory_store):
        assert await memory_store.get_customers() == []
        assert await memory_store.get_current_user() is None

    async def test_values_are_stored_as_json(self, memory_store, sample_customer):
        await memory_store.save_customers([sample_customer])

        assert json.loads(memory_store.raw("customers"))[0]["id"] == "c1"

    async def test_loaded_records_are_copies(self, memory_store, sample_order):
        await memory_store.save_orders([sample_order])

        loaded = await memory_store.get_orders()
        loaded[0].notes = "changed"

        assert (await memory_store.get_orders())[0].notes is None

    async def test_stores_are_independent(self, sample_invoice):
        first, second = InMemoryRecordStore(), InMemoryRecordStore()
        await first.save_invoices([sample_invoice])

        assert await second.get_invoices() == []
