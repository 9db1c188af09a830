"""Concurrent use-case writes against SQLiteRecordStore."""

import asyncio
from datetime import date

import pytest

from src.application.dto.requests import (
    CustomerRequest,
    OrderItemRequest,
    SaveInvoiceRequest,
    SaveOrderRequest,
)
from src.application.use_cases.manage_customers import ManageCustomersUseCase
from src.application.use_cases.manage_invoices import ManageInvoicesUseCase
from src.application.use_cases.manage_orders import ManageOrdersUseCase
from src.core.exceptions import DuplicateInvoiceError
from src.core.services.identity import InvoiceNumberGenerator, SequentialIdGenerator
from src.core.services.invoice_engine import InvoiceEngine
from src.core.services.order_engine import OrderEngine
from src.infrastructure.storage.sqlite.connection import ConnectionPool
from src.infrastructure.storage.sqlite.record_store import SQLiteRecordStore


def _order_request(name: str = "Photo session") -> SaveOrderRequest:
    return SaveOrderRequest(
        customer_id="c1",
        items=[OrderItemRequest(name=name, quantity=1, price=100000)],
    )


def _invoice_request(order_id: str) -> SaveInvoiceRequest:
    return SaveInvoiceRequest(order_id=order_id, due_date=date(2026, 11, 18))


@pytest.fixture
async def store(pool: ConnectionPool, clock, sample_customer) -> SQLiteRecordStore:
    store = SQLiteRecordStore(pool=pool, clock=clock)
    await store.save_customers([sample_customer])
    return store


@pytest.fixture
def orders(store, clock) -> ManageOrdersUseCase:
    engine = OrderEngine(id_generator=SequentialIdGenerator(prefix="o"), clock=clock)
    return ManageOrdersUseCase(record_store=store, order_engine=engine)


@pytest.fixture
def invoices(store, clock) -> ManageInvoicesUseCase:
    engine = InvoiceEngine(
        id_generator=SequentialIdGenerator(prefix="inv"),
        number_generator=InvoiceNumberGenerator(clock=clock),
        clock=clock,
    )
    return ManageInvoicesUseCase(record_store=store, invoice_engine=engine)


class TestConcurrentWrites:
    async def test_concurrent_order_creates_all_persist(self, orders, store):
        created = await asyncio.gather(
            *(orders.create_order(_order_request(f"Session {n}")) for n in range(5))
        )

        stored = await store.get_orders()
        assert len(stored) == 5
        assert {o.id for o in stored} == {o.id for o in created}

    async def test_concurrent_invoices_for_one_order(self, orders, invoices, store):
        order = await orders.create_order(_order_request())

        results = await asyncio.gather(
            invoices.create_invoice(_invoice_request(order.id)),
            invoices.create_invoice(_invoice_request(order.id)),
            return_exceptions=True,
        )

        errors = [r for r in results if isinstance(r, Exception)]
        assert len(errors) == 1
        assert isinstance(errors[0], DuplicateInvoiceError)
        assert len(await store.get_invoices()) == 1

    async def test_concurrent_invoices_get_distinct_numbers(self, orders, invoices, store):
        first = await orders.create_order(_order_request("Wedding"))
        second = await orders.create_order(_order_request("Graduation"))

        await asyncio.gather(
            invoices.create_invoice(_invoice_request(first.id)),
            invoices.create_invoice(_invoice_request(second.id)),
        )

        numbers = [i.invoice_number for i in await store.get_invoices()]
        assert len(numbers) == 2
        assert len(set(numbers)) == 2

    async def test_concurrent_customer_creates_all_persist(self, store, clock):
        use_case = ManageCustomersUseCase(
            record_store=store,
            id_generator=SequentialIdGenerator(prefix="c", start=100),
            clock=clock,
        )

        await asyncio.gather(
            *(
                use_case.create_customer(
                    CustomerRequest(
                        name=f"Pelanggan {n}",
                        email=f"pelanggan{n}@example.com",
                        phone="0812-0000-0000",
                        address="Jl. Asia Afrika 1, Bandung",
                    )
                )
                for n in range(4)
            )
        )

        assert len(await store.get_customers()) == 5
