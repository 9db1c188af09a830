"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Callable, Iterator
from datetime import UTC, date, datetime
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from src.application.services import reset_services
from src.config import reset_settings
from src.core.entities import (
    Customer,
    Invoice,
    InvoiceStatus,
    Order,
    OrderItem,
    OrderStatus,
)
from src.infrastructure.storage.memory import InMemoryRecordStore

FIXED_NOW = datetime(2026, 10, 19, 9, 30, tzinfo=UTC)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point storage at a temporary directory and rebuild settings and services."""
    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))
    reset_settings()
    reset_services()
    yield
    reset_services()
    reset_settings()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """A clock frozen at FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def sample_customer() -> Customer:
    return Customer(
        id="c1",
        name="Budi Santoso",
        email="budi@example.com",
        phone="+62 812-3456-7890",
        address="Jl. Merdeka 10, Bandung",
        company="CV Maju",
        created_at=datetime(2026, 10, 1, 8, 0, tzinfo=UTC),
    )


@pytest.fixture
def sample_order(sample_customer: Customer) -> Order:
    """Two photo sessions at 50.000 and one album at 30.000."""
    return Order(
        id="o1",
        customer_id=sample_customer.id,
        customer_name=sample_customer.name,
        items=[
            OrderItem(id="item-1-0", name="Photo session", quantity=2, price=50000),
            OrderItem(id="item-1-1", name="Album", quantity=1, price=30000),
        ],
        subtotal=130000,
        tax=14300,
        total=144300,
        status=OrderStatus.PENDING,
        created_at=datetime(2026, 10, 2, 10, 0, tzinfo=UTC),
    )


@pytest.fixture
def make_invoice(sample_customer: Customer, sample_order: Order) -> Callable[..., Invoice]:
    """Factory for invoices built on the sample order; any field can be overridden."""
    counter = iter(range(1, 10_000))

    def _make(**overrides) -> Invoice:
        n = next(counter)
        fields = {
            "id": f"i{n}",
            "order_id": sample_order.id,
            "customer_id": sample_customer.id,
            "customer_name": sample_customer.name,
            "customer_email": sample_customer.email,
            "customer_phone": sample_customer.phone,
            "customer_address": sample_customer.address,
            "items": [item.model_copy(deep=True) for item in sample_order.items],
            "subtotal": sample_order.subtotal,
            "tax": sample_order.tax,
            "total": sample_order.total,
            "status": InvoiceStatus.DRAFT,
            "due_date": date(2026, 11, 1),
            "invoice_number": f"INV-202610-{n:04d}",
            "created_at": datetime(2026, 10, 3, 12, 0, tzinfo=UTC),
        }
        fields.update(overrides)
        return Invoice(**fields)

    return _make


@pytest.fixture
def sample_invoice(make_invoice: Callable[..., Invoice]) -> Invoice:
    return make_invoice()


@pytest.fixture
def memory_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
async def seeded_store(
    memory_store: InMemoryRecordStore,
    sample_customer: Customer,
    sample_order: Order,
) -> InMemoryRecordStore:
    """Store holding the sample customer and order, no invoices."""
    await memory_store.save_customers([sample_customer])
    await memory_store.save_orders([sample_order])
    return memory_store


@pytest.fixture
async def async_client(memory_store: InMemoryRecordStore) -> AsyncGenerator[AsyncClient, None]:
    """Async client for the app with the record store swapped for memory_store."""
    from src.api.dependencies import get_store
    from src.api.main import app

    app.dependency_overrides[get_store] = lambda: memory_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
