"""In-process record store for tests and throwaway runs."""

from pydantic import TypeAdapter

from src.core.entities.customer import Customer
from src.core.entities.invoice import Invoice
from src.core.entities.order import Order
from src.core.entities.user import User
from src.core.interfaces.record_store import IRecordStore

_customers_adapter = TypeAdapter(list[Customer])
_orders_adapter = TypeAdapter(list[Order])
_invoices_adapter = TypeAdapter(list[Invoice])


class InMemoryRecordStore(IRecordStore):
    """
    Keeps each collection as a JSON string, like the SQLite store does,
    so callers never share model instances with the store.
    """

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def raw(self, key: str) -> str | None:
        return self._values.get(key)

    async def get_customers(self) -> list[Customer]:
        raw = self._values.get("customers")
        return _customers_adapter.validate_json(raw) if raw else []

    async def save_customers(self, customers: list[Customer]) -> None:
        self._values["customers"] = _customers_adapter.dump_json(customers).decode("utf-8")

    async def get_orders(self) -> list[Order]:
        raw = self._values.get("orders")
        return _orders_adapter.validate_json(raw) if raw else []

    async def save_orders(self, orders: list[Order]) -> None:
        self._values["orders"] = _orders_adapter.dump_json(orders).decode("utf-8")

    async def get_invoices(self) -> list[Invoice]:
        raw = self._values.get("invoices")
        return _invoices_adapter.validate_json(raw) if raw else []

    async def save_invoices(self, invoices: list[Invoice]) -> None:
        self._values["invoices"] = _invoices_adapter.dump_json(invoices).decode("utf-8")

    async def get_current_user(self) -> User | None:
        raw = self._values.get("user")
        return User.model_validate_json(raw) if raw else None

    async def save_current_user(self, user: User) -> None:
        self._values["user"] = user.model_dump_json()

    async def clear_current_user(self) -> None:
        self._values.pop("user", None)
