"""SQLite implementation of whole-collection record storage."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TypeVar

import aiosqlite
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.config import get_logger, get_settings
from src.core.clock import Clock, utc_now
from src.core.entities.customer import Customer
from src.core.entities.invoice import Invoice
from src.core.entities.order import Order
from src.core.entities.user import User
from src.core.exceptions import CorruptRecordError, DatabaseError
from src.core.interfaces.record_store import IRecordStore
from src.infrastructure.storage.sqlite.connection import ConnectionPool, get_pool

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

CUSTOMERS_KEY = "customers"
ORDERS_KEY = "orders"
INVOICES_KEY = "invoices"
USER_KEY = "user"

_customers_adapter = TypeAdapter(list[Customer])
_orders_adapter = TypeAdapter(list[Order])
_invoices_adapter = TypeAdapter(list[Invoice])


class SQLiteRecordStore(IRecordStore):
    """
    Record store backed by the ``records`` key-value table.

    Each collection is one row whose value is the JSON array of its
    records. Keys carry a configurable prefix, e.g.
    ``studio_katalika_customers``.
    """

    def __init__(
        self,
        pool: ConnectionPool | None = None,
        key_prefix: str | None = None,
        clock: Clock = utc_now,
    ):
        self._pool = pool
        self._prefix = (
            key_prefix if key_prefix is not None else get_settings().storage.key_prefix
        )
        self._clock = clock

    def key(self, name: str) -> str:
        return f"{self._prefix}{name}"

    async def _get_pool(self) -> ConnectionPool:
        if self._pool is None:
            self._pool = await get_pool()
        return self._pool

    @asynccontextmanager
    async def _connection(self, operation: str) -> AsyncIterator[aiosqlite.Connection]:
        pool = await self._get_pool()
        try:
            async with pool.transaction() as conn:
                yield conn
        except aiosqlite.Error as e:
            logger.error("record_store_failed", operation=operation, error=str(e))
            raise DatabaseError(operation, str(e)) from e

    async def _read(self, name: str) -> str | None:
        async with self._connection(f"read {name}") as conn:
            cursor = await conn.execute(
                "SELECT value FROM records WHERE key = ?",
                (self.key(name),),
            )
            row = await cursor.fetchone()
            return row["value"] if row else None

    async def _write(self, name: str, value: str) -> None:
        async with self._connection(f"write {name}") as conn:
            await conn.execute(
                """
                INSERT INTO records (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (self.key(name), value, self._clock().isoformat()),
            )

    async def _delete(self, name: str) -> None:
        async with self._connection(f"delete {name}") as conn:
            await conn.execute("DELETE FROM records WHERE key = ?", (self.key(name),))

    async def _load_collection(self, name: str, adapter: TypeAdapter) -> list:
        raw = await self._read(name)
        if raw is None:
            return []
        try:
            return adapter.validate_json(raw)
        except PydanticValidationError as e:
            logger.error("corrupt_collection", key=self.key(name), errors=e.error_count())
            raise CorruptRecordError(self.key(name), str(e)) from e

    async def _save_collection(self, name: str, adapter: TypeAdapter, records: list) -> None:
        await self._write(name, adapter.dump_json(records).decode("utf-8"))
        logger.debug("collection_saved", key=self.key(name), count=len(records))

    # Customers
    async def get_customers(self) -> list[Customer]:
        return await self._load_collection(CUSTOMERS_KEY, _customers_adapter)

    async def save_customers(self, customers: list[Customer]) -> None:
        await self._save_collection(CUSTOMERS_KEY, _customers_adapter, customers)

    # Orders
    async def get_orders(self) -> list[Order]:
        return await self._load_collection(ORDERS_KEY, _orders_adapter)

    async def save_orders(self, orders: list[Order]) -> None:
        await self._save_collection(ORDERS_KEY, _orders_adapter, orders)

    # Invoices
    async def get_invoices(self) -> list[Invoice]:
        return await self._load_collection(INVOICES_KEY, _invoices_adapter)

    async def save_invoices(self, invoices: list[Invoice]) -> None:
        await self._save_collection(INVOICES_KEY, _invoices_adapter, invoices)

    # Signed-in user
    async def get_current_user(self) -> User | None:
        raw = await self._read(USER_KEY)
        if raw is None:
            return None
        try:
            return User.model_validate_json(raw)
        except PydanticValidationError as e:
            # An unreadable session only means nobody is signed in
            logger.warning("corrupt_user_cleared", key=self.key(USER_KEY), errors=e.error_count())
            await self._delete(USER_KEY)
            return None

    async def save_current_user(self, user: User) -> None:
        await self._write(USER_KEY, user.model_dump_json())

    async def clear_current_user(self) -> None:
        await self._delete(USER_KEY)
