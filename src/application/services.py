"""
Service factory functions for dependency injection.

Wires configuration into the core engines. Use cases import from here
so every request shares one id generator, which keeps identifiers
strictly increasing across the whole process. Writes to the record store
go through one lock so a load, change and save sequence is never
interleaved with another request's own.
"""

import asyncio

from src.config import get_settings
from src.core.interfaces import IIdGenerator, IRecordStore
from src.core.services import (
    AuthService,
    InvoiceEngine,
    InvoiceNumberGenerator,
    OrderEngine,
    TimestampIdGenerator,
)

# Singleton service instances
_id_generator: IIdGenerator | None = None
_order_engine: OrderEngine | None = None
_invoice_engine: InvoiceEngine | None = None
_write_lock: asyncio.Lock | None = None


def get_id_generator() -> IIdGenerator:
    """Get or create the process-wide record id generator."""
    global _id_generator
    if _id_generator is None:
        _id_generator = TimestampIdGenerator()
    return _id_generator


def get_order_engine() -> OrderEngine:
    """Get or create the OrderEngine using the configured tax rate."""
    global _order_engine
    if _order_engine is None:
        _order_engine = OrderEngine(
            id_generator=get_id_generator(),
            tax_rate=get_settings().billing.tax_rate,
        )
    return _order_engine


def get_invoice_engine() -> InvoiceEngine:
    """Get or create the InvoiceEngine using the configured number prefix."""
    global _invoice_engine
    if _invoice_engine is None:
        _invoice_engine = InvoiceEngine(
            id_generator=get_id_generator(),
            number_generator=InvoiceNumberGenerator(
                prefix=get_settings().billing.invoice_prefix,
            ),
        )
    return _invoice_engine


def get_write_lock() -> asyncio.Lock:
    """Get or create the lock held by every record store write flow."""
    global _write_lock
    if _write_lock is None:
        _write_lock = asyncio.Lock()
    return _write_lock


def get_auth_service(record_store: IRecordStore) -> AuthService:
    """Build an AuthService over the configured accounts."""
    return AuthService(
        record_store=record_store,
        accounts=get_settings().auth.accounts,
    )


def reset_services() -> None:
    """
    Reset all singleton service instances.

    Useful for testing or when configuration changes.
    """
    global _id_generator
    global _order_engine
    global _invoice_engine
    global _write_lock

    _id_generator = None
    _order_engine = None
    _invoice_engine = None
    _write_lock = None


__all__ = [
    # Factory functions
    "get_id_generator",
    "get_order_engine",
    "get_invoice_engine",
    "get_auth_service",
    "get_write_lock",
    # Reset
    "reset_services",
]
