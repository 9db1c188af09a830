"""Abstract interface for record collection storage."""

from abc import ABC, abstractmethod

from src.core.entities.customer import Customer
from src.core.entities.invoice import Invoice
from src.core.entities.order import Order
from src.core.entities.user import User


class IRecordStore(ABC):
    """
    Interface for whole-collection record persistence.

    Callers read a full collection, change it in memory and write the
    full collection back. A collection that was never saved reads as an
    empty list. There is no locking: the last save wins.
    """

    @abstractmethod
    async def get_customers(self) -> list[Customer]:
        """Load every customer."""
        pass

    @abstractmethod
    async def save_customers(self, customers: list[Customer]) -> None:
        """Replace the customer collection."""
        pass

    @abstractmethod
    async def get_orders(self) -> list[Order]:
        """Load every order."""
        pass

    @abstractmethod
    async def save_orders(self, orders: list[Order]) -> None:
        """Replace the order collection."""
        pass

    @abstractmethod
    async def get_invoices(self) -> list[Invoice]:
        """Load every invoice."""
        pass

    @abstractmethod
    async def save_invoices(self, invoices: list[Invoice]) -> None:
        """Replace the invoice collection."""
        pass

    @abstractmethod
    async def get_current_user(self) -> User | None:
        """Load the signed-in user, if any."""
        pass

    @abstractmethod
    async def save_current_user(self, user: User) -> None:
        """Persist the signed-in user."""
        pass

    @abstractmethod
    async def clear_current_user(self) -> None:
        """Forget the signed-in user."""
        pass
