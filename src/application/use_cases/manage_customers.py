"""
Manage Customers Use Case.

List, look up, create, replace and delete customers. Every write loads
the full customer collection, changes it in memory and saves it back
while holding the shared write lock.
"""

from src.application.dto.requests import CustomerRequest
from src.application.dto.responses import CustomerListResponse
from src.application.services import get_id_generator, get_write_lock
from src.config import get_logger
from src.core.clock import Clock, utc_now
from src.core.entities.customer import Customer
from src.core.exceptions import CustomerNotFoundError
from src.core.interfaces import IIdGenerator, IRecordStore
from src.core.services.record_filters import filter_customers

logger = get_logger(__name__)


class ManageCustomersUseCase:
    """Customer CRUD over the record store."""

    def __init__(
        self,
        record_store: IRecordStore | None = None,
        id_generator: IIdGenerator | None = None,
        clock: Clock = utc_now,
    ):
        self._record_store = record_store
        self._ids = id_generator or get_id_generator()
        self._clock = clock

    async def _get_record_store(self) -> IRecordStore:
        if self._record_store is None:
            from src.infrastructure.storage.sqlite import get_record_store

            self._record_store = await get_record_store()
        return self._record_store

    async def list_customers(self, search: str = "") -> list[Customer]:
        store = await self._get_record_store()
        return filter_customers(await store.get_customers(), search)

    async def get_customer(self, customer_id: str) -> Customer:
        store = await self._get_record_store()
        for customer in await store.get_customers():
            if customer.id == customer_id:
                return customer
        raise CustomerNotFoundError(customer_id)

    async def create_customer(self, request: CustomerRequest) -> Customer:
        store = await self._get_record_store()
        async with get_write_lock():
            customers = await store.get_customers()
            customer = Customer(
                id=self._ids.new_id(),
                created_at=self._clock(),
                **request.model_dump(),
            )
            customers.append(customer)
            await store.save_customers(customers)

        logger.info("customer_created", customer_id=customer.id)
        return customer

    async def update_customer(self, customer_id: str, request: CustomerRequest) -> Customer:
        """Replace a customer in place, keeping its id and creation time."""
        store = await self._get_record_store()
        async with get_write_lock():
            customers = await store.get_customers()

            for index, existing in enumerate(customers):
                if existing.id == customer_id:
                    break
            else:
                raise CustomerNotFoundError(customer_id)

            updated = Customer(
                id=existing.id,
                created_at=existing.created_at,
                **request.model_dump(),
            )
            customers[index] = updated
            await store.save_customers(customers)

        # Orders and invoices keep the name they were saved with
        logger.info("customer_updated", customer_id=customer_id)
        return updated

    async def delete_customer(self, customer_id: str) -> int:
        """
        Delete a customer by id.

        Orders that reference the customer are left as they are.

        Returns:
            Number of orders still pointing at the deleted customer.
        """
        store = await self._get_record_store()
        async with get_write_lock():
            customers = await store.get_customers()

            remaining = [c for c in customers if c.id != customer_id]
            if len(remaining) == len(customers):
                raise CustomerNotFoundError(customer_id)
            await store.save_customers(remaining)

        orphaned = sum(1 for o in await store.get_orders() if o.customer_id == customer_id)
        if orphaned:
            logger.warning(
                "customer_deleted_with_orders",
                customer_id=customer_id,
                orphaned_orders=orphaned,
            )
        logger.info("customer_deleted", customer_id=customer_id)
        return orphaned

    @staticmethod
    def to_response(customers: list[Customer]) -> CustomerListResponse:
        return CustomerListResponse(customers=customers, total=len(customers))
