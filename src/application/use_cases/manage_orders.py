"""
Manage Orders Use Case.

Resolves the customer, has the OrderEngine build the record and writes
the full order collection back.
"""

from src.application.dto.requests import SaveOrderRequest
from src.application.dto.responses import OrderListResponse
from src.application.services import get_order_engine, get_write_lock
from src.config import get_logger
from src.core.entities.customer import Customer
from src.core.entities.order import Order
from src.core.exceptions import OrderNotFoundError
from src.core.interfaces import IRecordStore
from src.core.services.order_engine import LineItemInput, OrderEngine
from src.core.services.record_filters import filter_orders

logger = get_logger(__name__)


def _find_customer(customers: list[Customer], customer_id: str) -> Customer | None:
    return next((c for c in customers if c.id == customer_id), None)


def _line_items(request: SaveOrderRequest) -> list[LineItemInput]:
    return [
        LineItemInput(
            name=item.name,
            description=item.description,
            quantity=item.quantity,
            price=item.price,
        )
        for item in request.items
    ]


class ManageOrdersUseCase:
    """
    Order CRUD over the record store.

    Flow for create and update:
    1. Load customers and orders
    2. Build the order (validation happens before anything is saved)
    3. Append or replace it and save the order collection

    Writes hold the shared write lock from load to save.
    """

    def __init__(
        self,
        record_store: IRecordStore | None = None,
        order_engine: OrderEngine | None = None,
    ):
        self._record_store = record_store
        self._engine = order_engine or get_order_engine()

    async def _get_record_store(self) -> IRecordStore:
        if self._record_store is None:
            from src.infrastructure.storage.sqlite import get_record_store

            self._record_store = await get_record_store()
        return self._record_store

    async def list_orders(self, search: str = "") -> list[Order]:
        store = await self._get_record_store()
        return filter_orders(await store.get_orders(), search)

    async def get_order(self, order_id: str) -> Order:
        store = await self._get_record_store()
        for order in await store.get_orders():
            if order.id == order_id:
                return order
        raise OrderNotFoundError(order_id)

    async def create_order(self, request: SaveOrderRequest) -> Order:
        store = await self._get_record_store()
        async with get_write_lock():
            customer = _find_customer(await store.get_customers(), request.customer_id)

            order = self._engine.build_order(
                customer,
                _line_items(request),
                status=request.status,
                notes=request.notes,
            )

            orders = await store.get_orders()
            orders.append(order)
            await store.save_orders(orders)

        logger.info(
            "order_created",
            order_id=order.id,
            customer_id=order.customer_id,
            total=order.total,
        )
        return order

    async def update_order(self, order_id: str, request: SaveOrderRequest) -> Order:
        """Rebuild an order from the request, keeping its id and creation time."""
        store = await self._get_record_store()
        async with get_write_lock():
            orders = await store.get_orders()

            for index, existing in enumerate(orders):
                if existing.id == order_id:
                    break
            else:
                raise OrderNotFoundError(order_id)

            customer = _find_customer(await store.get_customers(), request.customer_id)
            order = self._engine.build_order(
                customer,
                _line_items(request),
                status=request.status,
                notes=request.notes,
                existing_order=existing,
            )
            orders[index] = order
            await store.save_orders(orders)

        # Invoices keep the items and totals copied when they were issued
        logger.info("order_updated", order_id=order_id, total=order.total)
        return order

    async def delete_order(self, order_id: str) -> int:
        """
        Delete an order by id.

        An invoice built from the order is left as it is.

        Returns:
            Number of invoices still pointing at the deleted order.
        """
        store = await self._get_record_store()
        async with get_write_lock():
            orders = await store.get_orders()

            remaining = [o for o in orders if o.id != order_id]
            if len(remaining) == len(orders):
                raise OrderNotFoundError(order_id)
            await store.save_orders(remaining)

        orphaned = sum(1 for i in await store.get_invoices() if i.order_id == order_id)
        if orphaned:
            logger.warning(
                "order_deleted_with_invoices",
                order_id=order_id,
                orphaned_invoices=orphaned,
            )
        logger.info("order_deleted", order_id=order_id)
        return orphaned

    @staticmethod
    def to_response(orders: list[Order]) -> OrderListResponse:
        return OrderListResponse(orders=orders, total=len(orders))
