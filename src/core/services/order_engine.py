"""
Order Engine.

Turns a customer and requested line items into a complete Order record
with derived line totals, subtotal, tax and grand total.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from src.config import get_logger
from src.core.clock import Clock, utc_now
from src.core.entities.customer import Customer
from src.core.entities.order import Order, OrderItem, OrderStatus
from src.core.exceptions import ValidationError
from src.core.interfaces.identity import IIdGenerator
from src.core.money import DEFAULT_TAX_RATE, compute_tax

logger = get_logger(__name__)


@dataclass(frozen=True)
class LineItemInput:
    """A requested line item, before ids and totals are assigned."""

    name: str
    quantity: int
    price: float
    description: str = ""


@dataclass(frozen=True)
class OrderTotals:
    """Derived order amounts."""

    subtotal: float
    tax: float
    total: float


def compute_order_totals(
    items: Sequence[OrderItem], tax_rate: float = DEFAULT_TAX_RATE
) -> OrderTotals:
    """Sum line totals and add tax."""
    subtotal = sum(item.total for item in items)
    tax = compute_tax(subtotal, tax_rate)
    return OrderTotals(subtotal=subtotal, tax=tax, total=subtotal + tax)


class OrderEngine:
    """
    Builds Order records. Pure: nothing is persisted here.

    Identifiers come from the injected generator and timestamps from the
    injected clock, so callers and tests control both.
    """

    def __init__(
        self,
        id_generator: IIdGenerator,
        tax_rate: float = DEFAULT_TAX_RATE,
        clock: Clock = utc_now,
    ) -> None:
        self._ids = id_generator
        self._tax_rate = tax_rate
        self._clock = clock

    def build_order(
        self,
        customer: Customer | None,
        items: Sequence[LineItemInput],
        status: OrderStatus = OrderStatus.PENDING,
        notes: str | None = None,
        existing_order: Order | None = None,
    ) -> Order:
        """
        Build a new order, or the edited version of ``existing_order``.

        Args:
            customer: The resolved customer; ``None`` means none was selected.
            items: Requested line items, at least one.
            status: Lifecycle status to record.
            notes: Free-form notes.
            existing_order: When editing, the stored order whose id and
                creation timestamp are kept.

        Raises:
            ValidationError: No customer, no items, or an item with a
                quantity below 1 or a negative price.
        """
        if customer is None:
            raise ValidationError("customer_id", "Select a customer first")
        self._validate_items(items)

        if existing_order is not None:
            order_id = existing_order.id
            created_at = existing_order.created_at
        else:
            order_id = self._ids.new_id()
            created_at = self._clock()

        item_base = self._ids.new_id()
        order_items = [
            OrderItem(
                id=f"item-{item_base}-{index}",
                name=item.name,
                description=item.description,
                quantity=item.quantity,
                price=item.price,
            )
            for index, item in enumerate(items)
        ]
        totals = compute_order_totals(order_items, self._tax_rate)

        order = Order(
            id=order_id,
            customer_id=customer.id,
            customer_name=customer.name,
            items=order_items,
            subtotal=totals.subtotal,
            tax=totals.tax,
            total=totals.total,
            status=status,
            notes=notes,
            created_at=created_at,
        )

        logger.debug(
            "order_built",
            order_id=order.id,
            items=len(order_items),
            total=order.total,
            edited=existing_order is not None,
        )
        return order

    @staticmethod
    def _validate_items(items: Sequence[LineItemInput]) -> None:
        if not items:
            raise ValidationError("items", "An order needs at least one item")

        for index, item in enumerate(items):
            if item.quantity < 1:
                raise ValidationError(
                    f"items[{index}].quantity",
                    "Quantity must be at least 1",
                    item.quantity,
                )
            if item.price < 0:
                raise ValidationError(
                    f"items[{index}].price",
                    "Price must not be negative",
                    item.price,
                )
