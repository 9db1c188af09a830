"""
Invoice Engine.

Derives an Invoice from an existing Order. Items, amounts and customer
contact details are copied when the invoice is built and are never
refreshed afterwards, so editing the order or the customer later does
not change invoices that were already issued.
"""

from collections.abc import Collection, Iterable
from datetime import date

from src.config import get_logger
from src.core.clock import Clock, utc_now
from src.core.entities.customer import Customer
from src.core.entities.invoice import Invoice, InvoiceStatus
from src.core.entities.order import Order
from src.core.exceptions import ValidationError
from src.core.interfaces.identity import IIdGenerator
from src.core.services.identity import InvoiceNumberGenerator

logger = get_logger(__name__)


def index_invoices_by_order(invoices: Iterable[Invoice]) -> dict[str, Invoice]:
    """Map order id to the first invoice that references it."""
    index: dict[str, Invoice] = {}
    for invoice in invoices:
        index.setdefault(invoice.order_id, invoice)
    return index


def find_conflicting_invoice(
    order_id: str,
    invoices: Iterable[Invoice],
    editing_invoice: Invoice | None = None,
) -> Invoice | None:
    """Return another invoice already backed by ``order_id``, if any."""
    for invoice in invoices:
        if invoice.order_id != order_id:
            continue
        if editing_invoice is not None and invoice.id == editing_invoice.id:
            continue
        return invoice
    return None


def available_orders(
    orders: Iterable[Order],
    invoices: Iterable[Invoice],
    editing_invoice: Invoice | None = None,
) -> list[Order]:
    """
    Orders that can back a new invoice.

    An order that already has an invoice is excluded, unless that invoice
    is the one currently being edited.
    """
    invoiced = index_invoices_by_order(invoices)
    return [
        order
        for order in orders
        if order.id not in invoiced
        or (editing_invoice is not None and editing_invoice.order_id == order.id)
    ]


class InvoiceEngine:
    """Builds Invoice records from orders. Nothing is persisted here."""

    def __init__(
        self,
        id_generator: IIdGenerator,
        number_generator: InvoiceNumberGenerator | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._ids = id_generator
        self._numbers = number_generator or InvoiceNumberGenerator(clock=clock)
        self._clock = clock

    def build_invoice_from_order(
        self,
        order: Order | None,
        customer: Customer | None,
        due_date: date,
        notes: str | None = None,
        status: InvoiceStatus = InvoiceStatus.DRAFT,
        existing_invoice: Invoice | None = None,
        taken_numbers: Collection[str] = (),
    ) -> Invoice:
        """
        Build a new invoice for ``order``, or the edited ``existing_invoice``.

        ``taken_numbers`` lists invoice numbers already in use; a freshly
        generated number never repeats one of them.

        Raises:
            ValidationError: No order, no customer, or a customer that is
                not the order's customer.
        """
        if order is None:
            raise ValidationError("order_id", "Select an order first")
        if customer is None:
            raise ValidationError(
                "customer_id",
                "The customer of this order no longer exists",
                order.customer_id,
            )
        if customer.id != order.customer_id:
            raise ValidationError(
                "customer_id",
                f"Customer does not match order {order.id}",
                customer.id,
            )

        if existing_invoice is not None:
            invoice_id = existing_invoice.id
            invoice_number = existing_invoice.invoice_number
            created_at = existing_invoice.created_at
        else:
            invoice_id = self._ids.new_id()
            invoice_number = self._numbers.generate(taken=taken_numbers)
            created_at = self._clock()

        invoice = Invoice(
            id=invoice_id,
            order_id=order.id,
            customer_id=order.customer_id,
            customer_name=customer.name,
            customer_email=customer.email,
            customer_phone=customer.phone,
            customer_address=customer.address,
            items=[item.model_copy(deep=True) for item in order.items],
            subtotal=order.subtotal,
            tax=order.tax,
            total=order.total,
            status=status,
            due_date=due_date,
            notes=notes,
            invoice_number=invoice_number,
            created_at=created_at,
        )

        logger.debug(
            "invoice_built",
            invoice_id=invoice.id,
            invoice_number=invoice.invoice_number,
            order_id=order.id,
            edited=existing_invoice is not None,
        )
        return invoice
