"""
Manage Invoices Use Case.

Builds invoices from orders and keeps at most one invoice per order.
"""

from src.application.dto.requests import SaveInvoiceRequest
from src.application.dto.responses import InvoiceListResponse
from src.application.services import get_invoice_engine, get_write_lock
from src.config import get_logger
from src.core.entities.invoice import Invoice
from src.core.entities.order import Order
from src.core.exceptions import DuplicateInvoiceError, InvoiceNotFoundError
from src.core.interfaces import IRecordStore
from src.core.services.invoice_engine import (
    InvoiceEngine,
    available_orders,
    find_conflicting_invoice,
)
from src.core.services.record_filters import filter_invoices

logger = get_logger(__name__)


class ManageInvoicesUseCase:
    """
    Invoice CRUD over the record store.

    Flow for create and update:
    1. Load customers, orders and invoices
    2. Reject an order that already backs a different invoice
    3. Build the invoice (customer snapshot and items are copied)
    4. Append or replace it and save the invoice collection

    Steps 1 to 4 run under the shared write lock, so two requests can
    never claim the same order or the same invoice number.
    """

    def __init__(
        self,
        record_store: IRecordStore | None = None,
        invoice_engine: InvoiceEngine | None = None,
    ):
        self._record_store = record_store
        self._engine = invoice_engine or get_invoice_engine()

    async def _get_record_store(self) -> IRecordStore:
        if self._record_store is None:
            from src.infrastructure.storage.sqlite import get_record_store

            self._record_store = await get_record_store()
        return self._record_store

    async def list_invoices(self, search: str = "") -> list[Invoice]:
        store = await self._get_record_store()
        return filter_invoices(await store.get_invoices(), search)

    async def get_invoice(self, invoice_id: str) -> Invoice:
        store = await self._get_record_store()
        for invoice in await store.get_invoices():
            if invoice.id == invoice_id:
                return invoice
        raise InvoiceNotFoundError(invoice_id)

    async def list_available_orders(self, editing_invoice_id: str | None = None) -> list[Order]:
        """Orders without an invoice, plus the order of the invoice being edited."""
        store = await self._get_record_store()
        invoices = await store.get_invoices()
        editing = None
        if editing_invoice_id is not None:
            editing = next((i for i in invoices if i.id == editing_invoice_id), None)
            if editing is None:
                raise InvoiceNotFoundError(editing_invoice_id)
        return available_orders(await store.get_orders(), invoices, editing)

    async def _build(
        self,
        request: SaveInvoiceRequest,
        invoices: list[Invoice],
        existing: Invoice | None = None,
    ) -> Invoice:
        store = await self._get_record_store()

        conflict = find_conflicting_invoice(request.order_id, invoices, existing)
        if conflict is not None:
            raise DuplicateInvoiceError(request.order_id, conflict.id)

        order = next((o for o in await store.get_orders() if o.id == request.order_id), None)
        customer = None
        if order is not None:
            customer = next(
                (c for c in await store.get_customers() if c.id == order.customer_id),
                None,
            )

        return self._engine.build_invoice_from_order(
            order,
            customer,
            due_date=request.due_date,
            notes=request.notes,
            status=request.status,
            existing_invoice=existing,
            taken_numbers={i.invoice_number for i in invoices},
        )

    async def create_invoice(self, request: SaveInvoiceRequest) -> Invoice:
        store = await self._get_record_store()
        async with get_write_lock():
            invoices = await store.get_invoices()

            invoice = await self._build(request, invoices)
            invoices.append(invoice)
            await store.save_invoices(invoices)

        logger.info(
            "invoice_created",
            invoice_id=invoice.id,
            invoice_number=invoice.invoice_number,
            order_id=invoice.order_id,
            total=invoice.total,
        )
        return invoice

    async def update_invoice(self, invoice_id: str, request: SaveInvoiceRequest) -> Invoice:
        """
        Rebuild an invoice from the request.

        The id, invoice number and creation time are kept. Items, totals
        and the customer snapshot are copied again from the chosen order.
        """
        store = await self._get_record_store()
        async with get_write_lock():
            invoices = await store.get_invoices()

            for index, existing in enumerate(invoices):
                if existing.id == invoice_id:
                    break
            else:
                raise InvoiceNotFoundError(invoice_id)

            invoice = await self._build(request, invoices, existing)
            invoices[index] = invoice
            await store.save_invoices(invoices)

        logger.info(
            "invoice_updated",
            invoice_id=invoice_id,
            status=invoice.status.value,
        )
        return invoice

    async def delete_invoice(self, invoice_id: str) -> None:
        """Delete an invoice; its order becomes available again."""
        store = await self._get_record_store()
        async with get_write_lock():
            invoices = await store.get_invoices()

            remaining = [i for i in invoices if i.id != invoice_id]
            if len(remaining) == len(invoices):
                raise InvoiceNotFoundError(invoice_id)
            await store.save_invoices(remaining)

        logger.info("invoice_deleted", invoice_id=invoice_id)

    @staticmethod
    def to_response(invoices: list[Invoice]) -> InvoiceListResponse:
        return InvoiceListResponse(invoices=invoices, total=len(invoices))
