"""
Create Invoice PDF Use Case.

Generates the printable PDF for a stored invoice.
"""

from dataclasses import dataclass

from src.config import get_logger
from src.core.exceptions import InvoiceNotFoundError
from src.core.interfaces import IRecordStore
from src.infrastructure.pdf.invoice_pdf_renderer import Fpdf2InvoiceRenderer, IInvoicePdfRenderer

logger = get_logger(__name__)


@dataclass
class InvoicePdfResult:
    """Result of invoice PDF generation."""

    pdf_bytes: bytes
    invoice_id: str
    filename: str
    file_size: int


class CreateInvoicePdfUseCase:
    """
    Use case for generating invoice PDFs.

    Flow:
    1. Load the invoice from the record store
    2. Render PDF via the invoice renderer
    3. Return PDF bytes and metadata
    """

    def __init__(
        self,
        record_store: IRecordStore | None = None,
        renderer: IInvoicePdfRenderer | None = None,
    ):
        self._record_store = record_store
        self._renderer = renderer or Fpdf2InvoiceRenderer()

    async def _get_record_store(self) -> IRecordStore:
        if self._record_store is None:
            from src.infrastructure.storage.sqlite import get_record_store

            self._record_store = await get_record_store()
        return self._record_store

    async def execute(self, invoice_id: str) -> InvoicePdfResult:
        """
        Generate an invoice PDF.

        Raises:
            InvoiceNotFoundError: If the invoice does not exist.
        """
        logger.info("create_invoice_pdf_started", invoice_id=invoice_id)

        store = await self._get_record_store()
        invoice = next((i for i in await store.get_invoices() if i.id == invoice_id), None)
        if invoice is None:
            raise InvoiceNotFoundError(invoice_id)

        pdf_bytes = self._renderer.render(invoice)

        logger.info(
            "create_invoice_pdf_complete",
            invoice_id=invoice_id,
            file_size=len(pdf_bytes),
        )
        return InvoicePdfResult(
            pdf_bytes=pdf_bytes,
            invoice_id=invoice_id,
            filename=f"{invoice.invoice_number}.pdf",
            file_size=len(pdf_bytes),
        )
