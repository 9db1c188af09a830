"""Share Invoice Use Case - WhatsApp text and link for an invoice."""

import re

from src.application.dto.responses import ShareLinkResponse
from src.config import get_logger, get_settings
from src.config.settings import CompanySettings
from src.core.exceptions import InvoiceNotFoundError, ValidationError
from src.core.interfaces import IRecordStore
from src.core.services.share_message import build_share_message, build_whatsapp_url

logger = get_logger(__name__)


class ShareInvoiceUseCase:
    """Build the message and wa.me link for an invoice's customer."""

    def __init__(
        self,
        record_store: IRecordStore | None = None,
        company: CompanySettings | None = None,
    ):
        self._record_store = record_store
        self._company = company or get_settings().company

    async def _get_record_store(self) -> IRecordStore:
        if self._record_store is None:
            from src.infrastructure.storage.sqlite import get_record_store

            self._record_store = await get_record_store()
        return self._record_store

    async def execute(self, invoice_id: str) -> ShareLinkResponse:
        store = await self._get_record_store()
        invoice = next((i for i in await store.get_invoices() if i.id == invoice_id), None)
        if invoice is None:
            raise InvoiceNotFoundError(invoice_id)

        phone = re.sub(r"\D", "", invoice.customer_phone)
        if not phone:
            raise ValidationError(
                "customer_phone",
                "The invoice has no phone number to send to",
                invoice.customer_phone,
            )

        name = self._company.name
        accounts = self._company.bank_accounts
        logger.info("invoice_share_link_built", invoice_id=invoice_id)
        return ShareLinkResponse(
            invoice_id=invoice.id,
            phone=phone,
            message=build_share_message(invoice, name, accounts),
            url=build_whatsapp_url(invoice, name, accounts),
        )
