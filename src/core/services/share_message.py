"""WhatsApp share text and deep link for an invoice."""

import re
from collections.abc import Sequence
from urllib.parse import quote

from src.config.settings import BankAccount
from src.core.entities.invoice import Invoice
from src.core.money import format_currency
from src.core.services.formatting import format_date

WHATSAPP_BASE_URL = "https://wa.me"

_NON_DIGITS = re.compile(r"\D")


def build_share_message(
    invoice: Invoice,
    company_name: str,
    bank_accounts: Sequence[BankAccount] = (),
) -> str:
    """Compose the message sent to the customer."""
    lines = [
        f"Hello {invoice.customer_name},",
        "",
        f"Here is the invoice for your order from {company_name}:",
        "",
        f"Invoice No: {invoice.invoice_number}",
        f"Date: {format_date(invoice.created_at)}",
        f"Total: {format_currency(invoice.total)}",
        f"Due Date: {format_date(invoice.due_date)}",
    ]
    if bank_accounts:
        lines.extend(["", "Payment Details:"])
        lines.extend(
            f"{account.bank}: {account.number} a.n {account.holder}"
            for account in bank_accounts
        )
    lines.extend(
        [
            "",
            f"Thank you for trusting {company_name}.",
            "",
            "Best regards,",
            f"{company_name} Team",
        ]
    )
    return "\n".join(lines)


def build_whatsapp_url(
    invoice: Invoice,
    company_name: str,
    bank_accounts: Sequence[BankAccount] = (),
) -> str:
    """``https://wa.me/{phone digits}?text={encoded message}``"""
    phone = _NON_DIGITS.sub("", invoice.customer_phone)
    message = build_share_message(invoice, company_name, bank_accounts)
    return f"{WHATSAPP_BASE_URL}/{phone}?text={quote(message, safe='')}"
