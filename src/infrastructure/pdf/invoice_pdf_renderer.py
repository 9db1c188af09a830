"""
Invoice PDF renderer using fpdf2.

Produces the printable invoice: company header, bill-to block, items
table, subtotal/PPN/total, bank payment details, notes and a
page-numbered footer.
"""

import os
from abc import ABC, abstractmethod
from datetime import datetime

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from src.config.settings import BillingSettings, CompanySettings, PdfSettings, get_settings
from src.core.clock import Clock, utc_now
from src.core.entities.invoice import Invoice
from src.core.money import format_currency
from src.core.services.formatting import format_date, format_datetime


def _safe_text(text: str) -> str:
    """Core fonts only cover latin-1; replace anything outside it."""
    return text.encode("latin-1", errors="replace").decode("latin-1")


class IInvoicePdfRenderer(ABC):
    """Interface for invoice PDF rendering implementations."""

    @abstractmethod
    def render(self, invoice: Invoice) -> bytes:
        """Render an invoice into PDF bytes."""
        ...


class _InvoicePdf(FPDF):
    """FPDF subclass that renders a footer on every page."""

    def __init__(self, footer_text: str, generated_at: datetime) -> None:
        super().__init__()
        self._footer_text = footer_text
        self._generated_at = format_datetime(generated_at)

    def footer(self) -> None:
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.cell(0, 5, _safe_text(self._footer_text), align="L")
        self.set_x(-70)
        self.cell(
            0,
            5,
            f"Page {self.page_no()} of {{nb}} | {self._generated_at}",
            align="R",
        )


class Fpdf2InvoiceRenderer(IInvoicePdfRenderer):
    """Renders invoice PDFs using fpdf2."""

    def __init__(
        self,
        company: CompanySettings | None = None,
        pdf_settings: PdfSettings | None = None,
        billing: BillingSettings | None = None,
        clock: Clock = utc_now,
    ) -> None:
        settings = get_settings()
        self._company = company or settings.company
        self._settings = pdf_settings or settings.pdf
        self._billing = billing or settings.billing
        self._clock = clock

    def render(self, invoice: Invoice) -> bytes:
        pdf = _InvoicePdf(self._settings.footer_text, self._clock())
        pdf.alias_nb_pages()
        pdf.set_auto_page_break(auto=True, margin=20)
        pdf.add_page()

        self._render_header(pdf, invoice)
        self._render_separator(pdf)
        self._render_bill_to(pdf, invoice)
        self._render_items_table(pdf, invoice)
        self._render_totals(pdf, invoice)
        self._render_payment_info(pdf)
        if invoice.notes:
            self._render_notes(pdf, invoice.notes)

        return bytes(pdf.output())

    # Sections

    def _render_header(self, pdf: FPDF, invoice: Invoice) -> None:
        logo_path = self._settings.logo_path
        text_x = 10
        if logo_path and os.path.isfile(logo_path):
            pdf.image(logo_path, x=10, y=10, w=40, h=20)
            text_x = 55

        # Company block, left
        pdf.set_xy(text_x, 10)
        pdf.set_font("Helvetica", "B", 16)
        pdf.cell(0, 8, _safe_text(self._company.name), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "", 9)
        for line in (
            self._company.tagline,
            self._company.address,
            f"Tel: {self._company.phone}",
            f"Email: {self._company.email}",
        ):
            pdf.set_x(text_x)
            pdf.cell(0, 4, _safe_text(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        bottom = pdf.get_y()

        # Invoice block, right
        pdf.set_xy(120, 10)
        pdf.set_font("Helvetica", "B", 20)
        pdf.cell(80, 10, "INVOICE", align="R", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "", 9)
        for line in (
            f"No: {invoice.invoice_number}",
            f"Date: {format_date(invoice.created_at.date())}",
            f"Due Date: {format_date(invoice.due_date)}",
            f"Status: {invoice.status.value.upper()}",
        ):
            pdf.set_x(120)
            pdf.cell(80, 5, _safe_text(line), align="R", new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.set_y(max(bottom, pdf.get_y(), 32) + 2)

    @staticmethod
    def _render_separator(pdf: FPDF) -> None:
        y = pdf.get_y()
        pdf.set_draw_color(100, 100, 100)
        pdf.line(10, y, 200, y)
        pdf.set_draw_color(0, 0, 0)
        pdf.ln(4)

    @staticmethod
    def _render_bill_to(pdf: FPDF, invoice: Invoice) -> None:
        pdf.set_font("Helvetica", "B", 11)
        pdf.cell(0, 6, "Bill To:", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "", 10)
        for line in (
            invoice.customer_name,
            invoice.customer_address,
            invoice.customer_phone,
            invoice.customer_email,
        ):
            if line:
                pdf.cell(0, 5, _safe_text(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(4)

    @staticmethod
    def _render_items_table(pdf: FPDF, invoice: Invoice) -> None:
        # No | Description | Qty | Unit Price | Total
        col_widths = [12, 88, 20, 35, 35]
        headers = ["No", "Description", "Qty", "Unit Price", "Total"]

        pdf.set_font("Helvetica", "B", 9)
        pdf.set_fill_color(70, 70, 70)
        pdf.set_text_color(255, 255, 255)
        for width, header in zip(col_widths, headers):
            pdf.cell(width, 7, header, border=1, fill=True, align="C")
        pdf.ln()
        pdf.set_text_color(0, 0, 0)

        pdf.set_font("Helvetica", "", 8)
        for idx, item in enumerate(invoice.items, 1):
            description = item.name
            if item.description:
                description = f"{item.name} - {item.description}"
            description = _safe_text(description[:60])

            fill = idx % 2 == 0
            if fill:
                pdf.set_fill_color(240, 240, 240)

            pdf.cell(col_widths[0], 6, str(idx), border=1, align="C", fill=fill)
            pdf.cell(col_widths[1], 6, description, border=1, fill=fill)
            pdf.cell(col_widths[2], 6, str(item.quantity), border=1, align="R", fill=fill)
            pdf.cell(col_widths[3], 6, format_currency(item.price), border=1, align="R", fill=fill)
            pdf.cell(col_widths[4], 6, format_currency(item.total), border=1, align="R", fill=fill)
            pdf.ln()

        pdf.ln(3)

    def _render_totals(self, pdf: FPDF, invoice: Invoice) -> None:
        tax_label = f"PPN ({self._billing.tax_rate * 100:g}%):"

        pdf.set_font("Helvetica", "", 10)
        pdf.cell(140, 6, "Subtotal:", align="R")
        pdf.cell(0, 6, format_currency(invoice.subtotal), align="R", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.cell(140, 6, tax_label, align="R")
        pdf.cell(0, 6, format_currency(invoice.tax), align="R", new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.set_font("Helvetica", "B", 12)
        pdf.cell(140, 8, "Total:", align="R")
        pdf.cell(0, 8, format_currency(invoice.total), align="R", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(4)

    def _render_payment_info(self, pdf: FPDF) -> None:
        pdf.set_font("Helvetica", "B", 10)
        pdf.cell(0, 6, "Payment Information:", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "", 9)
        for account in self._company.bank_accounts:
            pdf.cell(
                0,
                5,
                _safe_text(f"{account.bank}: {account.number} a.n {account.holder}"),
                new_x=XPos.LMARGIN,
                new_y=YPos.NEXT,
            )
        pdf.ln(3)

    @staticmethod
    def _render_notes(pdf: FPDF, notes: str) -> None:
        pdf.set_font("Helvetica", "B", 10)
        pdf.cell(0, 6, "Notes:", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "", 9)
        pdf.multi_cell(0, 5, _safe_text(notes), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
