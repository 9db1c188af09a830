"""Tests for the invoice PDF renderer."""

import zlib

import pytest

from src.config.settings import BankAccount, CompanySettings, PdfSettings
from src.core.entities.order import OrderItem
from src.infrastructure.pdf.invoice_pdf_renderer import Fpdf2InvoiceRenderer, _safe_text


def _extract_pdf_text(pdf_bytes: bytes) -> str:
    """Decompress FlateDecode streams in *pdf_bytes* and return all text."""
    texts = [pdf_bytes.decode("latin-1")]
    start_marker = b"stream\n"
    end_marker = b"\nendstream"
    idx = 0
    while True:
        s = pdf_bytes.find(start_marker, idx)
        if s == -1:
            break
        s += len(start_marker)
        e = pdf_bytes.find(end_marker, s)
        if e == -1:
            break
        try:
            texts.append(zlib.decompress(pdf_bytes[s:e]).decode("latin-1", errors="replace"))
        except zlib.error:
            pass
        idx = e + len(end_marker)
    return "\n".join(texts)


@pytest.fixture
def renderer(clock) -> Fpdf2InvoiceRenderer:
    return Fpdf2InvoiceRenderer(
        company=CompanySettings(
            name="Studio Uji",
            bank_accounts=[BankAccount(bank="BCA", number="1234567890", holder="Studio Uji")],
        ),
        pdf_settings=PdfSettings(footer_text="Terima kasih"),
        clock=clock,
    )


class TestFpdf2InvoiceRenderer:
    def test_returns_pdf_bytes(self, renderer, sample_invoice):
        pdf_bytes = renderer.render(sample_invoice)

        assert pdf_bytes.startswith(b"%PDF")
        assert len(pdf_bytes) > 500

    def test_contains_invoice_sections(self, renderer, sample_invoice):
        text = _extract_pdf_text(renderer.render(sample_invoice))

        for expected in (
            "Studio Uji",
            "INVOICE",
            "No: INV-202610-0001",
            "Due Date: 01/11/2026",
            "Bill To:",
            "Budi Santoso",
            "Photo session",
            "Subtotal:",
            "PPN",
            "Payment Information:",
            "BCA: 1234567890 a.n Studio Uji",
            "Terima kasih",
            "Page 1 of ",
            "| 19/10/2026 09.30.00",
        ):
            assert expected in text

    def test_notes_rendered_only_when_present(self, renderer, make_invoice):
        without = _extract_pdf_text(renderer.render(make_invoice()))
        with_notes = _extract_pdf_text(renderer.render(make_invoice(notes="Lunas via transfer")))

        assert "Notes:" not in without
        assert "Lunas via transfer" in with_notes

    def test_long_item_list_breaks_pages(self, renderer, make_invoice):
        items = [
            OrderItem(id=f"item-{n}", name=f"Print {n}", quantity=1, price=1000)
            for n in range(80)
        ]
        invoice = make_invoice(items=items, subtotal=80000, tax=8800, total=88800)

        text = _extract_pdf_text(renderer.render(invoice))

        assert "Page 2 of" in text

    def test_missing_logo_is_skipped(self, sample_invoice, tmp_path):
        renderer = Fpdf2InvoiceRenderer(
            pdf_settings=PdfSettings(logo_path=str(tmp_path / "missing.png"))
        )
        assert renderer.render(sample_invoice).startswith(b"%PDF")

    def test_non_latin_text_does_not_fail(self, renderer, make_invoice):
        invoice = make_invoice(customer_name="Budi ✓ Santoso")
        assert renderer.render(invoice).startswith(b"%PDF")


def test_safe_text_replaces_unsupported_characters():
    assert _safe_text("Café ✓") == "Café ?"
