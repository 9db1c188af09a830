"""Tests for the invoice entity."""

from datetime import date

from src.core.entities import Invoice, InvoiceStatus


class TestInvoice:
    def test_default_status_is_draft(self, sample_invoice):
        assert sample_invoice.status == InvoiceStatus.DRAFT

    def test_status_values(self):
        assert [s.value for s in InvoiceStatus] == ["draft", "sent", "paid", "overdue"]

    def test_due_date_parsed_from_iso_string(self, sample_invoice):
        data = sample_invoice.model_dump(mode="json")
        data["due_date"] = "2026-12-31"
        invoice = Invoice.model_validate(data)
        assert invoice.due_date == date(2026, 12, 31)

    def test_items_keep_their_totals(self, sample_invoice):
        assert [item.total for item in sample_invoice.items] == [100000, 30000]
