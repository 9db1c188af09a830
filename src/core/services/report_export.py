"""Plain-text rendering of a financial report for download."""

from datetime import datetime

from src.core.entities.report import DateRange, ReportData
from src.core.money import format_currency
from src.core.services.formatting import format_date, format_datetime


def report_filename(date_range: DateRange) -> str:
    """``financial-report-2026-10-01-2026-10-19.txt``"""
    return (
        f"financial-report-{date_range.start.isoformat()}"
        f"-{date_range.end.isoformat()}.txt"
    )


def render_report_text(
    report: ReportData,
    date_range: DateRange,
    generated_at: datetime,
    company_name: str = "Studio Katalika",
) -> str:
    """Render the header, summary, status and monthly blocks."""
    lines = [
        f"FINANCIAL REPORT {company_name.upper()}",
        f"Period: {format_date(date_range.start)} - {format_date(date_range.end)}",
        f"Generated: {format_datetime(generated_at)}",
        "",
        "=== FINANCIAL SUMMARY ===",
        f"Total Revenue: {format_currency(report.total_revenue)}",
        f"Total Outstanding: {format_currency(report.total_outstanding)}",
        f"Paid Invoices: {report.paid_invoices}",
        f"Pending Invoices: {report.pending_invoices}",
        f"Overdue Invoices: {report.overdue_invoices}",
        f"Average Invoice Value: {format_currency(report.average_invoice_value)}",
        "",
        "=== STATUS BREAKDOWN ===",
    ]
    lines.extend(
        f"{item.status.upper()}: {item.count} invoice(s) ({format_currency(item.amount)})"
        for item in report.status_breakdown
    )
    lines.extend(["", "=== MONTHLY REVENUE ==="])
    lines.extend(
        f"{item.month}: {format_currency(item.revenue)} ({item.invoices} invoice(s))"
        for item in report.monthly_revenue
    )
    return "\n".join(lines).strip()
