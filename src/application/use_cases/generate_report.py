"""
Generate Report Use Case.

Loads every invoice and aggregates the ones in the requested window.
"""

from dataclasses import dataclass
from datetime import date

from src.application.dto.responses import ReportResponse
from src.config import get_logger, get_settings
from src.core.clock import Clock, utc_now
from src.core.entities.invoice import InvoiceStatus
from src.core.entities.report import DateRange, ReportData
from src.core.exceptions import ValidationError
from src.core.interfaces import IRecordStore
from src.core.services.report_aggregator import (
    ALL_STATUSES,
    StatusFilter,
    build_report,
    default_date_range,
)

logger = get_logger(__name__)


def status_label(status_filter: StatusFilter) -> str:
    return status_filter.value if isinstance(status_filter, InvoiceStatus) else status_filter


def parse_status_filter(value: str | None) -> StatusFilter:
    """Accept ``all`` or a stored invoice status."""
    if value is None or value == ALL_STATUSES:
        return ALL_STATUSES
    try:
        return InvoiceStatus(value)
    except ValueError:
        raise ValidationError("status", "Unknown invoice status", value) from None


def resolve_date_range(
    start: date | None,
    end: date | None,
    today: date,
) -> DateRange:
    """Fill missing bounds from the default range and check their order."""
    default = default_date_range(today)
    start = start or default.start
    end = end or default.end
    if end < start:
        raise ValidationError("end_date", "End date must not be before start date", end)
    return DateRange(start=start, end=end)


@dataclass
class ReportResult:
    """Result of report generation."""

    date_range: DateRange
    status_filter: StatusFilter
    report: ReportData


class GenerateReportUseCase:
    """Financial report over a date range and status filter."""

    def __init__(
        self,
        record_store: IRecordStore | None = None,
        clock: Clock = utc_now,
    ):
        self._record_store = record_store
        self._clock = clock

    async def _get_record_store(self) -> IRecordStore:
        if self._record_store is None:
            from src.infrastructure.storage.sqlite import get_record_store

            self._record_store = await get_record_store()
        return self._record_store

    async def execute(
        self,
        start: date | None = None,
        end: date | None = None,
        status: str | None = None,
    ) -> ReportResult:
        """
        Build the report.

        Args:
            start: First creation day to include (default: first of this month).
            end: Last creation day to include (default: today).
            status: ``all`` or an invoice status.

        Raises:
            ValidationError: Unknown status or end before start.
        """
        now = self._clock()
        date_range = resolve_date_range(start, end, now.date())
        status_filter = parse_status_filter(status)

        store = await self._get_record_store()
        report = build_report(
            await store.get_invoices(),
            date_range,
            status_filter,
            now=now,
            recent_limit=get_settings().billing.recent_transactions_limit,
        )

        logger.info(
            "report_generated",
            start=date_range.start.isoformat(),
            end=date_range.end.isoformat(),
            status=status_label(status_filter),
            revenue=report.total_revenue,
        )
        return ReportResult(date_range=date_range, status_filter=status_filter, report=report)

    @staticmethod
    def to_response(result: ReportResult) -> ReportResponse:
        return ReportResponse(
            start_date=result.date_range.start,
            end_date=result.date_range.end,
            status=status_label(result.status_filter),
            report=result.report,
        )
