"""
Export Report Use Case.

Renders the financial report as a plain-text download.
"""

from dataclasses import dataclass
from datetime import date

from src.application.use_cases.generate_report import GenerateReportUseCase
from src.config import get_logger, get_settings
from src.core.clock import Clock, utc_now
from src.core.interfaces import IRecordStore
from src.core.services.report_export import render_report_text, report_filename

logger = get_logger(__name__)


@dataclass
class ReportExportResult:
    """Result of report export."""

    filename: str
    content: str


class ExportReportUseCase:
    """Plain-text financial report for the same filters as the report view."""

    def __init__(
        self,
        record_store: IRecordStore | None = None,
        clock: Clock = utc_now,
    ):
        self._report = GenerateReportUseCase(record_store=record_store, clock=clock)
        self._clock = clock

    async def execute(
        self,
        start: date | None = None,
        end: date | None = None,
        status: str | None = None,
    ) -> ReportExportResult:
        result = await self._report.execute(start, end, status)
        content = render_report_text(
            result.report,
            result.date_range,
            generated_at=self._clock(),
            company_name=get_settings().company.name,
        )
        filename = report_filename(result.date_range)

        logger.info("report_exported", filename=filename, size=len(content))
        return ReportExportResult(filename=filename, content=content)
