"""Financial report endpoints."""

from datetime import date

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from src.api.dependencies import get_export_report_use_case, get_report_use_case
from src.application.dto.responses import ErrorResponse, ReportResponse
from src.application.use_cases.export_report import ExportReportUseCase
from src.application.use_cases.generate_report import GenerateReportUseCase

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get(
    "",
    response_model=ReportResponse,
    responses={400: {"model": ErrorResponse}},
)
async def get_report(
    start_date: date | None = None,
    end_date: date | None = None,
    status: str = "all",
    use_case: GenerateReportUseCase = Depends(get_report_use_case),
) -> ReportResponse:
    """
    Revenue, outstanding amounts, counts, monthly revenue and status
    breakdown for invoices created in the range.

    Defaults to the current month up to today.
    """
    result = await use_case.execute(start_date, end_date, status)
    return use_case.to_response(result)


@router.get(
    "/export",
    response_class=PlainTextResponse,
    responses={400: {"model": ErrorResponse}},
)
async def export_report(
    start_date: date | None = None,
    end_date: date | None = None,
    status: str = "all",
    use_case: ExportReportUseCase = Depends(get_export_report_use_case),
) -> PlainTextResponse:
    """Download the report as a text file."""
    result = await use_case.execute(start_date, end_date, status)
    return PlainTextResponse(
        content=result.content,
        headers={
            "Content-Disposition": f'attachment; filename="{result.filename}"',
        },
    )
