"""
Dependency injection container for FastAPI.

Provides the record store and use case instances to route handlers.
Tests override ``get_store`` to run the real use cases against an
in-memory store.
"""

from fastapi import Depends

from src.application.use_cases import (
    AuthenticateUserUseCase,
    CreateInvoicePdfUseCase,
    ExportReportUseCase,
    GenerateReportUseCase,
    GetDashboardUseCase,
    ManageCustomersUseCase,
    ManageInvoicesUseCase,
    ManageOrdersUseCase,
    ShareInvoiceUseCase,
)
from src.core.interfaces import IRecordStore
from src.infrastructure.storage.sqlite import get_record_store


# Store dependencies
async def get_store() -> IRecordStore:
    """Get the record store."""
    return await get_record_store()


# Use case dependencies
def get_customers_use_case(
    store: IRecordStore = Depends(get_store),
) -> ManageCustomersUseCase:
    return ManageCustomersUseCase(record_store=store)


def get_orders_use_case(
    store: IRecordStore = Depends(get_store),
) -> ManageOrdersUseCase:
    return ManageOrdersUseCase(record_store=store)


def get_invoices_use_case(
    store: IRecordStore = Depends(get_store),
) -> ManageInvoicesUseCase:
    return ManageInvoicesUseCase(record_store=store)


def get_invoice_pdf_use_case(
    store: IRecordStore = Depends(get_store),
) -> CreateInvoicePdfUseCase:
    return CreateInvoicePdfUseCase(record_store=store)


def get_share_invoice_use_case(
    store: IRecordStore = Depends(get_store),
) -> ShareInvoiceUseCase:
    return ShareInvoiceUseCase(record_store=store)


def get_report_use_case(
    store: IRecordStore = Depends(get_store),
) -> GenerateReportUseCase:
    return GenerateReportUseCase(record_store=store)


def get_export_report_use_case(
    store: IRecordStore = Depends(get_store),
) -> ExportReportUseCase:
    return ExportReportUseCase(record_store=store)


def get_dashboard_use_case(
    store: IRecordStore = Depends(get_store),
) -> GetDashboardUseCase:
    return GetDashboardUseCase(record_store=store)


def get_auth_use_case(
    store: IRecordStore = Depends(get_store),
) -> AuthenticateUserUseCase:
    return AuthenticateUserUseCase(record_store=store)
