"""Application use cases."""

from src.application.use_cases.authenticate_user import AuthenticateUserUseCase
from src.application.use_cases.create_invoice_pdf import CreateInvoicePdfUseCase, InvoicePdfResult
from src.application.use_cases.export_report import ExportReportUseCase, ReportExportResult
from src.application.use_cases.generate_report import GenerateReportUseCase, ReportResult
from src.application.use_cases.get_dashboard import GetDashboardUseCase
from src.application.use_cases.manage_customers import ManageCustomersUseCase
from src.application.use_cases.manage_invoices import ManageInvoicesUseCase
from src.application.use_cases.manage_orders import ManageOrdersUseCase
from src.application.use_cases.share_invoice import ShareInvoiceUseCase

__all__ = [
    "ManageCustomersUseCase",
    "ManageOrdersUseCase",
    "ManageInvoicesUseCase",
    "GenerateReportUseCase",
    "ReportResult",
    "ExportReportUseCase",
    "ReportExportResult",
    "CreateInvoicePdfUseCase",
    "InvoicePdfResult",
    "ShareInvoiceUseCase",
    "AuthenticateUserUseCase",
    "GetDashboardUseCase",
]
