"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that load collections, call the core engines
   and save collections back
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers.
"""

from src.application.services import (
    get_auth_service,
    get_id_generator,
    get_invoice_engine,
    get_order_engine,
    get_write_lock,
    reset_services,
)
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

__all__ = [
    # Use Cases
    "ManageCustomersUseCase",
    "ManageOrdersUseCase",
    "ManageInvoicesUseCase",
    "GenerateReportUseCase",
    "ExportReportUseCase",
    "CreateInvoicePdfUseCase",
    "ShareInvoiceUseCase",
    "AuthenticateUserUseCase",
    "GetDashboardUseCase",
    # Service factories
    "get_id_generator",
    "get_order_engine",
    "get_invoice_engine",
    "get_auth_service",
    "get_write_lock",
    "reset_services",
]
