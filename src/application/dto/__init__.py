"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from src.application.dto.requests import (
    CustomerRequest,
    LoginRequest,
    OrderItemRequest,
    SaveInvoiceRequest,
    SaveOrderRequest,
)
from src.application.dto.responses import (
    CustomerListResponse,
    DeleteResponse,
    ErrorResponse,
    HealthResponse,
    InvoiceListResponse,
    LoginResponse,
    OrderListResponse,
    ProviderHealthResponse,
    ReportResponse,
    ShareLinkResponse,
)

__all__ = [
    # Requests
    "CustomerRequest",
    "OrderItemRequest",
    "SaveOrderRequest",
    "SaveInvoiceRequest",
    "LoginRequest",
    # Responses
    "CustomerListResponse",
    "OrderListResponse",
    "InvoiceListResponse",
    "DeleteResponse",
    "ReportResponse",
    "ShareLinkResponse",
    "LoginResponse",
    "HealthResponse",
    "ProviderHealthResponse",
    "ErrorResponse",
]
