"""
Domain exceptions for the invoicing application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class InvoicingError(Exception):
    """Base exception for all invoicing errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(InvoicingError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


class CorruptRecordError(StorageError):
    """A stored collection no longer matches the record shape."""

    def __init__(self, key: str, reason: str):
        super().__init__(
            f"Stored value for '{key}' is unreadable: {reason}",
            code="CORRUPT_RECORD",
            details={"key": key, "reason": reason[:200]},
        )


# Lookup Exceptions
class RecordNotFoundError(InvoicingError):
    """Base exception for missing records."""

    pass


class CustomerNotFoundError(RecordNotFoundError):
    """Customer not found in storage."""

    def __init__(self, customer_id: str):
        super().__init__(
            f"Customer not found: {customer_id}",
            code="CUSTOMER_NOT_FOUND",
            details={"customer_id": customer_id},
        )


class OrderNotFoundError(RecordNotFoundError):
    """Order not found in storage."""

    def __init__(self, order_id: str):
        super().__init__(
            f"Order not found: {order_id}",
            code="ORDER_NOT_FOUND",
            details={"order_id": order_id},
        )


class InvoiceNotFoundError(RecordNotFoundError):
    """Invoice not found in storage."""

    def __init__(self, invoice_id: str):
        super().__init__(
            f"Invoice not found: {invoice_id}",
            code="INVOICE_NOT_FOUND",
            details={"invoice_id": invoice_id},
        )


# Validation Exceptions
class ValidationError(InvoicingError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class DuplicateInvoiceError(ValidationError):
    """The order already backs another invoice."""

    def __init__(self, order_id: str, existing_invoice_id: str):
        super().__init__(
            field="order_id",
            message=f"Order {order_id} already has invoice {existing_invoice_id}",
            value=order_id,
        )
        self.code = "DUPLICATE_INVOICE"
        self.details.update({"existing_invoice_id": existing_invoice_id})


# Auth Exceptions
class AuthenticationError(InvoicingError):
    """Credentials were rejected or no user is signed in."""

    def __init__(self, reason: str = "Invalid email or password"):
        super().__init__(reason, code="AUTHENTICATION_FAILED")


class ConfigurationError(InvoicingError):
    """Configuration error."""

    pass
