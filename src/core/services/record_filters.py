"""Case-insensitive search over record collections."""

from collections.abc import Iterable

from src.core.entities.customer import Customer
from src.core.entities.invoice import Invoice
from src.core.entities.order import Order


def filter_customers(customers: Iterable[Customer], term: str = "") -> list[Customer]:
    """Match name or email ignoring case, phone as typed."""
    needle = term.lower()
    return [
        c
        for c in customers
        if needle in c.name.lower() or needle in c.email.lower() or term in c.phone
    ]


def filter_orders(orders: Iterable[Order], term: str = "") -> list[Order]:
    """Match the customer name or any item name."""
    needle = term.lower()
    return [
        o
        for o in orders
        if needle in o.customer_name.lower()
        or any(needle in item.name.lower() for item in o.items)
    ]


def filter_invoices(invoices: Iterable[Invoice], term: str = "") -> list[Invoice]:
    """Match the invoice number or customer name."""
    needle = term.lower()
    return [
        i
        for i in invoices
        if needle in i.invoice_number.lower() or needle in i.customer_name.lower()
    ]
