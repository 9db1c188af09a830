"""Date formatting for the fixed Indonesian locale."""

from datetime import date, datetime

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "Mei",
    "Jun",
    "Jul",
    "Agu",
    "Sep",
    "Okt",
    "Nov",
    "Des",
)


def format_date(value: date) -> str:
    """``19/10/2026``"""
    return value.strftime("%d/%m/%Y")


def format_datetime(value: datetime) -> str:
    """``19/10/2026 14.05.09``"""
    return value.strftime("%d/%m/%Y %H.%M.%S")


def format_month_label(value: date) -> str:
    """Short month and year, e.g. ``Okt 2026``. Used as a grouping key."""
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.year}"
