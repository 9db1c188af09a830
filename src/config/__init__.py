"""Configuration module."""

from src.config.logging import configure_logging, get_logger
from src.config.settings import (
    BankAccount,
    CompanySettings,
    DemoAccount,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "BankAccount",
    "CompanySettings",
    "DemoAccount",
    "Settings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
]
