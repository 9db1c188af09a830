"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BankAccount(BaseModel):
    """A bank account printed on invoices and share messages."""

    bank: str
    number: str
    holder: str


class DemoAccount(BaseModel):
    """A fixed login account."""

    id: str
    email: str
    password: str
    name: str
    role: Literal["admin", "user"] = "user"
    created_at: datetime = datetime(2024, 1, 1, tzinfo=UTC)


class StorageSettings(BaseSettings):
    """Storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    data_dir: Path = Path("data")
    db_name: str = "invoicing.db"
    key_prefix: str = "studio_katalika_"

    # SQLite settings
    pool_size: int = 5
    busy_timeout: int = 30000  # ms

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


class BillingSettings(BaseSettings):
    """Tax and numbering configuration."""

    model_config = SettingsConfigDict(env_prefix="BILLING_")

    tax_rate: float = 0.11  # PPN
    invoice_prefix: str = "INV"
    recent_transactions_limit: int = 10


class CompanySettings(BaseSettings):
    """Issuing company details."""

    model_config = SettingsConfigDict(env_prefix="COMPANY_")

    name: str = "Studio Katalika"
    tagline: str = "Professional Invoice System"
    address: str = "Jl. Contoh No. 123, Jakarta"
    phone: str = "(021) 123-4567"
    email: str = "admin@studiokatalika.com"
    bank_accounts: list[BankAccount] = [
        BankAccount(bank="Bank BCA", number="1234567890", holder="Studio Katalika"),
        BankAccount(bank="Bank Mandiri", number="0987654321", holder="Studio Katalika"),
    ]


class PdfSettings(BaseSettings):
    """Invoice PDF layout configuration."""

    model_config = SettingsConfigDict(env_prefix="PDF_")

    footer_text: str = "Thank you for your business!"
    logo_path: str | None = None


class AuthSettings(BaseSettings):
    """Fixed account list for the login check."""

    model_config = SettingsConfigDict(env_prefix="AUTH_")

    accounts: list[DemoAccount] = [
        DemoAccount(
            id="1",
            email="admin@studiokatalika.com",
            password="admin123",
            name="Administrator",
            role="admin",
        ),
        DemoAccount(
            id="2",
            email="user@studiokatalika.com",
            password="user123",
            name="Staff User",
            role="user",
        ),
    ]


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Studio Invoicing"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    billing: BillingSettings = Field(default_factory=BillingSettings)
    company: CompanySettings = Field(default_factory=CompanySettings)
    pdf: PdfSettings = Field(default_factory=PdfSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    api: APISettings = Field(default_factory=APISettings)

    @field_validator("storage", mode="before")
    @classmethod
    def ensure_data_dir(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            settings = StorageSettings(**v)
        else:
            settings = v or StorageSettings()
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
