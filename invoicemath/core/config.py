"""Application configuration via pydantic settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="INVOICEMATH_",
        extra="ignore",
    )

    app_name: str = "invoicemath"
    app_version: str = "1.0.0"
    app_env: str = "development"

    # Formatting locale is explicit so output never depends on the host locale
    locale: str = "en-IN"
    currency: str = "INR"
    pdf_currency_prefix: str = "Rs."
    display_currency_prefix: str = "₹"

    invoice_number_prefix: str = "INV"
    proposal_number_prefix: str = "PROP"

    log_level: str = "INFO"
    log_json: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
