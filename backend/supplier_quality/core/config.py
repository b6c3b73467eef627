"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # ── Quality rules ─────────────────────────
    # List values are read from the environment as JSON, e.g.
    # QUALITY_TRUSTED_EMAIL_DOMAINS='["wiseb2b.eu"]'
    QUALITY_TRUSTED_EMAIL_DOMAINS: list[str] = Field(
        default_factory=lambda: ["example.com", "my-company.eu", "wiseb2b.eu"]
    )
    QUALITY_REFERENCE_CITY: str = "Warszawa"
    QUALITY_REQUIRED_ADDRESS_FIELDS: list[str] = Field(
        default_factory=lambda: ["street", "house_number", "city", "postal_code", "country_code"]
    )

    # ── Review routing ────────────────────────
    MIN_QUALITY_SCORE: int = 30

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
