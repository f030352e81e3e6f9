"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out of the box locally
    - stripe_secret_key optional: payments answer 500 until it is set
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Store
    seed_sample_data: bool = True
    enforce_status_transitions: bool = True

    # Discovery
    default_search_radius_km: float = 10.0
    popular_dishes_default_limit: int = 4

    # Tables
    qr_code_service_url: str = "https://api.qrserver.com/v1/create-qr-code/"
    table_link_base_url: str = "https://crave.app/table"

    # Payments (Stripe)
    stripe_secret_key: str | None = None
    payment_currency: str = "usd"
    payment_method_types: list[str] = ["card"]

    @field_validator("stripe_secret_key", mode="before")
    @classmethod
    def blank_key_is_unset(cls, v: str | None) -> str | None:
        """STRIPE_SECRET_KEY= (empty) in .env means not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Geocoding (Nominatim)
    geocoding_base_url: str = "https://nominatim.openstreetmap.org"
    geocoding_user_agent: str = "Crave Restaurant App"
    geocoding_timeout_seconds: float = 10.0

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
