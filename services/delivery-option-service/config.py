"""Configuration from environment variables."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (parent of services/delivery-option-service)
_project_root = Path(__file__).resolve().parents[2]
load_dotenv(_project_root / ".env")


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get environment variable."""
    return os.getenv(key, default)


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get boolean env var."""
    v = os.getenv(key, "").lower()
    return v in ("1", "true", "yes") if v else default


class Settings:
    """Delivery option service settings."""

    # Supabase (shopify_stores.settings lookup)
    supabase_url: str = get_env("SUPABASE_URL") or ""
    supabase_key: str = get_env("SUPABASE_SECRET_KEY") or get_env("SUPABASE_SERVICE_KEY") or ""

    # Service
    environment: str = get_env("ENVIRONMENT", "development")
    log_level: str = get_env("LOG_LEVEL", "INFO")
    cors_origins: str = get_env("CORS_ORIGINS", "") or ""

    # Generator defaults
    default_currency: str = (get_env("DEFAULT_CURRENCY") or "USD").strip().upper()
    gate_on_product_tags: bool = get_env_bool("GATE_ON_PRODUCT_TAGS", False)

    @property
    def supabase_configured(self) -> bool:
        """Check if Supabase is configured."""
        return bool(self.supabase_url and self.supabase_key)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


settings = Settings()
