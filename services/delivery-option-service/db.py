"""Supabase access for merchant store settings."""

import logging
from typing import Any, Dict, Optional

from supabase import create_client, Client

from config import settings
from packages.shared.errors import TransientError
from packages.shared.retry import create_retry_decorator

logger = logging.getLogger(__name__)

STORES_TABLE = "shopify_stores"

_client: Optional[Client] = None


def get_supabase() -> Optional[Client]:
    """Get Supabase client. Returns None if not configured."""
    global _client
    if _client is not None:
        return _client
    if not settings.supabase_configured:
        return None
    _client = create_client(settings.supabase_url, settings.supabase_key)
    return _client


async def check_connection() -> bool:
    """Verify database connectivity."""
    client = get_supabase()
    if not client:
        return False
    try:
        result = client.table(STORES_TABLE).select("id").limit(1).execute()
        return result.data is not None
    except Exception:
        return False


@create_retry_decorator("store_settings")
def get_store_settings(shop_domain: str) -> Optional[Dict[str, Any]]:
    """
    Fetch the settings JSON for an active store.
    Returns None when Supabase is not configured or the shop is unknown.
    Raises TransientError when the query itself fails.
    """
    client = get_supabase()
    if not client:
        return None
    try:
        result = (
            client.table(STORES_TABLE)
            .select("id, shop_domain, settings, active")
            .eq("shop_domain", shop_domain)
            .limit(1)
            .execute()
        )
    except Exception as e:
        logger.warning("Store settings lookup failed for %s: %s", shop_domain, e)
        raise TransientError(
            "Store settings lookup failed",
            details={"shop": shop_domain},
        ) from e

    row = result.data[0] if result.data else None
    if not row or row.get("active") is False:
        return None
    return row.get("settings") or {}
