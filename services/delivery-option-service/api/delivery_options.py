"""Delivery option function runner API."""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Query, Request

from config import settings
from db import get_store_settings
from packages.shared.delivery_options import (
    DEFAULT_CONFIG,
    GeneratorOptions,
    MerchantConfig,
    config_from_store_settings,
    run,
)
from packages.shared.errors import (
    NotFoundError,
    ServiceUnavailableError,
    TransientError,
    ValidationError,
)
from packages.shared.monitoring import log_with_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Delivery Options"])


def _metafield_value(payload: Dict[str, Any]) -> Optional[str]:
    generator = payload.get("deliveryOptionGenerator")
    if not isinstance(generator, dict):
        return None
    metafield = generator.get("metafield")
    if not isinstance(metafield, dict):
        return None
    return metafield.get("value")


def _store_config(shop: str) -> Optional[MerchantConfig]:
    """Merchant config from shopify_stores.settings, or None for an unknown shop."""
    try:
        store_settings = get_store_settings(shop)
    except TransientError as e:
        raise ServiceUnavailableError(
            "Store settings are temporarily unavailable",
            retry_after=5,
            details={"shop": shop},
        ) from e
    if store_settings is None:
        return None
    return config_from_store_settings(store_settings)


@router.post("/delivery-options/run")
def run_delivery_options(
    request: Request,
    payload: Any = Body(None),
    shop: Optional[str] = Query(None, description="Shop domain used to resolve merchant config"),
    gate_on_product_tags: Optional[bool] = Query(None, description="Override the service tag gate default"),
) -> Dict[str, Any]:
    """
    Execute the delivery option generator against a function input payload.
    Returns {"operations": [...]} exactly as the checkout would receive it.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Function input must be a JSON object")

    if shop and not _metafield_value(payload):
        config = _store_config(shop)
        if config is None:
            log_with_context(
                logger,
                logging.INFO,
                "Unknown shop; running with default configuration",
                request_id=getattr(request.state, "request_id", None),
                shop=shop,
            )
        else:
            payload = {
                **payload,
                "deliveryOptionGenerator": {"metafield": {"value": config.to_metafield_value()}},
            }

    options = GeneratorOptions(
        gate_on_product_tags=settings.gate_on_product_tags if gate_on_product_tags is None else gate_on_product_tags,
        currency_code=settings.default_currency,
    )
    return run(payload, options)


@router.get("/delivery-options/config")
def get_delivery_option_config(
    shop: Optional[str] = Query(None, description="Shop domain"),
) -> Dict[str, Any]:
    """Effective merchant configuration and the metafield JSON that encodes it."""
    if not shop:
        config = DEFAULT_CONFIG
    else:
        config = _store_config(shop)
        if config is None:
            raise NotFoundError("Shop not found", details={"shop": shop})

    return {
        "shop": shop,
        "configuration": config.model_dump(by_alias=True),
        "metafield_value": config.to_metafield_value(),
    }
