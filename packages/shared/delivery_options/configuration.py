"""Merchant configuration for the delivery option generator.

Stored as a JSON string in the function's metafield. Parsing never raises:
malformed or absent values fall back to DEFAULT_CONFIG.
"""

import logging
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_PICKUP_TIME = "2-3 business days"

# Pickup keys this service reads from shopify_stores.settings -> MerchantConfig field
STORE_SETTINGS_KEYS = {
    "pickup_enabled": "enabled",
    "default_pickup_time": "default_pickup_time",
    "sustainability_message": "sustainability_message",
    "require_product_tag": "require_product_tag",
}


class MerchantConfig(BaseModel):
    """Per-merchant pickup option configuration."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    enabled: bool = True
    default_pickup_time: str = Field(default=DEFAULT_PICKUP_TIME, alias="defaultPickupTime")
    sustainability_message: bool = Field(default=True, alias="sustainabilityMessage")
    require_product_tag: bool = Field(default=False, alias="requireProductTag")

    @field_validator("enabled", mode="before")
    @classmethod
    def _null_disables(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("default_pickup_time")
    @classmethod
    def _blank_pickup_time(cls, v: str) -> str:
        return v.strip() or DEFAULT_PICKUP_TIME

    def to_metafield_value(self) -> str:
        """Serialize to the camelCase JSON stored in the metafield."""
        return self.model_dump_json(by_alias=True)


DEFAULT_CONFIG = MerchantConfig()


def parse_merchant_config(value: Union[str, bytes, Dict[str, Any], None]) -> MerchantConfig:
    """Parse metafield value; any failure yields DEFAULT_CONFIG."""
    if value is None:
        return DEFAULT_CONFIG
    try:
        if isinstance(value, (str, bytes)):
            if not value.strip():
                return DEFAULT_CONFIG
            return MerchantConfig.model_validate_json(value)
        if isinstance(value, dict):
            return MerchantConfig.model_validate(value)
    except ValidationError as e:
        logger.warning("Invalid merchant configuration, using defaults: %s", e.errors()[:1])
        return DEFAULT_CONFIG
    logger.warning("Unsupported merchant configuration type %s, using defaults", type(value).__name__)
    return DEFAULT_CONFIG


def config_from_store_settings(settings: Optional[Dict[str, Any]]) -> MerchantConfig:
    """
    Build config from the shopify_stores.settings JSON.
    Keys outside STORE_SETTINGS_KEYS are ignored; values of the wrong type are skipped.
    """
    if not isinstance(settings, dict):
        return DEFAULT_CONFIG
    fields: Dict[str, Any] = {}
    for store_key, field_name in STORE_SETTINGS_KEYS.items():
        v = settings.get(store_key)
        if field_name == "default_pickup_time":
            if isinstance(v, str) and v.strip():
                fields[field_name] = v
        elif isinstance(v, bool):
            fields[field_name] = v
    return MerchantConfig(**fields)
