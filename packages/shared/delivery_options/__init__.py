"""DIY Label local pickup delivery option generator."""

from .attributes import (
    ATTR_CUSTOMER_LOCATION,
    ATTR_ENABLED,
    ATTR_ESTIMATED_COMPLETION,
    ATTR_PRINT_SHOP_ADDRESS,
    ATTR_PRINT_SHOP_ID,
    ATTR_PRINT_SHOP_NAME,
    AttributeSet,
    PrintShopSelection,
    parse_customer_location,
)
from .configuration import (
    DEFAULT_CONFIG,
    DEFAULT_PICKUP_TIME,
    MerchantConfig,
    config_from_store_settings,
    parse_merchant_config,
)
from .generator import (
    GeneratorOptions,
    build_pickup_option,
    has_qualifying_product,
    run,
)

__all__ = [
    "ATTR_CUSTOMER_LOCATION",
    "ATTR_ENABLED",
    "ATTR_ESTIMATED_COMPLETION",
    "ATTR_PRINT_SHOP_ADDRESS",
    "ATTR_PRINT_SHOP_ID",
    "ATTR_PRINT_SHOP_NAME",
    "AttributeSet",
    "PrintShopSelection",
    "parse_customer_location",
    "DEFAULT_CONFIG",
    "DEFAULT_PICKUP_TIME",
    "MerchantConfig",
    "config_from_store_settings",
    "parse_merchant_config",
    "GeneratorOptions",
    "build_pickup_option",
    "has_qualifying_product",
    "run",
]
