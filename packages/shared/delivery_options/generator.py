"""DIY Label delivery option generator.

Runs on every checkout evaluation. Decides whether to offer free pickup from
the customer's local print shop and builds the option. Pure: no I/O, no state,
and never raises; every failure path returns no operations.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .attributes import AttributeSet, PrintShopSelection
from .configuration import MerchantConfig, parse_merchant_config

logger = logging.getLogger(__name__)

PICKUP_TITLE = "🌱 Local Print Shop Pickup"
GENERIC_SHOP_NAME = "your Local Print Shop"
METHOD_NAME = "DIY Label Local Pickup"
METHOD_TYPE_PICKUP = "PICKUP"
DEFAULT_METHOD_ID = "diy-label-pickup"
ZERO_AMOUNT = "0.00"
DEFAULT_CURRENCY = "USD"

INSTRUCTION_SUSTAINABILITY = ". 🌱 Printed locally to reduce shipping impact and support your community!"
DESCRIPTION_SUSTAINABILITY = " 🌱 Supports your community and reduces shipping impact!"

QUALIFYING_TAGS = frozenset({"diy-label", "diy_label"})


@dataclass(frozen=True)
class GeneratorOptions:
    """Integration-time options; merchant options live in MerchantConfig."""

    gate_on_product_tags: bool = False
    currency_code: str = DEFAULT_CURRENCY


def run(input_data: Optional[Dict[str, Any]], options: Optional[GeneratorOptions] = None) -> Dict[str, Any]:
    """
    Function entry point. Returns {"operations": [...]} with zero or one
    `add` operation.
    """
    try:
        operations = generate_operations(input_data or {}, options or GeneratorOptions())
    except Exception:
        logger.exception("Delivery option generation failed; returning no operations")
        operations = []
    return {"operations": operations}


def generate_operations(input_data: Dict[str, Any], options: GeneratorOptions) -> List[Dict[str, Any]]:
    generator = input_data.get("deliveryOptionGenerator") or {}
    metafield = generator.get("metafield") or {}
    config = parse_merchant_config(metafield.get("value"))

    if not config.enabled:
        logger.debug("Pickup option disabled by merchant configuration")
        return []

    cart = input_data.get("cart") or {}
    attributes = AttributeSet.from_cart(cart)
    if not attributes.selection_enabled:
        logger.debug("No DIY Label selection in cart attributes")
        return []

    lines = cart.get("lines") or []
    if not isinstance(lines, list) or not lines:
        logger.debug("Cart has no lines")
        return []

    if (options.gate_on_product_tags or config.require_product_tag) and not has_qualifying_product(lines):
        logger.debug("No cart line carries a DIY Label product tag")
        return []

    option = build_pickup_option(
        attributes.print_shop(),
        config,
        currency_code=_currency_code(cart, options),
    )
    logger.info("Offering pickup option: %s", option["title"])
    return [{"add": option}]


def has_qualifying_product(lines: List[Dict[str, Any]]) -> bool:
    """True when any line's product is tagged for DIY Label."""
    for line in lines:
        product = ((line or {}).get("merchandise") or {}).get("product") or {}
        if product.get("hasAnyTag") is True:
            return True
        tags = product.get("tags") or []
        if any(tag in QUALIFYING_TAGS for tag in tags):
            return True
    return False


def pickup_instruction(pickup_time: str, config: MerchantConfig) -> str:
    instruction = f"Ready for pickup in {pickup_time}"
    if config.sustainability_message:
        instruction += INSTRUCTION_SUSTAINABILITY
    return instruction


def build_pickup_option(
    shop: PrintShopSelection,
    config: MerchantConfig,
    currency_code: str = DEFAULT_CURRENCY,
) -> Dict[str, Any]:
    """Compose the `add` payload for the local pickup option."""
    pickup_time = shop.estimated_completion or config.default_pickup_time

    if shop.name and shop.distance:
        title = f"🌱 {shop.name} ({shop.distance} miles away)"
    else:
        title = PICKUP_TITLE

    description = f"Free pickup from {shop.name or GENERIC_SHOP_NAME}. Ready in {pickup_time}."
    if config.sustainability_message:
        description += DESCRIPTION_SUSTAINABILITY

    method: Dict[str, Any] = {
        "id": f"diy-label-{shop.shop_id}" if shop.shop_id else DEFAULT_METHOD_ID,
        "name": METHOD_NAME,
        "description": pickup_instruction(pickup_time, config),
        "methodType": METHOD_TYPE_PICKUP,
    }
    if shop.address:
        method["address"] = shop.address

    return {
        "title": title,
        "cost": {"amount": ZERO_AMOUNT, "currencyCode": currency_code},
        "description": description,
        "deliveryMethodDefinition": method,
    }


def _currency_code(cart: Dict[str, Any], options: GeneratorOptions) -> str:
    subtotal = (cart.get("cost") or {}).get("subtotalAmount") or {}
    code = subtotal.get("currencyCode")
    if isinstance(code, str) and code:
        return code
    return options.currency_code
