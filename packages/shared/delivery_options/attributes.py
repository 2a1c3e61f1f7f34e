"""Cart attribute lookup for the DIY Label checkout flow.

Upstream checkout UI steps write the customer's print shop selection into cart
attributes. Shopify hands them to the function either as the full list
(`cart.attributes`) or as a single queried attribute (`cart.attribute`).
"""

import json
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

ATTR_ENABLED = "diy_label_enabled"
ATTR_PRINT_SHOP_ID = "diy_label_print_shop_id"
ATTR_PRINT_SHOP_NAME = "diy_label_print_shop_name"
ATTR_PRINT_SHOP_ADDRESS = "diy_label_print_shop_address"
ATTR_ESTIMATED_COMPLETION = "diy_label_estimated_completion"
ATTR_CUSTOMER_LOCATION = "diy_label_customer_location"

ENABLED_VALUE = "true"


@dataclass(frozen=True)
class PrintShopSelection:
    """Print shop chosen by the customer, as far as the cart knows it."""

    shop_id: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None
    estimated_completion: Optional[str] = None
    distance: Optional[str] = None


def parse_customer_location(value: Optional[str]) -> Optional[Dict[str, Any]]:
    """Decode the customer location attribute. Returns None when unusable."""
    if not value:
        return None
    try:
        location = json.loads(value)
    except (TypeError, ValueError):
        return None
    if not isinstance(location, dict):
        return None
    return location


def _distance_label(location: Optional[Dict[str, Any]]) -> Optional[str]:
    if not location:
        return None
    distance = location.get("distance")
    if distance is None or isinstance(distance, bool):
        return None
    if isinstance(distance, (int, float)):
        if not math.isfinite(distance) or distance < 0:
            return None
        return f"{distance:.1f}"
    if isinstance(distance, str) and distance.strip():
        return distance.strip()
    return None


class AttributeSet:
    """Read-only key lookup over cart attributes."""

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(values or {})

    @classmethod
    def from_cart(cls, cart: Optional[Dict[str, Any]]) -> "AttributeSet":
        """
        Build from a function input cart.
        Accepts `attributes` ([{key, value}]) and the single `attribute` ({value})
        form, whose key is implicitly the enabling flag.
        """
        values: Dict[str, str] = {}
        if not isinstance(cart, dict):
            return cls(values)

        for entry in cart.get("attributes") or []:
            if not isinstance(entry, dict):
                continue
            key = entry.get("key")
            value = entry.get("value")
            if not isinstance(key, str) or value is None:
                continue
            values[key] = value if isinstance(value, str) else str(value)

        single = cart.get("attribute")
        if isinstance(single, dict) and single.get("value") is not None:
            key = single.get("key") or ATTR_ENABLED
            value = single["value"]
            values.setdefault(key, value if isinstance(value, str) else str(value))

        return cls(values)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    @property
    def selection_enabled(self) -> bool:
        """True only when the enabling flag is exactly "true"."""
        return self.get(ATTR_ENABLED) == ENABLED_VALUE

    def print_shop(self) -> PrintShopSelection:
        location = parse_customer_location(self.get(ATTR_CUSTOMER_LOCATION))
        return PrintShopSelection(
            shop_id=self.get(ATTR_PRINT_SHOP_ID) or None,
            name=self.get(ATTR_PRINT_SHOP_NAME) or None,
            address=self.get(ATTR_PRINT_SHOP_ADDRESS) or None,
            estimated_completion=self.get(ATTR_ESTIMATED_COMPLETION) or None,
            distance=_distance_label(location),
        )
