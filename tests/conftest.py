"""Pytest configuration: function input builders and live-server fixtures."""

import copy
import os
from typing import Any, Dict, List, Optional

import pytest

DEFAULT_METAFIELD = '{"enabled": true, "defaultPickupTime": "2-3 business days", "sustainabilityMessage": true}'


def cart_line(
    line_id: str = "gid://shopify/CartLine/1",
    quantity: int = 1,
    handle: str = "test-tshirt",
    tags: Optional[List[str]] = None,
) -> Dict[str, Any]:
    product: Dict[str, Any] = {"id": "gid://shopify/Product/1", "handle": handle}
    if tags is not None:
        product["tags"] = tags
    return {
        "id": line_id,
        "quantity": quantity,
        "merchandise": {"id": "gid://shopify/ProductVariant/1", "product": product},
    }


def build_input(
    attributes: Optional[Dict[str, str]] = None,
    lines: Optional[List[Dict[str, Any]]] = None,
    metafield: Optional[str] = DEFAULT_METAFIELD,
) -> Dict[str, Any]:
    """Function input in the shape Shopify sends to the generator."""
    if attributes is None:
        attributes = {"diy_label_enabled": "true"}
    return {
        "cart": {
            "lines": [cart_line()] if lines is None else copy.deepcopy(lines),
            "attributes": [{"key": k, "value": v} for k, v in attributes.items()],
        },
        "deliveryOptionGenerator": {
            "metafield": {"value": metafield} if metafield is not None else None,
        },
    }


@pytest.fixture
def make_input():
    """Factory fixture for function input payloads."""
    return build_input


@pytest.fixture
def make_line():
    """Factory fixture for cart lines."""
    return cart_line


def _get_base_url() -> str:
    """Resolve delivery option service base URL from environment."""
    url = os.environ.get("DELIVERY_OPTION_SERVICE_URL")
    if not url:
        pytest.skip(
            "DELIVERY_OPTION_SERVICE_URL must be set for server tests. "
            "Example: export DELIVERY_OPTION_SERVICE_URL=http://localhost:8000"
        )
    return url.rstrip("/")


@pytest.fixture(scope="session")
def base_url() -> str:
    """Base URL for a running delivery option service (from env)."""
    return _get_base_url()
