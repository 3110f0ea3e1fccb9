"""The storefront demo script.

Builds the catalog, fills a cart, checks it out into an order and calls the
demo API once. Every step is sequential; the API call is the only one that
can fail, and its failure is reported rather than raised.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from loguru import logger
from rich.console import Console

from src.shopnest.core.clock import Clock
from src.shopnest.core.errors import NetworkFailure
from src.shopnest.core.services.api_client import ApiClient
from src.shopnest.entities.service.cart import Cart
from src.shopnest.entities.service.order import Order, labels_for
from src.shopnest.entities.service.product import ProductCatalog, default_catalog
from src.shopnest.runtime.config.config_data import ConfigData
from src.shopnest.runtime.context import get_config

SEARCH_PRODUCT_ID = "P002"
API_SUCCESS_PREFIX = "Integración API (demo): "
API_FAILURE_PREFIX = "No se pudo llamar a la API (posible falta de red). Detalle: "


@dataclass
class StorefrontResult:
    """Everything the script produced, for callers that want more than stdout."""

    cart: Cart
    order: Order
    api_result: str | None = None
    api_error: NetworkFailure | None = None


def build_cart(catalog: ProductCatalog, product_id: str = SEARCH_PRODUCT_ID) -> Cart:
    """Fill a cart with the searched product (if found) then the first catalog item.

    When the searched product is the first catalog item it is added twice.
    """
    cart = Cart()
    found = catalog.find_by_id(product_id)
    if found is not None:
        cart.add(found)
    cart.add(catalog.first())
    return cart


def _emit(console: Console, text: str) -> None:
    # Raw write: API bodies keep their tabs and carriage returns.
    console.file.write(text + "\n")


def call_api(console: Console, api: ApiClient) -> tuple[str | None, NetworkFailure | None]:
    try:
        result = api.fetch_sample_product()
    except NetworkFailure as e:
        _emit(console, f"{API_FAILURE_PREFIX}{e}")
        return None, e
    _emit(console, f"{API_SUCCESS_PREFIX}{result}")
    return result, None


def run_storefront(
    console: Console,
    http_client: httpx.Client,
    clock: Clock | None = None,
    config: ConfigData | None = None,
) -> StorefrontResult:
    """Run the storefront demo end to end, printing to console.

    Args:
        console: Destination for the user-facing output
        http_client: HTTP client used for the single API call
        clock: Source of the order timestamp; local system time if omitted
        config: Configuration to use; the current context's if omitted

    Returns:
        StorefrontResult with the cart, the order and the API outcome
    """
    config = config or get_config()
    labels = labels_for(config.storefront.language)

    catalog = default_catalog()
    cart = build_cart(catalog)

    _emit(console, f"{labels.cart_contents}{cart.describe()}")
    _emit(console, f"{labels.cart_total}{cart.total()}")

    order = Order.from_products(cart.items(), clock=clock)
    logger.debug(f"Order created with {len(order.products)} products, total {order.total}")
    _emit(console, order.summary(labels))

    api = ApiClient(http_client, url=config.api.sample_product_url)
    api_result, api_error = call_api(console, api)
    return StorefrontResult(cart=cart, order=order, api_result=api_result, api_error=api_error)
