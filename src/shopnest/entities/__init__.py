"""Entities module with entity-centric structure.

Each entity has its own package under ``service``:
- product: Product value and the in-memory catalog
- cart: the mutable shopping cart
- order: the immutable order snapshot and its summary labels
"""

from .service.cart import Cart
from .service.order import Order, SummaryLabels, labels_for
from .service.product import Product, ProductCatalog, default_catalog

__all__ = [
    "Cart",
    "Order",
    "Product",
    "ProductCatalog",
    "SummaryLabels",
    "default_catalog",
    "labels_for",
]
