"""Entity package: Product."""

from .catalog import ProductCatalog, default_catalog
from .entity import Product

__all__ = ["Product", "ProductCatalog", "default_catalog"]
