"""In-memory product catalog."""

from collections.abc import Iterable, Iterator

from loguru import logger

from src.shopnest.entities.service.product.entity import Product


class ProductCatalog:
    """Ordered list of every product known to the storefront."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: list[Product] = list(products)

    def add(self, product: Product) -> Product:
        self._products.append(product)
        return product

    def list_all(self) -> list[Product]:
        return list(self._products)

    def first(self) -> Product:
        """Return the product at index 0.

        Raises:
            IndexError: If the catalog is empty.
        """
        return self._products[0]

    def find_by_id(self, product_id: str) -> Product | None:
        """Linear scan for the first product whose id matches exactly.

        Args:
            product_id: Identifier to look for

        Returns:
            The first matching product, or None when nothing matches
        """
        for product in self._products:
            if product.id == product_id:
                return product
        logger.debug(f"No product with id {product_id!r} in catalog")
        return None

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)


def default_catalog() -> ProductCatalog:
    """Build the fixed three-item demo catalog."""
    return ProductCatalog(
        [
            Product(id="P001", name="Pulsera artesanal", price=120.0),
            Product(id="P002", name="Playera local", price=250.0),
            Product(id="P003", name="Taza ShopNest", price=99.0),
        ]
    )
