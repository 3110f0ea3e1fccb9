"""Entity: Cart."""

from src.shopnest.entities.service.product.entity import Product


class Cart:
    """Mutable, ordered collection of products selected for purchase.

    The cart holds references into the catalog. Duplicates are allowed and
    insertion order is preserved.
    """

    def __init__(self) -> None:
        self._items: list[Product] = []

    def add(self, product: Product) -> None:
        self._items.append(product)

    def total(self) -> float:
        """Sum of the contained prices, recomputed on every call."""
        return sum((p.price for p in self._items), 0.0)

    def items(self) -> list[Product]:
        """Return the internal item list (not a copy)."""
        return self._items

    def describe(self) -> str:
        return "[" + ", ".join(str(p) for p in self._items) + "]"

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Cart({self.describe()})"
