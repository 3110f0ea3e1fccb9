"""Entity: Order."""

from collections.abc import Iterable
from datetime import datetime

from pydantic import Field

from src.shopnest.core.clock import Clock, SystemClock
from src.shopnest.entities.core._base import ValueEntity
from src.shopnest.entities.service.order.labels import SummaryLabels, labels_for
from src.shopnest.entities.service.product.entity import Product

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Order(ValueEntity):
    """Snapshot of a cart taken at construction time.

    The product sequence, timestamp and total are fixed once the order
    exists. Products are shared references, not copies.
    """

    products: tuple[Product, ...] = Field(description="Products at checkout")
    created_at: datetime = Field(description="Local time the order was created")
    total: float = Field(description="Sum of product prices at creation")

    @classmethod
    def from_products(
        cls, products: Iterable[Product], clock: Clock | None = None
    ) -> "Order":
        """Create an order from the given products.

        Args:
            products: Products to snapshot, usually ``cart.items()``
            clock: Source of the creation timestamp; local system time if omitted

        Returns:
            A frozen Order whose total is the sum of the snapshot's prices
        """
        snapshot = tuple(products)
        created_at = (clock or SystemClock()).now()
        return cls(
            products=snapshot,
            created_at=created_at,
            total=sum((p.price for p in snapshot), 0.0),
        )

    def formatted_timestamp(self) -> str:
        return self.created_at.strftime(TIMESTAMP_FORMAT)

    def summary(self, labels: SummaryLabels | None = None) -> str:
        """Render the order as a multi-line text block.

        Prices use Python's default float rendering, so ``370.0`` prints as
        ``370.0`` rather than ``370.00``.
        """
        labels = labels or labels_for("en")
        lines = [
            labels.banner,
            f"{labels.timestamp}{self.formatted_timestamp()}",
            labels.products_header,
        ]
        lines.extend(f" - {p.name} ${p.price}" for p in self.products)
        lines.append(f"TOTAL: ${self.total}")
        return "\n".join(lines) + "\n"
