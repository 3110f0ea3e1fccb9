"""Entity: Product."""

from pydantic import Field

from src.shopnest.entities.core._base import ValueEntity


class Product(ValueEntity):
    """Product offered by the storefront.

    Values are taken as given: empty identifiers, duplicate identifiers and
    zero or negative prices are all accepted.
    """

    id: str = Field(description="Catalog identifier, unique by convention")
    name: str = Field(description="Display name")
    price: float = Field(description="Unit price")

    def __str__(self) -> str:
        return f"{self.name} (${self.price})"
