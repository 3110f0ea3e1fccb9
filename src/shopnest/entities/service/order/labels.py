"""Text labels used when rendering carts and order summaries."""

from typing import Literal

from pydantic import BaseModel

Language = Literal["en", "es"]


class SummaryLabels(BaseModel):
    """Fixed wording for one output language."""

    banner: str
    timestamp: str
    products_header: str
    cart_contents: str
    cart_total: str


LABELS: dict[str, SummaryLabels] = {
    "en": SummaryLabels(
        banner="=== ShopNest ORDER SUMMARY ===",
        timestamp="Date/Time: ",
        products_header="Products:",
        cart_contents="Current cart: ",
        cart_total="Cart total: $",
    ),
    "es": SummaryLabels(
        banner="=== RESUMEN PEDIDO ShopNest ===",
        timestamp="Fecha/Hora: ",
        products_header="Productos:",
        cart_contents="Carrito actual: ",
        cart_total="Total carrito: $",
    ),
}


def labels_for(language: Language) -> SummaryLabels:
    """Return the label set for a language.

    Raises:
        ValueError: If no labels exist for the language
    """
    try:
        return LABELS[language]
    except KeyError:
        raise ValueError(f"Unsupported summary language: {language}") from None
