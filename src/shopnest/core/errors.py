class ShopNestError(Exception):
    """Base class for storefront errors."""


class NetworkFailure(ShopNestError):
    """Raised when the outbound HTTP call cannot complete at transport level."""
