"""Entity package: Cart."""

from .entity import Cart

__all__ = ["Cart"]
