from ._base import ValueEntity

__all__ = ["ValueEntity"]
