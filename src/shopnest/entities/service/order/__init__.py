"""Entity package: Order."""

from .entity import Order
from .labels import LABELS, SummaryLabels, labels_for

__all__ = ["LABELS", "Order", "SummaryLabels", "labels_for"]
