"""Clock abstraction used for order timestamps."""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Local wall-clock time, no timezone attached."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """Clock that always reports the same moment."""

    def __init__(self, moment: datetime) -> None:
        self._moment = moment

    def now(self) -> datetime:
        return self._moment
