from datetime import datetime

from src.shopnest.core.clock import FixedClock, SystemClock


def test_fixed_clock_always_returns_same_moment():
    moment = datetime(2024, 1, 1, 12, 0, 0)
    clock = FixedClock(moment)

    assert clock.now() == moment
    assert clock.now() is clock.now()


def test_system_clock_returns_local_naive_time():
    before = datetime.now()
    now = SystemClock().now()

    assert now.tzinfo is None
    assert before <= now <= datetime.now()
