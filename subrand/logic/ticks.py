"""Coarse millisecond tick counter used for default seeding."""
import time

from subrand.config import settings


def coarse_tick_count() -> int:
    """
    Return a 32-bit signed millisecond tick count.

    The clock is chosen by settings.tick_source. Values wrap like a 32-bit
    counter, so the result may be negative.
    """
    if settings.tick_source == "wall":
        ns = time.time_ns()
    else:
        ns = time.monotonic_ns()
    ms = ns // 1_000_000
    return ((ms + 0x80000000) & 0xFFFFFFFF) - 0x80000000
