"""Per-thread default generator.

Each thread lazily gets its own SeededRNG, so no instance is ever shared
across threads. Code that needs reproducible output should create and pass
its own seeded generator instead.
"""
import threading

from subrand.config import settings
from subrand.logic.rng import SeededRNG
from subrand.logic.ticks import coarse_tick_count
from subrand.telemetry import DefaultInstanceCreatedEvent, telemetry_service


_local = threading.local()


def default_for_context() -> SeededRNG:
    """
    Return the calling thread's default generator, creating it on first use.

    Seeded from settings.default_seed when configured, otherwise from the
    coarse tick counter. Never reseeded afterwards.
    """
    rng = getattr(_local, "rng", None)
    if rng is None:
        if settings.default_seed is not None:
            seed, source = settings.default_seed, "settings"
        else:
            seed, source = coarse_tick_count(), "tick"
        rng = SeededRNG(seed)
        _local.rng = rng
        telemetry_service.emit_default_instance_created(
            DefaultInstanceCreatedEvent(
                thread_name=threading.current_thread().name,
                seed=seed,
                seed_source=source,
            )
        )
    return rng


def reset_default_for_context() -> None:
    """Drop the calling thread's default generator."""
    _local.__dict__.pop("rng", None)
