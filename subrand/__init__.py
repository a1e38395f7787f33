"""Deterministic, seedable subtractive random number generator."""

from .config import settings
from .context import default_for_context, reset_default_for_context
from .errors import ErrorCode, InvalidArgumentError, MissingBufferError, RandomError
from .logic.models import StateSnapshot
from .logic.override import SeedOverride
from .logic.rng import RNGBase, SeededRNG
from .logic.ticks import coarse_tick_count
from .state_hash import get_state_hash

__all__ = [
    "ErrorCode",
    "InvalidArgumentError",
    "MissingBufferError",
    "RNGBase",
    "RandomError",
    "SeedOverride",
    "SeededRNG",
    "StateSnapshot",
    "coarse_tick_count",
    "default_for_context",
    "get_state_hash",
    "reset_default_for_context",
    "settings",
]
