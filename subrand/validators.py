"""Argument validators for the public sampling surface."""
from typing import Any

from subrand.errors import InvalidArgumentError, MissingBufferError


INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def validate_int32(name: str, value: Any) -> int:
    """
    Validate that value is a signed 32-bit integer.

    Raises INVALID_ARGUMENT for non-ints (bool included) and ints outside
    [INT32_MIN, INT32_MAX].
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            name,
            f"Argument '{name}' must be an int, got {type(value).__name__}.",
        )
    if value < INT32_MIN or value > INT32_MAX:
        raise InvalidArgumentError(
            name,
            f"Argument '{name}' must fit in 32 bits, got {value}.",
        )
    return value


def validate_max_value(max_value: Any) -> int:
    """Validate an exclusive upper bound. Raises INVALID_ARGUMENT if negative."""
    validate_int32("max_value", max_value)
    if max_value < 0:
        raise InvalidArgumentError(
            "max_value",
            f"max_value must be non-negative, got {max_value}.",
        )
    return max_value


def validate_range(min_value: Any, max_value: Any) -> tuple[int, int]:
    """Validate a [min_value, max_value) pair. Raises INVALID_ARGUMENT if min > max."""
    validate_int32("min_value", min_value)
    validate_int32("max_value", max_value)
    if min_value > max_value:
        raise InvalidArgumentError(
            "min_value",
            f"min_value ({min_value}) must not exceed max_value ({max_value}).",
        )
    return min_value, max_value


def validate_buffer(buffer: Any) -> memoryview:
    """
    Validate a byte buffer for in-place filling.

    Raises MISSING_BUFFER if buffer is None, INVALID_ARGUMENT if it is not a
    writable, contiguous buffer. Returns an unsigned byte view over it.
    """
    if buffer is None:
        raise MissingBufferError("buffer")
    try:
        view = memoryview(buffer)
    except TypeError:
        raise InvalidArgumentError(
            "buffer",
            f"Argument 'buffer' must support the buffer protocol, "
            f"got {type(buffer).__name__}.",
        ) from None
    if view.readonly:
        raise InvalidArgumentError("buffer", "Argument 'buffer' is read-only.")
    if not view.c_contiguous:
        raise InvalidArgumentError("buffer", "Argument 'buffer' must be contiguous.")
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view
