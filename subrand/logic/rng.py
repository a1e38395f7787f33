"""Seedable subtractive random number generator.

Deterministic across processes and platforms for a given seed. Not
cryptographically secure.
"""
import struct
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from subrand.logic.models import STATE_SIZE, StateSnapshot
from subrand.logic.ticks import coarse_tick_count
from subrand.validators import (
    INT32_MAX,
    INT32_MIN,
    validate_buffer,
    validate_int32,
    validate_max_value,
    validate_range,
)

if TYPE_CHECKING:
    from subrand.logic.override import SeedOverride


# === ALGORITHM CONSTANTS (changing any breaks bit-compatibility) ===
MBIG = 0x7FFFFFFF
MSEED = 0x9A4EC86
SHORT_LAG = 21
LONG_LAG_OFFSET = 30
SEED_PASSES = 4

# 1 / MBIG as used by the reference output; must stay a literal
SAMPLE_SCALE = 4.6566128752457969e-10

# Wide-range sampling for spans above MBIG
LARGE_RANGE_OFFSET = 2147483646.0
LARGE_RANGE_DIVISOR = 4294967293.0

_FLOAT32 = struct.Struct("<f")


def _wrap32(value: int) -> int:
    """Reduce to a signed 32-bit integer with two's-complement wraparound."""
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


class RNGBase(ABC):
    """Abstract RNG interface for game and simulation code."""

    @abstractmethod
    def random(self) -> float:
        """Return random float in [0, 1)."""
        pass

    @abstractmethod
    def randint(self, a: int, b: int) -> int:
        """Return random int in [a, b] inclusive."""
        pass


class SeededRNG(RNGBase):
    """
    Subtractive (lagged-Fibonacci) generator.

    Deterministic, fully controlled by seed. A 56-entry state array and two
    rolling indices; each draw subtracts two lagged entries and writes the
    result back. Not safe for concurrent use from several threads.
    """

    def __init__(self, seed: int | None = None):
        self._seed_array = [0] * STATE_SIZE
        self._inext = 0
        self._inextp = 0
        self.seed = 0
        self.set_seed(coarse_tick_count() if seed is None else seed)

    def set_seed(self, seed: int) -> None:
        """
        Rewrite the whole internal state from a 32-bit seed.

        Only call this on a generator you own. Prefer push_seed when the
        previous sequence has to continue afterwards.
        """
        validate_int32("seed", seed)
        seed_array = self._seed_array

        # abs(INT32_MIN) does not fit in 32 bits
        mj = INT32_MAX if seed == INT32_MIN else abs(seed)
        mj = _wrap32(MSEED - mj)
        seed_array[0] = 0
        seed_array[55] = mj
        mk = 1
        for i in range(1, 55):
            ii = (SHORT_LAG * i) % 55
            seed_array[ii] = mk
            mk = _wrap32(mj - mk)
            if mk < 0:
                mk += MBIG
            mj = seed_array[ii]

        for _ in range(SEED_PASSES):
            for k in range(1, STATE_SIZE):
                value = _wrap32(seed_array[k] - seed_array[1 + (k + LONG_LAG_OFFSET) % 55])
                if value < 0:
                    value += MBIG
                seed_array[k] = value

        self._inext = 0
        self._inextp = SHORT_LAG
        self.seed = seed

    def _internal_sample(self) -> int:
        """Advance one step and return the raw sample in [0, MBIG)."""
        inext = self._inext + 1
        if inext >= STATE_SIZE:
            inext = 1
        inextp = self._inextp + 1
        if inextp >= STATE_SIZE:
            inextp = 1

        num = _wrap32(self._seed_array[inext] - self._seed_array[inextp])
        if num == MBIG:
            num -= 1
        if num < 0:
            num += MBIG

        self._seed_array[inext] = num
        self._inext = inext
        self._inextp = inextp
        return num

    def _sample_large_range(self) -> float:
        num = self._internal_sample()
        if self._internal_sample() % 2 == 0:
            num = -num
        return (num + LARGE_RANGE_OFFSET) / LARGE_RANGE_DIVISOR

    def _scale(self, min_value: int, span: int) -> int:
        if span <= MBIG:
            return int(self.sample() * span) + min_value
        return int(self._sample_large_range() * span) + min_value

    # === SAMPLING ===

    def sample(self) -> float:
        """Return a float in [0, 1) from one raw sample."""
        return self._internal_sample() * SAMPLE_SCALE

    def next_raw(self) -> int:
        """Return a raw sample in [0, 2**31 - 1)."""
        return self._internal_sample()

    def next_int(self, max_value: int) -> int:
        """
        Return an int in [0, max_value).

        next_int(0) returns 0. Raises INVALID_ARGUMENT if max_value < 0.
        """
        validate_max_value(max_value)
        return int(self.sample() * max_value)

    def next_in_range(self, min_value: int, max_value: int) -> int:
        """
        Return an int in [min_value, max_value).

        next_in_range(k, k) returns k. Spans wider than 2**31 - 1 use two raw
        samples per draw. Raises INVALID_ARGUMENT if min_value > max_value.
        """
        validate_range(min_value, max_value)
        return self._scale(min_value, max_value - min_value)

    def next_bytes(self, buffer) -> None:
        """
        Fill a writable buffer in place, one raw sample per byte.

        Raises MISSING_BUFFER if buffer is None.
        """
        view = validate_buffer(buffer)
        for i in range(len(view)):
            view[i] = self._internal_sample() % 0x100

    def next_int64(self) -> int:
        """Return a signed 64-bit int built from eight next_bytes draws."""
        buffer = bytearray(8)
        self.next_bytes(buffer)
        return int.from_bytes(buffer, "little", signed=True)

    def next_float32(self) -> float:
        """Return sample() rounded to single precision."""
        return _FLOAT32.unpack(_FLOAT32.pack(self.sample()))[0]

    def next_float64(self) -> float:
        """Return sample()."""
        return self.sample()

    def new_seed_from_entropy(self) -> int:
        """Mint a fresh seed from the tick counter and one raw draw."""
        return coarse_tick_count() ^ self._internal_sample()

    # === RNGBase ===

    def random(self) -> float:
        return self.next_float64()

    def randint(self, a: int, b: int) -> int:
        validate_range(a, b)
        return self._scale(a, b - a + 1)

    # === STATE ===

    def capture(self) -> StateSnapshot:
        """Return a snapshot of the exact current state."""
        return StateSnapshot(
            inext=self._inext,
            inextp=self._inextp,
            seed_array=tuple(self._seed_array),
        )

    def restore(self, snapshot: StateSnapshot) -> None:
        """Replace indices and all array entries with the snapshot's."""
        self._inext = snapshot.inext
        self._inextp = snapshot.inextp
        self._seed_array[:] = snapshot.seed_array

    def push_seed(self, new_seed: int | None = None) -> "SeedOverride":
        """
        Temporarily reseed; the returned handle restores the current state.

        Use as a context manager:

            with rng.push_seed(entity_seed):
                spawn_entity(rng)
        """
        from subrand.logic.override import SeedOverride

        return SeedOverride(self, new_seed)
