"""Scoped seed override with guaranteed state restoration."""
from subrand.logic.models import StateSnapshot
from subrand.logic.rng import SeededRNG
from subrand.state_hash import get_state_hash
from subrand.telemetry import SeedPushedEvent, SeedRestoredEvent, telemetry_service
from subrand.validators import validate_int32


class SeedOverride:
    """
    Temporarily substitutes a generator's seed.

    On construction the generator's exact state is captured and, if
    new_seed is given, the generator is reseeded. release() writes the
    captured state back, so later draws continue as if the override never
    happened. Use it as a context manager so release runs on every exit
    path:

        with SeedOverride(rng, 1234):
            ...

    An override without a generator does nothing, which lets callers apply
    one conditionally:

        with SeedOverride(rng, seed) if seed is not None else SeedOverride():
            ...
    """

    def __init__(self, rng: SeededRNG | None = None, new_seed: int | None = None):
        self._rng = rng
        self._snapshot: StateSnapshot | None = None
        self._previous_seed: int | None = None
        self._released = False

        if rng is None:
            return
        if new_seed is not None:
            validate_int32("new_seed", new_seed)

        self._snapshot = rng.capture()
        self._previous_seed = rng.seed
        if new_seed is not None:
            rng.set_seed(new_seed)

        telemetry_service.emit_seed_pushed(
            SeedPushedEvent(seed=new_seed, state_hash=get_state_hash(self._snapshot))
        )

    @property
    def active(self) -> bool:
        """True while a bound generator still awaits restoration."""
        return self._rng is not None and not self._released

    def release(self) -> None:
        """Restore the captured state. Later calls are no-ops."""
        if not self.active:
            return
        self._released = True
        self._rng.restore(self._snapshot)
        self._rng.seed = self._previous_seed
        telemetry_service.emit_seed_restored(
            SeedRestoredEvent(state_hash=get_state_hash(self._snapshot))
        )

    def __enter__(self) -> SeededRNG | None:
        return self._rng

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.release()
        return False
