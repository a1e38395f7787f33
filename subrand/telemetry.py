"""Telemetry for seed overrides and default-instance creation."""
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from subrand.config import settings


logger = logging.getLogger(__name__)


class TelemetrySink(Protocol):
    """Protocol for telemetry sinks."""

    def emit(self, event_name: str, data: dict[str, Any]) -> None:
        """Emit a telemetry event."""
        ...


class LoggingTelemetrySink:
    """Default sink that logs telemetry events."""

    def emit(self, event_name: str, data: dict[str, Any]) -> None:
        """Log telemetry event."""
        logger.info("TELEMETRY %s: %s", event_name, data)


@dataclass
class SeedPushedEvent:
    """seed_pushed telemetry event."""

    seed: int | None  # None when the override only guards the state
    state_hash: str  # state captured for restoration

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for emission."""
        return {
            "seed": self.seed,
            "state_hash": self.state_hash,
        }


@dataclass
class SeedRestoredEvent:
    """seed_restored telemetry event."""

    state_hash: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for emission."""
        return {"state_hash": self.state_hash}


@dataclass
class DefaultInstanceCreatedEvent:
    """default_instance_created telemetry event."""

    thread_name: str
    seed: int
    seed_source: str  # "settings" | "tick"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for emission."""
        return {
            "thread_name": self.thread_name,
            "seed": self.seed,
            "seed_source": self.seed_source,
        }


class TelemetryService:
    """Service for emitting generator telemetry events."""

    def __init__(self, sink: TelemetrySink | None = None):
        self._sink = sink or LoggingTelemetrySink()
        self._sink_errors = 0  # Counter for sink failures

    def set_sink(self, sink: TelemetrySink) -> None:
        """Set the telemetry sink (useful for testing)."""
        self._sink = sink

    def _safe_emit(self, event_name: str, data: dict[str, Any]) -> None:
        """
        Emit event with exception safety.

        Sink failures MUST NOT break the caller or skip a state restore.
        """
        if not settings.telemetry_enabled:
            return
        try:
            self._sink.emit(event_name, data)
        except Exception as e:
            self._sink_errors += 1
            logger.warning(
                "Telemetry sink error (count=%d): %s - %s",
                self._sink_errors,
                event_name,
                str(e),
            )

    def emit_seed_pushed(self, event: SeedPushedEvent) -> None:
        """Emit seed_pushed event."""
        self._safe_emit("seed_pushed", event.to_dict())

    def emit_seed_restored(self, event: SeedRestoredEvent) -> None:
        """Emit seed_restored event."""
        self._safe_emit("seed_restored", event.to_dict())

    def emit_default_instance_created(self, event: DefaultInstanceCreatedEvent) -> None:
        """Emit default_instance_created event."""
        self._safe_emit("default_instance_created", event.to_dict())


# Global instance
telemetry_service = TelemetryService()
