"""Pytest fixtures for generator tests."""
import json
from pathlib import Path
from typing import Any, Generator

import pytest

from subrand.context import reset_default_for_context
from subrand.telemetry import telemetry_service


FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "golden: marks tests that compare against reference vectors"
    )


class RecordingTelemetrySink:
    """Telemetry sink that records events in memory."""

    def __init__(self):
        self.events: list[tuple[str, dict[str, Any]]] = []

    def emit(self, event_name: str, data: dict[str, Any]) -> None:
        self.events.append((event_name, data))

    def get_events(self, event_name: str) -> list[dict[str, Any]]:
        """Return payloads of all events with the given name, in order."""
        return [data for name, data in self.events if name == event_name]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def recording_telemetry() -> Generator[RecordingTelemetrySink, None, None]:
    """Route the global telemetry service into a RecordingTelemetrySink."""
    sink = RecordingTelemetrySink()
    original_sink = telemetry_service._sink
    telemetry_service.set_sink(sink)

    yield sink

    telemetry_service.set_sink(original_sink)


@pytest.fixture(autouse=True)
def fresh_default_instance() -> Generator[None, None, None]:
    """Each test starts without a default generator on the main thread."""
    reset_default_for_context()
    yield
    reset_default_for_context()


@pytest.fixture(scope="session")
def golden_vectors() -> dict[str, Any]:
    """Load reference vectors captured from the canonical implementation."""
    with open(FIXTURES_DIR / "golden_vectors.json") as f:
        return json.load(f)
