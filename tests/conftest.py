"""Shared pytest fixtures for the router syslog test suite."""

import pytest


class RecordingDiagnostics:
    """Diagnostics sink that keeps every event for inspection."""

    def __init__(self):
        self.warnings: list[tuple[str, dict]] = []
        self.errors: list[tuple[str, dict]] = []

    def warning(self, event, **context):
        self.warnings.append((event, context))

    def error(self, event, **context):
        self.errors.append((event, context))

    def warning_events(self) -> list[str]:
        return [event for event, _ in self.warnings]

    def error_events(self) -> list[str]:
        return [event for event, _ in self.errors]


@pytest.fixture()
def diagnostics() -> RecordingDiagnostics:
    return RecordingDiagnostics()


@pytest.fixture()
def router_datagram() -> bytes:
    """A full four-field datagram as sent by the router."""
    return b"<134>20251019T070037-0600 IBR1700-f11 gps.src.gnssd.firehose: connect"
