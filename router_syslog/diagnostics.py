"""Diagnostics sinks for degrade and reject decisions made while decoding."""

import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class DiagnosticsSink(Protocol):
    def warning(self, event: str, **context: Any) -> None:
        """A field was dropped but a record is still produced."""

    def error(self, event: str, **context: Any) -> None:
        """The datagram was rejected."""


class LoggingDiagnostics:
    """Default sink: forwards events to the standard logging module."""

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger

    def warning(self, event: str, **context: Any) -> None:
        self._log.debug("%s %s", event, _format_context(context))

    def error(self, event: str, **context: Any) -> None:
        self._log.warning("%s %s", event, _format_context(context))


def _format_context(context: dict[str, Any]) -> str:
    return " ".join(f"{k}={v!r}" for k, v in sorted(context.items()))
