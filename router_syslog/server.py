"""UDP syslog server: receives router datagrams and hands decoded records to a consumer."""

import logging
import socket
import threading
from typing import Callable

from router_syslog.config import Config
from router_syslog.decoder import decode_or_raise
from router_syslog.diagnostics import DiagnosticsSink, LoggingDiagnostics
from router_syslog.errors import EncodingViolation, SyslogDecodeError
from router_syslog.hexdump import hex_dump
from router_syslog.metrics import Metrics
from router_syslog.models import SyslogRecord, facility_name, severity_name
from router_syslog.reject_tracker import RejectTracker

logger = logging.getLogger(__name__)

Consumer = Callable[[SyslogRecord, tuple], None]


def log_record(record: SyslogRecord, addr: tuple):
    """Default consumer: log the parsed fields."""
    logger.info(
        "From %s: facility=%s severity=%s timestamp=%s hostname=%r appname=%r message=%r",
        addr[0], facility_name(record.facility), severity_name(record.severity),
        record.timestamp.isoformat() if record.timestamp else None,
        record.hostname, record.appname, record.message,
    )


class UDPSyslogServer:
    def __init__(self, config: Config, shutdown_event: threading.Event,
                 consumer: Consumer | None = None,
                 diagnostics: DiagnosticsSink | None = None):
        self._config = config
        self._shutdown = shutdown_event
        self._consumer = consumer or log_record
        self._diagnostics = diagnostics if diagnostics is not None else LoggingDiagnostics()
        self._sock = None
        self.server_address = None
        self.metrics = Metrics()
        self.reject_tracker = RejectTracker(config.max_rejects)

    def start(self):
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._sock.settimeout(1.0)
        self._sock.bind((self._config.host, self._config.port))

        self.server_address = self._sock.getsockname()
        logger.info(
            "Syslog server listening on %s:%d (buffer_size=%d bytes)",
            self.server_address[0], self.server_address[1], self._config.buffer_size,
        )

        while not self._shutdown.is_set():
            try:
                data, addr = self._sock.recvfrom(self._config.buffer_size)
            except socket.timeout:
                continue
            except OSError:
                if self._shutdown.is_set():
                    break
                raise

            self.handle_datagram(data, addr)

    def handle_datagram(self, data: bytes, addr: tuple):
        """Decode one datagram. Rejects are counted and logged, never raised."""
        if self._config.hex_dump and logger.isEnabledFor(logging.DEBUG):
            for line in hex_dump(data):
                logger.debug("%s", line)

        try:
            record = decode_or_raise(data, self._diagnostics)
        except SyslogDecodeError as exc:
            self._reject(data, addr, exc)
            return

        self.metrics.record_decoded(record.severity)
        self._consumer(record, addr)

    def _reject(self, data: bytes, addr: tuple, exc: SyslogDecodeError):
        context = {"source": addr[0], "detail": exc.detail}
        if isinstance(exc, EncodingViolation):
            context["offset"] = exc.offset
        self._diagnostics.error(exc.reason, **context)

        self.metrics.record_rejected(exc.reason)
        self.reject_tracker.add(addr[0], exc.reason, data)
        logger.warning("Rejected %d-byte datagram from %s: %s", len(data), addr[0], exc.detail)
        for line in hex_dump(data):
            logger.warning("%s", line)

    def stop(self):
        self._shutdown.set()
        if self._sock:
            self._sock.close()
            self._sock = None
        logger.info("Syslog server stopped. Stats: %s", self.metrics.snapshot())
