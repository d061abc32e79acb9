"""Tests for the UDP syslog server."""

import logging
import socket
import threading
import time

from router_syslog.config import Config
from router_syslog.models import SyslogRecord
from router_syslog.server import UDPSyslogServer, log_record


def _make_server(consumer=None, diagnostics=None, **overrides):
    """Create a server with port=0 (OS-assigned) and return (server, thread)."""
    defaults = {
        "host": "127.0.0.1",
        "port": 0,
        "buffer_size": 1024,
        "max_rejects": 100,
        "dashboard_enabled": False,
    }
    defaults.update(overrides)
    config = Config(**defaults)
    server = UDPSyslogServer(config, threading.Event(), consumer, diagnostics)

    thread = threading.Thread(target=server.start, daemon=True)
    thread.start()

    for _ in range(50):
        if server.server_address is not None:
            break
        time.sleep(0.05)
    else:
        raise RuntimeError("Server failed to bind")

    return server, thread


def _send_udp(host, port, data: bytes):
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.sendto(data, (host, port))
    finally:
        sock.close()


def _wait_for(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.02)
    return False


class TestServerReceive:
    def test_decodes_router_datagram(self, router_datagram):
        received = []
        server, thread = _make_server(consumer=lambda record, addr: received.append(record))
        try:
            _send_udp(*server.server_address, router_datagram)
            assert _wait_for(lambda: len(received) == 1)
            record = received[0]
            assert record.hostname == "IBR1700-f11"
            assert record.message == "connect"
            assert server.metrics.snapshot()["decoded"] == 1
        finally:
            server.stop()
            thread.join(timeout=5)

    def test_rejects_bad_header_and_keeps_running(self, router_datagram):
        received = []
        server, thread = _make_server(consumer=lambda record, addr: received.append(record))
        try:
            host, port = server.server_address
            _send_udp(host, port, b"not syslog at all")
            _send_udp(host, port, router_datagram)
            assert _wait_for(lambda: len(received) == 1)
            assert _wait_for(lambda: server.reject_tracker.count == 1)

            snap = server.metrics.snapshot()
            assert snap["rejected"] == 1
            assert snap["reject_reasons"] == {"header_malformed": 1}
            reject = server.reject_tracker.get_recent(1)[0]
            assert reject["source"] == "127.0.0.1"
            assert reject["size"] == len(b"not syslog at all")
        finally:
            server.stop()
            thread.join(timeout=5)

    def test_datagram_truncated_to_buffer_size(self):
        received = []
        server, thread = _make_server(consumer=lambda record, addr: received.append(record),
                                      buffer_size=16)
        try:
            _send_udp(*server.server_address, b"<13>" + b"x" * 100)
            assert _wait_for(lambda: len(received) == 1)
            assert received[0].message == "x" * 12
        finally:
            server.stop()
            thread.join(timeout=5)

    def test_shutdown_stops_server(self):
        server, thread = _make_server()
        server.stop()
        thread.join(timeout=5)
        assert not thread.is_alive()


class TestHandleDatagram:
    def _server(self, diagnostics=None, consumer=None, **overrides):
        config = Config(host="127.0.0.1", port=0, **overrides)
        return UDPSyslogServer(config, threading.Event(), consumer, diagnostics)

    def test_encoding_violation_reported_with_offset(self, diagnostics):
        server = self._server(diagnostics=diagnostics)
        server.handle_datagram(b"<13>\xef\xbb\xbfok\xff", ("10.1.1.1", 514))

        event, context = diagnostics.errors[0]
        assert event == "encoding_violation"
        assert context["offset"] == 2
        assert context["source"] == "10.1.1.1"
        assert server.metrics.snapshot()["reject_reasons"] == {"encoding_violation": 1}

    def test_degrade_warnings_reach_sink(self, diagnostics):
        server = self._server(diagnostics=diagnostics, consumer=lambda record, addr: None)
        server.handle_datagram(b"<13>hello", ("10.1.1.1", 514))
        server.handle_datagram(b"<13>qqqq-1 h a m", ("10.1.1.1", 514))
        assert diagnostics.warning_events() == ["timestamp_unparsable"]
        assert server.metrics.snapshot()["decoded"] == 2

    def test_reject_logs_hex_dump(self, caplog):
        server = self._server()
        with caplog.at_level(logging.WARNING, logger="router_syslog.server"):
            server.handle_datagram(b"garbage", ("10.1.1.1", 514))
        assert "0x00000000 67 61 72 62 61 67 65" in caplog.text

    def test_hex_dump_every_datagram_when_enabled(self, caplog):
        server = self._server(hex_dump=True, consumer=lambda record, addr: None)
        with caplog.at_level(logging.DEBUG, logger="router_syslog.server"):
            server.handle_datagram(b"<13>hi", ("10.1.1.1", 514))
        assert "3C 31 33 3E 68 69" in caplog.text

    def test_default_consumer_logs_fields(self, caplog, router_datagram):
        server = self._server()
        with caplog.at_level(logging.INFO, logger="router_syslog.server"):
            server.handle_datagram(router_datagram, ("10.1.1.1", 514))
        assert "hostname='IBR1700-f11'" in caplog.text
        assert "facility=local0" in caplog.text
        assert "2025-10-19T07:00:37-06:00" in caplog.text


class TestLogRecord:
    def test_record_without_timestamp(self, caplog):
        with caplog.at_level(logging.INFO, logger="router_syslog.server"):
            log_record(SyslogRecord(facility=1, severity=5, message="m"), ("10.1.1.1", 514))
        assert "timestamp=None" in caplog.text


class TestDiagnosticsWiring:
    def test_falsy_sink_is_kept(self):
        class CountingSink:
            def __init__(self):
                self.errors = []

            def __bool__(self):
                return False

            def warning(self, event, **context):
                pass

            def error(self, event, **context):
                self.errors.append(event)

        sink = CountingSink()
        server = UDPSyslogServer(Config(host="127.0.0.1", port=0), threading.Event(), diagnostics=sink)
        server.handle_datagram(b"garbage", ("10.1.1.1", 514))
        assert sink.errors == ["header_malformed"]
