"""UDP syslog sender for exercising the receiver with router-style datagrams."""

import logging
import random
import socket
import time
from datetime import datetime, timezone

from router_syslog.formatter import format_datagram

logger = logging.getLogger(__name__)

SAMPLE_MESSAGES = [
    ("gps.src.gnssd.firehose:", "connect"),
    ("gps.src.gnssd.firehose:", "disconnect"),
    ("wan.manager:", "Ethernet-WAN link up"),
    ("wan.manager:", "Modem failover triggered"),
    ("dhcpd:", "DHCPACK on 192.168.0.20"),
    ("netcloud:", "Heartbeat sent"),
    ("firewall:", "Dropped packet from 10.0.0.7"),
    ("ntpd:", "Clock synchronized"),
]


class SyslogSender:
    def __init__(self, server_host: str, server_port: int, hostname: str = "IBR1700-f11",
                 bom: bool = False, with_timezone: bool = False):
        self._server = (server_host, server_port)
        self._hostname = hostname
        self._bom = bom
        self._with_timezone = with_timezone
        self._sent = 0
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def send(self, priority: int, message: str, appname: str | None = None,
             timestamp: datetime | None = None):
        """Send a single datagram stamped with *timestamp* (default: now)."""
        timestamp = timestamp or datetime.now(timezone.utc).astimezone()
        data = format_datagram(
            priority, message, timestamp=timestamp, hostname=self._hostname,
            appname=appname, bom=self._bom, with_timezone=self._with_timezone,
        )
        self.send_raw(data)

    def send_raw(self, data: bytes):
        self._sock.sendto(data, self._server)
        self._sent += 1
        logger.debug("Sent %d bytes to %s:%d", len(data), *self._server)

    def generate_sample_logs(self, count: int, interval: float = 0.1):
        """Send N sample datagrams with random severities."""
        for i in range(count):
            appname, message = random.choice(SAMPLE_MESSAGES)
            priority = 16 * 8 + random.randint(0, 7)
            self.send(priority, message, appname)
            if interval > 0 and i < count - 1:
                time.sleep(interval)
        logger.info("Sent %d sample datagrams", count)

    @property
    def sent_count(self) -> int:
        return self._sent

    def close(self):
        self._sock.close()
