"""Thread-safe counters for the syslog receiver."""

import threading
import time
from collections import defaultdict

from router_syslog.models import severity_name


class Metrics:
    def __init__(self):
        self._lock = threading.Lock()
        self._total_received = 0
        self._decoded = 0
        self._rejected = 0
        self._severity_counts: dict[str, int] = defaultdict(int)
        self._reject_reasons: dict[str, int] = defaultdict(int)
        self._start_time = time.monotonic()

    def record_decoded(self, severity: int):
        """Count a datagram that produced a record."""
        with self._lock:
            self._total_received += 1
            self._decoded += 1
            self._severity_counts[severity_name(severity)] += 1

    def record_rejected(self, reason: str):
        """Count a datagram that was rejected."""
        with self._lock:
            self._total_received += 1
            self._rejected += 1
            self._reject_reasons[reason] += 1

    def snapshot(self) -> dict:
        """Return a point-in-time snapshot of all metrics."""
        with self._lock:
            elapsed = time.monotonic() - self._start_time
            total = self._total_received
            decoded = self._decoded
            rejected = self._rejected
            severities = dict(self._severity_counts)
            reasons = dict(self._reject_reasons)

        return {
            "total_received": total,
            "decoded": decoded,
            "rejected": rejected,
            "severity_distribution": severities,
            "reject_reasons": reasons,
            "elapsed_seconds": round(elapsed, 2),
            "datagrams_per_second": round(total / elapsed, 2) if elapsed > 0 else 0.0,
        }
