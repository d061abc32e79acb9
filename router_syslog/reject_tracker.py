"""In-memory ring buffer of recently rejected datagrams."""

import threading
from collections import deque


class RejectTracker:
    def __init__(self, max_size: int = 100):
        self._rejects: deque[dict] = deque(maxlen=max_size)
        self._lock = threading.Lock()

    def add(self, source: str, reason: str, data: bytes):
        """Store a reject, evicting the oldest if at capacity."""
        entry = {
            "source": source,
            "reason": reason,
            "size": len(data),
            "hex": data.hex(" "),
        }
        with self._lock:
            self._rejects.append(entry)

    def get_recent(self, n: int = 10) -> list[dict]:
        """Return the N most recent rejects, oldest first."""
        if n <= 0:
            return []
        with self._lock:
            return list(self._rejects)[-n:]

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._rejects)
