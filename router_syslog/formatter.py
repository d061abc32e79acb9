"""Builds router-style syslog datagrams: <PRI>[TIMESTAMP ][HOSTNAME ][APPNAME ]MESSAGE."""

from datetime import datetime, timezone

from router_syslog.normalizer import UTF8_BOM
from router_syslog.timestamps import TIMESTAMP_WITH_TZ, TIMESTAMP_WITHOUT_TZ


def format_timestamp(ts: datetime, with_timezone: bool = True) -> str:
    """Render *ts* compactly. Naive datetimes are taken as UTC."""
    if not with_timezone:
        if ts.tzinfo is not None:
            ts = ts.astimezone(timezone.utc)
        return ts.strftime(TIMESTAMP_WITHOUT_TZ)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.strftime(TIMESTAMP_WITH_TZ)


def format_datagram(priority: int, message: str, timestamp: datetime | None = None,
                    hostname: str | None = None, appname: str | None = None,
                    bom: bool = False, with_timezone: bool = True) -> bytes:
    """Encode one datagram. Fields left as None are omitted along with their delimiter."""
    parts = [format_timestamp(timestamp, with_timezone)] if timestamp is not None else []
    parts += [p for p in (hostname, appname) if p is not None]
    parts.append(message)
    body = " ".join(parts).encode("utf-8")
    return f"<{priority}>".encode("ascii") + (UTF8_BOM if bom else b"") + body
