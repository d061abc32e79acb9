"""Structured syslog record produced by the decoder."""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any

FACILITIES = {
    0: "kern", 1: "user", 2: "mail", 3: "daemon",
    4: "auth", 5: "syslog", 6: "lpr", 7: "news",
    8: "uucp", 9: "cron", 10: "authpriv", 11: "ftp",
    12: "ntp", 13: "security", 14: "console", 15: "solaris-cron",
    16: "local0", 17: "local1", 18: "local2", 19: "local3",
    20: "local4", 21: "local5", 22: "local6", 23: "local7",
}

SEVERITIES = {
    0: "emergency", 1: "alert", 2: "critical", 3: "error",
    4: "warning", 5: "notice", 6: "info", 7: "debug",
}


@dataclass(frozen=True)
class SyslogRecord:
    facility: int
    severity: int
    message: str
    timestamp: datetime | None = None
    hostname: str | None = None
    appname: str | None = None

    @property
    def priority(self) -> int:
        return self.facility * 8 + self.severity


def facility_name(code: int) -> str:
    return FACILITIES.get(code, f"unknown({code})")


def severity_name(code: int) -> str:
    return SEVERITIES.get(code, f"unknown({code})")


def record_to_dict(record: SyslogRecord) -> dict[str, Any]:
    """Convert a SyslogRecord to a dict, dropping None values for cleaner JSON."""
    data = {k: v for k, v in asdict(record).items() if v is not None}
    if record.timestamp is not None:
        data["timestamp"] = record.timestamp.isoformat()
    data["facility_name"] = facility_name(record.facility)
    data["severity_name"] = severity_name(record.severity)
    return data
