"""Compact router timestamps, e.g. 20251019T070037-0600 or 20251019T070037."""

import re
from datetime import datetime, timezone

TIMESTAMP_WITH_TZ = "%Y%m%dT%H%M%S%z"
TIMESTAMP_WITHOUT_TZ = "%Y%m%dT%H%M%S"

# strptime accepts single-digit and non-ASCII digit fields, so check the shape first.
_WITH_TZ_RE = re.compile(r"\d{8}T\d{6}[+-]\d{4}", re.ASCII)
_WITHOUT_TZ_RE = re.compile(r"\d{8}T\d{6}", re.ASCII)


def parse_timestamp(token: str) -> datetime | None:
    """Parse a timestamp token, returning an aware datetime or None.

    A '-' anywhere in the token selects the offset-bearing format. Tokens
    without one are read as naive wall time and pinned to UTC.
    """
    try:
        if "-" in token:
            if not _WITH_TZ_RE.fullmatch(token):
                return None
            return datetime.strptime(token, TIMESTAMP_WITH_TZ)
        if not _WITHOUT_TZ_RE.fullmatch(token):
            return None
        return datetime.strptime(token, TIMESTAMP_WITHOUT_TZ).replace(tzinfo=timezone.utc)
    except ValueError:
        return None
