"""Byte-to-text normalization for syslog payloads."""

from router_syslog.errors import EncodingViolation

UTF8_BOM = b"\xef\xbb\xbf"


def normalize(data: bytes) -> str:
    """Turn a raw payload into text.

    A leading UTF-8 BOM is a promise of well-formed UTF-8, so the rest is
    decoded strictly and a violation raises EncodingViolation. Anything else
    gets a lossy decode with U+FFFD replacements and never fails.
    """
    if data[:3] == UTF8_BOM:
        try:
            return data[3:].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingViolation(exc.start, f"invalid UTF-8 after BOM at byte offset {exc.start}") from exc
    return data.decode("utf-8", errors="replace")
