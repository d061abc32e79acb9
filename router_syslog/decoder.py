"""Tolerant decoder for router syslog datagrams.

The priority header is mandatory. After it, the payload is split on single
spaces into timestamp, hostname, appname and message, in that order. Each
field is optional: as soon as a delimiter is missing, whatever text is left
becomes the message.
"""

import enum

from router_syslog.diagnostics import DiagnosticsSink, LoggingDiagnostics
from router_syslog.errors import EncodingViolation, HeaderMalformed, SyslogDecodeError
from router_syslog.models import SyslogRecord
from router_syslog.normalizer import normalize
from router_syslog.timestamps import parse_timestamp

# '>' must sit at index 1..6, so the priority is at most five characters.
MAX_HEADER_END = 6


class Stage(enum.Enum):
    TIMESTAMP = "timestamp"
    HOSTNAME = "hostname"
    APPNAME = "appname"
    MESSAGE = "message"
    DONE = "done"


def parse_priority(data: bytes) -> tuple[int, int]:
    """Parse the <PRI> header. Return (priority, index of the closing '>')."""
    if data[:1] != b"<":
        raise HeaderMalformed("datagram does not start with '<'")

    end = data.find(b">", 1, MAX_HEADER_END + 1)
    if end == -1:
        raise HeaderMalformed(f"no '>' within {MAX_HEADER_END} bytes of '<'")

    token = data[1:end]
    if not token or not token.isdigit():
        raise HeaderMalformed(f"priority {token!r} is not a non-negative integer")
    return int(token), end


def _tokenize(text: str, diagnostics: DiagnosticsSink) -> dict:
    """Walk the stages over a cursor into text and collect the fields found."""
    fields = {"timestamp": None, "hostname": None, "appname": None}
    stage = Stage.TIMESTAMP
    cursor = 0
    # Where the message starts if the current stage finds no delimiter.
    fallback = 0

    while stage is not Stage.DONE:
        if stage is Stage.MESSAGE:
            fields["message"] = text[cursor:]
            stage = Stage.DONE
            continue

        space = text.find(" ", cursor)
        if space == -1:
            if stage is not Stage.TIMESTAMP:
                diagnostics.warning("token_boundary_missing", stage=stage.value)
            fields["message"] = text[fallback:]
            stage = Stage.DONE
            continue

        token = text[cursor:space]
        if stage is Stage.TIMESTAMP:
            fields["timestamp"] = parse_timestamp(token)
            if fields["timestamp"] is None:
                diagnostics.warning("timestamp_unparsable", token=token)
            # A missing hostname keeps the first delimiter in the message.
            fallback = space
            stage = Stage.HOSTNAME
        elif stage is Stage.HOSTNAME:
            fields["hostname"] = token
            fallback = space + 1
            stage = Stage.APPNAME
        else:
            fields["appname"] = token
            stage = Stage.MESSAGE
        cursor = space + 1

    return fields


def decode_or_raise(data: bytes, diagnostics: DiagnosticsSink | None = None) -> SyslogRecord:
    """Decode one datagram, raising SyslogDecodeError when it must be rejected."""
    if diagnostics is None:
        diagnostics = LoggingDiagnostics()

    priority, end = parse_priority(data)
    text = normalize(data[end + 1:])

    fields = _tokenize(text, diagnostics)
    return SyslogRecord(facility=priority // 8, severity=priority % 8, **fields)


def decode(data: bytes, diagnostics: DiagnosticsSink | None = None) -> SyslogRecord | None:
    """Decode one datagram. Return None if the header or a BOM payload is malformed."""
    if diagnostics is None:
        diagnostics = LoggingDiagnostics()
    try:
        return decode_or_raise(data, diagnostics)
    except EncodingViolation as exc:
        diagnostics.error(exc.reason, offset=exc.offset, detail=exc.detail)
    except SyslogDecodeError as exc:
        diagnostics.error(exc.reason, detail=exc.detail)
    return None
