"""Decode errors that cause a datagram to be rejected outright."""


class SyslogDecodeError(Exception):
    """Base class for whole-datagram rejections."""

    reason = "decode_error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class HeaderMalformed(SyslogDecodeError):
    """Missing '<', no '>' within bound, or a non-numeric priority."""

    reason = "header_malformed"


class EncodingViolation(SyslogDecodeError):
    """A UTF-8 BOM was present but the payload is not valid UTF-8."""

    reason = "encoding_violation"

    def __init__(self, offset: int, detail: str | None = None):
        super().__init__(detail or f"invalid UTF-8 at byte offset {offset}")
        self.offset = offset
