"""Hex dump of raw datagrams for diagnosing new firmware quirks."""


def _printable(b: int) -> str:
    return chr(b) if 0x20 <= b <= 0x7E else "."


def hex_dump(data: bytes, width: int = 16) -> list[str]:
    """Return dump lines of the form '0x00000000 3C 31 33 ...  <13...'."""
    lines = []
    for offset in range(0, len(data), width):
        chunk = data[offset:offset + width]
        hex_part = " ".join(f"{b:02X}" for b in chunk)
        ascii_part = "".join(_printable(b) for b in chunk)
        lines.append(f"{offset:#010x} {hex_part:<{width * 3}} {ascii_part}")
    return lines
