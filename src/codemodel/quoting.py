"""Quoted literal encoding for generated Java source."""

from __future__ import annotations

import struct

# Escape set and mnemonics are paired by index.
CHAR_ESCAPE = "\b\t\n\f\r\"'\\"
CHAR_MACRO = "btnfr\"'\\"


def _code_units(text: str) -> tuple[int, ...]:
    """Split text into UTF-16 code units. Lone surrogates pass through."""
    raw = text.encode("utf-16-le", "surrogatepass")
    return struct.unpack("<" + str(len(raw) // 2) + "H", raw)


def quotify(quote: str, text: str) -> str:
    """Escape text and surround it with quote.

    Anything outside printable ASCII becomes a \\uXXXX escape regardless of
    the encoding the generated file is eventually written in.
    """
    result: list[str] = [quote]
    for c in _code_units(text):
        j = CHAR_ESCAPE.find(chr(c))
        if j >= 0:
            result.append("\\")
            result.append(CHAR_MACRO[j])
        elif c < 0x20 or c > 0x7E:
            result.append(f"\\u{c & 0xFFFF:04x}")
        else:
            result.append(chr(c))
    result.append(quote)
    return "".join(result)
