"""bytelens built-in codec table.

Each codec turns the front of a byte buffer into one rendered unit and
reports how many bytes that unit consumed. Codec kinds form a closed set;
dispatch goes through a single table keyed by kind.
"""
from __future__ import annotations

import struct
import unicodedata
from dataclasses import dataclass, field, replace
from enum import Enum

from blens_core.protocol import (
    CONTROL_GLYPHS,
    FLOAT_FMT,
    LINE_SEPARATORS,
    NON_PRINTABLE,
    REPLACEMENT,
    UTF8_MAX,
    VARIABLE,
)


class CodecKind(Enum):
    INTEGER = "integer"
    FLOAT = "float"
    HEX = "hex"
    ASCII = "ascii"
    UTF8 = "utf8"


@dataclass(frozen=True)
class Codec:
    """One byte-to-text transformation.

    `carry` holds bytes read but not yet decoded. It is the only mutable
    part of a codec and belongs to a single instance for one run.
    """

    name: str
    kind: CodecKind
    unit_size: int
    separator: str
    max_width: int
    desc: str
    fmt: str = ""
    carry: bytearray = field(default_factory=bytearray, repr=False, compare=False)

    @property
    def variable(self) -> bool:
        return self.unit_size == VARIABLE

    def fresh(self) -> Codec:
        """Copy of this descriptor with its own empty carry."""
        return replace(self, carry=bytearray())

    def decode(self, buf: bytes, final: bool = False) -> tuple[str, int]:
        """Render one unit from the front of `buf`.

        Returns (text, consumed). consumed == 0 means more bytes are needed;
        with final=True any non-empty buffer always yields a unit.
        """
        return _DECODERS[self.kind](self, buf, final)


def _short_tail(buf: bytes, final: bool) -> tuple[str, int]:
    # A trailing partial unit can only be resolved once no more bytes will come.
    if not buf or not final:
        return "", 0
    return REPLACEMENT, len(buf)


def _decode_integer(codec: Codec, buf: bytes, final: bool) -> tuple[str, int]:
    n = codec.unit_size
    if len(buf) < n:
        return _short_tail(buf, final)
    (value,) = struct.unpack(codec.fmt, buf[:n])
    return str(value), n


def _decode_float(codec: Codec, buf: bytes, final: bool) -> tuple[str, int]:
    n = codec.unit_size
    if len(buf) < n:
        return _short_tail(buf, final)
    (value,) = struct.unpack(codec.fmt, buf[:n])
    return FLOAT_FMT.format(value), n


def _decode_hex(codec: Codec, buf: bytes, final: bool) -> tuple[str, int]:
    if not buf:
        return "", 0
    return f"{buf[0]:02x}", 1


def ascii_glyph(b: int) -> str:
    if b in CONTROL_GLYPHS:
        return CONTROL_GLYPHS[b]
    if 32 <= b <= 126:
        return chr(b)
    return NON_PRINTABLE


def _decode_ascii(codec: Codec, buf: bytes, final: bool) -> tuple[str, int]:
    if not buf:
        return "", 0
    return ascii_glyph(buf[0]), 1


def utf8_length(lead: int) -> int:
    """Sequence length announced by a lead byte, 0 if it cannot start one."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _continues(seq: bytes) -> bool:
    """True if every byte after the lead is a legal continuation.

    The second-byte bounds exclude overlong forms, surrogates and code
    points above U+10FFFF.
    """
    lead = seq[0]
    for i, b in enumerate(seq[1:], 1):
        lo, hi = 0x80, 0xBF
        if i == 1:
            if lead == 0xE0:
                lo = 0xA0
            elif lead == 0xED:
                hi = 0x9F
            elif lead == 0xF0:
                lo = 0x90
            elif lead == 0xF4:
                hi = 0x8F
        if not lo <= b <= hi:
            return False
    return True


def char_glyph(ch: str) -> str:
    cp = ord(ch)
    if cp in CONTROL_GLYPHS:
        return CONTROL_GLYPHS[cp]
    if cp in LINE_SEPARATORS:
        return CONTROL_GLYPHS[0x0A]
    if unicodedata.category(ch) == "Cc":
        return NON_PRINTABLE
    return ch


def _decode_utf8(codec: Codec, buf: bytes, final: bool) -> tuple[str, int]:
    if not buf:
        return "", 0

    n = utf8_length(buf[0])
    if n:
        head = bytes(buf[:n])
        if _continues(head):
            if len(head) == n:
                return char_glyph(head.decode("utf-8")), n
            if not final:
                return "", 0

    # Unrecoverable prefix: swallow everything up to the next byte that can
    # start a sequence.
    for i in range(1, len(buf)):
        if utf8_length(buf[i]):
            return REPLACEMENT, i

    if final or len(buf) >= UTF8_MAX:
        return REPLACEMENT, min(len(buf), UTF8_MAX)
    return "", 0


_DECODERS = {
    CodecKind.INTEGER: _decode_integer,
    CodecKind.FLOAT: _decode_float,
    CodecKind.HEX: _decode_hex,
    CodecKind.ASCII: _decode_ascii,
    CodecKind.UTF8: _decode_utf8,
}


# 16/32-bit integers are little-endian; 64-bit integers and both float
# widths are big-endian. Existing output depends on this mix.
CODECS: tuple[Codec, ...] = (
    Codec("int8", CodecKind.INTEGER, 1, ",", 4, "Signed 8-bit integer", fmt="b"),
    Codec("uint8", CodecKind.INTEGER, 1, ",", 3, "Unsigned 8-bit integer", fmt="B"),
    Codec("int16", CodecKind.INTEGER, 2, ",", 6, "Signed 16-bit integer", fmt="<h"),
    Codec("uint16", CodecKind.INTEGER, 2, ",", 5, "Unsigned 16-bit integer", fmt="<H"),
    Codec("int32", CodecKind.INTEGER, 4, ",", 11, "Signed 32-bit integer", fmt="<i"),
    Codec("uint32", CodecKind.INTEGER, 4, ",", 10, "Unsigned 32-bit integer", fmt="<I"),
    Codec(
        "float32",
        CodecKind.FLOAT,
        4,
        ",",
        12,
        "IEEE 754 single-precision binary floating-point format: "
        "sign bit, 8 bits exponent, 23 bits mantissa",
        fmt=">f",
    ),
    Codec("int64", CodecKind.INTEGER, 8, ",", 20, "Signed 64-bit integer", fmt=">q"),
    Codec("uint64", CodecKind.INTEGER, 8, ",", 20, "Unsigned 64-bit integer", fmt=">Q"),
    Codec(
        "float64",
        CodecKind.FLOAT,
        8,
        ",",
        12,
        "IEEE 754 double-precision binary floating-point format: "
        "sign bit, 11 bits exponent, 52 bits mantissa",
        fmt=">d",
    ),
    Codec("hex", CodecKind.HEX, 1, ",", 2, "Hexadecimal encoding"),
    Codec(
        "ascii",
        CodecKind.ASCII,
        1,
        "",
        1,
        "ASCII encoded text. Non-printable bytes are shown as a dot; "
        "\\n, \\t, \\r, \\v, \\f, \\b, \\a, \\x1b and NUL are shown as symbols",
    ),
    Codec(
        "utf8",
        CodecKind.UTF8,
        VARIABLE,
        "",
        1,
        "UTF-8 encoded text. Control characters are shown as symbols; "
        "sequences split across lines are carried over to the next line",
    ),
)

CODEC_TABLE: dict[str, Codec] = {c.name: c for c in CODECS}


def lookup(name: str) -> Codec:
    """Fresh instance of a built-in codec."""
    try:
        return CODEC_TABLE[name].fresh()
    except KeyError:
        raise KeyError(f"unknown codec {name!r}") from None
