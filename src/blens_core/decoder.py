"""Drive one codec across one window of bytes."""
from __future__ import annotations

from warnings import warn

from blens_core.codecs import Codec


def _drain(codec: Codec, buf: bytes, final: bool) -> tuple[list[str], int]:
    units: list[str] = []
    pos = 0
    while pos < len(buf):
        text, used = codec.decode(buf[pos:], final)
        if used == 0:
            break
        units.append(text)
        pos += used
    return units, pos


def decode_window(codec: Codec, window: bytes, final: bool = False) -> list[str]:
    """Decode carry + window into rendered units.

    Bytes the codec cannot place yet become the new carry. With final=True
    nothing more will arrive, so the carry is force-resolved and left empty.
    """
    buf = bytes(codec.carry) + bytes(window)
    units, pos = _drain(codec, buf, final=False)
    rest = buf[pos:]

    if final and rest:
        warn(f"Truncated {codec.name} unit at end of input: {rest.hex()}")
        tail, used = _drain(codec, rest, final=True)
        units.extend(tail)
        rest = rest[used:]

    codec.carry[:] = rest
    return units


def fit_column(codec: Codec, units: list[str], width: int) -> str:
    """Join units and pad or cut to exactly `width` characters."""
    return codec.separator.join(units).ljust(width)[:width]


def render_column(codec: Codec, window: bytes, width: int, final: bool = False) -> str:
    return fit_column(codec, decode_window(codec, window, final), width)


def flush(codec: Codec) -> list[str]:
    """Resolve whatever is still carried once the stream has ended."""
    return decode_window(codec, b"", final=True)
