from __future__ import annotations

from typing import BinaryIO, Iterator

from blens_core.codecs import Codec
from blens_core.decoder import decode_window, fit_column, flush, render_column
from blens_core.widths import column_width
from blens_view.config import RunConfig
from blens_view.streams import WindowReader


class RowRenderer:
    """Lines up every active codec's column for one window at a time."""

    def __init__(self, codecs: list[Codec], width: int):
        self.codecs = codecs
        self.width = width
        self.widths = [column_width(c, width) for c in codecs]

    def header(self) -> str:
        return " ".join(c.name.ljust(w) for c, w in zip(self.codecs, self.widths))

    def rule(self) -> str:
        return "-" * len(self.header())

    def decode(self, data: bytes, final: bool = False) -> list[list[str]]:
        return [decode_window(c, data, final) for c in self.codecs]

    def pending(self) -> bool:
        return any(c.carry for c in self.codecs)

    def flush_into(self, units: list[list[str]]) -> None:
        """Append the force-resolved carry of every codec to its units."""
        for codec, column in zip(self.codecs, units):
            column.extend(flush(codec))

    def line(self, units: list[list[str]]) -> str:
        return " ".join(
            fit_column(c, u, w) for c, u, w in zip(self.codecs, units, self.widths)
        )

    def render(self, data: bytes, final: bool = False) -> str:
        return " ".join(
            render_column(c, data, w, final) for c, w in zip(self.codecs, self.widths)
        )


def render_stream(source: BinaryIO, config: RunConfig) -> Iterator[str]:
    """Header, rule, then one line per window.

    Each row is produced as soon as its window is read. Only when a codec
    still carries bytes after a full window is the next window read early,
    to find out whether the stream ended and the carry must be resolved.
    """
    renderer = RowRenderer(config.instantiate(), config.width)
    reader = WindowReader(source, config.width, config.max_rows)
    yield renderer.header()
    yield renderer.rule()
    for window in reader:
        units = renderer.decode(window.data, window.final)
        if not window.final and renderer.pending() and reader.at_end():
            renderer.flush_into(units)
        yield renderer.line(units)
