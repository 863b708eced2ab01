"""bytelens core - codecs, window decoding and column widths."""
from .codecs import CODECS, CODEC_TABLE, Codec, CodecKind, lookup
from .decoder import decode_window, fit_column, flush, render_column
from .widths import column_width, units_per_row

__all__ = [
    "CODECS",
    "CODEC_TABLE",
    "Codec",
    "CodecKind",
    "lookup",
    "decode_window",
    "fit_column",
    "flush",
    "render_column",
    "column_width",
    "units_per_row",
]
