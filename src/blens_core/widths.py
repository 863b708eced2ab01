"""Column width arithmetic.

Widths depend only on configuration (row width, unit size, max unit width,
separator), never on what a particular row happened to decode.
"""
from __future__ import annotations

from blens_core.codecs import Codec


def units_per_row(codec: Codec, row_width: int) -> int:
    if codec.variable:
        # At most one unit per byte, plus one for bytes carried in from the
        # previous row.
        return row_width + 1
    return row_width // codec.unit_size


def column_width(codec: Codec, row_width: int) -> int:
    units = units_per_row(codec, row_width)
    span = units * codec.max_width + (units - 1) * len(codec.separator)
    return max(span, len(codec.name))
