import io
import struct
import warnings

import pytest

from blens_view.config import build_config
from blens_view.render import RowRenderer, render_stream


def render(data: bytes, codecs=(), width=8, max_rows=0):
    config = build_config(codecs, width=width, max_rows=max_rows)
    return list(render_stream(io.BytesIO(data), config))


def test_hello_row():
    lines = render(bytes.fromhex("48656c6c6f0a0001"), codecs=["hex", "ascii"])

    assert lines == [
        "hex".ljust(23) + " " + "ascii".ljust(8),
        "-" * 32,
        "48,65,6c,6c,6f,0a,00,01" + " " + "Hello⏎␀.",
    ]


ALIGN_CASES = [
    ((), bytes(range(20)), [23, 8, 39]),
    (("float32", "hex"), struct.pack(">ff", 3e38, 1.0) + struct.pack(">ff", 1, 1), [25, 23]),
    (("utf8", "hex"), b"AAAAA\xff\xff\xff" + b"B" * 8, [9, 23]),
    (("utf8", "ascii"), "日本語🎉é!".encode("utf-8") + b"\xe6", [9, 8]),
]


@pytest.mark.parametrize("codecs,data,widths", ALIGN_CASES)
def test_header_and_rows_align(codecs, data, widths):
    config = build_config(codecs, width=8)
    renderer = RowRenderer(config.instantiate(), config.width)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        lines = list(render_stream(io.BytesIO(data), config))
    header = lines[0]

    assert renderer.widths == widths
    for line in lines[2:]:
        assert len(line) == len(header)
        pos = 0
        for w in renderer.widths[:-1]:
            pos += w
            assert line[pos] == " "
            pos += 1


def test_short_last_row_is_padded():
    lines = render(b"abcdefghij", codecs=["hex", "ascii"])
    assert len(lines) == 4
    assert lines[3] == "69,6a".ljust(23) + " " + "ij".ljust(8)


def test_empty_input_prints_only_header():
    lines = render(b"")
    assert len(lines) == 2


@pytest.mark.parametrize("length,rows", [(1, 1), (8, 1), (9, 2), (64, 8), (65, 9)])
def test_row_count(length, rows):
    assert len(render(bytes(length))) == 2 + rows


def test_row_limit():
    assert len(render(bytes(40), max_rows=2)) == 4


def test_utf8_column_across_rows():
    lines = render("日本語🎉é!".encode("utf-8"), codecs=["utf8"])
    assert lines[2:] == ["日本".ljust(9), "語🎉é!".ljust(9)]


def test_read_error_keeps_rows_already_produced():
    class Broken(io.BytesIO):
        def __init__(self, data):
            super().__init__(data)
            self.calls = 0

        def read(self, size=-1):
            self.calls += 1
            if self.calls > 1:
                raise OSError("device gone")
            return super().read(size)

    config = build_config(["hex"])
    out = []
    with pytest.raises(OSError, match="device gone"):
        for line in render_stream(Broken(bytes(16)), config):
            out.append(line)
    assert out == ["hex".ljust(23), "-" * 23, ",".join(["00"] * 8)]


class CountingReader(io.BytesIO):
    def __init__(self, data):
        super().__init__(data)
        self.calls = 0

    def read(self, size=-1):
        self.calls += 1
        return super().read(size)


def test_row_is_written_before_next_window_is_read():
    src = CountingReader(bytes(24))
    lines = render_stream(src, build_config(["hex"]))
    next(lines)
    next(lines)
    next(lines)
    assert src.calls == 1


def test_pending_carry_reads_next_window_early():
    src = CountingReader(b"AAAAAAA\xe6\x97\xa5BBBBBB")
    lines = render_stream(src, build_config(["utf8"]))
    next(lines)
    next(lines)
    assert next(lines) == "AAAAAAA".ljust(9)
    assert src.calls == 2
    assert next(lines) == "日BBBBBB".ljust(9)


def test_carry_resolved_when_stream_ends_on_a_full_window():
    with pytest.warns(UserWarning, match="Truncated utf8"):
        lines = render(b"ABCDEFG\xe6", codecs=["utf8"])
    assert lines[2:] == ["ABCDEFG�".ljust(9)]


def test_row_limit_resolves_carry_on_last_row():
    with pytest.warns(UserWarning):
        lines = render(b"AAAAAAA\xe6\x97\xa5BBBBB", codecs=["utf8"], max_rows=1)
    assert lines == ["utf8".ljust(9), "-" * 9, "AAAAAAA�".ljust(9)]


def test_render_single_window_matches_stream_row():
    config = build_config(["hex", "ascii"])
    renderer = RowRenderer(config.instantiate(), config.width)
    data = bytes.fromhex("48656c6c6f0a0001")
    assert renderer.render(data, final=True) == render(data, codecs=["hex", "ascii"])[2]
