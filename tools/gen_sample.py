"""Write a deterministic sample stream for bytelens.

Mixes ASCII, multi-byte UTF-8 (placed so sequences straddle 8-byte lines),
control bytes, packed integers and floats, then pads with a counting
pattern up to the requested size.
"""
import struct
import sys
from pathlib import Path

TEXT = "Hello, world!\n\tnaïve café ✓ 日本語 🎉\r\n".encode("utf-8")

NUMBERS = b"".join(
    [
        struct.pack("<hH", -2, 65535),
        struct.pack("<iI", -123456, 4000000000),
        struct.pack(">q", -1),
        struct.pack(">f", 1.5),
        struct.pack(">d", -2.25),
    ]
)


def generate_sample(out_path, size=256):
    body = TEXT + b"\x00\x07\x1b\x7f" + NUMBERS
    pad = bytes(i % 256 for i in range(max(0, size - len(body))))
    data = (body + pad)[:size]

    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(data)
    print(f"GENERATED: {out} ({len(data)} bytes)")
    return out


if __name__ == "__main__":
    # Usage:
    #   python tools/gen_sample.py OUT [--size N]
    args = [a for a in sys.argv[1:] if a]

    size = 256
    if "--size" in args:
        i = args.index("--size")
        if i + 1 >= len(args):
            raise SystemExit("--size requires a value")
        size = int(args[i + 1])
        args = args[:i] + args[i + 2:]

    out = args[0] if len(args) > 0 else "sample.bin"
    generate_sample(out, size=size)
