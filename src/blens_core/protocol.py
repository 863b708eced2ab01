"""bytelens rendering constants.

Single source of truth for glyphs, sentinels and run defaults.
Keep this file stable. Codecs and renderer must remain synchronized.
"""

# Unit size sentinel for self-delimiting codecs (utf8)
VARIABLE = 0

# Longest UTF-8 sequence for any code point
UTF8_MAX = 4

# Single visible glyph for bytes a codec cannot decode
REPLACEMENT = "�"  # U+FFFD

# Printed for bytes with no visible form
NON_PRINTABLE = "."

# Control bytes remapped to visible glyphs (ascii and utf8 columns)
CONTROL_GLYPHS = {
    0x0A: "⏎",  # newline
    0x09: "⇥",  # tab
    0x0D: "↵",  # carriage return
    0x0B: "↴",  # vertical tab
    0x0C: "↵",  # form feed
    0x08: "⌫",  # backspace
    0x07: "␇",  # bell
    0x1B: "⎋",  # escape
    0x00: "␀",  # null
}

# Unicode line separators outside the byte range (utf8 column only)
LINE_SEPARATORS = {0x85, 0x2028, 0x2029}

# Run defaults
DEFAULT_WIDTH = 8
WIDTH_MULTIPLE = 8
DEFAULT_CODECS = ("hex", "ascii", "int8")

# Float rendering: fixed point, six fractional digits
FLOAT_FMT = "{:12.6f}"
