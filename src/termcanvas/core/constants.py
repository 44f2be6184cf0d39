"""Shared constants for terminal cell encoding."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Half-block glyph: background paints the top sub-pixel, foreground the bottom
LOWER_HALF = "▄"

# Braille patterns occupy U+2800..U+28FF, one code point per dot mask
BRAILLE_OFFSET = 0x2800

# Braille dot bits indexed by [y % 4][x % 2]:
#  dots: 1 4
#        2 5
#        3 6
#        7 8
DOT_BITS: tuple[tuple[int, int], ...] = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)
