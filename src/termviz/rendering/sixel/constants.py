"""Sixel protocol constants (introducer, terminator, control characters)."""

# DCS introducer: ESC P, pixel aspect 1:1 (P1=9), background left as is (P2=1).
INTRODUCER = '\033P9;1q'
# String terminator ESC \, then newline so the cursor moves below the image.
TERMINATOR = '\033\\\n'

BAND_HEIGHT = 6  # pixel rows per sixel band
SIXEL_OFFSET = 63  # '?' encodes an empty column

COLOUR_INTRODUCER = '#'
REPEAT_INTRODUCER = '!'
RASTER_ATTRIBUTES = '"'
CARRIAGE_RETURN = '$'  # back to start of band, next colour layer
NEXT_LINE = '-'  # down one band, back to left margin

RGB_COLOUR_SPACE = 2
MAX_LITERAL_RUN = 3  # longer runs use the repeat introducer
