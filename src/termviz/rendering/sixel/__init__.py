"""Sixel output layer: palette + band/run-length encoding of indexed canvases.

The escape sequence is built entirely in memory and returned as bytes, so a
caller can write it to the terminal in a single operation.
"""

from termviz.rendering.sixel.constants import BAND_HEIGHT, INTRODUCER, TERMINATOR
from termviz.rendering.sixel.decoder import DecodedSixel, decode_sixel
from termviz.rendering.sixel.encoder import (
    check_indices,
    colourmap_specifier,
    encode_band,
    encode_image,
)
from termviz.rendering.sixel.runlength import commit, encode_runs, sixel_masks

__all__: list[str] = [
    'BAND_HEIGHT',
    'INTRODUCER',
    'TERMINATOR',
    'DecodedSixel',
    'check_indices',
    'colourmap_specifier',
    'commit',
    'decode_sixel',
    'encode_band',
    'encode_image',
    'encode_runs',
    'sixel_masks',
]
