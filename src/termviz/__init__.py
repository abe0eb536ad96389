"""Terminal graphics: show indexed and scalar images as sixel escape sequences.

The main entry points are:
- imshow: encode an image and write it to the terminal in one operation
- encode_image: produce the sixel byte sequence without writing it
- gray, hot, jet, from_matplotlib, plot_colours: ready-made colour maps
- Image, Rescale, Magnify: canvas buffer and adapters

Sixel output requires a terminal with sixel support (e.g. xterm, mlterm,
WezTerm, iTerm2, minTTY).
"""

from termviz.colourmap import (
    ColourMap,
    from_matplotlib,
    gray,
    hot,
    invert,
    jet,
    plot_colours,
    validate_colourmap,
)
from termviz.display import imshow
from termviz.draw import render_line
from termviz.errors import ColourIndexError, ColourMapError
from termviz.image import IndexedCanvas, Image, Magnify, Rescale, Transposed, as_index_array
from termviz.rendering.sixel import decode_sixel, encode_image

__all__: list[str] = [
    'ColourIndexError',
    'ColourMap',
    'ColourMapError',
    'Image',
    'IndexedCanvas',
    'Magnify',
    'Rescale',
    'Transposed',
    'as_index_array',
    'decode_sixel',
    'encode_image',
    'from_matplotlib',
    'gray',
    'hot',
    'imshow',
    'invert',
    'jet',
    'plot_colours',
    'render_line',
    'validate_colourmap',
]
