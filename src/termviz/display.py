"""Display images on a sixel-capable terminal.

Supported terminals include xterm (with sixel enabled), mlterm, WezTerm,
iTerm2, minTTY and Windows Terminal.
"""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO

from termviz.colourmap import ColourMapLike, gray
from termviz.image import IndexedCanvas, Rescale
from termviz.rendering.sixel import encode_image

logger = logging.getLogger(__name__)


def imshow(
    image: IndexedCanvas,
    cmap: ColourMapLike | None = None,
    *,
    vmin: float | None = None,
    vmax: float | None = None,
    zero_is_transparent: bool = False,
    stream: BinaryIO | None = None,
) -> None:
    """Write an image to the terminal as sixel graphics.

    Without vmin/vmax, pixel values are colour indices into cmap. With both
    given, values are rescaled so that vmin and below show as the first
    colour and vmax and above as the last.

    The whole escape sequence is encoded before anything is written, then
    written with a single write() and flushed, so an invalid image never
    leaves a partial sequence on the terminal.

    Parameters:
        image: Indexed (or, with vmin/vmax, scalar) canvas.
        cmap: Colour map; defaults to gray().
        vmin, vmax: Intensity range for rescaling; give both or neither.
        zero_is_transparent: Leave index 0 unpainted.
        stream: Binary output; defaults to sys.stdout.buffer.

    Raises:
        ValueError: If only one of vmin/vmax is given, or vmax <= vmin.
        ColourMapError, ColourIndexError: See encode_image().
    """
    colours = gray() if cmap is None else cmap
    if (vmin is None) != (vmax is None):
        raise ValueError('imshow requires both vmin and vmax, or neither')
    canvas: IndexedCanvas = image
    if vmin is not None and vmax is not None:
        canvas = Rescale(image, vmin, vmax, len(colours))
    data = encode_image(canvas, colours, zero_is_transparent)
    out = stream if stream is not None else sys.stdout.buffer
    out.write(data)
    out.flush()
    logger.debug('Wrote %d bytes of sixel data', len(data))
