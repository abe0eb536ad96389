"""Sixel encoder: indexed canvas + colour map -> DCS escape sequence.

The image is written as horizontal bands of up to six pixel rows. Within a
band, each colour present gets one layer: a colour selector #<n> followed by
run-length encoded sixel characters, one per column, whose low six bits say
which rows of that column are painted with the colour. Layers are separated by
'$' (carriage return) and each band ends with '-' (next line).
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import numpy.typing as npt

from termviz.colourmap import ColourMap, ColourMapLike, validate_colourmap
from termviz.errors import ColourIndexError
from termviz.image import IndexedCanvas, as_index_array
from termviz.rendering.sixel.constants import (
    BAND_HEIGHT,
    CARRIAGE_RETURN,
    COLOUR_INTRODUCER,
    INTRODUCER,
    NEXT_LINE,
    RGB_COLOUR_SPACE,
    TERMINATOR,
)
from termviz.rendering.sixel.runlength import encode_runs, sixel_masks

logger = logging.getLogger(__name__)


def colourmap_specifier(cmap: ColourMap) -> str:
    """Return palette definitions #<n>;2;<r>;<g>;<b> for every entry, concatenated."""
    return ''.join(
        f'{COLOUR_INTRODUCER}{n};{RGB_COLOUR_SPACE};{r};{g};{b}'
        for n, (r, g, b) in enumerate(cmap)
    )


def check_indices(indices: npt.NDArray[Any], cmap_size: int) -> npt.NDArray[np.int64]:
    """Return indices as int64, raising ColourIndexError for the first invalid pixel.

    Pixels are checked in raster order (y outer, x inner).
    """
    if indices.size == 0:
        return indices.astype(np.int64)
    integral = np.asarray(indices)
    if integral.dtype.kind not in 'iub':
        # Non-integer values (e.g. floats from an unscaled image) are only valid
        # if they are whole numbers.
        bad_type = integral != np.floor(integral)
        if bad_type.any():
            y, x = np.argwhere(bad_type)[0]
            raise ColourIndexError(int(x), int(y), integral[y, x], cmap_size)
    as_int = integral.astype(np.int64)
    bad = (as_int < 0) | (as_int >= cmap_size)
    if bad.any():
        y, x = np.argwhere(bad)[0]
        raise ColourIndexError(int(x), int(y), int(as_int[y, x]), cmap_size)
    return as_int


def encode_band(band: npt.NDArray[np.int64], colour_start: int, colour_end: int) -> str:
    """Encode one band (up to six rows) as colour layers closed by '-'.

    Colours without any pixel in the band produce no layer at all.
    """
    layers: list[str] = []
    for colour in np.unique(band):
        colour = int(colour)
        if colour < colour_start or colour >= colour_end:
            continue
        masks = sixel_masks(band, colour)
        layers.append(f'{COLOUR_INTRODUCER}{colour}{encode_runs(masks)}')
    return CARRIAGE_RETURN.join(layers) + NEXT_LINE


def encode_image(
    canvas: IndexedCanvas,
    cmap: ColourMapLike,
    zero_is_transparent: bool = False,
) -> bytes:
    """Encode an indexed canvas as a complete sixel escape sequence.

    Parameters:
        canvas: Source of palette indices (width(), height(), pixel(x, y)).
        cmap: Colour map; channels are integers in [0, 100].
        zero_is_transparent: If True, index 0 is never painted so the terminal
            background shows through.

    Returns:
        ASCII bytes: introducer, palette, bands, terminator.

    Raises:
        ColourMapError: If the colour map is empty or malformed.
        ColourIndexError: If a pixel index is outside the colour map.
    """
    colours = validate_colourmap(cmap)
    indices = check_indices(as_index_array(canvas), len(colours))
    height, width = indices.shape
    colour_start = 1 if zero_is_transparent else 0

    parts = [INTRODUCER, colourmap_specifier(colours)]
    for y0 in range(0, height, BAND_HEIGHT):
        parts.append(encode_band(indices[y0 : y0 + BAND_HEIGHT], colour_start, len(colours)))
    parts.append(TERMINATOR)
    data = ''.join(parts).encode('ascii')
    logger.debug(
        'Encoded %dx%d canvas with %d colours (transparent=%s): %d bytes',
        width,
        height,
        len(colours),
        zero_is_transparent,
        len(data),
    )
    return data
