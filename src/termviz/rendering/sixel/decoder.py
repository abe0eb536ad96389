"""Reference sixel decoder: escape sequence -> palette + colour index grid.

Understands the subset written by the encoder plus raster attributes, which
are skipped. Intended for checking encoder output, not for display.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import numpy.typing as npt

from termviz.colourmap import ColourMap
from termviz.rendering.sixel.constants import (
    BAND_HEIGHT,
    CARRIAGE_RETURN,
    COLOUR_INTRODUCER,
    NEXT_LINE,
    RASTER_ATTRIBUTES,
    REPEAT_INTRODUCER,
    RGB_COLOUR_SPACE,
    SIXEL_OFFSET,
)

_DCS = '\033P'
_ST = '\033\\'
_SIXEL_MIN = chr(SIXEL_OFFSET)
_SIXEL_MAX = chr(SIXEL_OFFSET + 63)


@dataclass
class DecodedSixel:
    """Result of decode_sixel: palette definitions and painted index grid."""

    palette: dict[int, tuple[int, int, int]] = field(default_factory=dict)
    pixels: npt.NDArray[np.int64] = field(
        default_factory=lambda: np.zeros((0, 0), dtype=np.int64)
    )

    def colourmap(self) -> ColourMap:
        """Return palette entries 0..max defined index as a list (undefined entries black)."""
        if not self.palette:
            return []
        return [self.palette.get(n, (0, 0, 0)) for n in range(max(self.palette) + 1)]


def _read_number(body: str, pos: int) -> tuple[int, int]:
    """Parse decimal digits at body[pos:]; return (value, new position)."""
    end = pos
    while end < len(body) and body[end].isdigit():
        end += 1
    if end == pos:
        raise ValueError(f'Expected number at offset {pos} of sixel data')
    return int(body[pos:end]), end


def _split_frame(text: str) -> str:
    """Return the sixel body between the DCS parameters' 'q' and the terminator."""
    start = text.find(_DCS)
    if start < 0:
        raise ValueError('No DCS introducer (ESC P) in sixel data')
    q = text.find('q', start + len(_DCS))
    if q < 0:
        raise ValueError('DCS introducer is not a sixel sequence (no final q)')
    params = text[start + len(_DCS) : q]
    if any(not (c.isdigit() or c == ';') for c in params):
        raise ValueError(f'Invalid DCS parameters {params!r}')
    end = text.find(_ST, q)
    if end < 0:
        raise ValueError('Sixel data is not terminated (no ESC \\)')
    return text[q + 1 : end]


def decode_sixel(
    data: bytes | str,
    width: int | None = None,
    height: int | None = None,
    background: int = -1,
) -> DecodedSixel:
    """Decode a sixel escape sequence into its palette and index grid.

    Parameters:
        data: Complete sequence from ESC P to ESC \\.
        width: Crop/pad the grid to this width (default: widest painted band).
        height: Crop/pad the grid to this height (default: 6 rows per band).
        background: Value for pixels no layer painted.

    Returns:
        DecodedSixel with pixels shaped (height, width).

    Raises:
        ValueError: If the sequence is malformed.
    """
    text = data.decode('ascii') if isinstance(data, bytes) else data
    body = _split_frame(text)

    palette: dict[int, tuple[int, int, int]] = {}
    painted: dict[tuple[int, int], int] = {}
    colour = 0
    x = 0
    band = 0
    max_x = 0
    nbands = 0
    pos = 0
    while pos < len(body):
        c = body[pos]
        if c == COLOUR_INTRODUCER:
            colour, pos = _read_number(body, pos + 1)
            if pos < len(body) and body[pos] == ';':
                params = []
                while pos < len(body) and body[pos] == ';':
                    value, pos = _read_number(body, pos + 1)
                    params.append(value)
                if len(params) != 4 or params[0] != RGB_COLOUR_SPACE:
                    raise ValueError(f'Unsupported colour definition for #{colour}: {params}')
                palette[colour] = (params[1], params[2], params[3])
            continue
        if c == RASTER_ATTRIBUTES:
            pos += 1
            while pos < len(body) and (body[pos].isdigit() or body[pos] == ';'):
                pos += 1
            continue
        if c == CARRIAGE_RETURN:
            x = 0
            pos += 1
            continue
        if c == NEXT_LINE:
            x = 0
            band += 1
            nbands = max(nbands, band)
            pos += 1
            continue
        repeats = 1
        if c == REPEAT_INTRODUCER:
            repeats, pos = _read_number(body, pos + 1)
            if pos >= len(body):
                raise ValueError('Repeat introducer without a sixel character')
            c = body[pos]
        if not _SIXEL_MIN <= c <= _SIXEL_MAX:
            raise ValueError(f'Unexpected character {c!r} at offset {pos} of sixel data')
        mask = ord(c) - SIXEL_OFFSET
        if mask:
            for k in range(BAND_HEIGHT):
                if mask & (1 << k):
                    y = band * BAND_HEIGHT + k
                    for dx in range(repeats):
                        painted[(x + dx, y)] = colour
        x += repeats
        max_x = max(max_x, x)
        nbands = max(nbands, band + 1)
        pos += 1

    out_width = max_x if width is None else width
    out_height = nbands * BAND_HEIGHT if height is None else height
    pixels = np.full((out_height, out_width), background, dtype=np.int64)
    for (px, py), value in painted.items():
        if px < out_width and py < out_height:
            pixels[py, px] = value
    return DecodedSixel(palette=palette, pixels=pixels)
