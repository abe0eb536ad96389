"""Line rasterisation onto an indexed Image."""

from __future__ import annotations

import math
from typing import Union

from termviz.image import Image, Transposed

_Canvas = Union[Image, Transposed]


def _line_x(
    canvas: _Canvas,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    colour_index: int,
    stipple: int,
    stipple_frac: float,
) -> None:
    """Draw a line with |slope| <= 1, one pixel per column, clipped to the canvas."""
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0
    x_range = x1 - x0
    y_range = y1 - y0

    xmax = min(int(x1 + 1.0), canvas.width())
    for x in range(max(math.floor(x0 + 0.5), 0), xmax):
        if stipple > 0 and x % stipple >= stipple_frac * stipple:
            continue
        y = y0 if x_range == 0 else y0 + y_range * (x - x0) / x_range
        row = math.floor(y + 0.5)
        if 0 <= row < canvas.height():
            canvas.set_pixel(x, row, colour_index)


def render_line(
    canvas: Image,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    colour_index: int,
    stipple: int = 0,
    stipple_frac: float = 0.5,
) -> None:
    """Draw the segment (x0, y0)-(x1, y1) in colour_index.

    Steep lines are drawn on a transposed view so every step along the major
    axis paints exactly one pixel.

    Parameters:
        canvas: Image to draw into; pixels outside it are skipped.
        x0, y0, x1, y1: End points in pixel coordinates.
        colour_index: Palette index to paint.
        stipple: Dash interval in pixels; 0 draws a solid line.
        stipple_frac: Fraction of each dash interval that is painted.
    """
    if abs(x1 - x0) < abs(y1 - y0):
        _line_x(Transposed(canvas), y0, x0, y1, x1, colour_index, stipple, stipple_frac)
    else:
        _line_x(canvas, x0, y0, x1, y1, colour_index, stipple, stipple_frac)
