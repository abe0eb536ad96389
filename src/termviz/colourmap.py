"""Colour maps: ordered RGB palettes with channels in [0, 100].

A colour map associates a palette index with a colour. The position of each
entry in the list is its index; the sixel protocol expects every channel as an
integer percentage between 0 and 100.

A simple colour map can be written out literally::

    my_cmap = [
        (100, 0, 0),  # red
        (0, 100, 0),  # green
        (0, 0, 100),  # blue
    ]
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from termviz.errors import ColourMapError

RGB = tuple[int, int, int]
ColourMap = list[RGB]
ColourMapLike = Sequence[Union[RGB, Sequence[int]]]

DEFAULT_SIZE = 101
CHANNEL_MAX = 100

# Line-plot palette on a black background: black, white, yellow, magenta,
# cyan, red, green, blue.
_PLOT_COLOURS: tuple[RGB, ...] = (
    (0, 0, 0),
    (100, 100, 100),
    (100, 100, 20),
    (100, 20, 100),
    (20, 100, 100),
    (100, 20, 20),
    (20, 100, 20),
    (20, 20, 100),
)


def _nint(x: float) -> int:
    """Round half away from zero (not banker's rounding)."""
    if x >= 0.0:
        return int(x + 0.5)
    return -int(-x + 0.5)


def _channel(value: float, last: int) -> int:
    """Scale value from [0, last] to a percentage, clamped to [0, 100]."""
    return _nint(min(max(CHANNEL_MAX * value / last, 0.0), float(CHANNEL_MAX)))


def gray(number: int = DEFAULT_SIZE) -> ColourMap:
    """Return a black-to-white ramp of `number` entries.

    number < 2 is degenerate: 1 gives a single black entry, 0 or less an empty map.
    """
    if number < 2:
        return [(0, 0, 0)] * max(number, 0)
    last = number - 1
    cmap: ColourMap = []
    for n in range(number):
        c = _channel(n, last)
        cmap.append((c, c, c))
    return cmap


def hot(number: int = DEFAULT_SIZE) -> ColourMap:
    """Return a black-red-yellow-white ramp of `number` entries.

    Red ramps over the first third, green over the second and blue over the last.
    """
    if number < 2:
        return [(0, 0, 0)] * max(number, 0)
    last = number - 1
    return [
        (
            _channel(3 * n, last),
            _channel(3 * n - number, last),
            _channel(3 * n - 2 * number, last),
        )
        for n in range(number)
    ]


def jet(number: int = DEFAULT_SIZE) -> ColourMap:
    """Return a blue-cyan-yellow-red ramp of `number` entries (triangular waves)."""
    if number < 2:
        return [(0, 0, 0)] * max(number, 0)
    last = number - 1
    return [
        (
            _channel(1.5 * number - abs(4 * n - 3 * number), last),
            _channel(1.5 * number - abs(4 * n - 2 * number), last),
            _channel(1.5 * number - abs(4 * n - number), last),
        )
        for n in range(number)
    ]


def from_matplotlib(name: str, number: int = DEFAULT_SIZE) -> ColourMap:
    """Sample a named matplotlib colormap into `number` palette entries.

    Parameters:
        name: Registered matplotlib colormap name (e.g. 'viridis').
        number: Number of palette entries (>= 1).

    Returns:
        Colour map with channels scaled to [0, 100].

    Raises:
        ImportError: If matplotlib is not installed.
        ValueError: If the name is not a registered colormap or number < 1.
    """
    if number < 1:
        raise ValueError(f'number must be >= 1, got {number}')
    try:
        import matplotlib
    except ImportError:
        raise ImportError('matplotlib is required for from_matplotlib') from None
    try:
        mpl_cmap = matplotlib.colormaps[name]
    except KeyError:
        raise ValueError(f'Unknown matplotlib colormap {name!r}') from None
    sampled = mpl_cmap.resampled(number)
    cmap: ColourMap = []
    for n in range(number):
        r, g, b, _alpha = sampled(n)
        cmap.append((_nint(r * CHANNEL_MAX), _nint(g * CHANNEL_MAX), _nint(b * CHANNEL_MAX)))
    return cmap


def invert(cmap: ColourMapLike) -> ColourMap:
    """Return the colour map with every channel replaced by 100 - channel."""
    return [
        (CHANNEL_MAX - int(c[0]), CHANNEL_MAX - int(c[1]), CHANNEL_MAX - int(c[2]))
        for c in cmap
    ]


def plot_colours(white_background: bool = False) -> ColourMap:
    """Return the 8-entry line-plot palette, inverted for white backgrounds.

    Index 0 is the background, 1 the foreground (axes, text), and 2-7 are
    the line colours. Pass config.get_white_background() for the terminal default.
    """
    cmap = list(_PLOT_COLOURS)
    if white_background:
        return invert(cmap)
    return cmap


def validate_colourmap(cmap: ColourMapLike) -> ColourMap:
    """Check colour map entries and return them as integer triples.

    Raises:
        ColourMapError: If the map is empty, an entry is not a triple, or a
            channel is not an integer in [0, 100].
    """
    if len(cmap) == 0:
        raise ColourMapError('colour map has no entries')
    checked: ColourMap = []
    for n, entry in enumerate(cmap):
        if len(entry) != 3:
            raise ColourMapError(f'colour map entry {n} is not an RGB triple: {entry!r}')
        rgb = []
        for channel in entry:
            try:
                value = int(channel)
            except (TypeError, ValueError):
                raise ColourMapError(
                    f'colour map entry {n} has non-numeric channel {channel!r}'
                ) from None
            if value != channel or not 0 <= value <= CHANNEL_MAX:
                raise ColourMapError(
                    f'colour map entry {n} has channel {channel!r} outside 0-{CHANNEL_MAX}'
                )
            rgb.append(value)
        checked.append((rgb[0], rgb[1], rgb[2]))
    return checked
