"""Exceptions raised by the encoder and its inputs."""

from __future__ import annotations


class ColourMapError(ValueError):
    """Colour map is empty or holds an entry that is not an RGB triple in [0, 100]."""


class ColourIndexError(IndexError):
    """Canvas pixel refers to a palette index outside the colour map."""

    def __init__(self, x: int, y: int, value: int, cmap_size: int) -> None:
        super().__init__(
            f'pixel ({x}, {y}) has colour index {value}, '
            f'outside colour map of size {cmap_size}'
        )
        self.x = x
        self.y = y
        self.value = value
        self.cmap_size = cmap_size
