"""Indexed canvases: the Image buffer and the Rescale, Magnify and Transposed adapters.

Any object with width(), height() and pixel(x, y) can be encoded. The x index
runs left to right and y top to bottom. Adapters that can produce their whole
content at once also provide to_array(), returning a (height, width) numpy
array; as_index_array() uses it when present.
"""

from __future__ import annotations

import math
from typing import Any, Protocol, runtime_checkable

import numpy as np
import numpy.typing as npt


@runtime_checkable
class IndexedCanvas(Protocol):
    """2-D grid of palette indices (or scalar values, for Rescale input)."""

    def width(self) -> int: ...

    def height(self) -> int: ...

    def pixel(self, x: int, y: int) -> Any: ...


def as_index_array(canvas: IndexedCanvas) -> npt.NDArray[Any]:
    """Return canvas content as a (height, width) array.

    Uses canvas.to_array() when available, otherwise queries every pixel.
    """
    to_array = getattr(canvas, 'to_array', None)
    if to_array is not None:
        return np.asarray(to_array())
    width = canvas.width()
    height = canvas.height()
    if width == 0 or height == 0:
        return np.zeros((height, width), dtype=np.int64)
    return np.asarray([[canvas.pixel(x, y) for x in range(width)] for y in range(height)])


class Image:
    """Mutable 2-D image buffer, zero-initialised.

    Holds palette indices for direct display, or scalar intensities to be
    wrapped in Rescale. Storage is a numpy array indexed [y, x].
    """

    def __init__(self, width: int, height: int, dtype: npt.DTypeLike = np.uint8) -> None:
        if width < 0 or height < 0:
            raise ValueError(f'Image dimensions must be >= 0, got {width}x{height}')
        self._data = np.zeros((height, width), dtype=dtype)

    @classmethod
    def from_array(cls, data: npt.ArrayLike) -> Image:
        """Wrap a 2-D array (rows are y, columns are x) without copying if possible."""
        arr = np.asarray(data)
        if arr.ndim != 2:
            raise ValueError(f'Image data must be 2-D, got shape {arr.shape}')
        image = cls.__new__(cls)
        image._data = arr
        return image

    def width(self) -> int:
        return int(self._data.shape[1])

    def height(self) -> int:
        return int(self._data.shape[0])

    def pixel(self, x: int, y: int) -> Any:
        return self._data[y, x].item()

    def set_pixel(self, x: int, y: int, value: Any) -> None:
        self._data[y, x] = value

    def clear(self) -> None:
        """Set every pixel to 0."""
        self._data.fill(0)

    def to_array(self) -> npt.NDArray[Any]:
        return self._data


class Rescale:
    """Map scalar intensities in (vmin, vmax) onto colour indices 0..cmap_size-1.

    Values <= vmin give index 0 and values >= vmax give cmap_size - 1; in
    between, index = round(cmap_size * (value - vmin) / (vmax - vmin)), clamped
    and rounded half away from zero. NaN maps to 0.
    """

    def __init__(self, image: IndexedCanvas, vmin: float, vmax: float, cmap_size: int) -> None:
        if not vmax > vmin:
            raise ValueError(f'Rescale requires vmax > vmin, got vmin={vmin!r}, vmax={vmax!r}')
        if cmap_size < 1:
            raise ValueError(f'cmap_size must be >= 1, got {cmap_size}')
        self._image = image
        self._vmin = float(vmin)
        self._vmax = float(vmax)
        self._cmap_size = cmap_size

    def width(self) -> int:
        return self._image.width()

    def height(self) -> int:
        return self._image.height()

    def pixel(self, x: int, y: int) -> int:
        value = float(self._image.pixel(x, y))
        if math.isnan(value):
            return 0
        scaled = self._cmap_size * (value - self._vmin) / (self._vmax - self._vmin)
        return int(math.floor(min(max(scaled, 0.0), self._cmap_size - 1.0) + 0.5))

    def to_array(self) -> npt.NDArray[np.int64]:
        values = as_index_array(self._image).astype(np.float64)
        scaled = self._cmap_size * (values - self._vmin) / (self._vmax - self._vmin)
        scaled = np.nan_to_num(scaled, nan=0.0)
        clamped = np.clip(scaled, 0.0, self._cmap_size - 1.0)
        return np.floor(clamped + 0.5).astype(np.int64)


class Magnify:
    """Enlarge a canvas by an integer factor (nearest-neighbour block replication).

    Handy for small images on high-resolution terminals::

        imshow(Magnify(image, 3), vmin=0, vmax=255)
    """

    def __init__(self, image: IndexedCanvas, factor: int) -> None:
        if factor < 1:
            raise ValueError(f'Magnify factor must be >= 1, got {factor}')
        self._image = image
        self._factor = int(factor)

    def width(self) -> int:
        return self._image.width() * self._factor

    def height(self) -> int:
        return self._image.height() * self._factor

    def pixel(self, x: int, y: int) -> Any:
        return self._image.pixel(x // self._factor, y // self._factor)

    def to_array(self) -> npt.NDArray[Any]:
        base = as_index_array(self._image)
        return np.repeat(np.repeat(base, self._factor, axis=0), self._factor, axis=1)


class Transposed:
    """View of an Image with x and y swapped; writes go through to the image."""

    def __init__(self, image: Image) -> None:
        self._image = image

    def width(self) -> int:
        return self._image.height()

    def height(self) -> int:
        return self._image.width()

    def pixel(self, x: int, y: int) -> Any:
        return self._image.pixel(y, x)

    def set_pixel(self, x: int, y: int, value: Any) -> None:
        self._image.set_pixel(y, x, value)

    def to_array(self) -> npt.NDArray[Any]:
        return self._image.to_array().T
