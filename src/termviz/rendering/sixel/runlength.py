"""Per-band sixel masks and their run-length encoding."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np
import numpy.typing as npt

from termviz.rendering.sixel.constants import (
    BAND_HEIGHT,
    MAX_LITERAL_RUN,
    REPEAT_INTRODUCER,
    SIXEL_OFFSET,
)


def sixel_masks(band: npt.NDArray[Any], colour: int) -> npt.NDArray[np.int64]:
    """Return one 6-bit mask per column of band for the given colour.

    Parameters:
        band: (nsixels, width) array of colour indices, nsixels <= 6.
        colour: Colour index to select.

    Returns:
        Array of width masks; bit k is set where row k of the column is `colour`.
    """
    nsixels = band.shape[0]
    if nsixels > BAND_HEIGHT:
        raise ValueError(f'band has {nsixels} rows, at most {BAND_HEIGHT} allowed')
    weights = np.left_shift(1, np.arange(nsixels, dtype=np.int64))
    return ((band == colour).astype(np.int64) * weights[:, np.newaxis]).sum(axis=0)


def commit(out: list[str], mask: int, repeats: int) -> None:
    """Append a run of `repeats` identical sixels to out.

    Runs of up to three are written literally; longer runs as !<repeats><sixel>.
    """
    sixel = chr(SIXEL_OFFSET + mask)
    if repeats <= MAX_LITERAL_RUN:
        out.append(sixel * repeats)
    else:
        out.append(f'{REPEAT_INTRODUCER}{repeats}{sixel}')


def encode_runs(masks: Iterable[int]) -> str:
    """Run-length encode a row of sixel masks.

    The final run is always written, including a trailing run of empty (zero)
    columns, so the row keeps its full width.
    """
    out: list[str] = []
    current = 0
    repeats = 0
    for mask in masks:
        mask = int(mask)
        if repeats and mask == current:
            repeats += 1
            continue
        if repeats:
            commit(out, current, repeats)
        current = mask
        repeats = 1
    if repeats:
        commit(out, current, repeats)
    return ''.join(out)
