"""Tests for sixel masks and run-length encoding."""

from __future__ import annotations

import re

import numpy as np
import pytest

from termviz.rendering.sixel.runlength import commit, encode_runs, sixel_masks


def _expand(encoded: str) -> list[int]:
    """Expand !<n><c> repeats and literal sixels back into per-column masks."""
    masks: list[int] = []
    for count, repeated, literal in re.findall(r'!(\d+)(.)|(.)', encoded):
        if literal:
            masks.append(ord(literal) - 63)
        else:
            masks.extend([ord(repeated) - 63] * int(count))
    return masks


@pytest.mark.parametrize('repeats', [1, 2, 3])
def test_short_runs_are_literal(repeats: int) -> None:
    out: list[str] = []
    commit(out, 5, repeats)
    assert out == ['D' * repeats]


@pytest.mark.parametrize('repeats', [4, 9, 250])
def test_long_runs_use_repeat_introducer(repeats: int) -> None:
    out: list[str] = []
    commit(out, 63, repeats)
    assert out == [f'!{repeats}~']


@pytest.mark.parametrize('width', [1, 3, 4, 17])
@pytest.mark.parametrize('mask', [0, 1, 42, 63])
def test_uniform_row_compaction(width: int, mask: int) -> None:
    """A uniform row is one run: literal up to three columns, !<k><c> beyond."""
    encoded = encode_runs([mask] * width)
    sixel = chr(63 + mask)
    if width <= 3:
        assert encoded == sixel * width
    else:
        assert encoded == f'!{width}{sixel}'
    assert _expand(encoded) == [mask] * width


def test_mixed_row_reconstructs_exactly() -> None:
    masks = [0, 0, 0, 0, 0, 7, 7, 1, 63, 63, 63, 63, 0]
    encoded = encode_runs(masks)
    assert encoded == '!5?FF@!4~?'
    assert _expand(encoded) == masks


def test_final_zero_run_is_kept() -> None:
    assert encode_runs([1, 0, 0, 0, 0]) == '@!4?'


def test_empty_row_encodes_to_nothing() -> None:
    assert encode_runs([]) == ''


def test_sixel_masks_set_bit_per_row() -> None:
    band = np.array([[1, 0, 2], [1, 1, 2], [0, 0, 1]])
    assert sixel_masks(band, 1).tolist() == [3, 2, 4]
    assert sixel_masks(band, 2).tolist() == [0, 0, 3]
    assert sixel_masks(band, 7).tolist() == [0, 0, 0]


def test_full_band_mask_is_63() -> None:
    band = np.full((6, 2), 4)
    assert sixel_masks(band, 4).tolist() == [63, 63]


def test_band_taller_than_six_rows_rejected() -> None:
    with pytest.raises(ValueError, match='at most 6'):
        sixel_masks(np.zeros((7, 1), dtype=np.int64), 0)
