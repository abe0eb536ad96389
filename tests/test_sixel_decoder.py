"""Tests for the reference sixel decoder."""

from __future__ import annotations

import pytest

from termviz.rendering.sixel import decode_sixel


def test_decodes_palette_and_layers() -> None:
    decoded = decode_sixel('\033P9;1q#0;2;0;0;0#1;2;100;50;25#0@A$#1A@-\033\\\n')
    assert decoded.palette == {0: (0, 0, 0), 1: (100, 50, 25)}
    assert decoded.pixels.shape == (6, 2)
    assert decoded.pixels[:2].tolist() == [[0, 1], [1, 0]]
    assert (decoded.pixels[2:] == -1).all()


def test_expands_repeats_and_crops() -> None:
    decoded = decode_sixel(b'\x1bPq#0;2;1;2;3#0!5~-\x1b\\', width=3, height=4, background=9)
    assert decoded.pixels.tolist() == [[0, 0, 0]] * 4


def test_pads_to_requested_size() -> None:
    decoded = decode_sixel(b'\x1bPq#0;2;1;2;3#0@-\x1b\\', width=2, height=1)
    assert decoded.pixels.tolist() == [[0, -1]]


def test_skips_raster_attributes() -> None:
    decoded = decode_sixel('\033P0;0;0q"1;1;2;1#0;2;0;0;0#0@@-\033\\')
    assert decoded.pixels[0].tolist() == [0, 0]


def test_second_band_rows_start_at_six() -> None:
    decoded = decode_sixel('\033Pq#0;2;0;0;0-#0@-\033\\')
    assert decoded.pixels.shape == (12, 1)
    assert decoded.pixels[6, 0] == 0
    assert (decoded.pixels[:6] == -1).all()


def test_colourmap_fills_undefined_entries() -> None:
    decoded = decode_sixel('\033Pq#2;2;10;20;30-\033\\')
    assert decoded.colourmap() == [(0, 0, 0), (0, 0, 0), (10, 20, 30)]


@pytest.mark.parametrize(
    'data',
    [
        'no escape here',
        '\033P9;1',
        '\033P9;1q#0;2;0;0;0#0@-',
        '\033Px;1q-\033\\',
        '\033Pq#0;1;0;0;0-\033\\',
        '\033Pq#0@*-\033\\',
        '\033Pq#0!-\033\\',
    ],
)
def test_malformed_input_raises(data: str) -> None:
    with pytest.raises(ValueError):
        decode_sixel(data)
