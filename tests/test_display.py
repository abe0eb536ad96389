"""Tests for imshow: one buffered write of the encoded sequence."""

from __future__ import annotations

import io
import logging
import types

import numpy as np
import pytest

from termviz.colourmap import gray
from termviz.display import imshow
from termviz.errors import ColourIndexError
from termviz.image import Image
from termviz.rendering.sixel import encode_image


class _CountingSink(io.BytesIO):
    def __init__(self) -> None:
        super().__init__()
        self.writes = 0
        self.flushes = 0

    def write(self, data) -> int:  # type: ignore[override]
        self.writes += 1
        return super().write(data)

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


def test_imshow_writes_encoded_image_once() -> None:
    image = Image.from_array([[0, 1], [1, 0]])
    sink = _CountingSink()
    imshow(image, gray(2), stream=sink)
    assert sink.getvalue() == encode_image(image, gray(2))
    assert sink.writes == 1
    assert sink.flushes == 1


def test_imshow_rescales_with_vmin_vmax() -> None:
    sink = io.BytesIO()
    imshow(Image.from_array([[0.0, 10.0]]), gray(2), vmin=0.0, vmax=10.0, stream=sink)
    assert sink.getvalue() == encode_image(Image.from_array([[0, 1]]), gray(2))


def test_imshow_defaults_to_gray_ramp() -> None:
    sink = io.BytesIO()
    imshow(Image.from_array(np.array([[0.0, 1.0]])), vmin=0.0, vmax=1.0, stream=sink)
    assert sink.getvalue().startswith(b'\x1bP9;1q#0;2;0;0;0#1;2;1;1;1')
    assert b'#100;2;100;100;100' in sink.getvalue()


def test_imshow_passes_transparency_through() -> None:
    sink = io.BytesIO()
    imshow(Image.from_array([[0]]), [(50, 50, 50)], zero_is_transparent=True, stream=sink)
    assert sink.getvalue() == b'\x1bP9;1q#0;2;50;50;50-\x1b\\\n'


def test_imshow_requires_both_bounds() -> None:
    with pytest.raises(ValueError, match='both vmin and vmax'):
        imshow(Image(1, 1), vmin=0.0, stream=io.BytesIO())


def test_imshow_writes_nothing_on_invalid_index() -> None:
    sink = io.BytesIO()
    with pytest.raises(ColourIndexError):
        imshow(Image.from_array([[0, 5]]), gray(2), stream=sink)
    assert sink.getvalue() == b''


def test_imshow_defaults_to_stdout_buffer(monkeypatch: pytest.MonkeyPatch) -> None:
    buffer = io.BytesIO()
    monkeypatch.setattr('sys.stdout', types.SimpleNamespace(buffer=buffer))
    imshow(Image.from_array([[0]]), [(50, 50, 50)])
    assert buffer.getvalue() == b'\x1bP9;1q#0;2;50;50;50#0@-\x1b\\\n'


def test_imshow_logs_byte_count(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger='termviz'):
        imshow(Image.from_array([[0]]), [(50, 50, 50)], stream=io.BytesIO())
    assert 'Wrote 26 bytes of sixel data' in caplog.text
    assert 'Encoded 1x1 canvas with 1 colours' in caplog.text
