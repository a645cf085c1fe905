import logging

import pytest

from gamegraphics.core import Palette
from gamegraphics.enum import Confidence
from gamegraphics.exceptions import UnpackException
from gamegraphics.palettes.ega import ega_palette
from gamegraphics.palettes.vga import VGA6bitPaletteHandler, VGA8bitPaletteHandler


def test_identify_6bit():
    assert VGA6bitPaletteHandler.identify(b'\x3f' * 768) is Confidence.POSSIBLE_MATCH
    assert VGA6bitPaletteHandler.identify(b'\x3f' * 48) is Confidence.POSSIBLE_MATCH
    assert VGA6bitPaletteHandler.identify(b'\x40' + b'\x00' * 767) is Confidence.DEFINITE_NO_MATCH
    assert VGA6bitPaletteHandler.identify(b'\x00' * 769) is Confidence.DEFINITE_NO_MATCH
    assert VGA6bitPaletteHandler.identify(b'\x00' * 771) is Confidence.DEFINITE_NO_MATCH
    assert VGA6bitPaletteHandler.identify(b'') is Confidence.DEFINITE_NO_MATCH


def test_identify_8bit():
    assert VGA8bitPaletteHandler.identify(b'\xff' * 768) is Confidence.POSSIBLE_MATCH
    assert VGA8bitPaletteHandler.identify(b'\xff' * 767) is Confidence.DEFINITE_NO_MATCH


def test_parse_6bit():
    palette = VGA6bitPaletteHandler.parse({'main': bytes([0, 63, 32])})

    assert palette.entries == [(0, 255, 130, 255)]


def test_parse_6bit_out_of_range():
    with pytest.raises(UnpackException):
        VGA6bitPaletteHandler.parse({'main': bytes([0, 64, 0])})


def test_generate_6bit():
    palette = Palette([(0, 255, 130, 255)])

    assert VGA6bitPaletteHandler.generate(palette) == {'main': bytes([0, 63, 32])}


def test_8bit_parse_generate():
    content = bytes(range(255, -1, -1)) * 3

    palette = VGA8bitPaletteHandler.parse(content)

    assert len(palette) == 256
    assert palette[0] == (255, 254, 253, 255)
    assert VGA8bitPaletteHandler.generate(palette)['main'] == content


def test_check_limits(caplog):
    assert VGA6bitPaletteHandler.check_limits(ega_palette()) == []
    assert len(VGA6bitPaletteHandler.check_limits(Palette())) == 1
    assert len(VGA8bitPaletteHandler.check_limits(Palette([(0, 0, 0, 255)] * 257))) == 1

    with caplog.at_level(logging.WARNING):
        issues = VGA8bitPaletteHandler.check_limits(Palette([(0, 0, 0, 0)]))

    assert issues == []
    assert 'alpha' in caplog.text
