import struct

import gamegraphics
from gamegraphics.enum import Confidence
from gamegraphics.images.png import PNGHandler, PNG_SIGNATURE
from gamegraphics.images.raw import (
    LinearRawImageHandler,
    RowPlanarRawImageHandler,
    BytePlanarRawImageHandler,
)
from gamegraphics.palettes.vga import VGA6bitPaletteHandler, VGA8bitPaletteHandler
from gamegraphics.registry import FormatRegistry
from gamegraphics.tilesets.ddave import DDaveVGATilesetHandler


def test_find_handler_stops_at_definite_match(fake_handler):
    calls = []
    a = fake_handler('a', Confidence.POSSIBLE_MATCH, calls)
    b = fake_handler('b', Confidence.DEFINITE_MATCH, calls)
    c = fake_handler('c', Confidence.DEFINITE_NO_MATCH, calls)

    registry = FormatRegistry([a, b, c])

    assert registry.find_handler(b'') == [b]
    assert calls == ['a', 'b']


def test_find_handler_ambiguous(fake_handler):
    a = fake_handler('a', Confidence.POSSIBLE_MATCH)
    b = fake_handler('b', Confidence.DEFINITE_NO_MATCH)
    c = fake_handler('c', Confidence.POSSIBLE_MATCH)

    registry = FormatRegistry([a, b, c])

    assert registry.find_handler(b'') == [a, c]


def test_find_handler_unknown(fake_handler):
    registry = FormatRegistry([
        fake_handler('a', Confidence.DEFINITE_NO_MATCH),
        fake_handler('b', Confidence.DEFINITE_NO_MATCH),
    ])

    assert registry.find_handler(b'') == []


def test_get_handler(fake_handler):
    a = fake_handler('a', Confidence.POSSIBLE_MATCH)
    b = fake_handler('b', Confidence.POSSIBLE_MATCH)

    registry = FormatRegistry([a, b])

    assert registry.get_handler('b') is b
    assert registry.get_handler('z') is None


def test_list_handlers_is_fixed(fake_handler):
    handlers = [fake_handler('a', Confidence.POSSIBLE_MATCH)]
    registry = FormatRegistry(handlers)

    handlers.append(fake_handler('b', Confidence.POSSIBLE_MATCH))

    assert isinstance(registry.list_handlers(), tuple)
    assert [_.metadata().id for _ in registry.list_handlers()] == ['a']


def test_default_registry():
    ids = [_.metadata().id for _ in gamegraphics.list_handlers()]

    assert ids == [
        'img-png',
        'tls-ddave-vga',
        'pal-vga-6bit',
        'pal-vga-8bit',
        'img-raw-linear-8bpp',
        'img-raw-planar-4bpp',
        'img-raw-bplanar-4bpp',
    ]
    assert len(set(ids)) == len(ids)

    assert gamegraphics.get_handler('img-png') is PNGHandler
    assert gamegraphics.get_handler('img-pcx') is None


def test_default_registry_autodetection():
    assert gamegraphics.find_handler(PNG_SIGNATURE + b'\x00' * 16) == [PNGHandler]
    assert gamegraphics.find_handler(b'\x00' * 768) == [VGA6bitPaletteHandler, VGA8bitPaletteHandler]
    assert gamegraphics.find_handler(b'\xff' * 768) == [VGA8bitPaletteHandler]
    assert gamegraphics.find_handler(b'\x00' * 64000) == [LinearRawImageHandler]
    assert gamegraphics.find_handler(b'\x00' * 32000) == [RowPlanarRawImageHandler, BytePlanarRawImageHandler]
    assert gamegraphics.find_handler(b'\x00' * 17) == []


def test_default_registry_enumeration_first():
    """A small tileset is also a plausible palette, the tileset comes first."""
    content = struct.pack('<II', 1, 8) + b'\x00' * 256

    assert gamegraphics.find_handler(content) == [
        DDaveVGATilesetHandler,
        VGA6bitPaletteHandler,
        VGA8bitPaletteHandler,
    ]
