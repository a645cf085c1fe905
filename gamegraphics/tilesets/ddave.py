'''
# Dangerous Dave VGA tileset

The (decompressed) VGADAVE.DAV file is laid out as

  .--------------------------------.
  | UINT32LE number of tiles       |
  | UINT32LE offset of tile 0      |
  | ...                            |
  | UINT32LE offset of tile N-1    |
  | tile data                      |
  '--------------------------------'

The offsets are from the start of the file. A tile made of exactly 256 bytes is
a 16x16 tile; any other tile starts with a header made of UINT16LE width and
UINT16LE height, followed by width * height bytes of 8bpp pixels.
'''
import logging
import struct
from typing import Dict, List

from ..core import Image, Tileset
from ..enum import Confidence
from ..exceptions import UnpackException
from ..handler import FormatHandler, Metadata, get_main


logger = logging.getLogger(__name__)

TILE_WIDTH  = 16
TILE_HEIGHT = 16
TILE_SIZE   = TILE_WIDTH * TILE_HEIGHT
MAX_DIMENSION = 0xFFFF


def read_offsets(data):
    '''Return the offsets table or None if it doesn't fit the data.'''
    if len(data) < 4:
        return None

    count, = struct.unpack_from('<I', data, 0)
    if 4 + count * 4 > len(data):
        return None

    return list(struct.unpack_from(f'<{count}I', data, 4))


class DDaveVGATilesetHandler(FormatHandler):

    @classmethod
    def metadata(cls) -> Metadata:
        return Metadata(
            id='tls-ddave-vga',
            title='Dangerous Dave VGA tileset',
            games=('Dangerous Dave',),
            glob=('vgadave.dav',),
        )

    @classmethod
    def identify(cls, content) -> Confidence:
        offsets = read_offsets(content)
        if offsets is None:
            return Confidence.DEFINITE_NO_MATCH

        table_end = 4 + len(offsets) * 4
        if not offsets:
            return Confidence.POSSIBLE_MATCH if len(content) == table_end else Confidence.DEFINITE_NO_MATCH

        if offsets[0] != table_end:
            return Confidence.DEFINITE_NO_MATCH

        for current, following in zip(offsets, offsets[1:] + [len(content)]):
            if following < current:
                return Confidence.DEFINITE_NO_MATCH

        return Confidence.POSSIBLE_MATCH

    @classmethod
    def parse(cls, content) -> Tileset:
        data = get_main(content)
        offsets = read_offsets(data)
        if offsets is None:
            raise UnpackException('the offsets table is truncated', handler=cls.metadata().id)

        tileset = Tileset()
        for idx, (start, end) in enumerate(zip(offsets, offsets[1:] + [len(data)])):
            size = end - start
            if size < 0 or end > len(data):
                raise UnpackException(f'tile {idx} has an invalid offset {start}', handler=cls.metadata().id)

            if size == TILE_SIZE:
                image = Image(TILE_WIDTH, TILE_HEIGHT, data[start:end])
            else:
                if size < 4:
                    raise UnpackException(f'tile {idx} is too short for its header', handler=cls.metadata().id)

                width, height = struct.unpack_from('<HH', data, start)
                pixels = data[start + 4:start + 4 + width * height]
                if len(pixels) != width * height:
                    raise UnpackException(f'tile {idx} is {width}x{height} but only {len(pixels)} '
                                          f'bytes are available', handler=cls.metadata().id)

                image = Image(width, height, pixels)

            logger.debug(f'tile {idx} at 0x{start:08x}: {image.width}x{image.height}')
            tileset.append(image)

        return tileset

    @classmethod
    def generate(cls, tileset: Tileset) -> Dict[str, bytes]:
        table_end = 4 + len(tileset.files) * 4

        offsets = []
        tiles = []
        position = table_end
        for entry in tileset.files:
            image = entry.image
            tile = bytes(image.pixels)
            if image.dims != (TILE_WIDTH, TILE_HEIGHT):
                tile = struct.pack('<HH', image.width, image.height) + tile

            offsets.append(position)
            tiles.append(tile)
            position += len(tile)

        header = struct.pack(f'<I{len(offsets)}I', len(offsets), *offsets)

        return {
            'main': header + b''.join(tiles),
        }

    @classmethod
    def check_limits(cls, tileset: Tileset) -> List[str]:
        issues = super().check_limits(tileset)

        for entry in tileset.files:
            image = entry.image
            if image.width > MAX_DIMENSION or image.height > MAX_DIMENSION:
                issues.append(f'Tile {entry.name} is {image.width}x{image.height}, but this format '
                              f'can only store dimensions up to {MAX_DIMENSION}.')
            elif image.width * image.height + 4 == TILE_SIZE:
                # with its header it'd be read back as a 16x16 tile
                issues.append(f'Tile {entry.name} is {image.width}x{image.height}, but this format '
                              f'can\'t store tiles of {TILE_SIZE - 4} pixels.')

            if len(image.pixels) != image.width * image.height:
                issues.append(f'Tile {entry.name} has {len(image.pixels)} pixels, but a '
                              f'{image.width}x{image.height} tile must have {image.width * image.height}.')

        return issues
