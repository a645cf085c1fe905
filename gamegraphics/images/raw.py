'''
# Raw screen dumps

Many games store the full screen images exactly as they go into the video
memory, with no header at all. The only way to recognize them is the size,
that's why these handlers are the last ones to be tried.

 - VGA mode 13h: 320x200, one byte per pixel, the palette (if any) goes into
   a separate file
 - EGA mode 0Dh: 320x200, 16 colours in 4 planes; depending on the game the
   planes are switched every row or every byte
'''
import logging
import os
from typing import Dict, List, Optional

from ..common.planar import from_planar, to_planar
from ..core import Image
from ..enum import Confidence
from ..exceptions import UnpackException
from ..handler import FormatHandler, Metadata, get_main
from ..palettes.ega import ega_palette
from ..palettes.vga import VGA6bitPaletteHandler


logger = logging.getLogger(__name__)


class RawImageHandler(FormatHandler):
    WIDTH  = 320
    HEIGHT = 200
    PLANES = 8

    @classmethod
    def get_file_size(cls) -> int:
        return cls.WIDTH * cls.HEIGHT * cls.PLANES // 8

    @classmethod
    def identify(cls, content) -> Confidence:
        if len(content) == cls.get_file_size():
            return Confidence.POSSIBLE_MATCH

        return Confidence.DEFINITE_NO_MATCH

    @classmethod
    def get_main_checked(cls, content) -> bytes:
        data = get_main(content)
        if len(data) != cls.get_file_size():
            raise UnpackException(f'content is {len(data)} bytes but it must be {cls.get_file_size()}',
                                  handler=cls.metadata().id)

        return data

    @classmethod
    def check_limits(cls, image: Image) -> List[str]:
        issues = []

        if image.dims != (cls.WIDTH, cls.HEIGHT):
            issues.append(f'The image is {image.width}x{image.height}, but this format '
                          f'can only store {cls.WIDTH}x{cls.HEIGHT} images.')

        if len(image.pixels) != image.width * image.height:
            issues.append(f'The image has {len(image.pixels)} pixels, but a '
                          f'{image.width}x{image.height} image must have {image.width * image.height}.')

        max_value = (1 << cls.PLANES) - 1
        if image.pixels and max(image.pixels) > max_value:
            issues.append(f'The pixel value {max(image.pixels)} is too large, this format '
                          f'can only store values up to {max_value}.')

        return issues


class LinearRawImageHandler(RawImageHandler):

    @classmethod
    def metadata(cls) -> Metadata:
        return Metadata(
            id='img-raw-linear-8bpp',
            title='Raw 8bpp VGA image (320x200)',
            glob=('*.raw', '*.bin'),
        )

    @classmethod
    def supps(cls, name: str, content) -> Optional[Dict[str, str]]:
        return {
            'palette': os.path.splitext(name)[0] + '.pal',
        }

    @classmethod
    def check_limits(cls, image: Image) -> List[str]:
        issues = super().check_limits(image)

        # the palette goes into its own file
        if image.palette is not None:
            issues.extend(VGA6bitPaletteHandler.check_limits(image.palette))

        return issues

    @classmethod
    def parse(cls, content) -> Image:
        data = cls.get_main_checked(content)

        palette = None
        if isinstance(content, dict) and content.get('palette') is not None:
            palette = VGA6bitPaletteHandler.parse(content['palette'])
        else:
            logger.debug('no palette file, the image will have no palette')

        return Image(cls.WIDTH, cls.HEIGHT, data, palette)

    @classmethod
    def generate(cls, image: Image) -> Dict[str, bytes]:
        output = {
            'main': bytes(image.pixels),
        }
        if image.palette is not None:
            output['palette'] = VGA6bitPaletteHandler.generate(image.palette)['main']

        return output


class PlanarRawImageHandler(RawImageHandler):
    PLANES = 4
    PLANE_WIDTH = RawImageHandler.WIDTH
    BYTE_ORDER_MSB = True

    @classmethod
    def parse(cls, content) -> Image:
        data = cls.get_main_checked(content)
        pixels = from_planar(data, cls.PLANES, cls.PLANE_WIDTH, cls.BYTE_ORDER_MSB)

        return Image(cls.WIDTH, cls.HEIGHT, pixels, ega_palette())

    @classmethod
    def generate(cls, image: Image) -> Dict[str, bytes]:
        return {
            'main': bytes(to_planar(image.pixels, cls.PLANES, cls.PLANE_WIDTH, cls.BYTE_ORDER_MSB)),
        }


class RowPlanarRawImageHandler(PlanarRawImageHandler):
    PLANE_WIDTH = RawImageHandler.WIDTH

    @classmethod
    def metadata(cls) -> Metadata:
        return Metadata(
            id='img-raw-planar-4bpp',
            title='Raw 4bpp row-planar EGA image (320x200)',
            glob=('*.raw', '*.bin'),
        )


class BytePlanarRawImageHandler(PlanarRawImageHandler):
    PLANE_WIDTH = 8

    @classmethod
    def metadata(cls) -> Metadata:
        return Metadata(
            id='img-raw-bplanar-4bpp',
            title='Raw 4bpp byte-planar EGA image (320x200)',
            glob=('*.raw', '*.bin'),
        )
