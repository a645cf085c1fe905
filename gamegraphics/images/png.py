'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html>.

Here it's used as the exchange format with the outside world, so only indexed
images are supported: a truecolor PNG has no palette to map into the
legacy formats. The decoding itself is left to Pillow.
'''
import io
import logging
from typing import Dict, List

import PIL.Image

from ..core import Image, Palette
from ..enum import Confidence
from ..exceptions import MagicException, UnpackException
from ..handler import FormatHandler, Metadata, get_main


logger = logging.getLogger(__name__)

PNG_SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'


class PNGHandler(FormatHandler):

    @classmethod
    def metadata(cls) -> Metadata:
        return Metadata(
            id='img-png',
            title='Portable Network Graphics',
            glob=('*.png',),
        )

    @classmethod
    def identify(cls, content) -> Confidence:
        if bytes(content[:len(PNG_SIGNATURE)]) == PNG_SIGNATURE:
            return Confidence.DEFINITE_MATCH

        return Confidence.DEFINITE_NO_MATCH

    @classmethod
    def parse(cls, content) -> Image:
        data = bytes(get_main(content))
        if data[:len(PNG_SIGNATURE)] != PNG_SIGNATURE:
            raise MagicException('the signature doesn\'t correspond', handler=cls.metadata().id)

        try:
            png = PIL.Image.open(io.BytesIO(data))
            png.load()
        except (OSError, SyntaxError) as e:
            raise UnpackException(f'unable to decode: {e}', handler=cls.metadata().id) from e

        if png.mode != 'P':
            raise UnpackException(f'colour mode {png.mode!r} not supported, the image must be indexed',
                                  handler=cls.metadata().id)

        palette = Palette.from_rgb(png.getpalette() or [])

        # a single transparent index or one alpha value for each entry
        transparency = png.info.get('transparency')
        if isinstance(transparency, int):
            transparency = bytes([255] * transparency + [0])
        if isinstance(transparency, bytes):
            for idx, alpha in enumerate(transparency[:len(palette)]):
                palette[idx] = palette[idx][:3] + (alpha,)

        logger.debug(f'decoded {png.width}x{png.height} image with {len(palette)} colours')

        return Image(png.width, png.height, png.tobytes(), palette)

    @classmethod
    def generate(cls, image: Image) -> Dict[str, bytes]:
        png = PIL.Image.frombytes('P', (image.width, image.height), bytes(image.pixels))
        png.putpalette(image.palette.to_rgb())

        options = {}
        if image.palette.has_alpha:
            options['transparency'] = bytes(color[3] for color in image.palette)

        output = io.BytesIO()
        png.save(output, format='PNG', **options)

        return {
            'main': output.getvalue(),
        }

    @classmethod
    def check_limits(cls, image: Image) -> List[str]:
        issues = []

        if image.width <= 0 or image.height <= 0:
            issues.append(f'The image is {image.width}x{image.height}, but both dimensions must be positive.')

        if len(image.pixels) != image.width * image.height:
            issues.append(f'The image has {len(image.pixels)} pixels, but a '
                          f'{image.width}x{image.height} image must have {image.width * image.height}.')

        if image.palette is None:
            issues.append('The image has no palette, but this format can only store indexed images.')
            return issues

        if not 0 < len(image.palette) <= 256:
            issues.append(f'The palette has {len(image.palette)} entries, but this format '
                          f'can only store from 1 to 256 entries.')

        if image.pixels and max(image.pixels) >= len(image.palette):
            issues.append(f'The pixel value {max(image.pixels)} is outside the palette '
                          f'of {len(image.palette)} entries.')

        return issues
