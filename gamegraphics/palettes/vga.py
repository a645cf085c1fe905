'''
# VGA palettes

The VGA DAC takes 6 bits per channel, a lot of games store the palette exactly
in that way: 256 RGB triplets with values from 0 to 63. Others use the full
8 bits and leave the shift to the code loading the palette.

Both the formats have no header, so the best that can be done is checking the
size and the range of the values.
'''
import logging
from typing import Dict, List

from ..core import Palette
from ..enum import Confidence
from ..exceptions import UnpackException
from ..handler import FormatHandler, Metadata, get_main


logger = logging.getLogger(__name__)

MAX_ENTRIES = 256


class VGAPaletteHandler(FormatHandler):
    DEPTH = 8

    @classmethod
    def identify(cls, content) -> Confidence:
        length = len(content)
        if length == 0 or length % 3 != 0 or length > MAX_ENTRIES * 3:
            return Confidence.DEFINITE_NO_MATCH

        if max(content) >= 1 << cls.DEPTH:
            return Confidence.DEFINITE_NO_MATCH

        # with no signature a dim 8-bit palette can't be told from a 6-bit one
        return Confidence.POSSIBLE_MATCH

    @classmethod
    def expand(cls, value: int) -> int:
        return value

    @classmethod
    def reduce(cls, value: int) -> int:
        return value

    @classmethod
    def parse(cls, content) -> Palette:
        data = get_main(content)
        if len(data) and max(data) >= 1 << cls.DEPTH:
            raise UnpackException(f'values must be less than {1 << cls.DEPTH}', handler=cls.metadata().id)

        palette = Palette.from_rgb([cls.expand(_) for _ in data])
        logger.debug(f'parsed {palette!r} from {len(data)} bytes')

        return palette

    @classmethod
    def generate(cls, palette: Palette) -> Dict[str, bytes]:
        return {
            'main': bytes(cls.reduce(_) for _ in palette.to_rgb()),
        }

    @classmethod
    def check_limits(cls, palette: Palette) -> List[str]:
        issues = []
        if not 0 < len(palette) <= MAX_ENTRIES:
            issues.append(f'The palette has {len(palette)} entries, but this format '
                          f'can only store from 1 to {MAX_ENTRIES} entries.')

        if palette.has_alpha:
            logger.warning('the palette has transparent entries, the alpha channel will be lost')

        return issues


class VGA6bitPaletteHandler(VGAPaletteHandler):
    DEPTH = 6

    @classmethod
    def metadata(cls) -> Metadata:
        return Metadata(
            id='pal-vga-6bit',
            title='VGA 6-bit palette',
            glob=('*.pal',),
        )

    @classmethod
    def expand(cls, value: int) -> int:
        # replicate the top bits so that 63 becomes 255
        return (value << 2) | (value >> 4)

    @classmethod
    def reduce(cls, value: int) -> int:
        return value >> 2


class VGA8bitPaletteHandler(VGAPaletteHandler):
    DEPTH = 8

    @classmethod
    def metadata(cls) -> Metadata:
        return Metadata(
            id='pal-vga-8bit',
            title='VGA 8-bit palette',
            glob=('*.pal',),
        )
