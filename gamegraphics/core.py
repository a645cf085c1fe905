"""
Canonical in-memory representation of the graphics handled by the formats.

Every handler parses its file into one of these objects and generates its file
from one of these objects, so converting between two formats is just a matter
of chaining the parse() of the first with the generate() of the second.
"""
import logging
from typing import Callable, List, Optional, Tuple


logger = logging.getLogger(__name__)

Color = Tuple[int, int, int, int]


class Entry(object):
    '''A named resource inside a collection.

    The content is produced lazily via get_content() so that it's possible to
    check the limits of a collection without decoding everything; native_size
    is the size of the content as it will be stored and it's used to
    preallocate the output, for this reason should be always set.'''

    def __init__(self, name: str, native_size: int = 0, get_content: Optional[Callable[[], bytes]] = None):
        self.name = name
        self.native_size = native_size
        self.get_content = get_content if get_content is not None else (lambda: b'')

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.name!r}, native_size={self.native_size})>'

    @property
    def content(self) -> bytes:
        return self.get_content()


class Collection(object):
    '''Ordered set of entries that a handler will serialize.'''

    def __init__(self, files: Optional[List[Entry]] = None):
        self.files = files if files is not None else []

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.files!r})>'

    def __len__(self):
        return len(self.files)

    def __getitem__(self, item):
        return self.files[item]

    def __iter__(self):
        return iter(self.files)


class Palette(object):
    '''List of RGBA colours, 8 bits per channel.'''

    def __init__(self, entries: Optional[List[Color]] = None):
        self.entries = [tuple(_) for _ in entries] if entries is not None else []

    def __repr__(self):
        return f'<{self.__class__.__name__}({len(self.entries)} entries)>'

    def __len__(self):
        return len(self.entries)

    def __getitem__(self, item):
        return self.entries[item]

    def __setitem__(self, item, value):
        self.entries[item] = tuple(value)

    def __iter__(self):
        return iter(self.entries)

    def __eq__(self, other):
        return isinstance(other, Palette) and self.entries == other.entries

    def append(self, color: Color):
        self.entries.append(tuple(color))

    @classmethod
    def from_rgb(cls, data, alpha=255) -> "Palette":
        '''Build the palette from a flat sequence of RGB triplets.'''
        return cls([
            (data[idx], data[idx + 1], data[idx + 2], alpha)
            for idx in range(0, len(data) - len(data) % 3, 3)
        ])

    def to_rgb(self) -> bytes:
        '''The inverse of from_rgb(), the alpha channel is lost.'''
        return bytes(channel for color in self.entries for channel in color[:3])

    @property
    def has_alpha(self) -> bool:
        return any(color[3] != 255 for color in self.entries)


class Image(object):
    '''Indexed image: each pixel is a single byte with the index of its colour
    in the palette, the pixels are stored row after row.'''

    def __init__(self, width: int, height: int, pixels=None, palette: Optional[Palette] = None):
        self.width = width
        self.height = height
        self.pixels = bytearray(pixels) if pixels is not None else bytearray(width * height)
        self.palette = palette

    def __repr__(self):
        return '<%s(%dx%d, palette=%r)>' % (
            self.__class__.__name__,
            self.width,
            self.height,
            self.palette,
        )

    @property
    def dims(self) -> Tuple[int, int]:
        return self.width, self.height

    def get_pixel(self, x: int, y: int) -> int:
        return self.pixels[y * self.width + x]

    def set_pixel(self, x: int, y: int, value: int) -> None:
        self.pixels[y * self.width + x] = value


class ImageEntry(Entry):
    '''Entry of a collection made of images, the content is the pixel data.'''

    def __init__(self, name: str, image: Image):
        self.name = name
        self.image = image

    @property
    def native_size(self) -> int:
        return len(self.image.pixels)

    def get_content(self) -> bytes:
        return bytes(self.image.pixels)


class Tileset(Collection):
    '''Collection of images sharing the same palette.'''

    def __init__(self, files: Optional[List[ImageEntry]] = None, palette: Optional[Palette] = None):
        super().__init__(files)
        self.palette = palette

    @property
    def images(self) -> List[Image]:
        return [_.image for _ in self.files]

    def append(self, image: Image, name: Optional[str] = None) -> ImageEntry:
        entry = ImageEntry(name if name is not None else 'tile%03d' % len(self.files), image)
        self.files.append(entry)

        return entry
