'''
All the file formats known to the library.

The handlers are listed in order of reliability of their identification, the
autodetection stops at the first one claiming the content for sure.
'''
from ..registry import FormatRegistry
from ..images.png import PNGHandler
from ..images.raw import (
    LinearRawImageHandler,
    RowPlanarRawImageHandler,
    BytePlanarRawImageHandler,
)
from ..palettes.vga import (
    VGA6bitPaletteHandler,
    VGA8bitPaletteHandler,
)
from ..tilesets.ddave import DDaveVGATilesetHandler


FILE_TYPES = (
    # These file formats all have signatures so the autodetection is
    # fast and they are listed first.
    PNGHandler,

    # These formats require enumeration, sometimes all the way to the
    # end of the file, so they are next.
    DDaveVGATilesetHandler,
    VGA6bitPaletteHandler,
    VGA8bitPaletteHandler,

    # These formats are recognized only by their size so they are
    # often misidentified, thus they are last.
    LinearRawImageHandler,
    RowPlanarRawImageHandler,
    BytePlanarRawImageHandler,
)

registry = FormatRegistry(FILE_TYPES)
