"""
# gamegraphics: legacy game graphics for humans

Games of the DOS era store their graphics in a lot of different ways, mostly
dictated by the video hardware: linear one byte per pixel for VGA, bits split
across planes for EGA, palettes with 6 bits per channel and so on.

Each file format is implemented by a handler (see gamegraphics.handler) that
defines the following operations

 1. identify(): tell if some content is in its format
 2. parse(): decode the content into an Image, a Palette or a Tileset
 3. check_limits(): list the problems preventing a model to be written
 4. generate(): encode the model back into the content of a file

The handlers are collected in a registry, so that it's possible to find the
right one for some content without knowing its format in advance

    content = open('screen.png', 'rb').read()
    handlers = gamegraphics.find_handler(content)
    image = handlers[0].parse({'main': content})
"""
from .core import Entry, Collection, Image, ImageEntry, Palette, Tileset
from .enum import Confidence
from .formats import FILE_TYPES, registry


def get_handler(id):
    '''Get a handler by its identifier, None if there is no such handler.'''
    return registry.get_handler(id)


def find_handler(content):
    '''Get the handlers able to read the content, an empty list if the format
    could not be identified.'''
    return registry.find_handler(content)


def list_handlers():
    '''Get all the available handlers, probably useful only for testing.'''
    return registry.list_handlers()
