'''
# Planar pixel data

Legacy video hardware (CGA, EGA, Amiga, Atari ST and friends) doesn't store the
bits of a pixel contiguously: the bits with the same significance for a run of
pixels are grouped together into a "plane", and the planes follow each other.

The parameters describing the layout are

 1. planes: the number of bits per pixel, e.g. 4 for 16-colour EGA data,
    5 for 16-colour data with a transparency mask
 2. plane_width: the number of pixels stored before switching to the next
    plane; 8 for byte-planar data, the image width for row-planar data and
    the whole image size for plane-sequential data
 3. byte_order_msb: if the most significant bit of a byte is the left-most
    pixel (True) or the least significant one (False)

Plane p always supplies bit p of the linear pixel value.

Inputs whose length is not a whole number of blocks are not really defined:
here the reads past the end of the input give zero bits and the writes past the
end of the output are discarded, so the result is truncated.
'''
import logging

from ..exceptions import InvalidArgumentException


logger = logging.getLogger(__name__)

# a linear pixel is a single byte
MAX_PLANES = 8


def _check_parameters(planes, plane_width):
    if plane_width <= 0:
        raise InvalidArgumentException(f'plane_width={plane_width} too small!')

    if not 1 <= planes <= MAX_PLANES:
        raise InvalidArgumentException(f'planes={planes} must be between 1 and {MAX_PLANES}')


def get_width_bytes(plane_width: int) -> int:
    '''Number of bytes used by a stride of a single plane.'''
    return (plane_width + 7) // 8


def from_planar(content, planes: int, plane_width: int, byte_order_msb: bool) -> bytearray:
    '''Convert packed planar pixel data to linear, one byte per pixel.

    The content is walked in strides of one plane, the planes cycling fastest,
    and each stride ORs its bits into the same window of the output; the
    window moves forward only after the last plane.'''
    _check_parameters(planes, plane_width)

    width_bytes = get_width_bytes(plane_width)
    length = len(content)
    out = bytearray(length * 8 // planes)
    out_length = len(out)

    logger.debug(f'from_planar(): {length} bytes, planes={planes} plane_width={plane_width} msb={byte_order_msb}')

    outpos = 0
    for stride, offset in enumerate(range(0, length, width_bytes)):
        plane = stride % planes
        for b in range(plane_width):
            src = offset + b // 8
            dst = outpos + b
            if src >= length or dst >= out_length:
                break
            bit = 7 - (b % 8) if byte_order_msb else b % 8
            out[dst] |= ((content[src] >> bit) & 1) << plane

        if plane == planes - 1:
            outpos += plane_width

    return out


def to_planar(content, planes: int, plane_width: int, byte_order_msb: bool) -> bytearray:
    '''Convert linear pixel data, one byte per pixel, to packed planar.

    This is the inverse of from_planar() for the same parameters.'''
    _check_parameters(planes, plane_width)

    width_bytes = get_width_bytes(plane_width)
    out = bytearray(len(content) * planes // 8)
    out_length = len(out)

    logger.debug(f'to_planar(): {len(content)} pixels, planes={planes} plane_width={plane_width} msb={byte_order_msb}')

    outpos = 0
    for idx, pixel in enumerate(content):
        pixel_byte = (idx // 8) % width_bytes
        pixel_bit = 7 - (idx % 8) if byte_order_msb else idx % 8
        for b in range(planes):
            dst = outpos + pixel_byte + b * width_bytes
            if dst < out_length:
                out[dst] |= ((pixel >> b) & 1) << pixel_bit

        if idx % plane_width == plane_width - 1:
            outpos += planes * width_bytes

    return out
