'''Helpers to look at planar data one plane at a time, mostly useful when
trying to figure out the layout of an unknown file.'''
import logging

from bitstring import BitArray

from .planar import _check_parameters, get_width_bytes


logger = logging.getLogger(__name__)


def iter_plane_strides(content, planes, plane_width, byte_order_msb=True):
    '''Yield a couple (plane, bits) for each stride of the planar content,
    with bits a BitArray holding the plane_width pixels in left to right order.'''
    _check_parameters(planes, plane_width)
    width_bytes = get_width_bytes(plane_width)

    for stride, offset in enumerate(range(0, len(content), width_bytes)):
        data = bytes(content[offset:offset + width_bytes]).ljust(width_bytes, b'\x00')
        bits = BitArray(data)
        if not byte_order_msb:
            for idx in range(width_bytes):
                bits.reverse(idx * 8, idx * 8 + 8)

        yield stride % planes, bits[:plane_width]


def dump_planes(content, planes, plane_width, byte_order_msb=True, set_char='#', clear_char='.'):
    '''Return a textual representation of the planes, one line per stride.'''
    lines = []
    for plane, bits in iter_plane_strides(content, planes, plane_width, byte_order_msb):
        row = ''.join(set_char if bit else clear_char for bit in bits)
        lines.append(f'{plane}: {row}')

    return '\n'.join(lines)
