import pytest

from gamegraphics.common.planes import dump_planes, iter_plane_strides
from gamegraphics.exceptions import InvalidArgumentException


def test_dump_planes():
    assert dump_planes(bytes([0xaa, 0x55]), 2, 8) == '0: #.#.#.#.\n1: .#.#.#.#'


def test_dump_planes_lsb():
    assert dump_planes(b'\x01', 1, 8, byte_order_msb=False) == '0: #.......'
    assert dump_planes(b'\x01', 1, 8) == '0: .......#'


def test_iter_plane_strides_partial_bytes():
    """Plane widths not multiple of 8 use only the first bits of the last byte."""
    strides = list(iter_plane_strides(bytes([0xf0, 0x0f, 0xff]), 1, 12))

    assert [plane for plane, _ in strides] == [0, 0]
    assert strides[0][1].bin == '111100000000'
    # the missing byte is read as zero
    assert strides[1][1].bin == '111111110000'


def test_iter_plane_strides_invalid():
    with pytest.raises(InvalidArgumentException):
        list(iter_plane_strides(b'\x00', 1, 0))
