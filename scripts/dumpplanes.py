#!/usr/bin/env python3
'''
Show the bit planes of a file, useful to guess the layout of unknown data.

 $ dumpplanes.py 4 320 SCREEN.EGA | less
'''
import logging
import os
import sys

from gamegraphics.common.planes import dump_planes


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'usage: {progname} <planes> <plane width> <file> [lsb]')
    sys.exit(1)


if __name__ == '__main__':
    if len(sys.argv) < 4:
        usage(sys.argv[0])

    planes = int(sys.argv[1])
    plane_width = int(sys.argv[2])
    byte_order_msb = not (len(sys.argv) > 4 and sys.argv[4] == 'lsb')

    with open(sys.argv[3], 'rb') as f:
        content = f.read()

    print(dump_planes(content, planes, plane_width, byte_order_msb))
