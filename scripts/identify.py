#!/usr/bin/env python3
'''
Print the formats that could be used to read each file.

 $ identify.py VGADAVE.DAV title.png
'''
import logging
import os
import sys

import gamegraphics


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'usage: {progname} <file> [<file>...]')
    sys.exit(1)


def identify(path):
    with open(path, 'rb') as f:
        content = f.read()

    handlers = gamegraphics.find_handler(content)
    if not handlers:
        return f'{path}: unknown format'

    ids = ', '.join(_.metadata().id for _ in handlers)
    if len(handlers) > 1:
        return f'{path}: one of {ids}'

    return f'{path}: {ids}'


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    for path in sys.argv[1:]:
        try:
            print(identify(path))
        except OSError as e:
            logger.error(f'unable to read \'{path}\': {e}')
