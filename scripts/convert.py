#!/usr/bin/env python3
'''
Convert a file from one format to another.

 $ convert.py auto SCREEN.EGA img-png screen.png
 $ convert.py img-png screen.png img-raw-linear-8bpp SCREEN.VGA

The supplementary files (like the palette of a raw VGA image) are read from and
written to the same directory of the main file.
'''
import logging
import os
import sys

import gamegraphics


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} <input format|auto> <input file> <output format> <output file>

Available formats:''')
    for handler in gamegraphics.list_handlers():
        md = handler.metadata()
        print(f'  {md.id:<24} {md.title}')
    sys.exit(1)


def read_file(path):
    with open(path, 'rb') as f:
        return f.read()


def get_handler(id, content):
    if id != 'auto':
        handler = gamegraphics.get_handler(id)
        if handler is None:
            raise ValueError(f'unknown format \'{id}\'')
        return handler

    handlers = gamegraphics.find_handler(content)
    if not handlers:
        raise ValueError('unable to identify the format of the input file')
    if len(handlers) > 1:
        raise ValueError('the input file could be in any of these formats, indicate one explicitly: '
                         + ', '.join(_.metadata().id for _ in handlers))

    return handlers[0]


def load(handler, path, main):
    content = {'main': main}
    supps = handler.supps(os.path.basename(path), main) or {}
    for key, name in supps.items():
        supp_path = os.path.join(os.path.dirname(path), name)
        if not os.path.exists(supp_path):
            logger.warning(f'supplementary file \'{supp_path}\' not found')
            continue
        content[key] = read_file(supp_path)

    return content


def save(handler, path, output):
    supps = handler.supps(os.path.basename(path), output['main']) or {}
    for key, data in output.items():
        target = path if key == 'main' else os.path.join(os.path.dirname(path), supps[key])
        logger.info(f'writing {len(data)} bytes to \'{target}\'')
        with open(target, 'wb') as f:
            f.write(data)


if __name__ == '__main__':
    if len(sys.argv) < 5:
        usage(sys.argv[0])

    input_id, input_path, output_id, output_path = sys.argv[1:5]

    main = read_file(input_path)
    handler_in = get_handler(input_id, main)
    handler_out = get_handler(output_id, b'')

    model = handler_in.parse(load(handler_in, input_path, main))

    issues = handler_out.check_limits(model)
    if issues:
        for issue in issues:
            logger.error(issue)
        sys.exit(2)

    save(handler_out, output_path, handler_out.generate(model))
