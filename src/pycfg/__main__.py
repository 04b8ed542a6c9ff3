# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2026/10/19 22:10:49
# @Author : Kariko Lin

"""Parse one cfg file and print it back, mostly for debugging."""

import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError

from .cfg import MAX_NAME_LEN, CfgParser, MalformedAssignment
from .cfg import dump, to_json, to_yaml

RENDERERS = {'cfg': dump, 'json': to_json, 'yaml': to_yaml}


def _name_len(arg: str) -> int:
    ret = int(arg)
    if ret < 0:
        raise ArgumentTypeError(f'must not be negative: {ret}')
    return ret


def _build_args() -> ArgumentParser:
    ret = ArgumentParser(prog='pycfg', description=__doc__)
    ret.add_argument('file', help='cfg file to parse.')
    ret.add_argument(
        '-e', '--encoding', default=None,
        help='file encoding; guessed when the default one fails.')
    ret.add_argument(
        '-f', '--format', choices=RENDERERS, default='cfg',
        help='how to print the document (default: %(default)s).')
    ret.add_argument(
        '--max-name-len', type=_name_len, default=MAX_NAME_LEN,
        help='truncate longer section/key names, 0 to disable '
             '(default: %(default)s).')
    ret.add_argument('-v', '--verbose', action='store_true')
    return ret


def main(argv: list[str] | None = None) -> int:
    args = _build_args().parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    parser = CfgParser(
        args.file, args.encoding,
        max_name_len=args.max_name_len or None)
    try:
        doc = parser.read()
    except (OSError, UnicodeDecodeError) as e:
        logging.error('unable to read %s: %s', parser, e)
        return 2
    except MalformedAssignment as e:
        logging.error('%s: %s (at offset %d)', args.file, e, e.position)
        return 1
    sys.stdout.write(RENDERERS[args.format](doc))
    return 0


if __name__ == '__main__':
    sys.exit(main())
