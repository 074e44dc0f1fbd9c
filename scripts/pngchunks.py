#!/usr/bin/env python3
'''
Hide messages into PNG files

 $ pngchunks.py encode image.png ruSt "this is a secret"
 $ pngchunks.py decode image.png ruSt
 this is a secret
 $ pngchunks.py remove image.png ruSt
 $ pngchunks.py print image.png
'''
import logging
import os
import sys
from argparse import ArgumentParser

from pngme import commands
from pngme.exceptions import PNGException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def fail_hard(*s):
    if s:
        print(*s, file=sys.stderr)
    sys.exit(1)


def read(path):
    with open(path, 'rb') as f:
        return f.read()


def write(path, data):
    with open(path, 'wb') as f:
        f.write(data)


def main_encode(args):
    write(args.file_path, commands.encode(read(args.file_path), args.chunk_type, args.message))


def main_decode(args):
    print(commands.decode(read(args.file_path), args.chunk_type))


def main_remove(args):
    write(args.file_path, commands.remove(read(args.file_path), args.chunk_type))


def main_print(args):
    for summary in commands.print_chunks(read(args.file_path)):
        print(summary)


def get_parser():
    parser = ArgumentParser(description='hide messages into PNG files')
    subparsers = parser.add_subparsers(dest='command', required=True)

    encode = subparsers.add_parser('encode', help='append a chunk containing a message')
    encode.add_argument('file_path')
    encode.add_argument('chunk_type')
    encode.add_argument('message')
    encode.set_defaults(func=main_encode)

    decode = subparsers.add_parser('decode', help='print the message of the first chunk of the given type')
    decode.add_argument('file_path')
    decode.add_argument('chunk_type')
    decode.set_defaults(func=main_decode)

    remove = subparsers.add_parser('remove', help='remove the first chunk of the given type')
    remove.add_argument('file_path')
    remove.add_argument('chunk_type')
    remove.set_defaults(func=main_remove)

    dump = subparsers.add_parser('print', help='print all the chunks')
    dump.add_argument('file_path')
    dump.set_defaults(func=main_print)

    return parser


if __name__ == '__main__':
    args = get_parser().parse_args()

    try:
        args.func(args)
    except (PNGException, OSError) as e:
        logger.debug('failed with chain %s', getattr(e, 'chain', None))
        fail_hard(f'{e.__class__.__name__}: {e}')
