""" Dispatch code generator.

Turn a parse table and a lex table, stored as json, into dispatch
code for the parser runtime:

.. code::

    $ dispatchgen-generate calc.json -o calc_parser.c

"""

import argparse
from .base import base_parser, LogSetup
from ..generator import CodeGenerator, DEFAULT_RUNTIME_HEADER
from ..printer import print_tree
from ..serialize import load_tables


parser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.RawDescriptionHelpFormatter,
    parents=[base_parser])
parser.add_argument(
    'source', type=argparse.FileType('r'), help='the json table file')
parser.add_argument(
    '-o', '--output', type=argparse.FileType('w'), required=True)
parser.add_argument(
    '--name', help='language name, overrides the name in the table file')
parser.add_argument(
    '--header', default=DEFAULT_RUNTIME_HEADER,
    help='runtime header to include (default: %(default)s)')
parser.add_argument(
    '--permissive', action='store_true', default=False,
    help='resolve conflicting actions by picking the first one')
parser.add_argument(
    '--ir', action='store_true', default=False,
    help='output the dispatch tree instead of code')


def generate(args=None):
    """ Generate dispatch code from json tables """
    args = parser.parse_args(args)
    with LogSetup(args):
        with args.source:
            name, parse_table, lex_table = load_tables(args.source)
        if args.name:
            name = args.name
        generator = CodeGenerator(
            name, parse_table, lex_table, strict=not args.permissive,
            runtime_header=args.header)
        if args.ir:
            print_tree(generator.build(), file=args.output)
        else:
            args.output.write(generator.code())
        args.output.close()


if __name__ == '__main__':
    generate()
