"""
The api module contains a set of handy functions to invoke dispatch
code generation.
"""

import logging
from .generator import CodeGenerator, DEFAULT_RUNTIME_HEADER
from .serialize import load_tables

__all__ = ['generate', 'generate_from_file']

logger = logging.getLogger('dispatchgen')


def generate(
        name, parse_table, lex_table, strict=True,
        runtime_header=DEFAULT_RUNTIME_HEADER):
    """ Generate dispatch code for the given tables.

    Args:
        name: the language name, used for the exported descriptor
        parse_table: the ParseTable to encode
        lex_table: the LexTable to encode
        strict: refuse action sets with more than one action
        runtime_header: the header providing the runtime primitives

    Returns:
        The generated source text.
    """
    generator = CodeGenerator(
        name, parse_table, lex_table, strict=strict,
        runtime_header=runtime_header)
    return generator.code()


def generate_from_file(f, name=None, **options):
    """ Load json tables from a file object and generate code for them.

    When name is given it overrides the name stored in the file.
    """
    stored_name, parse_table, lex_table = load_tables(f)
    if name is None:
        name = stored_name
    logger.info('Generating dispatch code for %s', name)
    return generate(name, parse_table, lex_table, **options)
