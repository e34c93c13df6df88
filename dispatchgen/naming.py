""" Identifiers for grammar symbols.

The same identifier is used for the switch labels in the parser and
for the symbol enumeration, so it must be a pure function of the
symbol.
"""

import string
from .common import ValidationError


SYMBOL_PREFIX = 'sym_'
AUX_SYMBOL_PREFIX = 'aux_sym_'

_identifier_chars = frozenset(string.ascii_letters + string.digits + '_')


def mangle(name):
    """ Replace characters which cannot appear in a C identifier.

    Such characters become _x<hex>_. An underscore that is followed by
    an x is escaped as well, so that different names never mangle to
    the same identifier.

    >>> mangle('a-b')
    'a_x2d_b'
    >>> mangle('a_x2d_')
    'a_x5f_x2d_'
    """
    parts = []
    for index, c in enumerate(name):
        if c == '_' and name[index + 1:index + 2] == 'x':
            parts.append(_escape(c))
        elif c in _identifier_chars:
            parts.append(c)
        else:
            parts.append(_escape(c))
    return ''.join(parts)


def _escape(c):
    return '_x{:x}_'.format(ord(c))


def symbol_id(symbol):
    """ Get the identifier of a symbol.

    >>> from dispatchgen.tables import Symbol
    >>> symbol_id(Symbol('expression'))
    'sym_expression'
    >>> symbol_id(Symbol('expression', is_auxiliary=True))
    'aux_sym_expression'
    """
    if symbol.is_auxiliary:
        return AUX_SYMBOL_PREFIX + mangle(symbol.name)
    else:
        return SYMBOL_PREFIX + mangle(symbol.name)


def check_unique_ids(symbols):
    """ Raise when a symbol is declared twice.

    Identifiers are unique per symbol, so a repeated identifier means a
    repeated declaration.
    """
    seen = set()
    for symbol in symbols:
        identifier = symbol_id(symbol)
        if identifier in seen:
            raise ValidationError(
                'Symbol declared twice as {}'.format(identifier),
                table='parse', key=symbol)
        seen.add(identifier)
