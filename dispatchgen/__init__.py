""" Dispatch code generator for table driven parsers and scanners.

Turns an LR parse table and a lexical automaton into dispatch code
for a small runtime of primitive operations.

Example usage:

>>> from dispatchgen.api import generate
>>> from dispatchgen.tables import Symbol, ParseTable, ParseState, Accept
>>> from dispatchgen.tables import LexTable, LexState
>>> end = Symbol('end')
>>> parse_table = ParseTable([end], [ParseState({end: Accept()}, 0)])
>>> lex_table = LexTable([LexState({})], LexState({}))
>>> print(generate('tiny', parse_table, lex_table).splitlines()[-1])
EXPORT_PARSER(parse_config_tiny);

"""

# Define version here. Used in docs, and setup script:
__version_info__ = (0, 3, 1)
__version__ = '.'.join(map(str, __version_info__))
