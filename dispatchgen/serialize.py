""" Load and save tables as json.

A document looks like this::

    {
      "name": "calc",
      "symbols": [{"name": "end"}, {"name": "expr_repeat", "auxiliary": true}],
      "parse_states": [
        {"lex_state": 0,
         "actions": [{"symbol": 0, "actions": [{"type": "accept"}]}]}
      ],
      "lex_states": [
        {"actions": [{"ranges": [["a", "z"]],
                      "actions": [{"type": "advance", "state": 0}]}],
         "default": []}
      ],
      "lex_error_state": {"actions": [], "default": []}
    }

Symbols are referred to by their index in the symbols list.
"""

import json
from .charset import CharacterSet
from .common import TableFormatError
from .validation import is_index
from .tables import Symbol, ParseTable, ParseState, LexTable, LexState
from .tables import Accept, Shift, Reduce, Advance, AcceptToken, LexError


def load_tables(input_file):
    """ Load name, parse table and lex table from a json file """
    try:
        data = json.load(input_file)
    except ValueError as ex:
        raise TableFormatError('Invalid json: {}'.format(ex))
    return deserialize(data)


def save_tables(name, parse_table, lex_table, output_file):
    """ Write tables to a json file """
    data = serialize(name, parse_table, lex_table)
    json.dump(data, output_file, indent=2, sort_keys=True)


def serialize(name, parse_table, lex_table):
    """ Serialize tables into a dictionary structure suitable for json """
    symbol_numbers = {s: i for i, s in enumerate(parse_table.symbols)}

    def symbol_ref(symbol):
        return symbol_numbers[symbol]

    def action(a):
        if isinstance(a, Accept):
            return {'type': 'accept'}
        elif isinstance(a, Shift):
            return {'type': 'shift', 'state': a.to_state}
        elif isinstance(a, Reduce):
            return {
                'type': 'reduce',
                'symbol': symbol_ref(a.symbol),
                'arity': a.arity,
                'collapse': list(a.collapse_flags),
            }
        elif isinstance(a, Advance):
            return {'type': 'advance', 'state': a.to_state}
        elif isinstance(a, AcceptToken):
            return {'type': 'accept_token', 'symbol': symbol_ref(a.symbol)}
        elif isinstance(a, LexError):
            return {'type': 'error'}
        else:  # pragma: no cover
            raise NotImplementedError(str(type(a)))

    def actions(s):
        return [action(a) for a in sorted(s)]

    def lex_state(state):
        return {
            'actions': [
                {'ranges': [list(r) for r in cs.ranges],
                 'actions': actions(a)}
                for cs, a in state.actions],
            'default': actions(state.default_actions),
        }

    res = {}
    res['name'] = name
    res['symbols'] = []
    for symbol in parse_table.symbols:
        entry = {'name': symbol.name}
        if symbol.is_auxiliary:
            entry['auxiliary'] = True
        res['symbols'].append(entry)

    res['parse_states'] = []
    for state in parse_table.states:
        res['parse_states'].append({
            'lex_state': state.lex_state_id,
            'actions': [
                {'symbol': symbol_ref(s), 'actions': actions(a)}
                for s, a in state.actions],
        })
    res['lex_states'] = [lex_state(s) for s in lex_table.states]
    res['lex_error_state'] = lex_state(lex_table.error_state)
    return res


def deserialize(data):
    """ Create tables from dict-like data.

    Returns a tuple (name, parse_table, lex_table).
    """
    try:
        return TableReader(data).read()
    except (KeyError, TypeError, ValueError) as ex:
        raise TableFormatError('Malformed table document: {!r}'.format(ex))


class TableReader:
    def __init__(self, data):
        self.data = data
        self.symbols = [
            Symbol(self.string(s['name']), s.get('auxiliary', False))
            for s in data['symbols']]

    def read(self):
        parse_states = [
            self.parse_state(state) for state in self.data['parse_states']]
        lex_states = [
            self.lex_state(state) for state in self.data['lex_states']]
        error_state = self.lex_state(self.data['lex_error_state'])
        parse_table = ParseTable(self.symbols, parse_states)
        lex_table = LexTable(lex_states, error_state)
        return self.string(self.data['name']), parse_table, lex_table

    @staticmethod
    def integer(value):
        if not is_index(value):
            raise TableFormatError(
                'Expected an integer, got {!r}'.format(value))
        return value

    @staticmethod
    def string(value):
        if not isinstance(value, str):
            raise TableFormatError(
                'Expected a string, got {!r}'.format(value))
        return value

    def symbol(self, ref):
        if not is_index(ref) or not 0 <= ref < len(self.symbols):
            raise TableFormatError('Invalid symbol reference {!r}'.format(ref))
        return self.symbols[ref]

    def parse_state(self, state):
        pairs = [
            (self.symbol(entry['symbol']),
             [self.action(a) for a in entry['actions']])
            for entry in state['actions']]
        return ParseState(pairs, self.integer(state['lex_state']))

    def lex_state(self, state):
        pairs = [
            (self.character_set(entry['ranges']),
             [self.action(a) for a in entry['actions']])
            for entry in state['actions']]
        default = [self.action(a) for a in state.get('default', [])]
        return LexState(pairs, default)

    @staticmethod
    def character_set(ranges):
        """ Ranges are [min, max] pairs or single characters """
        members = []
        for r in ranges:
            if isinstance(r, list):
                if len(r) != 2:
                    raise TableFormatError('Invalid range {!r}'.format(r))
                members.append(tuple(r))
            else:
                members.append(r)
        return CharacterSet(*members)

    def action(self, data):
        typ = data['type']
        if typ == 'accept':
            return Accept()
        elif typ == 'shift':
            return Shift(self.integer(data['state']))
        elif typ == 'reduce':
            collapse = data['collapse']
            if not isinstance(collapse, list) or \
                    not all(isinstance(f, bool) for f in collapse):
                raise TableFormatError(
                    'Invalid collapse flags {!r}'.format(collapse))
            return Reduce(
                self.symbol(data['symbol']), self.integer(data['arity']),
                collapse)
        elif typ == 'advance':
            return Advance(self.integer(data['state']))
        elif typ == 'accept_token':
            return AcceptToken(self.symbol(data['symbol']))
        elif typ == 'error':
            return LexError()
        else:
            raise TableFormatError('Unknown action type {!r}'.format(typ))
