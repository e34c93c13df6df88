""" Consistency checks on the input tables.

All checks run before anything is emitted, so that a broken table
never results in a partial artifact.
"""

import logging
import re
from .actions import check_kinds
from .common import AmbiguousActionError, ValidationError
from .naming import check_unique_ids
from .tables import Symbol, ParseAction, LexAction
from .tables import Shift, Reduce, Advance, AcceptToken

ERROR_STATE = 'error'

_identifier = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


def is_index(value):
    """ Check for a plain integer, booleans do not count """
    return isinstance(value, int) and not isinstance(value, bool)


def validate(name, parse_table, lex_table, strict=True):
    """ Check tables, raise ValidationError on the first problem """
    TableValidator(parse_table, lex_table, strict=strict).validate(name)


class TableValidator:
    def __init__(self, parse_table, lex_table, strict=True):
        self.logger = logging.getLogger('dispatchgen.validation')
        self.parse_table = parse_table
        self.lex_table = lex_table
        self.strict = strict
        self.symbols = set(parse_table.symbols)

    def validate(self, name):
        if not isinstance(name, str) or not _identifier.fullmatch(name):
            raise ValidationError(
                'Language name {!r} is not an identifier'.format(name))
        for symbol in self.parse_table.symbols:
            if not isinstance(symbol, Symbol) or \
                    not isinstance(symbol.name, str):
                raise ValidationError(
                    'Invalid symbol {!r}'.format(symbol), table='parse')
        check_unique_ids(self.parse_table.symbols)
        for index, parse_state in enumerate(self.parse_table.states):
            self.check_parse_state(index, parse_state)
        for index, lex_state in enumerate(self.lex_table.states):
            self.check_lex_state(index, lex_state)
        self.check_lex_state(ERROR_STATE, self.lex_table.error_state)
        self.logger.debug(
            'Tables ok: %s symbols, %s parse states, %s lex states',
            len(self.parse_table.symbols), len(self.parse_table.states),
            len(self.lex_table.states))

    def check_parse_state(self, index, parse_state):
        n_lex_states = len(self.lex_table.states)
        lex_state_id = parse_state.lex_state_id
        if not is_index(lex_state_id) or \
                not 0 <= lex_state_id < n_lex_states:
            raise ValidationError(
                'Lex state {!r} out of range (0..{})'.format(
                    lex_state_id, n_lex_states - 1),
                table='parse', state=index)

        seen = set()
        for symbol, actions in parse_state.actions:
            if symbol in seen:
                raise ValidationError(
                    'Duplicate key', table='parse', state=index, key=symbol)
            seen.add(symbol)
            self.check_symbol(symbol, 'parse', index, symbol)
            if not actions:
                raise ValidationError(
                    'Empty action set', table='parse', state=index,
                    key=symbol)
            check_kinds(actions, ParseAction, 'parse', index, symbol)
            for action in actions:
                self.check_parse_action(action, index, symbol)
            self.check_ambiguity(actions, 'parse', index, symbol)

    def check_parse_action(self, action, index, symbol):
        if isinstance(action, Shift):
            self.check_target(
                action.to_state, len(self.parse_table.states), 'Shift',
                'parse', index, symbol)
        elif isinstance(action, Reduce):
            if not is_index(action.arity) or action.arity < 0:
                raise ValidationError(
                    'Invalid reduce arity {!r}'.format(action.arity),
                    table='parse', state=index, key=symbol)
            if len(action.collapse_flags) != action.arity:
                raise ValidationError(
                    'Reduce of arity {} has {} collapse flags'.format(
                        action.arity, len(action.collapse_flags)),
                    table='parse', state=index, key=symbol)
            self.check_symbol(action.symbol, 'parse', index, symbol)

    def check_lex_state(self, index, lex_state):
        seen = set()
        for character_set, actions in lex_state.actions:
            if character_set in seen:
                raise ValidationError(
                    'Duplicate key', table='lex', state=index,
                    key=character_set)
            seen.add(character_set)
            self.check_lex_actions(actions, index, character_set)
        self.check_lex_actions(lex_state.default_actions, index, 'default')

    def check_lex_actions(self, actions, index, key):
        check_kinds(actions, LexAction, 'lex', index, key)
        for action in actions:
            if isinstance(action, Advance):
                self.check_target(
                    action.to_state, len(self.lex_table.states), 'Advance',
                    'lex', index, key)
            elif isinstance(action, AcceptToken):
                self.check_symbol(action.symbol, 'lex', index, key)
        self.check_ambiguity(actions, 'lex', index, key)

    @staticmethod
    def check_target(target, n_states, what, table, index, key):
        if not is_index(target) or not 0 <= target < n_states:
            raise ValidationError(
                '{} to non existing state {!r}'.format(what, target),
                table=table, state=index, key=key)

    def check_ambiguity(self, actions, table, index, key):
        if len(actions) > 1:
            if self.strict:
                raise AmbiguousActionError(
                    'Conflicting actions {}'.format(sorted(actions)),
                    table=table, state=index, key=key)
            self.logger.debug(
                'Tolerating conflict in %s state %s on %r', table, index, key)

    def check_symbol(self, symbol, table, index, key):
        if symbol not in self.symbols:
            raise ValidationError(
                'Symbol {} is not declared'.format(symbol),
                table=table, state=index, key=key)
