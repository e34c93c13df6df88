""" Encoding of parse and lex actions into runtime instructions. """

import logging
from . import ir
from .common import AmbiguousActionError, ValidationError
from .naming import symbol_id
from .tables import ParseAction, Accept, Shift, Reduce
from .tables import LexAction, Advance, AcceptToken, LexError


def call(callee, *args):
    return ir.Instruction(ir.Call(callee, args))


def check_kinds(actions, kind, table, state, key):
    """ Refuse actions that belong to the other table """
    for action in actions:
        if not isinstance(action, kind):
            raise ValidationError(
                '{!r} is not a {} action'.format(action, table),
                table=table, state=state, key=key)


class ActionEncoder:
    """ Turn action sets into single instructions.

    A resolved table has one action per key. When a set holds more than
    one action, strict mode refuses it. Otherwise the first action in
    canonical order (Accept < Shift < Reduce, Advance < AcceptToken <
    LexError, then by payload) is used.
    """
    def __init__(self, strict=True):
        self.logger = logging.getLogger('dispatchgen.actions')
        self.strict = strict

    def select(self, actions, table, state, key):
        """ Pick the single action to encode from a non empty set """
        ordered = sorted(set(actions))
        if len(ordered) > 1:
            if self.strict:
                raise AmbiguousActionError(
                    'Conflicting actions {}'.format(ordered),
                    table=table, state=state, key=key)
            self.logger.warning(
                'Conflict in %s state %s on %r, using %s out of %s',
                table, state, key, ordered[0], ordered)
        return ordered[0]

    def encode_parse_actions(self, actions, state=None, symbol=None):
        """ Encode the action set for one lookahead symbol """
        if not actions:
            raise ValidationError(
                'Empty action set', table='parse', state=state, key=symbol)
        check_kinds(actions, ParseAction, 'parse', state, symbol)
        action = self.select(actions, 'parse', state, symbol)
        return self.encode_parse_action(action, state=state, symbol=symbol)

    def encode_parse_action(self, action, state=None, symbol=None):
        if isinstance(action, Accept):
            return call('ACCEPT_INPUT')
        elif isinstance(action, Shift):
            return call('SHIFT', ir.Number(action.to_state))
        elif isinstance(action, Reduce):
            if len(action.collapse_flags) != action.arity:
                raise ValidationError(
                    'Reduce of arity {} has {} collapse flags'.format(
                        action.arity, len(action.collapse_flags)),
                    table='parse', state=state, key=symbol)
            mask = ir.Call('COLLAPSE', [ir.Initializer(
                ir.Number(int(flag)) for flag in action.collapse_flags)])
            return call(
                'REDUCE',
                ir.Name(symbol_id(action.symbol)),
                ir.Number(action.arity),
                mask)
        else:
            raise ValidationError(
                '{!r} is not a parse action'.format(action),
                table='parse', state=state, key=symbol)

    def parse_error(self, expected_inputs):
        """ Report a parse error listing the expected symbols """
        expected = ir.Call('EXPECT', [ir.Initializer(
            ir.Name(symbol_id(symbol)) for symbol in expected_inputs)])
        return call('PARSE_ERROR', ir.Number(len(expected_inputs)), expected)

    def encode_lex_actions(self, actions, state=None, key=None):
        """ Encode the action set for one character class.

        An empty set means there is no way forward, which is a lex
        error.
        """
        if not actions:
            return call('LEX_ERROR')
        check_kinds(actions, LexAction, 'lex', state, key)
        action = self.select(actions, 'lex', state, key)
        return self.encode_lex_action(action, state=state, key=key)

    def encode_lex_action(self, action, state=None, key=None):
        if isinstance(action, Advance):
            return call('ADVANCE', ir.Number(action.to_state))
        elif isinstance(action, AcceptToken):
            return call('ACCEPT_TOKEN', ir.Name(symbol_id(action.symbol)))
        elif isinstance(action, LexError):
            return call('LEX_ERROR')
        else:
            raise ValidationError(
                '{!r} is not a lex action'.format(action),
                table='lex', state=state, key=key)
