""" Dispatch blocks for single parser and lexer states. """

from . import ir
from .actions import ActionEncoder, call
from .conditions import condition_for_rule
from .naming import symbol_id


class StateEmitter:
    """ Build the dispatch statement for one state at a time """
    def __init__(self, encoder=None):
        if encoder is None:
            encoder = ActionEncoder()
        self.encoder = encoder

    def parse_state(self, parse_state, index=None):
        """ Pin the lexer state, then switch on the lookahead symbol.

        Every symbol with an action gets its own case. The default case
        reports a parse error listing all of those symbols.
        """
        expected_inputs = parse_state.expected_inputs()
        cases = []
        for symbol, actions in parse_state.actions:
            body = self.encoder.encode_parse_actions(
                actions, state=index, symbol=symbol)
            cases.append(ir.Case(ir.Name(symbol_id(symbol)), body))
        default = ir.Default(self.encoder.parse_error(expected_inputs))
        return ir.Compound([
            call('SET_LEX_STATE', ir.Number(parse_state.lex_state_id)),
            ir.Switch(ir.Call('LOOKAHEAD_SYM'), cases, default),
        ])

    def lex_state(self, lex_state, index=None):
        """ Test the character classes one after the other.

        Classes may overlap, so the guards are not exclusive and the
        first guard that holds wins. The default actions follow the
        last guard unconditionally.
        """
        statements = []
        for character_set, actions in lex_state.actions:
            body = self.encoder.encode_lex_actions(
                actions, state=index, key=character_set)
            statements.append(ir.If(condition_for_rule(character_set), body))
        statements.append(self.encoder.encode_lex_actions(
            lex_state.default_actions, state=index, key='default'))
        return ir.Compound(statements)
