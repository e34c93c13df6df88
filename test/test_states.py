import unittest

from dispatchgen import ir
from dispatchgen.charset import CharacterSet
from dispatchgen.common import AmbiguousActionError
from dispatchgen.states import StateEmitter
from dispatchgen.actions import ActionEncoder
from dispatchgen.tables import ParseState, LexState, Shift, Advance
from dispatchgen.tables import AcceptToken, LexError
from helper_util import sum_tables, render, NUMBER, PLUS, END


class ParseStateTestCase(unittest.TestCase):
    def setUp(self):
        self.parse_table, self.lex_table = sum_tables()
        self.emitter = StateEmitter()

    def test_dispatch(self):
        code = self.emitter.parse_state(self.parse_table.states[0], 0)
        expected = '\n'.join([
            'SET_LEX_STATE(0);',
            'switch (LOOKAHEAD_SYM()) {',
            '    case sym_number:',
            '        SHIFT(1);',
            '    case sym_sum:',
            '        SHIFT(2);',
            '    default:',
            '        PARSE_ERROR(2, EXPECT({sym_number, sym_sum}));',
            '}',
        ])
        self.assertEqual(expected, render(code))

    def test_one_case_per_key(self):
        """ Every key gets exactly one case, plus one default """
        for index, state in enumerate(self.parse_table.states):
            code = self.emitter.parse_state(state, index)
            pin, switch = code.statements
            self.assertEqual('SET_LEX_STATE', pin.call.callee)
            self.assertEqual(state.lex_state_id, pin.call.args[0].value)
            self.assertIsInstance(switch, ir.Switch)
            self.assertEqual(len(state.actions), len(switch.cases))
            self.assertIsInstance(switch.default, ir.Default)
            labels = [case.label.name for case in switch.cases]
            self.assertEqual(len(set(labels)), len(labels))

    def test_expected_inputs(self):
        """ The error path lists all symbols with an action, in order """
        code = self.emitter.parse_state(self.parse_table.states[2], 2)
        switch = code.statements[1]
        self.assertEqual(
            'PARSE_ERROR(2, EXPECT({sym_end, sym__x2b_}));',
            render(switch.default.body))

    def test_reduce_cases(self):
        code = self.emitter.parse_state(self.parse_table.states[4], 4)
        self.assertIn(
            'REDUCE(sym_sum, 3, COLLAPSE({0, 1, 0}));', render(code))

    def test_conflict_names_state(self):
        state = ParseState([(NUMBER, [Shift(1), Shift(2)])], 0)
        with self.assertRaises(AmbiguousActionError) as cm:
            self.emitter.parse_state(state, 9)
        self.assertEqual(9, cm.exception.state)
        self.assertEqual(NUMBER, cm.exception.key)


class LexStateTestCase(unittest.TestCase):
    def setUp(self):
        self.parse_table, self.lex_table = sum_tables()
        self.emitter = StateEmitter()

    def test_guard_chain(self):
        code = self.emitter.lex_state(self.lex_table.states[1], 1)
        expected = '\n'.join([
            "if (LOOKAHEAD_CHAR() == '+')",
            '    ADVANCE(3);',
            "if (LOOKAHEAD_CHAR() == ' ')",
            '    ADVANCE(1);',
            'ACCEPT_TOKEN(sym_end);',
        ])
        self.assertEqual(expected, render(code))

    def test_no_default(self):
        """ Without default actions, the chain ends in a lex error """
        code = self.emitter.lex_state(self.lex_table.states[0], 0)
        expected = '\n'.join([
            "if ('0' <= LOOKAHEAD_CHAR() && LOOKAHEAD_CHAR() <= '9')",
            '    ADVANCE(2);',
            "if ((LOOKAHEAD_CHAR() == '\\n') || (LOOKAHEAD_CHAR() == ' '))",
            '    ADVANCE(0);',
            'LEX_ERROR();',
        ])
        self.assertEqual(expected, render(code))

    def test_one_guard_per_key(self):
        for index, state in enumerate(self.lex_table.states):
            code = self.emitter.lex_state(state, index)
            guards = code.statements[:-1]
            fallback = code.statements[-1]
            self.assertEqual(len(state.actions), len(guards))
            self.assertTrue(all(isinstance(g, ir.If) for g in guards))
            self.assertIsInstance(fallback, ir.Instruction)

    def test_empty_state(self):
        code = self.emitter.lex_state(LexState({}), 'error')
        self.assertEqual('LEX_ERROR();', render(code))

    def test_error_state_like_others(self):
        """ The error state is emitted the same way as a numbered one """
        state = LexState(
            {CharacterSet('x'): AcceptToken(NUMBER)}, AcceptToken(PLUS))
        self.assertEqual(
            render(self.emitter.lex_state(state, 0)),
            render(self.emitter.lex_state(state, 'error')))

    def test_explicit_error_action(self):
        state = LexState({CharacterSet('!'): LexError()}, Advance(0))
        code = self.emitter.lex_state(state, 0)
        expected = '\n'.join([
            "if (LOOKAHEAD_CHAR() == '!')",
            '    LEX_ERROR();',
            'ADVANCE(0);',
        ])
        self.assertEqual(expected, render(code))

    def test_permissive_default(self):
        emitter = StateEmitter(ActionEncoder(strict=False))
        state = LexState({}, [AcceptToken(END), AcceptToken(NUMBER)])
        with self.assertLogs('dispatchgen.actions', level='WARNING'):
            code = emitter.lex_state(state, 3)
        self.assertEqual('ACCEPT_TOKEN(sym_end);', render(code))


if __name__ == '__main__':
    unittest.main()
