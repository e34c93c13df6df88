import unittest

from dispatchgen import ir
from dispatchgen.charset import CharacterSet, CharacterRange, MAX_CHAR
from dispatchgen.conditions import condition_for_range, condition_for_set
from dispatchgen.conditions import condition_for_rule
from helper_util import render_expr


def evaluate(expr, code):
    """ Interpret a condition for the given lookahead character """
    if isinstance(expr, ir.Constant):
        return expr.value
    elif isinstance(expr, ir.Call):
        assert expr.callee == 'LOOKAHEAD_CHAR'
        return code
    elif isinstance(expr, ir.CharLiteral):
        return expr.code
    elif isinstance(expr, ir.Equality):
        return evaluate(expr.a, code) == evaluate(expr.b, code)
    elif isinstance(expr, ir.RangeTest):
        return (
            evaluate(expr.low, code) <= evaluate(expr.value, code) <=
            evaluate(expr.high, code))
    elif isinstance(expr, ir.LogicalOr):
        return any(evaluate(p, code) for p in expr.parts)
    elif isinstance(expr, ir.LogicalNot):
        return not evaluate(expr.a, code)
    else:
        raise NotImplementedError(str(expr))


class ConditionForRangeTestCase(unittest.TestCase):
    def test_single_character(self):
        """ A range of one character is an equality test """
        condition = condition_for_range(CharacterRange(ord('x'), ord('x')))
        self.assertIsInstance(condition, ir.Equality)
        self.assertEqual("LOOKAHEAD_CHAR() == 'x'", render_expr(condition))

    def test_range(self):
        condition = condition_for_range(CharacterRange(ord('a'), ord('z')))
        self.assertIsInstance(condition, ir.RangeTest)
        self.assertEqual(
            "'a' <= LOOKAHEAD_CHAR() && LOOKAHEAD_CHAR() <= 'z'",
            render_expr(condition))


class ConditionForSetTestCase(unittest.TestCase):
    def test_one_range(self):
        condition = condition_for_set(CharacterSet(('0', '9')))
        self.assertIsInstance(condition, ir.RangeTest)

    def test_several_ranges(self):
        condition = condition_for_set(CharacterSet(('a', 'z'), ('0', '9')))
        self.assertEqual(
            "('0' <= LOOKAHEAD_CHAR() && LOOKAHEAD_CHAR() <= '9') || "
            "('a' <= LOOKAHEAD_CHAR() && LOOKAHEAD_CHAR() <= 'z')",
            render_expr(condition))

    def test_empty(self):
        self.assertEqual('0', render_expr(condition_for_set(CharacterSet())))


class ConditionForRuleTestCase(unittest.TestCase):
    def test_direct(self):
        condition = condition_for_rule(CharacterSet('a', 'c'))
        self.assertEqual(
            "(LOOKAHEAD_CHAR() == 'a') || (LOOKAHEAD_CHAR() == 'c')",
            render_expr(condition))

    def test_complement_range(self):
        """ Everything but a, b and c is emitted as a negated test """
        everything_but_abc = CharacterSet(
            (0, ord('a') - 1), (ord('c') + 1, MAX_CHAR))
        condition = condition_for_rule(everything_but_abc)
        self.assertIsInstance(condition, ir.LogicalNot)
        self.assertEqual(
            "!('a' <= LOOKAHEAD_CHAR() && LOOKAHEAD_CHAR() <= 'c')",
            render_expr(condition))

    def test_complement_chain(self):
        everything_but_ace = CharacterSet('a', 'c', 'e').complement()
        condition = condition_for_rule(everything_but_ace)
        self.assertEqual(
            "!((LOOKAHEAD_CHAR() == 'a') || (LOOKAHEAD_CHAR() == 'c') || "
            "(LOOKAHEAD_CHAR() == 'e'))",
            render_expr(condition))

    def test_string_body(self):
        """ The classic class of characters inside a string literal """
        condition = condition_for_rule(CharacterSet('"', '\\', '\n').complement())
        self.assertEqual(
            "!((LOOKAHEAD_CHAR() == '\\n') || (LOOKAHEAD_CHAR() == '\"') || "
            "(LOOKAHEAD_CHAR() == '\\\\'))",
            render_expr(condition))

    def test_everything(self):
        condition = condition_for_rule(CharacterSet((0, MAX_CHAR)))
        self.assertEqual('1', render_expr(condition))

    def test_same_characters_match(self):
        """ Whatever form is chosen, the same characters must match """
        samples = [
            CharacterSet('x'),
            CharacterSet(('a', 'z'), ('A', 'Z'), '_'),
            CharacterSet(('a', 'z'), ('A', 'Z'), '_').complement(),
            CharacterSet('a', 'c', 'e').complement(),
            CharacterSet((0, 31), (127, MAX_CHAR)),
            CharacterSet(),
            CharacterSet((0, MAX_CHAR)),
        ]
        codes = list(range(300)) + [0x263a, MAX_CHAR]
        for character_set in samples:
            condition = condition_for_rule(character_set)
            for code in codes:
                self.assertEqual(
                    code in character_set, evaluate(condition, code),
                    '{} on {}'.format(character_set, code))


if __name__ == '__main__':
    unittest.main()
