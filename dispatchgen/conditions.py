""" Boolean tests on the lookahead character.

A character class is tested either directly, or as the negation of a
test on its complement, whichever takes fewer range comparisons. The
choice only affects the size of the emitted test, never which
characters match.
"""

from . import ir


def lookahead_char():
    return ir.Call('LOOKAHEAD_CHAR')


def condition_for_range(character_range):
    """ Test for a single inclusive range """
    if character_range.min == character_range.max:
        return ir.Equality(
            lookahead_char(), ir.CharLiteral(character_range.min))
    else:
        return ir.RangeTest(
            ir.CharLiteral(character_range.min),
            lookahead_char(),
            ir.CharLiteral(character_range.max))


def condition_for_set(character_set):
    """ Test whether the lookahead is in any range of the set """
    ranges = character_set.ranges
    if not ranges:
        return ir.FALSE
    elif len(ranges) == 1:
        return condition_for_range(ranges[0])
    else:
        return ir.LogicalOr(condition_for_range(r) for r in ranges)


def condition_for_rule(character_set):
    """ Test for a character class, in its most compact form """
    representation, is_direct = character_set.most_compact_representation()
    if is_direct:
        return condition_for_set(representation)
    elif not representation:
        # The class covers the whole domain
        return ir.TRUE
    else:
        return ir.LogicalNot(condition_for_set(representation))
