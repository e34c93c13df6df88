""" Character ranges and character sets.

A character set is stored as a sorted tuple of closed intervals over
the character code domain. Dense classes such as ``[^"\\]`` are cheap
this way, and the interval count is what decides how big the emitted
test for a class will be.

The interval logic is derived from:

https://github.com/MichaelPaddon/epsilon

"""

import bisect
from collections import namedtuple


MIN_CHAR = 0
MAX_CHAR = 0x10FFFF


CharacterRange = namedtuple('CharacterRange', ['min', 'max'])


def char_code(value):
    """ Turn an integer or single character string into a code point """
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(
                'Expected a single character, got {!r}'.format(value))
        return ord(value)
    elif isinstance(value, int):
        return value
    else:
        raise TypeError('Expected int or str, got {}'.format(type(value)))


class CharacterSet:
    """ A set of character codes, stored as inclusive ranges.

    Members can be given as code points, single characters or
    (min, max) pairs of either:

    >>> CharacterSet('a', ('0', '9'))
    CharacterSet({48..57,97})

    Sets are hashable values, so they can key a lexer state. Membership
    of a code point or character is tested with ``in``:

    >>> '5' in CharacterSet(('0', '9'))
    True
    """

    def __init__(self, *values):
        ranges = []
        for value in values:
            if isinstance(value, tuple):
                ranges.append((char_code(value[0]), char_code(value[1])))
            else:
                code = char_code(value)
                ranges.append((code, code))

        for first, last in ranges:
            if first < MIN_CHAR or last > MAX_CHAR:
                raise ValueError(
                    'Range {}..{} outside of character domain'.format(
                        first, last))

        # Sort intervals, dropping reversed ones:
        ranges = sorted(filter(lambda r: r[0] <= r[1], ranges))

        # Eliminate overlapping ranges:
        self.ranges = tuple(
            CharacterRange(a, b)
            for a, b in merge_overlapping_intervals(ranges))

    def __repr__(self):
        inner = ",".join(
            str(a) if a == b else "{}..{}".format(a, b)
            for a, b in self.ranges)
        return "CharacterSet({{{}}})".format(inner)

    def __bool__(self):
        return bool(self.ranges)

    def __contains__(self, item):
        return self.contains(char_code(item))

    def contains(self, value) -> bool:
        index = bisect.bisect(self.ranges, (value,))
        if index < len(self.ranges) and value == self.ranges[index].min:
            return True
        if index > 0:
            previous = self.ranges[index - 1]
            return previous.min <= value <= previous.max
        return False

    def __eq__(self, other):
        if isinstance(other, CharacterSet):
            return self.ranges == other.ranges
        else:
            return False

    def __hash__(self):
        return hash(self.ranges)

    def difference(self, other):
        ranges = []
        i, j = iter(self.ranges), iter(other.ranges)
        r, s = next(i, None), next(j, None)
        while r:
            if s:
                # range s might punch a hole in range r
                if r[0] > s[1]:
                    s = next(j, None)
                elif r[1] < s[0]:
                    ranges.append(r)
                    r = next(i, None)
                else:
                    if r[0] < s[0]:
                        ranges.append((r[0], s[0] - 1))

                    if r[1] > s[1]:
                        r = (s[1] + 1, r[1])
                        s = next(j, None)
                    else:
                        r = next(i, None)
            else:
                ranges.append(r)
                r = next(i, None)

        return CharacterSet(*(tuple(r) for r in ranges))

    def complement(self):
        """ All characters of the domain which are not in this set """
        return FULL_SET.difference(self)

    def most_compact_representation(self):
        """ Pick whichever of this set or its complement has fewer ranges.

        Returns a tuple (character_set, is_direct). When is_direct is
        False the returned set is the complement of this one. Ties go
        to the direct form.
        """
        complement = self.complement()
        if len(complement.ranges) < len(self.ranges):
            return complement, False
        else:
            return self, True


def merge_overlapping_intervals(ranges):
    if ranges:
        r = ranges[0]
        for s in ranges[1:]:
            if s[0] > r[1] + 1:
                # Found hole!
                yield r
                r = s
            else:
                # s overlaps with or touches r, merge end values
                r = (r[0], max(r[1], s[1]))

        yield r


FULL_SET = CharacterSet((MIN_CHAR, MAX_CHAR))
