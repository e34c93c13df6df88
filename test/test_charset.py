import unittest

from dispatchgen.charset import CharacterSet, CharacterRange, MAX_CHAR


class CharacterSetTestCase(unittest.TestCase):
    def test_empty(self):
        """ Test the empty set. """
        s = CharacterSet()
        self.assertNotIn(1337, s)
        self.assertEqual((), s.ranges)
        self.assertFalse(s)

    def test_membership(self):
        s = CharacterSet((5, 8), 1, (20, 30))
        self.assertEqual(
            [1, 5, 6, 7, 8, 20, 30],
            [c for c in range(40) if c in s])

    def test_characters(self):
        """ Characters and code points can be mixed """
        s = CharacterSet('a', ('0', '9'), 0x41)
        self.assertEqual(
            (CharacterRange(48, 57), CharacterRange(65, 65),
             CharacterRange(97, 97)),
            s.ranges)
        self.assertIn('5', s)
        self.assertIn('A', s)
        self.assertNotIn('b', s)

    def test_merging(self):
        """ Overlapping and adjacent ranges are merged """
        s = CharacterSet(('a', 'f'), ('c', 'k'), 'l')
        self.assertEqual((CharacterRange(97, 108),), s.ranges)

    def test_invalid_member(self):
        with self.assertRaises(ValueError):
            CharacterSet('ab')
        with self.assertRaises(ValueError):
            CharacterSet((0, MAX_CHAR + 1))
        with self.assertRaises(TypeError):
            CharacterSet(1.5)

    def test_equality(self):
        s = CharacterSet(1, 3, 7)
        t = CharacterSet(7, 3, 1)
        u = CharacterSet(1, (3, 7))
        self.assertEqual(s, t)
        self.assertNotEqual(s, u)
        d = {s: 3}
        self.assertEqual(d[t], 3)

    def test_difference(self):
        s = CharacterSet((10, 20), 42)
        t = CharacterSet((15, 17))
        self.assertEqual(CharacterSet((10, 14), (18, 20), 42), s.difference(t))

    def test_complement(self):
        s = CharacterSet(('b', 'y'))
        c = s.complement()
        self.assertEqual(
            (CharacterRange(0, ord('a')), CharacterRange(ord('z'), MAX_CHAR)),
            c.ranges)
        self.assertEqual(s, c.complement())

    def test_complement_of_extremes(self):
        self.assertEqual(CharacterSet((0, MAX_CHAR)), CharacterSet().complement())
        self.assertFalse(CharacterSet((0, MAX_CHAR)).complement())


class CompactRepresentationTestCase(unittest.TestCase):
    def test_direct(self):
        s = CharacterSet('a', 'c')
        representation, is_direct = s.most_compact_representation()
        self.assertTrue(is_direct)
        self.assertIs(s, representation)

    def test_complement(self):
        """ Everything except a few letters is smaller as complement """
        s = CharacterSet((0, ord('a') - 1), ('d', MAX_CHAR))
        representation, is_direct = s.most_compact_representation()
        self.assertFalse(is_direct)
        self.assertEqual(CharacterSet(('a', 'c')), representation)

    def test_tie_is_direct(self):
        """ A range at the start of the domain has a single range
        complement as well. """
        s = CharacterSet((0, 100))
        representation, is_direct = s.most_compact_representation()
        self.assertTrue(is_direct)
        self.assertEqual(s, representation)

    def test_empty_set(self):
        representation, is_direct = CharacterSet().most_compact_representation()
        self.assertTrue(is_direct)
        self.assertFalse(representation)


if __name__ == '__main__':
    unittest.main()
