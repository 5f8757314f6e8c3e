import unittest
from packlist.logic.duplicates.similarity import levenshtein_distance


class TestLevenshteinDistance(unittest.TestCase):

    def test_classic_example(self):
        self.assertEqual(levenshtein_distance("kitten", "sitting"), 3)

    def test_empty_strings(self):
        self.assertEqual(levenshtein_distance("", "abc"), 3)
        self.assertEqual(levenshtein_distance("abc", ""), 3)
        self.assertEqual(levenshtein_distance("", ""), 0)

    def test_identical(self):
        self.assertEqual(levenshtein_distance("tent", "tent"), 0)

    def test_mixed_operations(self):
        self.assertEqual(levenshtein_distance("flaw", "lawn"), 2)
        self.assertEqual(levenshtein_distance("gumbo", "gambol"), 2)
        self.assertEqual(levenshtein_distance("hiking boots", "hiking boot"), 1)

    def test_case_sensitive(self):
        self.assertEqual(levenshtein_distance("Boots", "boots"), 1)

    def test_symmetric(self):
        self.assertEqual(levenshtein_distance("sunscreen", "sun screen"),
                         levenshtein_distance("sun screen", "sunscreen"))
