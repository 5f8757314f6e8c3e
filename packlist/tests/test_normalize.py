import unittest
from packlist.logic.duplicates.similarity import normalize_string


class TestNormalizeString(unittest.TestCase):

    def test_strips_punctuation_case_and_outer_whitespace(self):
        self.assertEqual(normalize_string("  T-Shirts!!  "), "tshirts")

    def test_collapses_inner_whitespace(self):
        self.assertEqual(normalize_string("Rain   Jacket"), "rain jacket")
        self.assertEqual(normalize_string("Tab\tand\nnewline"), "tab and newline")

    def test_keeps_digits_and_underscore(self):
        self.assertEqual(normalize_string("Socks (x3)"), "socks x3")
        self.assertEqual(normalize_string("snake_case"), "snake_case")

    def test_keeps_non_ascii_letters(self):
        self.assertEqual(normalize_string("Zahnbürste"), "zahnbürste")
        self.assertEqual(normalize_string("Café & Crème"), "café crème")

    def test_empty_and_punctuation_only(self):
        self.assertEqual(normalize_string(""), "")
        self.assertEqual(normalize_string("!!! ---"), "")

    def test_no_trailing_space_left_by_removed_punctuation(self):
        self.assertEqual(normalize_string("a !"), "a")
        self.assertEqual(normalize_string("! a"), "a")

    def test_idempotent(self):
        for s in ["  T-Shirts!!  ", "a !", "Café & Crème", "x  -  y", "", "Ünïcödé?"]:
            with self.subTest(s=s):
                once = normalize_string(s)
                self.assertEqual(normalize_string(once), once)
