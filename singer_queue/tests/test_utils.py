from django.test import SimpleTestCase
from karaoke.utils import format_lineup, sanitize_name


class TestSanitizeName(SimpleTestCase):
    def test_collapses_whitespace(self):
        self.assertEqual(sanitize_name("  Paul   McCartney "), "Paul McCartney")

    def test_lowercase_is_titlecased(self):
        self.assertEqual(sanitize_name("ringo starr"), "Ringo Starr")

    def test_capitals_are_kept(self):
        self.assertEqual(sanitize_name("DJ McFly"), "DJ McFly")

    def test_empty(self):
        self.assertEqual(sanitize_name("   "), "")


class TestFormatLineup(SimpleTestCase):
    def test_3_singers(self):
        self.assertEqual(format_lineup(["John", "Paul", "George"]), "John, Paul and then George")

    def test_2_singers(self):
        self.assertEqual(format_lineup(["John", "Paul"]), "John and then Paul")

    def test_1_singer(self):
        self.assertEqual(format_lineup(["John"]), "John")

    def test_empty(self):
        self.assertEqual(format_lineup([]), "nobody")
