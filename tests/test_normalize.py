import math
import unittest

from catalog.errors import InvalidIdentifierError
from catalog.validator import is_valid_id, normalize_id
from htmlgen.normalize import collation_key, escape_html, format_price, price_to_float


class TestEscapeHtml(unittest.TestCase):
    def test_escapes_all_special_characters(self):
        self.assertEqual(
            escape_html("<a href=\"x\">Tom & Jerry's</a>"),
            "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#39;s&lt;/a&gt;",
        )

    def test_ampersand_escaped_first(self):
        # An existing entity is escaped once, not double-processed into garbage
        self.assertEqual(escape_html("&lt;"), "&amp;lt;")
        self.assertEqual(escape_html("<"), "&lt;")

    def test_none_and_numbers(self):
        self.assertEqual(escape_html(None), "")
        self.assertEqual(escape_html(12), "12")


class TestFormatPrice(unittest.TestCase):
    def test_thousands_grouping(self):
        self.assertEqual(format_price(1234567), "1,234,567원")
        self.assertEqual(format_price(10000), "10,000원")
        self.assertEqual(format_price(0), "0원")
        self.assertEqual(format_price(999), "999원")

    def test_float_and_numeric_string(self):
        self.assertEqual(format_price(10000.0), "10,000원")
        self.assertEqual(format_price(1234.5), "1,234.5원")
        self.assertEqual(format_price(0.1234), "0.123원")
        self.assertEqual(format_price("2500"), "2,500원")
        self.assertEqual(format_price(-1500), "-1,500원")

    def test_not_a_number_gives_dash(self):
        for value in (float("nan"), math.inf, "abc", None, "", "  ", True, [1], int("9" * 400)):
            with self.subTest(value=value):
                self.assertEqual(format_price(value), "-")

    def test_custom_suffix(self):
        self.assertEqual(format_price(1000, suffix=" KRW"), "1,000 KRW")

    def test_price_to_float(self):
        self.assertEqual(price_to_float(" 12.5 "), 12.5)
        self.assertIsNone(price_to_float("nan"))


class TestNormalizeId(unittest.TestCase):
    def test_valid_ids_are_trimmed_and_lowercased(self):
        self.assertEqual(normalize_id("abc-1"), "abc-1")
        self.assertEqual(normalize_id("  ABC-1 "), "abc-1")
        self.assertEqual(normalize_id("tile-600-x"), "tile-600-x")
        self.assertEqual(normalize_id(42), "42")

    def test_invalid_ids(self):
        for raw in ("Bad Id!", "a b", "a_b", "a.b", "", "   ", None, "한글", "a/b"):
            with self.subTest(raw=raw):
                self.assertFalse(is_valid_id(raw))
                with self.assertRaises(InvalidIdentifierError):
                    normalize_id(raw)

    def test_error_names_offending_id(self):
        with self.assertRaises(InvalidIdentifierError) as ctx:
            normalize_id("Bad Id!")
        self.assertIn("Bad Id!", str(ctx.exception))
        self.assertEqual(ctx.exception.raw_id, "Bad Id!")


class TestCollation(unittest.TestCase):
    def test_case_insensitive_latin(self):
        words = ["Banana", "apple", "Cherry"]
        self.assertEqual(sorted(words, key=collation_key), ["apple", "Banana", "Cherry"])

    def test_hangul_order(self):
        words = ["하늘", "가나", "마루", "대림"]
        self.assertEqual(sorted(words, key=collation_key), ["가나", "대림", "마루", "하늘"])

    def test_ko_locale_mixed_scripts(self):
        words = ["A", "가", "b", "나", "1"]
        self.assertEqual(sorted(words, key=collation_key), ["1", "가", "나", "A", "b"])

    def test_hangul_and_han_before_latin(self):
        words = ["Tile", "漢字", "타일", "LG 동화", "동화 LG"]
        self.assertEqual(
            sorted(words, key=collation_key), ["동화 LG", "타일", "漢字", "LG 동화", "Tile"]
        )

    def test_shared_prefix_compares_next_run(self):
        self.assertEqual(sorted(["가b", "가a", "가"], key=collation_key), ["가", "가a", "가b"])


if __name__ == "__main__":
    unittest.main()
