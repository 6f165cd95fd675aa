"""Unit tests for text utilities."""
import pytest

from circulation.utils.text import format_amount, sanitize_text, single_line, truncate_text


class TestSanitizeText:

    def test_none(self):
        assert sanitize_text(None) == ""

    def test_keeps_accents_and_collapses_spaces(self):
        assert sanitize_text("  Cien   años de\tsoledad ") == "Cien años de soledad"

    def test_removes_control_characters(self):
        assert sanitize_text("19\x0084") == "1984"


class TestSingleLine:

    def test_folds_newlines(self):
        assert single_line("Due:\n\n  2024-03-15") == "Due: 2024-03-15"


class TestTruncateText:

    def test_short_text_untouched(self):
        assert truncate_text("hello", 10) == "hello"

    def test_long_text_cut(self):
        result = truncate_text("abcdefghijklmnop", 10)

        assert result == "abcdefg..."
        assert len(result) == 10

    def test_limit_too_small(self):
        with pytest.raises(ValueError):
            truncate_text("hello", 3)


class TestFormatAmount:

    @pytest.mark.parametrize("amount, expected", [
        (30, "$30"),
        (30.0, "$30"),
        (0, "$0"),
        (12.5, "$12.50"),
    ])
    def test_format(self, amount, expected):
        assert format_amount(amount) == expected

    def test_currency_symbol(self):
        assert format_amount(15, "€") == "€15"
