"""Tests for the plain text → Unicode Math formatter."""

import pytest

from plainpost_mcp.formatter import (
    FONT_CONFIGS,
    FONT_STYLES,
    UnknownStyleError,
    convert_to_unicode,
    is_cjk_char,
    normalize_char,
    normalize_to_ascii,
    to_bold,
    to_bold_italic,
    to_italic,
    to_monospace,
)


def _cp(*codes: int) -> str:
    return "".join(chr(c) for c in codes)


ASCII_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


# ---------------------------------------------------------------------------
# Individual conversion functions
# ---------------------------------------------------------------------------


class TestToBold:
    def test_lowercase(self):
        assert to_bold("hello") == _cp(0x1D5F5, 0x1D5F2, 0x1D5F9, 0x1D5F9, 0x1D5FC)

    def test_uppercase_range_ends(self):
        assert to_bold("A") == chr(0x1D5D4)
        assert to_bold("Z") == chr(0x1D5ED)
        assert to_bold("z") == chr(0x1D607)

    def test_digits(self):
        assert to_bold("2026") == _cp(0x1D7EE, 0x1D7EC, 0x1D7EE, 0x1D7F2)
        assert to_bold("9") == chr(0x1D7F5)

    def test_punctuation_passthrough(self):
        assert to_bold("hi!") == _cp(0x1D5F5, 0x1D5F6) + "!"

    def test_spaces_passthrough(self):
        assert to_bold("a b") == _cp(0x1D5EE) + " " + _cp(0x1D5EF)

    def test_empty(self):
        assert to_bold("") == ""


class TestToItalic:
    def test_h_uses_planck_constant(self):
        assert to_italic("h") == "ℎ"

    def test_lowercase(self):
        assert to_italic("hello") == _cp(0x210E, 0x1D626, 0x1D62D, 0x1D62D, 0x1D630)

    def test_uppercase_h_is_not_an_exception(self):
        assert to_italic("H") == chr(0x1D60F)

    def test_no_digit_conversion(self):
        """Italic block has no digit range — digits pass through as ASCII."""
        assert to_italic("abc123") == _cp(0x1D622, 0x1D623, 0x1D624) + "123"

    def test_empty(self):
        assert to_italic("") == ""


class TestToBoldItalic:
    def test_lowercase(self):
        assert to_bold_italic("hello") == _cp(0x1D65D, 0x1D65A, 0x1D661, 0x1D661, 0x1D664)

    def test_no_digit_conversion(self):
        """Bold italic block has no digit range — digits pass through."""
        assert to_bold_italic("x99") == chr(0x1D66D) + "99"

    def test_empty(self):
        assert to_bold_italic("") == ""


class TestToMonospace:
    def test_lowercase(self):
        assert to_monospace("code") == _cp(0x1D68C, 0x1D698, 0x1D68D, 0x1D68E)

    def test_uppercase(self):
        assert to_monospace("CODE") == _cp(0x1D672, 0x1D67E, 0x1D673, 0x1D674)

    def test_digits(self):
        assert to_monospace("42") == _cp(0x1D7FA, 0x1D7F8)

    def test_mixed(self):
        assert to_monospace("fn()") == _cp(0x1D68F, 0x1D697) + "()"


# ---------------------------------------------------------------------------
# convert_to_unicode across every style
# ---------------------------------------------------------------------------


class TestConvertToUnicode:
    @pytest.mark.parametrize("style", FONT_STYLES)
    def test_no_ascii_letter_survives(self, style):
        result = convert_to_unicode(ASCII_LETTERS, style)
        assert len(result) == len(ASCII_LETTERS)
        assert not any(ch in ASCII_LETTERS for ch in result)

    @pytest.mark.parametrize("style", FONT_STYLES)
    def test_cjk_passthrough(self, style):
        for ch in ("一", "中", "鿿", "㐀", "䶿"):
            assert convert_to_unicode(ch, style) == ch

    @pytest.mark.parametrize("style", FONT_STYLES)
    def test_empty(self, style):
        assert convert_to_unicode("", style) == ""

    def test_mixed_content(self):
        result = convert_to_unicode("Hello 世界! 123", "sansSerifBold")
        assert chr(0x1D5D4 + 7) in result  # H
        assert "世界" in result
        assert "! " in result

    def test_astral_input_counted_by_code_point(self):
        result = convert_to_unicode("a\U0001F680b", "monospace")
        assert result == chr(0x1D68A) + "\U0001F680" + chr(0x1D68B)

    def test_already_styled_text_is_unchanged(self):
        bold = to_bold("abc")
        assert convert_to_unicode(bold, "monospace") == bold

    def test_unknown_style(self):
        with pytest.raises(UnknownStyleError) as excinfo:
            convert_to_unicode("abc", "gothic")
        assert isinstance(excinfo.value, ValueError)
        assert excinfo.value.name == "gothic"
        assert "monospace" in excinfo.value.choices

    def test_font_configs_are_read_only(self):
        with pytest.raises(TypeError):
            FONT_CONFIGS["monospace"] = FONT_CONFIGS["sansSerifBold"]


class TestIsCjkChar:
    def test_unified_ideograph(self):
        assert is_cjk_char("中")

    def test_extension_a(self):
        assert is_cjk_char("㐀")

    def test_latin_and_kana(self):
        assert not is_cjk_char("a")
        assert not is_cjk_char("あ")  # hiragana

    def test_empty(self):
        assert not is_cjk_char("")


# ---------------------------------------------------------------------------
# Inverse mapping
# ---------------------------------------------------------------------------


class TestNormalize:
    @pytest.mark.parametrize("style", FONT_STYLES)
    def test_inverts_every_style(self, style):
        text = "Hello World 0123456789"
        assert normalize_to_ascii(convert_to_unicode(text, style)) == text

    def test_planck_h_maps_back(self):
        assert normalize_char("ℎ") == "h"

    def test_length_preserved(self):
        styled = to_bold("abc") + "中" + to_monospace("x1")
        assert len(normalize_to_ascii(styled)) == len(styled)

    def test_other_characters_unchanged(self):
        assert normalize_to_ascii("中! \U0001F680") == "中! \U0001F680"
        assert normalize_char("") == ""
