"""Plain text → Unicode Mathematical Symbol formatter.

Converts ASCII letters and digits to Unicode characters that render as
styled text on platforms that only accept plain text (Facebook, X, LINE).

Supported styles:
    sansSerifBold       → Math Sans-Serif Bold        (U+1D5D4 block)
    sansSerifItalic     → Math Sans-Serif Italic      (U+1D608 block)
    sansSerifBoldItalic → Math Sans-Serif Bold Italic (U+1D63C block)
    monospace           → Math Monospace              (U+1D670 block)

CJK ideographs and everything outside ASCII letters/digits pass through.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

FontStyle = Literal[
    "sansSerifBold",
    "sansSerifItalic",
    "sansSerifBoldItalic",
    "monospace",
]


class UnknownStyleError(ValueError):
    """Raised when a font style or symbol preset name is not recognised."""

    def __init__(self, name: str, choices: list[str]):
        self.name = name
        self.choices = choices
        super().__init__(
            f"Unknown style {name!r}. Choose one of: {', '.join(choices)}"
        )


# ---------------------------------------------------------------------------
# Unicode Mathematical Alphanumeric Symbols offset tables
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FontConfig:
    """Code-point bases for one styled alphabet."""

    uppercase_start: int
    lowercase_start: int
    digit_start: int | None = None
    exceptions: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))


FONT_CONFIGS: Mapping[str, FontConfig] = MappingProxyType({
    "sansSerifBold": FontConfig(
        uppercase_start=0x1D5D4,  # 𝗔
        lowercase_start=0x1D5EE,  # 𝗮
        digit_start=0x1D7EC,  # 𝟬
    ),
    "sansSerifItalic": FontConfig(
        uppercase_start=0x1D608,  # 𝘈
        lowercase_start=0x1D622,  # 𝘢
        # No italic digits in Unicode standard
        exceptions=MappingProxyType({"h": 0x210E}),  # ℎ (Planck constant)
    ),
    "sansSerifBoldItalic": FontConfig(
        uppercase_start=0x1D63C,  # 𝘼
        lowercase_start=0x1D656,  # 𝙖
        # No bold-italic digits in Unicode standard
    ),
    "monospace": FontConfig(
        uppercase_start=0x1D670,  # 𝙰
        lowercase_start=0x1D68A,  # 𝚊
        digit_start=0x1D7F6,  # 𝟶
    ),
})

FONT_STYLES: tuple[str, ...] = tuple(FONT_CONFIGS)


def get_font_config(style: str) -> FontConfig:
    """Look up a font config by style name, raising UnknownStyleError."""
    try:
        return FONT_CONFIGS[style]
    except KeyError:
        raise UnknownStyleError(style, list(FONT_STYLES)) from None


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------


def _is_cjk(code: int) -> bool:
    # CJK Unified Ideographs + CJK Extension A
    return 0x4E00 <= code <= 0x9FFF or 0x3400 <= code <= 0x4DBF


def is_cjk_char(char: str) -> bool:
    """Return True if the first code point of ``char`` is a CJK ideograph."""
    return bool(char) and _is_cjk(ord(char[0]))


# ---------------------------------------------------------------------------
# Forward conversion
# ---------------------------------------------------------------------------


def _convert_char(ch: str, config: FontConfig) -> str:
    """Convert a single character to its Unicode Math counterpart."""
    exception = config.exceptions.get(ch)
    if exception is not None:
        return chr(exception)

    code = ord(ch)
    if _is_cjk(code):
        return ch
    if 65 <= code <= 90:  # A-Z
        return chr(config.uppercase_start + (code - 65))
    elif 97 <= code <= 122:  # a-z
        return chr(config.lowercase_start + (code - 97))
    elif 48 <= code <= 57 and config.digit_start is not None:  # 0-9
        return chr(config.digit_start + (code - 48))
    return ch


def convert_to_unicode(text: str, style: FontStyle | str) -> str:
    """Convert plain text to the given Unicode Math font style.

    Python strings iterate by code point, so characters outside the BMP
    (emoji, already-styled letters) are handled as single characters.

    Raises:
        UnknownStyleError: if ``style`` is not one of FONT_STYLES.
    """
    config = get_font_config(style)
    return "".join(_convert_char(ch, config) for ch in text)


def to_bold(text: str) -> str:
    """Convert plain text to Math Sans-Serif Bold Unicode."""
    return convert_to_unicode(text, "sansSerifBold")


def to_italic(text: str) -> str:
    """Convert plain text to Math Sans-Serif Italic Unicode."""
    return convert_to_unicode(text, "sansSerifItalic")


def to_bold_italic(text: str) -> str:
    """Convert plain text to Math Sans-Serif Bold Italic Unicode."""
    return convert_to_unicode(text, "sansSerifBoldItalic")


def to_monospace(text: str) -> str:
    """Convert plain text to Math Monospace Unicode."""
    return convert_to_unicode(text, "monospace")


# ---------------------------------------------------------------------------
# Inverse conversion (styled → ASCII)
# ---------------------------------------------------------------------------


def _build_inverse_table() -> Mapping[int, str]:
    table: dict[int, str] = {}
    for config in FONT_CONFIGS.values():
        for i in range(26):
            table[config.uppercase_start + i] = chr(65 + i)
            table[config.lowercase_start + i] = chr(97 + i)
        if config.digit_start is not None:
            for i in range(10):
                table[config.digit_start + i] = chr(48 + i)
        for ch, code in config.exceptions.items():
            table[code] = ch
    return MappingProxyType(table)


_INVERSE_TABLE = _build_inverse_table()


def normalize_char(char: str) -> str:
    """Map one styled character back to ASCII; anything else is unchanged."""
    if len(char) != 1:
        return char
    return _INVERSE_TABLE.get(ord(char), char)


def normalize_to_ascii(text: str) -> str:
    """Undo convert_to_unicode for every style.

    The mapping is one code point to one code point, so indices into the
    result are valid indices into ``text``.
    """
    return "".join(_INVERSE_TABLE.get(ord(ch), ch) for ch in text)
