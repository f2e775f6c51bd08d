"""Plain-text decorations for Markdown structural elements.

Three presets are provided:
    minimal    → clean, undecorated output
    structured → clear visual hierarchy with box-drawing characters
    social     → decorative symbols suited for social media posts
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

from plainpost_mcp.formatter import UnknownStyleError

StyleName = Literal["minimal", "structured", "social"]


@dataclass(frozen=True)
class SymbolConfig:
    """How each structural role is written out as plain text."""

    h1: Callable[[str], str]
    h2: Callable[[str], str]
    h3: Callable[[str], str]
    list_item: Callable[[str], str]
    ordered_item: Callable[[int, str], str]
    blockquote: Callable[[str], str]
    hr: str


def _plain(text: str) -> str:
    return text


def _numbered(n: int, text: str) -> str:
    return f"{n}. {text}"


MINIMAL = SymbolConfig(
    h1=_plain,
    h2=_plain,
    h3=_plain,
    list_item=lambda text: f"\u2022 {text}",  # •
    ordered_item=_numbered,
    blockquote=lambda text: f"\u300c{text}\u300d",  # 「」
    hr="\u2014" * 3,  # ———
)

STRUCTURED = SymbolConfig(
    h1=lambda text: f"\u3010{text}\u3011",  # 【】
    h2=lambda text: f"\u258d{text}",  # ▍
    h3=_plain,
    list_item=lambda text: f"- {text}",
    ordered_item=_numbered,
    blockquote=lambda text: f"\u2503{text}",  # ┃
    hr="\u2501" * 6,  # ━━━━━━
)

SOCIAL = SymbolConfig(
    h1=lambda text: f"\u2738 {text}",  # ✸
    h2=lambda text: f"\u25b8 {text}",  # ▸
    h3=_plain,
    list_item=lambda text: f"\u2192 {text}",  # →
    ordered_item=_numbered,
    blockquote=lambda text: f"\U0001F4AC {text}",  # 💬
    hr="\u00b7 \u00b7 \u00b7",  # · · ·
)

STYLE_CONFIGS: Mapping[str, SymbolConfig] = MappingProxyType({
    "minimal": MINIMAL,
    "structured": STRUCTURED,
    "social": SOCIAL,
})

DEFAULT_STYLE: StyleName = "structured"


def get_symbol_config(name: str | None = None) -> SymbolConfig:
    """Return the preset called ``name`` (the default preset when None).

    Raises:
        UnknownStyleError: if ``name`` is not a preset.
    """
    if name is None:
        name = DEFAULT_STYLE
    try:
        return STYLE_CONFIGS[name]
    except KeyError:
        raise UnknownStyleError(name, list(STYLE_CONFIGS)) from None
