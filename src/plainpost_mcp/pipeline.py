"""Markdown in, ready-to-paste post out.

Chains the renderer, the post-processor and the audit:

    raw Markdown ─► convert_markdown_to_fb ─► post_process ─► FormattedPost
          └──────────────── audit (links, CJK hint) ───────────────┘
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from plainpost_mcp.audit import (
    LinkSpan,
    find_link_spans,
    has_cjk_in_markers,
    has_external_links,
)
from plainpost_mcp.formatter import FONT_STYLES, convert_to_unicode
from plainpost_mcp.post_process import post_process
from plainpost_mcp.renderer import convert_markdown_to_fb
from plainpost_mcp.symbols import DEFAULT_STYLE, get_symbol_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormattedPost:
    """Result of format_post."""

    text: str
    style: str
    pangu: bool
    has_links: bool = False
    has_cjk_in_markers: bool = False
    link_spans: tuple[LinkSpan, ...] = field(default_factory=tuple)

    def to_dict(self, include_spans: bool = True) -> dict:
        result: dict = {
            "text": self.text,
            "style": self.style,
            "pangu": self.pangu,
            "has_links": self.has_links,
            "has_cjk_in_markers": self.has_cjk_in_markers,
        }
        if include_spans:
            result["link_spans"] = [span.to_dict() for span in self.link_spans]
        return result


def format_post(
    markdown: str,
    style: str | None = None,
    pangu: bool = False,
) -> FormattedPost:
    """Render Markdown as a plain-text post and audit it.

    Whitespace-only input gives an empty post without running the parser.

    Args:
        markdown: Post content in Markdown.
        style: Symbol preset name; defaults to DEFAULT_STYLE.
        pangu: Insert spaces between CJK and Latin characters.

    Raises:
        UnknownStyleError: if ``style`` is not a preset name.
    """
    style = style or DEFAULT_STYLE
    config = get_symbol_config(style)

    if markdown.strip() == "":
        return FormattedPost(text="", style=style, pangu=pangu)

    rendered = convert_markdown_to_fb(markdown, config)
    output = post_process(rendered, pangu)
    logger.debug(
        "Rendered %d chars of markdown to %d chars (style=%s, pangu=%s)",
        len(markdown), len(output), style, pangu,
    )

    spans = find_link_spans(output)
    return FormattedPost(
        text=output,
        style=style,
        pangu=pangu,
        has_links=bool(spans) or has_external_links(markdown),
        has_cjk_in_markers=has_cjk_in_markers(markdown),
        link_spans=tuple(spans),
    )


def render_all_fonts(text: str) -> dict[str, str]:
    """Return ``text`` converted in every font style, keyed by style name."""
    return {style: convert_to_unicode(text, style) for style in FONT_STYLES}
