"""PlainPost-mcp — FastMCP server for turning Markdown into plain-text posts.

Facebook, LINE and other feeds accept plain text only. These tools render
Markdown with Unicode "bold/italic/monospace" letters and symbol
decorations, ready to paste.
"""

from __future__ import annotations

import logging
from typing import Any

from fastmcp import FastMCP

logger = logging.getLogger(__name__)

mcp = FastMCP("PlainPost")


# ---------------------------------------------------------------------------
# Settings singleton
# ---------------------------------------------------------------------------

_settings = None


def get_settings():
    """Get or create the Settings singleton."""
    global _settings
    if _settings is not None:
        return _settings
    from plainpost_mcp.config import Settings

    _settings = Settings()
    return _settings


def _package_version(name: str) -> str:
    import importlib.metadata as _meta

    try:
        return _meta.version(name)
    except _meta.PackageNotFoundError:
        return "unknown"


# ---------------------------------------------------------------------------
# MCP Tools
# ---------------------------------------------------------------------------


@mcp.tool()
async def health() -> dict:
    """Health check — returns service version and status."""
    from plainpost_mcp import __version__

    versions: dict[str, str] = {
        "plainpost_mcp": __version__,
        "mistune": _package_version("mistune"),
        "fastmcp": _package_version("fastmcp"),
    }

    return {
        "service": "plainpost-mcp",
        "version": __version__,
        "versions": versions,
        "status": "ok",
    }


@mcp.tool()
async def list_styles() -> dict[str, Any]:
    """List the symbol presets and font styles accepted by the other tools.

    Each preset is shown with a sample so the user can pick one.
    """
    from plainpost_mcp.formatter import FONT_STYLES
    from plainpost_mcp.symbols import STYLE_CONFIGS

    presets: dict[str, dict[str, str]] = {}
    for name, config in STYLE_CONFIGS.items():
        presets[name] = {
            "h1": config.h1("Title"),
            "h2": config.h2("Section"),
            "list_item": config.list_item("item"),
            "ordered_item": config.ordered_item(1, "item"),
            "blockquote": config.blockquote("quote"),
            "hr": config.hr,
        }

    return {
        "presets": presets,
        "default_style": get_settings().plainpost_default_style,
        "font_styles": list(FONT_STYLES),
    }


@mcp.tool()
async def format_post(
    markdown: str,
    style: str | None = None,
    pangu: bool | None = None,
) -> dict[str, Any]:
    """Convert Markdown into a plain-text social post.

    Structure becomes plain-text decoration and inline formatting becomes
    Unicode Mathematical Alphanumeric Symbols:

        # Title     → 【Title】 (structured preset)
        **bold**    → 𝗯𝗼𝗹𝗱
        *italic*    → 𝘪𝘵𝘢𝘭𝘪𝘤
        `code`      → 𝚌𝚘𝚍𝚎
        [t](url)    → t (url)

    Blank lines are kept with zero-width spaces so feeds don't collapse
    paragraphs.

    Args:
        markdown: Post content in Markdown.
        style: Symbol preset — "minimal", "structured" or "social".
               Defaults to the server's configured preset.
        pangu: Insert spaces between CJK and Latin characters.
               Defaults to the server's configured setting.

    Returns:
        text: The post, ready to paste.
        has_links: True if the post carries external links (feeds may
                   reduce reach for such posts).
        has_cjk_in_markers: True if CJK text was marked bold/italic/strike;
                            those styles have no CJK glyphs.
        link_spans: Where each link sits in ``text``.
    """
    from plainpost_mcp.formatter import UnknownStyleError
    from plainpost_mcp.pipeline import format_post as _format_post

    if not markdown.strip():
        logger.warning("format_post called with empty markdown")
        return {"error": "Nothing to format: markdown is empty."}

    settings = get_settings()
    if style is None:
        style = settings.plainpost_default_style
    if pangu is None:
        pangu = settings.plainpost_pangu_enabled

    try:
        post = _format_post(markdown, style=style, pangu=pangu)
    except UnknownStyleError as exc:
        logger.warning("format_post rejected style %r", exc.name)
        return {"error": str(exc), "choices": exc.choices}

    return post.to_dict(include_spans=settings.plainpost_highlight_links)


@mcp.tool()
async def convert_font(text: str, style: str | None = None) -> dict[str, Any]:
    """Convert plain text to Unicode "fancy font" letters.

    Args:
        text: Text to convert. CJK and punctuation pass through unchanged.
        style: One of "sansSerifBold", "sansSerifItalic",
               "sansSerifBoldItalic", "monospace". When omitted, every
               style is returned.
    """
    from plainpost_mcp.formatter import UnknownStyleError, convert_to_unicode
    from plainpost_mcp.pipeline import render_all_fonts

    if style is None:
        return {"text": text, "styles": render_all_fonts(text)}

    try:
        converted = convert_to_unicode(text, style)
    except UnknownStyleError as exc:
        logger.warning("convert_font rejected style %r", exc.name)
        return {"error": str(exc), "choices": exc.choices}

    return {"text": text, "style": style, "converted": converted}


@mcp.tool()
async def audit_links(text: str) -> dict[str, Any]:
    """Find external links in raw or already-formatted post text.

    Styled (bold/italic/monospace) URLs are detected too. Offsets are in
    characters (code points) of ``text``.
    """
    from plainpost_mcp.audit import find_link_spans

    spans = find_link_spans(text)
    return {
        "has_links": bool(spans),
        "link_spans": [span.to_dict() for span in spans],
    }


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the PlainPost MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()
