"""Post audit: external links and CJK styling hints.

Feeds tend to reduce the reach of posts carrying external links, so the
caller shows a warning and highlights each link. Detection works on
rendered output too: styled characters are mapped back to ASCII before
matching, and because that mapping is one code point for one code point the
match offsets index straight into the original text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from plainpost_mcp.formatter import normalize_to_ascii

SHORT_URL_DOMAINS = (
    "bit.ly",
    "goo.gl",
    "tinyurl.com",
    "t.co",
    "ow.ly",
    "is.gd",
    "buff.ly",
    "lnkd.in",
    "rb.gy",
)

_URL = r"https?://\S+"
# ASCII word boundary: Python's \b would treat CJK as word characters.
_SHORT_URL = (
    r"(?<![A-Za-z0-9_])(?:"
    + "|".join(re.escape(d) for d in SHORT_URL_DOMAINS)
    + r")/?\S*"
)

LINK_PATTERN = re.compile(f"{_URL}|{_SHORT_URL}", re.IGNORECASE)

# CJK inside Markdown emphasis markers; ** before *
_CJK_CLASS = "[\u4e00-\u9fff\u3400-\u4dbf]"
_CJK_IN_MARKERS = re.compile(
    rf"\*\*[^*]*{_CJK_CLASS}[^*]*\*\*"
    rf"|\*[^*]*{_CJK_CLASS}[^*]*\*"
    rf"|_[^_]*{_CJK_CLASS}[^_]*_"
    rf"|~~[^~]*{_CJK_CLASS}[^~]*~~"
)


@dataclass(frozen=True)
class LinkSpan:
    """A link found in text. Offsets are code-point indices."""

    start: int
    end: int
    text: str

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end, "text": self.text}


def has_external_links(text: str) -> bool:
    """Return True if text (plain or Unicode-styled) contains a link."""
    return LINK_PATTERN.search(normalize_to_ascii(text)) is not None


def find_link_spans(text: str) -> list[LinkSpan]:
    """Locate every link, matching on ASCII-normalized text.

    The returned ``text`` of each span is sliced from the original string,
    so styled characters are preserved for display.
    """
    normalized = normalize_to_ascii(text)
    return [
        LinkSpan(m.start(), m.end(), text[m.start():m.end()])
        for m in LINK_PATTERN.finditer(normalized)
    ]


def split_on_links(text: str) -> list[tuple[str, bool]]:
    """Split text into ``(segment, is_link)`` pieces for highlighting.

    Joining the segments gives back ``text``. Empty input yields ``[]``.
    """
    parts: list[tuple[str, bool]] = []
    last_end = 0
    for span in find_link_spans(text):
        if span.start > last_end:
            parts.append((text[last_end:span.start], False))
        parts.append((span.text, True))
        last_end = span.end
    if last_end < len(text):
        parts.append((text[last_end:], False))
    return parts


def has_cjk_in_markers(markdown: str) -> bool:
    """Return True if CJK text sits inside bold/italic/strike markers.

    Styled alphabets have no CJK glyphs, so such text renders unstyled and
    the user should be told.
    """
    return _CJK_IN_MARKERS.search(markdown) is not None
