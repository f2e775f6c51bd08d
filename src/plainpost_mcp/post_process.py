"""Post-processing for rendered social media text.

Two stages:
    1. ZWSP blank-line preservation (always on)
    2. Pangu CJK/Latin spacing (optional)
"""

from __future__ import annotations

import re

ZWSP = "\u200b"

# CJK Unified Ideographs + CJK Extension A
_CJK = "\u4e00-\u9fff\u3400-\u4dbf"

# ASCII word chars + the Unicode Math letters/digits produced by formatter.py.
# U+1D5D4..U+1D7FF covers the sans-serif and monospace alphabets and digits;
# U+210E is the italic "h". Python's \w is Unicode-aware and would also match
# CJK, so the ASCII part is spelled out.
_WORD = "A-Za-z0-9_\U0001d5d4-\U0001d7ff\u210e"

_CJK_THEN_WORD = re.compile(f"([{_CJK}])([{_WORD}])")
_WORD_THEN_CJK = re.compile(f"([{_WORD}])([{_CJK}])")


def insert_zwsp(text: str) -> str:
    """Put a zero-width space on every interior blank line.

    Facebook and similar feeds squash consecutive line breaks; a line that
    holds only U+200B survives.

        "a\\n\\n\\nb" -> "a\\n\\u200b\\n\\u200b\\nb"
        "a\\n\\nb"   -> "a\\n\\u200b\\nb"
        "a\\nb"     -> "a\\nb"

    The first and last lines are never marked, so leading or trailing
    newlines stay bare.
    """
    if text == "":
        return ""

    lines = text.split("\n")
    last = len(lines) - 1
    return "\n".join(
        ZWSP if line == "" and 0 < index < last else line
        for index, line in enumerate(lines)
    )


def pangu_spacing(text: str) -> str:
    """Insert a space between CJK characters and adjacent word characters.

        "我用Mac寫文" -> "我用 Mac 寫文"
        "hello你好"   -> "hello 你好"
        "第3章"       -> "第 3 章"

    Idempotent: an existing space breaks the adjacency, so nothing is added
    twice.
    """
    if text == "":
        return ""

    text = _CJK_THEN_WORD.sub(r"\1 \2", text)
    return _WORD_THEN_CJK.sub(r"\1 \2", text)


def post_process(text: str, pangu_enabled: bool) -> str:
    """Apply ZWSP insertion, then pangu spacing when enabled."""
    text = insert_zwsp(text)
    return pangu_spacing(text) if pangu_enabled else text
