"""Markdown → plain-text social post renderer.

Parses Markdown with mistune (CommonMark + tables + strikethrough) into its
AST form and walks the tree, writing each node out as plain text:

    # Heading       → config.h1 / h2 / h3
    **bold**        → 𝗯𝗼𝗹𝗱          (Math Sans-Serif Bold)
    *italic*        → 𝘪𝘵𝘢𝘭𝘪𝘤        (Math Sans-Serif Italic)
    ~~strike~~      → s̶t̶r̶i̶k̶e̶       (U+0336 after each non-CJK char)
    `code`          → 𝚌𝚘𝚍𝚎          (Math Monospace)
    [text](url)     → text (url)
    ![alt](src)     → [image: alt]
    lists, quotes   → config.list_item / ordered_item / blockquote
    tables          → one list item per row, other columns as "Header: value"

Single newlines in the source are kept as line breaks, since social feeds
show text exactly as typed.
"""

from __future__ import annotations

import html
import re
from collections.abc import Callable, Iterable
from typing import Any

import mistune

from plainpost_mcp.formatter import convert_to_unicode, is_cjk_char
from plainpost_mcp.symbols import SymbolConfig

Node = dict[str, Any]

STRIKE_OVERLAY = "\u0336"  # COMBINING LONG STROKE OVERLAY
IDEOGRAPHIC_SPACE = "\u3000"

_TAG_RE = re.compile(r"<[^>]*>")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")
_FENCE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")
_DELIMITER_ROW_RE = re.compile(r"^ {0,3}\|? *:?-+:? *(\| *:?-+:? *)*\|? *$")
_CELL_SPLIT_RE = re.compile(r"(?<!\\)\|")

_markdown = mistune.create_markdown(
    renderer="ast",
    hard_wrap=True,
    plugins=["strikethrough", "table"],
)


def _split_cells(line: str) -> list[str]:
    inner = line.strip()
    if inner.startswith("|"):
        inner = inner[1:]
    if inner.endswith("|") and not inner.endswith("\\|"):
        inner = inner[:-1]
    return [cell.strip() for cell in _CELL_SPLIT_RE.split(inner)]


def even_table_rows(markdown: str) -> str:
    """Pad or truncate table body rows to the width of the delimiter row.

    mistune drops a whole table when any row has the wrong cell count;
    GFM instead fills missing cells with blanks and ignores extra ones.
    """
    lines = markdown.split("\n")
    fence = None
    i = 0
    while i < len(lines):
        line = lines[i]
        match = _FENCE_RE.match(line)
        if match:
            marker = match.group(1)
            if fence is None:
                fence = marker[0] * 3
            elif marker.startswith(fence):
                fence = None
            i += 1
            continue
        if (
            fence is None
            and "|" in line
            and i + 1 < len(lines)
            and "|" in lines[i + 1]
            and _DELIMITER_ROW_RE.match(lines[i + 1])
        ):
            width = len(_split_cells(lines[i + 1]))
            i += 2
            while i < len(lines) and lines[i].strip() and "|" in lines[i]:
                cells = _split_cells(lines[i])[:width]
                cells += [""] * (width - len(cells))
                lines[i] = "| " + " | ".join(cells) + " |"
                i += 1
            continue
        i += 1
    return "\n".join(lines)


def parse_markdown(markdown: str) -> list[Node]:
    """Parse Markdown into mistune's AST (a list of typed dict nodes)."""
    return _markdown(even_table_rows(markdown))


def collapse_newlines(text: str) -> str:
    """Collapse runs of three or more newlines into exactly two."""
    return _EXCESS_NEWLINES_RE.sub("\n\n", text)


def strip_tags(text: str) -> str:
    """Remove anything that looks like an HTML tag."""
    return _TAG_RE.sub("", text)


# ---------------------------------------------------------------------------
# Tree walk
# ---------------------------------------------------------------------------


def _render_nodes(nodes: Iterable[Node], config: SymbolConfig) -> str:
    return "".join(_render_node(node, config) for node in nodes)


def _render_children(node: Node, config: SymbolConfig) -> str:
    return _render_nodes(node.get("children") or (), config)


def _render_node(node: Node, config: SymbolConfig) -> str:
    rule = _RULES.get(node.get("type", ""))
    if rule is not None:
        return rule(node, config)
    # Unknown node type: keep whatever text it carries.
    if node.get("children"):
        return _render_children(node, config)
    return html.unescape(node.get("raw", ""))


# ---------------------------------------------------------------------------
# Inline rules
# ---------------------------------------------------------------------------


def _text(node: Node, config: SymbolConfig) -> str:
    return html.unescape(node.get("raw", ""))


def _strong(node: Node, config: SymbolConfig) -> str:
    return convert_to_unicode(_render_children(node, config), "sansSerifBold")


def _emphasis(node: Node, config: SymbolConfig) -> str:
    return convert_to_unicode(_render_children(node, config), "sansSerifItalic")


def _strikethrough(node: Node, config: SymbolConfig) -> str:
    # The overlay does not compose with CJK glyphs on most renderers.
    text = _render_children(node, config)
    return "".join(ch if is_cjk_char(ch) else ch + STRIKE_OVERLAY for ch in text)


def _codespan(node: Node, config: SymbolConfig) -> str:
    return convert_to_unicode(node.get("raw", ""), "monospace")


def _link(node: Node, config: SymbolConfig) -> str:
    url = node.get("attrs", {}).get("url", "")
    return f"{_render_children(node, config)} ({url})"


def _image(node: Node, config: SymbolConfig) -> str:
    return f"[image: {_render_children(node, config)}]"


def _linebreak(node: Node, config: SymbolConfig) -> str:
    return "\n"


def _inline_html(node: Node, config: SymbolConfig) -> str:
    return html.unescape(strip_tags(node.get("raw", "")))


# ---------------------------------------------------------------------------
# Block rules
# ---------------------------------------------------------------------------


def _paragraph(node: Node, config: SymbolConfig) -> str:
    return _render_children(node, config) + "\n\n"


def _block_text(node: Node, config: SymbolConfig) -> str:
    return _render_children(node, config) + "\n"


def _heading(node: Node, config: SymbolConfig) -> str:
    level = node.get("attrs", {}).get("level", 1)
    if level == 1:
        format_fn = config.h1
    elif level == 2:
        format_fn = config.h2
    else:
        format_fn = config.h3
    return f"\n{format_fn(_render_children(node, config))}\n\n"


def _block_code(node: Node, config: SymbolConfig) -> str:
    code = node.get("raw", "").rstrip("\n")
    return convert_to_unicode(code, "monospace") + "\n\n"


def _item_text(item: Node, config: SymbolConfig) -> str:
    """Flatten a list item's first block to one line of text.

    Tight lists wrap item content in ``block_text``, loose lists in
    ``paragraph``; both give the same text.
    """
    for child in item.get("children") or ():
        kind = child.get("type")
        if kind in ("blank_line", "list"):
            continue
        if kind in ("block_text", "paragraph"):
            return _render_children(child, config)
        return collapse_newlines(_render_node(child, config)).strip()
    return ""


def _list_lines(node: Node, config: SymbolConfig, depth: int = 0) -> list[str]:
    attrs = node.get("attrs", {})
    ordered = attrs.get("ordered", False)
    start = attrs.get("start", 1)
    indent = IDEOGRAPHIC_SPACE * depth

    lines: list[str] = []
    for offset, item in enumerate(node.get("children") or ()):
        text = _item_text(item, config)
        if ordered:
            lines.append(indent + config.ordered_item(start + offset, text))
        else:
            lines.append(indent + config.list_item(text))
        for child in item.get("children") or ():
            if child.get("type") == "list":
                lines.extend(_list_lines(child, config, depth + 1))
    return lines


def _list(node: Node, config: SymbolConfig) -> str:
    return "\n".join(_list_lines(node, config)) + "\n\n"


def _block_quote(node: Node, config: SymbolConfig) -> str:
    inner = collapse_newlines(_render_children(node, config)).strip()
    return config.blockquote(inner) + "\n\n"


def _thematic_break(node: Node, config: SymbolConfig) -> str:
    return config.hr + "\n\n"


def _block_html(node: Node, config: SymbolConfig) -> str:
    text = html.unescape(strip_tags(node.get("raw", ""))).strip()
    return text + "\n\n" if text else ""


def _blank(node: Node, config: SymbolConfig) -> str:
    return ""


def _cells(part: Node) -> list[Node]:
    """Cells of a table head or row (the head may or may not wrap a row)."""
    cells: list[Node] = []
    for child in part.get("children") or ():
        if child.get("type") == "table_row":
            cells.extend(child.get("children") or ())
        else:
            cells.append(child)
    return cells


def _table(node: Node, config: SymbolConfig) -> str:
    headers: list[str] = []
    rows: list[list[str]] = []
    for part in node.get("children") or ():
        kind = part.get("type")
        if kind == "table_head":
            headers = [_render_children(cell, config).strip() for cell in _cells(part)]
        elif kind == "table_body":
            for row in part.get("children") or ():
                rows.append(
                    [_render_children(cell, config).strip() for cell in _cells(row)]
                )

    single_column = len(headers) <= 1
    lines: list[str] = []
    for row in rows:
        lines.append(config.list_item(row[0] if row else ""))
        if single_column:
            continue
        for column, value in enumerate(row[1:], start=1):
            header = headers[column] if column < len(headers) else ""
            lines.append(f"{IDEOGRAPHIC_SPACE}{header}: {value}")
    return "\n".join(lines) + "\n\n"


_RULES: dict[str, Callable[[Node, SymbolConfig], str]] = {
    # inline
    "text": _text,
    "strong": _strong,
    "emphasis": _emphasis,
    "strikethrough": _strikethrough,
    "codespan": _codespan,
    "link": _link,
    "image": _image,
    "linebreak": _linebreak,
    "softbreak": _linebreak,
    "inline_html": _inline_html,
    # block
    "paragraph": _paragraph,
    "block_text": _block_text,
    "heading": _heading,
    "block_code": _block_code,
    "list": _list,
    "block_quote": _block_quote,
    "thematic_break": _thematic_break,
    "block_html": _block_html,
    "blank_line": _blank,
    "table": _table,
}


def convert_markdown_to_fb(markdown: str, config: SymbolConfig) -> str:
    """Render Markdown as a plain-text post decorated per ``config``.

    Never raises on malformed Markdown; the parser falls back to literal
    text for anything it cannot structure.

    Returns:
        The rendered text, stripped, with no run of more than two newlines
        and exactly one trailing newline.
    """
    rendered = _render_nodes(parse_markdown(markdown), config)
    return collapse_newlines(rendered).strip() + "\n"
