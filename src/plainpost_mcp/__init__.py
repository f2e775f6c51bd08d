"""PlainPost-mcp: Markdown to plain-text social posts."""

__version__ = "0.3.0"
