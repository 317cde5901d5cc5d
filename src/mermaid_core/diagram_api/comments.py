"""Comment removal for diagram text."""

from __future__ import annotations

from mermaid_core.diagram_api.regexes import COMMENT_LINE_RE


def cleanup_comments(text: str) -> str:
    """Remove ``%%`` comment lines (directives are left alone) and leading whitespace."""
    return COMMENT_LINE_RE.sub("", text).lstrip()
