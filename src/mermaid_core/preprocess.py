"""Preprocessing pipeline: raw diagram text to canonical ``{code, title, config}``.

Stages run in a fixed order:

1. normalize line endings and attribute quoting inside HTML-like tags,
2. extract front matter (``displayMode`` is projected into ``gantt``),
3. extract and strip directives,
4. merge front-matter config with directive config (directive wins),
5. strip comments.
"""

from __future__ import annotations

import re
from typing import Any

from mermaid_core.diagram_api.comments import cleanup_comments
from mermaid_core.diagram_api.frontmatter import extract_front_matter
from mermaid_core.directives import detect_directive, detect_init, remove_directives
from mermaid_core.types import DirectiveResult, FrontMatterMetadata, PreprocessResult
from mermaid_core.utils import clean_and_merge

_LINE_ENDING_RE = re.compile(r"\r\n?")
_TAG_RE = re.compile(r"<(\w+)([^>]*)>")
_DOUBLE_QUOTED_ATTR_RE = re.compile(r'="([^"]*)"')


def cleanup_text(code: str) -> str:
    """Collapse CRLF/CR to LF and single-quote attribute values inside tags."""
    code = _LINE_ENDING_RE.sub("\n", code)
    return _TAG_RE.sub(
        lambda m: "<" + m.group(1) + _DOUBLE_QUOTED_ATTR_RE.sub(r"='\1'", m.group(2)) + ">",
        code,
    )


def process_front_matter(code: str) -> tuple[str, FrontMatterMetadata]:
    """Strip front matter from ``code``; returns the remaining text and metadata."""
    result = extract_front_matter(code)
    metadata = result.metadata
    if metadata.display_mode:
        # Legacy: displayMode only ever applied to gantt charts.
        gantt = metadata.config.get("gantt")
        if not isinstance(gantt, dict):
            gantt = {}
            metadata.config["gantt"] = gantt
        gantt["displayMode"] = metadata.display_mode
    return result.text, metadata


def process_directives(code: str) -> DirectiveResult:
    init_directive: dict[str, Any] = detect_init(code) or {}
    wrap_directives = detect_directive(code, "wrap")
    if any(directive.type == "wrap" for directive in wrap_directives):
        init_directive["wrap"] = True
    return DirectiveResult(text=remove_directives(code), directive=init_directive)


def preprocess_diagram(code: str) -> PreprocessResult:
    """Normalize ``code`` and pull out its title and configuration.

    Args:
        code: Raw diagram text as written by the author.

    Returns:
        The cleaned diagram code, the front-matter title (if any), and the
        merged configuration.

    Raises:
        MalformedFrontMatterError: If the front-matter block is invalid.
        MalformedDirectiveError: If a directive body is invalid.
    """
    cleaned = cleanup_text(code)
    text, metadata = process_front_matter(cleaned)
    directive_result = process_directives(text)
    config = clean_and_merge(metadata.config, directive_result.directive)
    return PreprocessResult(
        code=cleanup_comments(directive_result.text),
        title=metadata.title,
        config=config,
    )
