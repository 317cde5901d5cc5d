"""Front-matter extraction.

A front-matter block is a YAML document fenced by ``---`` lines at the very
start of the diagram text::

    ---
    title: My Flow
    config:
      theme: dark
    ---
    flowchart TD
"""

from __future__ import annotations

from collections.abc import Mapping

import yaml

from mermaid_core.diagram_api.regexes import FRONT_MATTER_RE
from mermaid_core.errors import MalformedFrontMatterError
from mermaid_core.types import FrontMatterMetadata, FrontMatterResult


def extract_front_matter(text: str) -> FrontMatterResult:
    """Split ``text`` into the body after the front-matter block and its metadata.

    Args:
        text: Diagram text with normalized line endings.

    Returns:
        The remaining text and the parsed metadata. Without a block the text
        is returned unchanged with empty metadata.

    Raises:
        MalformedFrontMatterError: If the block is not valid YAML, or its
            ``config`` entry is not a mapping.
    """
    match = FRONT_MATTER_RE.match(text)
    if match is None:
        return FrontMatterResult(text=text, metadata=FrontMatterMetadata())

    try:
        parsed = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise MalformedFrontMatterError(f"Invalid front matter: {e}") from e

    metadata = FrontMatterMetadata()
    if isinstance(parsed, Mapping):
        if parsed.get("displayMode"):
            metadata.display_mode = str(parsed["displayMode"])
        if parsed.get("title"):
            metadata.title = str(parsed["title"])
        config = parsed.get("config")
        if config:
            if not isinstance(config, Mapping):
                raise MalformedFrontMatterError("Front matter 'config' must be a mapping")
            metadata.config = dict(config)

    return FrontMatterResult(text=text[match.end() :], metadata=metadata)
