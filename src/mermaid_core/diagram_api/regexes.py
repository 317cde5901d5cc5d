"""Patterns shared by front-matter extraction, directive handling and detection."""

from __future__ import annotations

import re

FRONT_MATTER_RE = re.compile(r"^-{3}\s*[\n\r](.*?)[\n\r]-{3}\s*[\n\r]+", re.DOTALL)

# %%{init: {...}}%%, %%{wrap}%%, %%{ config: word }%%
DIRECTIVE_RE = re.compile(
    r"%{2}\{\s*(?:(\w+)\s*:|(\w+))\s*(?:(\w+)|((?:(?!\}%{2}).|\r?\n)*))?\s*(?:\}%{2})?",
    re.IGNORECASE,
)

ANY_COMMENT_RE = re.compile(r"\s*%%.*\n", re.MULTILINE)

# A comment line that does not open a directive.
COMMENT_LINE_RE = re.compile(r"^\s*%%(?!\{)[^\n]+\n?", re.MULTILINE)
