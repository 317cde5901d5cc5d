"""Inline ``%%{ ... }%%`` directives.

Directives are the legacy way to configure a diagram from inside its text::

    %%{init: {"theme": "dark"}}%%
    %%{wrap}%%

Front matter is preferred for new diagrams; directives are still honoured.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from mermaid_core import config as config_api
from mermaid_core.diagram_api.detect import detect_type
from mermaid_core.diagram_api.regexes import DIRECTIVE_RE
from mermaid_core.errors import MalformedDirectiveError
from mermaid_core.types import Directive
from mermaid_core.utils import assign_with_depth

logger = logging.getLogger(__name__)

_PLAIN_COMMENT_RE = re.compile(r"^[ \t]*%%(?!\{).*\n", re.MULTILINE)
_INIT_TYPE_RE = re.compile(r"(?:init\b)|(?:initialize\b)")


def detect_directive(text: str, type_pattern: str | re.Pattern[str] | None = None) -> list[Directive]:
    """Return every directive in ``text`` whose type matches ``type_pattern``.

    Single quotes are read as double quotes so that JSON bodies may use
    either style. Without ``type_pattern`` every directive is returned.

    Raises:
        MalformedDirectiveError: If a directive body is not valid JSON.
    """
    if isinstance(type_pattern, str):
        type_pattern = re.compile(type_pattern)
    text = _PLAIN_COMMENT_RE.sub("", text.strip()).replace("'", '"')
    logger.debug("Detecting diagram directive%s", f" type: {type_pattern.pattern}" if type_pattern else "")

    result: list[Directive] = []
    for match in DIRECTIVE_RE.finditer(text):
        directive_type = match.group(1) or match.group(2)
        if type_pattern is not None and not type_pattern.search(directive_type):
            continue
        result.append(Directive(type=directive_type, args=_directive_args(match)))
    return result


def _directive_args(match: re.Match[str]) -> Any:
    word, body = match.group(3), match.group(4)
    if word:
        return word.strip()
    if body and body.strip():
        try:
            return json.loads(body.strip())
        except json.JSONDecodeError as e:
            raise MalformedDirectiveError(f"Invalid directive body {body.strip()!r}: {e}") from e
    return None


def detect_init(text: str, config: dict[str, Any] | None = None) -> dict[str, Any] | None:
    """Merge the arguments of every ``init`` directive in ``text``.

    A ``config`` key is moved under the diagram's own section, so
    ``%%{init: {"config": {...}}}%%`` in a flowchart configures ``flowchart``.
    Returns ``None`` when there is no init directive with arguments.
    """
    inits = detect_directive(text, _INIT_TYPE_RE)
    args = [init.args for init in inits if isinstance(init.args, dict)]
    if not args:
        return None

    results: dict[str, Any] = {}
    for arg in args:
        config_api.sanitize_directive(arg)
        assign_with_depth(results, arg)

    if "config" in results:
        diagram_type = detect_type(text, config)
        if diagram_type == "flowchart-v2":
            diagram_type = "flowchart"
        results[diagram_type] = results.pop("config")
    return results


def remove_directives(text: str) -> str:
    """Strip all directive syntax, including markers left behind by an earlier removal."""
    while (stripped := DIRECTIVE_RE.sub("", text)) != text:
        text = stripped
    return text
