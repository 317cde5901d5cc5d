"""Small text and mapping helpers shared across the pipeline."""

from __future__ import annotations

import copy
import re
from collections.abc import Mapping
from typing import Any

_STYLE_COLOR_RE = re.compile(r"style.*:\S*#.*;")
_CLASSDEF_COLOR_RE = re.compile(r"classDef.*:\S*#.*;")
_ENTITY_RE = re.compile(r"#\w+;")
_INT_RE = re.compile(r"^\+?\d+$")

# Placeholders survive the grammars untouched and are turned back into
# "&...;" entities by decode_entities.
_NUMERIC_OPEN = "ﬂ°°"
_NAMED_OPEN = "ﬂ°"
_CLOSE = "¶ß"


def assign_with_depth(dst: dict[str, Any], src: Mapping[str, Any], depth: int = 2) -> dict[str, Any]:
    """Merge ``src`` into ``dst`` in place, descending ``depth`` levels into mappings."""
    for key, value in src.items():
        current = dst.get(key)
        if depth > 0 and isinstance(value, Mapping) and isinstance(current, dict):
            assign_with_depth(current, value, depth - 1)
        else:
            dst[key] = copy.deepcopy(value)
    return dst


def deep_merge(*sources: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge mappings left to right into a new dict; later sources win.

    Nested mappings combine key by key at any depth, everything else is
    replaced. The inputs are never mutated.
    """
    result: dict[str, Any] = {}
    for source in sources:
        if source:
            _merge_into(result, source)
    return result


def _merge_into(dst: dict[str, Any], src: Mapping[str, Any]) -> None:
    for key, value in src.items():
        if isinstance(value, Mapping):
            current = dst.get(key)
            if not isinstance(current, dict):
                current = {}
                dst[key] = current
            _merge_into(current, value)
        else:
            dst[key] = copy.deepcopy(value)


def clean_and_merge(default_data: Mapping[str, Any] | None, data: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Combine front-matter config with directive config; the directive wins."""
    return deep_merge(default_data, data)


def encode_entities(text: str) -> str:
    """Protect ``#name;`` entity references from the diagram grammars."""
    txt = _STYLE_COLOR_RE.sub(lambda m: m.group(0)[:-1], text)
    txt = _CLASSDEF_COLOR_RE.sub(lambda m: m.group(0)[:-1], txt)

    def _placeholder(m: re.Match[str]) -> str:
        inner = m.group(0)[1:-1]
        if _INT_RE.match(inner):
            return _NUMERIC_OPEN + inner + _CLOSE
        return _NAMED_OPEN + inner + _CLOSE

    return _ENTITY_RE.sub(_placeholder, txt)


def decode_entities(text: str) -> str:
    return text.replace(_NUMERIC_OPEN, "&#").replace(_NAMED_OPEN, "&").replace(_CLOSE, ";")
