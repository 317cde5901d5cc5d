"""Built-in diagrams, registered lazily: detectors now, implementations on first use."""

from __future__ import annotations

import logging

from mermaid_core.diagram_api.detect import register_lazy_loaded_diagrams
from mermaid_core.diagrams import flowchart, info

logger = logging.getLogger(__name__)

_has_loaded_diagrams = False


def add_diagrams() -> None:
    """Register the built-in diagram detectors and loaders once per process."""
    global _has_loaded_diagrams
    if _has_loaded_diagrams:
        return
    _has_loaded_diagrams = True
    register_lazy_loaded_diagrams(flowchart.plugin, info.plugin)
    logger.debug("Built-in diagrams added")


def reset() -> None:
    global _has_loaded_diagrams
    _has_loaded_diagrams = False
