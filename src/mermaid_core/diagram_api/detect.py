"""Diagram type detection.

Detectors are tried in the order they were added; the first one that claims
the text decides its type tag.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from mermaid_core.diagram_api import registry
from mermaid_core.diagram_api.regexes import ANY_COMMENT_RE, DIRECTIVE_RE, FRONT_MATTER_RE
from mermaid_core.errors import UnknownDiagramError
from mermaid_core.types import DiagramDetector, DiagramLoader, ExternalDiagramDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectorRecord:
    detector: DiagramDetector
    loader: DiagramLoader | None = None


_detectors: dict[str, DetectorRecord] = {}


def add_detector(key: str, detector: DiagramDetector, loader: DiagramLoader | None = None) -> None:
    """Register ``detector`` under ``key`` and hand its loader to the registry."""
    if key in _detectors:
        logger.warning("Detector with key %s already exists. Overwriting.", key)
    _detectors[key] = DetectorRecord(detector=detector, loader=loader)
    if loader is not None:
        registry.get_registry().add_loader(key, loader)
    logger.debug("Detector with key %s added%s", key, " with loader" if loader else "")


def register_lazy_loaded_diagrams(*diagrams: ExternalDiagramDefinition) -> None:
    for diagram in diagrams:
        add_detector(diagram.id, diagram.detector, diagram.loader)


def get_diagram_loader(key: str) -> DiagramLoader | None:
    record = _detectors.get(key)
    return record.loader if record else None


def detector_keys() -> list[str]:
    return list(_detectors)


def detect_type(text: str, config: dict[str, Any] | None = None) -> str:
    """Return the type tag of the first detector that accepts ``text``.

    Front matter, directives and comments are ignored.

    Raises:
        UnknownDiagramError: If no detector accepts the text.
    """
    text = FRONT_MATTER_RE.sub("", text, count=1)
    text = DIRECTIVE_RE.sub("", text)
    text = ANY_COMMENT_RE.sub("\n", text)
    for key, record in _detectors.items():
        if record.detector(text, config):
            return key
    raise UnknownDiagramError(f"No diagram type detected matching given configuration for text: {text}")


def reset() -> None:
    _detectors.clear()
