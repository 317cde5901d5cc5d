"""Built-in flowchart diagram: detector and lazy loader."""

from __future__ import annotations

import importlib
import re
from typing import Any

from mermaid_core.types import ExternalDiagramDefinition, LoadedDiagram

ID = "flowchart"

_DETECT_RE = re.compile(r"^\s*(?:flowchart|graph)\b", re.IGNORECASE)


def detector(text: str, config: dict[str, Any] | None = None) -> bool:
    return _DETECT_RE.match(text) is not None


async def loader() -> LoadedDiagram:
    module = importlib.import_module("mermaid_core.diagrams.flowchart.diagram")
    return LoadedDiagram(id=ID, diagram=module.diagram)


plugin = ExternalDiagramDefinition(id=ID, detector=detector, loader=loader)
