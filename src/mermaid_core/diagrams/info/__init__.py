"""Built-in info diagram: detector and lazy loader."""

from __future__ import annotations

import importlib
import re
from typing import Any

from mermaid_core.types import ExternalDiagramDefinition, LoadedDiagram

ID = "info"

_DETECT_RE = re.compile(r"^\s*info\b")


def detector(text: str, config: dict[str, Any] | None = None) -> bool:
    return _DETECT_RE.match(text) is not None


async def loader() -> LoadedDiagram:
    module = importlib.import_module("mermaid_core.diagrams.info.diagram")
    return LoadedDiagram(id=ID, diagram=module.diagram)


plugin = ExternalDiagramDefinition(id=ID, detector=detector, loader=loader)
