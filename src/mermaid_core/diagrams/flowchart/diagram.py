"""The flowchart diagram definition, imported on first use by the loader."""

from __future__ import annotations

from typing import Any

from mermaid_core.diagrams.flowchart.db import FlowDb
from mermaid_core.diagrams.flowchart.parser import FlowParser
from mermaid_core.diagrams.flowchart.renderer import FlowTextRenderer
from mermaid_core.types import DiagramDefinition

db = FlowDb()


def init(config: dict[str, Any]) -> None:
    db.set_config(config.get("flowchart", {}))


diagram = DiagramDefinition(db=db, parser=FlowParser(), renderer=FlowTextRenderer(), init=init, id="flowchart")
