"""Flowchart text renderer — writes the parsed model back out as canonical text."""

from __future__ import annotations

from typing import Any

from mermaid_core.diagrams.flowchart.db import FlowDb, Vertex
from mermaid_core.utils import decode_entities


def _vertex_text(vertex: Vertex) -> str:
    if vertex.label == vertex.id:
        return vertex.id
    shape = vertex.shape
    return f"{vertex.id}{shape.open}{decode_entities(vertex.label)}{shape.close}"


def render_flowchart(db: FlowDb, id: str, version: str) -> str:
    lines = [f"%% {id} rendered by mermaid-core {version}"]
    if db.title:
        lines.append(f"%% title: {decode_entities(db.title)}")
    if db.config.get("curve"):
        lines.append(f"%% curve: {db.config['curve']}")
    lines.append(f"flowchart {db.direction.value}")

    for vertex in db.ordered_vertices():
        if vertex.subgraph is None:
            lines.append(f"    {_vertex_text(vertex)}")
    vertices = db.get_vertices()
    for subgraph in db.subgraphs:
        lines.append(f"    subgraph {subgraph.id} [{decode_entities(subgraph.title)}]")
        for member in subgraph.members:
            lines.append(f"        {_vertex_text(vertices[member])}")
        lines.append("    end")

    for edge in db.get_edges():
        label = f"|{decode_entities(edge.label)}|" if edge.label else ""
        lines.append(f"    {edge.start} {edge.edge_type.value}{label} {edge.end}")
    return "\n".join(lines) + "\n"


class FlowTextRenderer:
    """Renders flowcharts to text; the output for each element id lands in ``outputs``."""

    def __init__(self) -> None:
        self.outputs: dict[str, str] = {}

    async def draw(self, text: str, id: str, version: str, diagram: Any) -> None:
        self.outputs[id] = render_flowchart(diagram.db, id, version)
