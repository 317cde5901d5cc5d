"""Flowchart model — vertices and edges kept in a networkx MultiDiGraph.

The parser writes into a FlowDb through ``parser.yy``; the renderer reads
from it. One FlowDb is shared by every flowchart parsed in the process, so
it is cleared before each parse.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import networkx as nx

from mermaid_core.diagrams.flowchart.types import Direction, EdgeType, NodeShape


@dataclass
class Vertex:
    id: str
    label: str
    shape: NodeShape
    subgraph: str | None = None


@dataclass
class FlowEdge:
    start: str
    end: str
    edge_type: EdgeType
    label: str | None = None


@dataclass
class Subgraph:
    id: str
    title: str
    members: list[str] = field(default_factory=list)


class FlowDb:
    def __init__(self) -> None:
        self.graph: nx.MultiDiGraph = nx.MultiDiGraph()
        self.direction = Direction.TD
        self.title: str | None = None
        self.config: dict[str, Any] = {}
        self.subgraphs: list[Subgraph] = []
        self._subgraph_stack: list[Subgraph] = []

    def clear(self) -> None:
        self.graph = nx.MultiDiGraph()
        self.direction = Direction.TD
        self.title = None
        self.subgraphs = []
        self._subgraph_stack = []

    def set_config(self, config: dict[str, Any]) -> None:
        self.config = dict(config)

    def set_diagram_title(self, title: str) -> None:
        self.title = title

    def get_diagram_title(self) -> str | None:
        return self.title

    def set_direction(self, direction: Direction) -> None:
        self.direction = direction

    def add_vertex(self, id: str, label: str | None = None, shape: NodeShape | None = None) -> None:
        """Add a vertex, or give an existing bare vertex its label and shape.

        The first explicit label wins; later bare references leave it alone.
        """
        current = self._subgraph_stack[-1] if self._subgraph_stack else None
        if id not in self.graph:
            vertex = Vertex(
                id=id,
                label=label if label is not None else id,
                shape=shape or NodeShape.Rectangle,
                subgraph=current.id if current else None,
            )
            self.graph.add_node(id, vertex=vertex)
            if current is not None:
                current.members.append(id)
            return
        vertex = self.graph.nodes[id]["vertex"]
        if label is not None and vertex.label == vertex.id and vertex.shape is NodeShape.Rectangle:
            vertex.label = label
            vertex.shape = shape or NodeShape.Rectangle

    def add_edge(self, start: str, end: str, edge_type: EdgeType, label: str | None = None) -> None:
        self.add_vertex(start)
        self.add_vertex(end)
        self.graph.add_edge(start, end, edge=FlowEdge(start, end, edge_type, label))

    def begin_subgraph(self, id: str, title: str | None = None) -> None:
        subgraph = Subgraph(id=id, title=title or id)
        self.subgraphs.append(subgraph)
        self._subgraph_stack.append(subgraph)

    def end_subgraph(self) -> bool:
        if not self._subgraph_stack:
            return False
        self._subgraph_stack.pop()
        return True

    def open_subgraphs(self) -> int:
        return len(self._subgraph_stack)

    def get_vertices(self) -> dict[str, Vertex]:
        return {node_id: data["vertex"] for node_id, data in self.graph.nodes(data=True)}

    def get_edges(self) -> list[FlowEdge]:
        return [data["edge"] for _, _, data in self.graph.edges(data=True)]

    def ordered_vertices(self) -> list[Vertex]:
        """Vertices in topological order when the graph is acyclic, else insertion order."""
        vertices = self.get_vertices()
        if not nx.is_directed_acyclic_graph(self.graph):
            return list(vertices.values())
        order = {node_id: index for index, node_id in enumerate(self.graph.nodes)}
        return [vertices[node_id] for node_id in nx.lexicographical_topological_sort(self.graph, key=order.__getitem__)]
