"""Flowchart parser — hand-rolled, statement at a time.

Writes into the db bound at ``parser.yy`` (JISON convention), so the caller
must bind a FlowDb before calling ``parse``. Handles::

    flowchart LR
        A[Start] --> B(Round) -->|yes| C{Choice}
        C -.-> D((End)); C ==> A
        subgraph group [Group]
            direction TB
            E --- F
        end
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from mermaid_core.diagrams.flowchart.types import Direction, EdgeType, NodeShape
from mermaid_core.errors import DiagramParseError

_HEADER_RE = re.compile(r"(?:flowchart-elk|flowchart|graph)(?:\s+(TD|TB|LR|RL|BT))?\s*$", re.IGNORECASE)
_SUBGRAPH_RE = re.compile(r"subgraph\s+(.+)$")
_SUBGRAPH_ID_TITLE_RE = re.compile(r"([A-Za-z0-9_-]+)\s*\[(.*)\]$")
_DIRECTION_STMT_RE = re.compile(r"direction\s+(TD|TB|LR|RL|BT)$")
_COMMENT_RE = re.compile(r"^\s*%%")

_NODE_ID_RE = re.compile(r"[A-Za-z0-9_]+(?:-(?![-.>])[A-Za-z0-9_]+)*")
_WS_RE = re.compile(r"[ \t]*")
_LABEL_TEXT_RE = re.compile(r"[^|]*")

# Longest shapes first so "((" wins over "(".
_SHAPES = sorted(NodeShape, key=lambda shape: -len(shape.open))
_EDGES = list(EdgeType)


@dataclass
class _Cursor:
    """Cursor over a single statement."""

    src: str
    pos: int = 0

    def eof(self) -> bool:
        return self.pos >= len(self.src)

    def skip_ws(self) -> None:
        self.pos = _WS_RE.match(self.src, self.pos).end()

    def consume(self, s: str) -> bool:
        if self.src.startswith(s, self.pos):
            self.pos += len(s)
            return True
        return False

    def match_re(self, pattern: re.Pattern[str]) -> str | None:
        m = pattern.match(self.src, self.pos)
        if m is None:
            return None
        self.pos = m.end()
        return m.group(0)

    def parse_label(self, close: str) -> str | None:
        if self.src.startswith('"', self.pos):
            end = self.src.find('"', self.pos + 1)
            if end < 0:
                return None
            label = self.src[self.pos + 1 : end]
            self.pos = end + 1
            return label if self.consume(close) else None
        end = self.src.find(close, self.pos)
        if end < 0:
            return None
        label = self.src[self.pos : end].strip()
        self.pos = end + len(close)
        return label

    def parse_node(self) -> tuple[str, str | None, NodeShape | None] | None:
        self.skip_ws()
        node_id = self.match_re(_NODE_ID_RE)
        if node_id is None:
            return None
        for shape in _SHAPES:
            if self.consume(shape.open):
                label = self.parse_label(shape.close)
                if label is None:
                    return None
                return node_id, label, shape
        return node_id, None, None

    def parse_edge(self) -> tuple[EdgeType, str | None] | None:
        self.skip_ws()
        for edge_type in _EDGES:
            if self.consume(edge_type.value):
                self.skip_ws()
                label = None
                if self.consume("|"):
                    label = self.match_re(_LABEL_TEXT_RE).strip()
                    if not self.consume("|"):
                        return None
                return edge_type, label
        return None


class _ParserState:
    """Holds ``yy``, the db the parser writes into."""

    def __init__(self) -> None:
        self.yy: Any = None


class FlowParser:
    """Flowchart/graph diagram parser."""

    def __init__(self) -> None:
        self.parser = _ParserState()

    def parse(self, text: str) -> None:
        db = self.parser.yy
        if db is None:
            raise DiagramParseError("flowchart parser has no db bound to parser.yy")

        seen_header = False
        for line_no, line in enumerate(text.split("\n"), start=1):
            if _COMMENT_RE.match(line):
                continue
            for statement in line.split(";"):
                statement = statement.strip()
                if not statement:
                    continue
                if not seen_header:
                    header = _HEADER_RE.match(statement)
                    if header is None:
                        raise DiagramParseError(f"expected 'flowchart' or 'graph', got {statement!r}", line_no)
                    db.set_direction(Direction.parse(header.group(1)))
                    seen_header = True
                    continue
                self._parse_statement(db, statement, line_no)

        if not seen_header:
            raise DiagramParseError("empty flowchart")
        if db.open_subgraphs():
            raise DiagramParseError("subgraph is missing its 'end'")

    def _parse_statement(self, db: Any, statement: str, line_no: int) -> None:
        if statement == "end":
            if not db.end_subgraph():
                raise DiagramParseError("'end' without a matching subgraph", line_no)
            return
        m = _SUBGRAPH_RE.match(statement)
        if m:
            _begin_subgraph(db, m.group(1).strip())
            return
        if _DIRECTION_STMT_RE.match(statement):
            return

        cursor = _Cursor(statement)
        node = cursor.parse_node()
        if node is None:
            raise DiagramParseError(f"unexpected {statement!r}", line_no)
        db.add_vertex(*node)
        prev_id = node[0]
        while True:
            cursor.skip_ws()
            if cursor.eof():
                break
            edge = cursor.parse_edge()
            target = cursor.parse_node() if edge is not None else None
            if target is None:
                raise DiagramParseError(f"unexpected {statement[cursor.pos:]!r}", line_no)
            db.add_vertex(*target)
            db.add_edge(prev_id, target[0], *edge)
            prev_id = target[0]


def _begin_subgraph(db: Any, declaration: str) -> None:
    m = _SUBGRAPH_ID_TITLE_RE.match(declaration)
    if m:
        db.begin_subgraph(m.group(1), m.group(2).strip().strip('"'))
    elif declaration.startswith('"') and declaration.endswith('"'):
        title = declaration.strip('"')
        db.begin_subgraph(title, title)
    else:
        db.begin_subgraph(declaration, declaration)
