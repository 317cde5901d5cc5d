"""Tests for the built-in flowchart diagram — parser, db and text renderer."""

import pytest

from mermaid_core.diagrams.flowchart.db import FlowDb
from mermaid_core.diagrams.flowchart.parser import FlowParser
from mermaid_core.diagrams.flowchart.renderer import render_flowchart
from mermaid_core.diagrams.flowchart.types import Direction, EdgeType, NodeShape
from mermaid_core.errors import DiagramParseError


def _parse(text: str) -> FlowDb:
    parser = FlowParser()
    db = FlowDb()
    parser.parser.yy = db
    parser.parse(text)
    return db


def test_parse_simple_chain():
    db = _parse("graph TD\n    A --> B --> C\n")
    assert db.direction == Direction.TD
    assert list(db.get_vertices()) == ["A", "B", "C"]
    edges = db.get_edges()
    assert [(e.start, e.end) for e in edges] == [("A", "B"), ("B", "C")]


def test_parse_without_spaces():
    db = _parse("flowchart LR\nA-->B\n")
    assert db.direction == Direction.LR
    assert list(db.get_vertices()) == ["A", "B"]


def test_parse_shapes():
    db = _parse("graph TD\n    A[Rect] --> B(Round) --> C{Diamond} --> D((Circle))\n")
    vertices = db.get_vertices()
    assert vertices["A"].shape == NodeShape.Rectangle
    assert vertices["B"].shape == NodeShape.Rounded
    assert vertices["C"].shape == NodeShape.Diamond
    assert vertices["D"].shape == NodeShape.Circle
    assert vertices["D"].label == "Circle"


def test_parse_edge_types_and_labels():
    db = _parse("graph TD\n    A --> B\n    C --- D\n    E -.-> F\n    G ==>|yes| H\n    I <--> J\n")
    edges = db.get_edges()
    assert [e.edge_type for e in edges] == [
        EdgeType.Arrow,
        EdgeType.Line,
        EdgeType.DottedArrow,
        EdgeType.ThickArrow,
        EdgeType.BidirArrow,
    ]
    assert edges[3].label == "yes"


def test_parse_quoted_label():
    db = _parse('graph TD\n    A["Hello World"] --> B\n')
    assert db.get_vertices()["A"].label == "Hello World"


def test_first_definition_wins():
    db = _parse("graph TD\n    A[Hello] --> B\n    A[World] --> C\n")
    assert db.get_vertices()["A"].label == "Hello"


def test_bare_reference_then_label():
    db = _parse("graph TD\n    A --> B\n    B[Named]\n")
    assert db.get_vertices()["B"].label == "Named"


def test_semicolon_separated_statements():
    db = _parse("graph LR; A-->B; B-->C")
    assert len(db.get_vertices()) == 3
    assert len(db.get_edges()) == 2


def test_parse_subgraph():
    src = "flowchart TD\n    subgraph one [Group One]\n        direction LR\n        A --> B\n    end\n    C --> A\n"
    db = _parse(src)
    assert len(db.subgraphs) == 1
    assert db.subgraphs[0].id == "one"
    assert db.subgraphs[0].title == "Group One"
    assert db.subgraphs[0].members == ["A", "B"]
    assert db.get_vertices()["C"].subgraph is None


def test_parse_comment_lines_skipped():
    db = _parse("graph TD\n    %% a comment\n    A --> B\n")
    assert len(db.get_vertices()) == 2


def test_missing_header():
    with pytest.raises(DiagramParseError, match="line 1"):
        _parse("A --> B\n")


def test_dangling_edge_reports_line():
    with pytest.raises(DiagramParseError) as excinfo:
        _parse("graph TD\n    A -->\n")
    assert excinfo.value.line == 2


def test_unbalanced_subgraph():
    with pytest.raises(DiagramParseError):
        _parse("graph TD\n    subgraph x\n    A --> B\n")
    with pytest.raises(DiagramParseError):
        _parse("graph TD\n    end\n")


def test_unbound_parser_raises():
    with pytest.raises(DiagramParseError):
        FlowParser().parse("graph TD\n")


def test_clear_resets_model():
    db = _parse("graph TD\n    A --> B\n")
    db.set_diagram_title("Old")
    db.clear()
    assert db.get_vertices() == {}
    assert db.get_edges() == []
    assert db.get_diagram_title() is None


def test_ordered_vertices_topological():
    db = _parse("graph TD\n    B --> C\n    A --> B\n")
    assert [v.id for v in db.ordered_vertices()] == ["A", "B", "C"]


def test_ordered_vertices_cycle_keeps_insertion_order():
    db = _parse("graph TD\n    B --> A\n    A --> B\n")
    assert [v.id for v in db.ordered_vertices()] == ["B", "A"]


def test_render_flowchart():
    db = _parse("graph LR\n    A[Start] -->|go| B\n")
    db.set_diagram_title("Demo")
    assert render_flowchart(db, "d1", "1.2.3") == (
        "%% d1 rendered by mermaid-core 1.2.3\n"
        "%% title: Demo\n"
        "flowchart LR\n"
        "    A[Start]\n"
        "    B\n"
        "    A -->|go| B\n"
    )


def test_render_flowchart_subgraph_and_entities():
    db = _parse("graph TD\n    subgraph s [Box]\n    A[ﬂ°quot¶ßhiﬂ°quot¶ß]\n    end\n")
    out = render_flowchart(db, "d", "0")
    assert "    subgraph s [Box]\n        A[&quot;hi&quot;]\n    end\n" in out


def test_render_flowchart_includes_configured_curve():
    db = _parse("graph TD\n    A --> B\n")
    db.set_config({"curve": "stepAfter"})
    out = render_flowchart(db, "d", "0")
    assert out.splitlines()[1:3] == ["%% curve: stepAfter", "flowchart TD"]


def test_clear_keeps_config():
    db = FlowDb()
    db.set_config({"curve": "linear"})
    db.clear()
    assert db.config == {"curve": "linear"}
