"""Enums shared by the flowchart db, parser and renderer."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    TD = "TD"
    LR = "LR"
    RL = "RL"
    BT = "BT"

    @classmethod
    def parse(cls, value: str | None) -> Direction:
        if not value:
            return cls.TD
        value = value.upper()
        if value == "TB":
            return cls.TD
        return cls(value)


class NodeShape(Enum):
    Rectangle = ("[", "]")
    Rounded = ("(", ")")
    Diamond = ("{", "}")
    Circle = ("((", "))")

    @property
    def open(self) -> str:
        return self.value[0]

    @property
    def close(self) -> str:
        return self.value[1]


class EdgeType(Enum):
    BidirDotted = "<-.->"
    BidirThick = "<==>"
    BidirArrow = "<-->"
    DottedArrow = "-.->"
    ThickArrow = "==>"
    Arrow = "-->"
    DottedLine = "-.-"
    ThickLine = "==="
    Line = "---"
