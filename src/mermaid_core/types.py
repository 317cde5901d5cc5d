"""Shared type definitions for mermaid-core.

Diagram definitions, loader results and the optional capabilities a diagram
implementation may expose. Capabilities are declared as runtime-checkable
protocols and probed with ``isinstance``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

# ─── Diagram plugin surface ──────────────────────────────────────────────────


class DiagramParser(Protocol):
    def parse(self, text: str) -> Awaitable[None] | None: ...


class DiagramRenderer(Protocol):
    def draw(self, text: str, id: str, version: str, diagram: Any) -> Awaitable[None] | None: ...


@runtime_checkable
class SupportsClear(Protocol):
    """A db whose parsed state can be wiped before the next parse."""

    def clear(self) -> None: ...


@runtime_checkable
class SupportsDiagramTitle(Protocol):
    def set_diagram_title(self, title: str) -> None: ...


@runtime_checkable
class HasParserState(Protocol):
    """A JISON-style parser whose ``parser.yy`` must point at the db."""

    parser: Any


@runtime_checkable
class TextOutputRenderer(Protocol):
    """A renderer that keeps the text it drew, keyed by element id."""

    outputs: dict[str, str]


@dataclass(frozen=True)
class DiagramDefinition:
    """The bundle registered under a diagram type tag."""

    db: Any
    parser: DiagramParser
    renderer: DiagramRenderer
    init: Callable[[dict[str, Any]], None] | None = None
    id: str | None = None


@dataclass(frozen=True)
class LoadedDiagram:
    """What an asynchronous loader hands back to the registry."""

    id: str
    diagram: DiagramDefinition


DiagramLoader = Callable[[], Awaitable[LoadedDiagram]]
DiagramDetector = Callable[[str, "dict[str, Any] | None"], bool]


@dataclass(frozen=True)
class ExternalDiagramDefinition:
    """A diagram that is detected eagerly but loaded on first use."""

    id: str
    detector: DiagramDetector
    loader: DiagramLoader


# ─── Preprocessing results ───────────────────────────────────────────────────


@dataclass
class FrontMatterMetadata:
    title: str | None = None
    display_mode: str | None = None
    config: dict[str, Any] = field(default_factory=dict)


@dataclass
class FrontMatterResult:
    text: str
    metadata: FrontMatterMetadata


@dataclass(frozen=True)
class Directive:
    """A single ``%%{ type: args }%%`` marker."""

    type: str
    args: Any = None


@dataclass
class DirectiveResult:
    text: str
    directive: dict[str, Any]


@dataclass
class PreprocessResult:
    code: str
    title: str | None
    config: dict[str, Any]


@dataclass
class DiagramMetadata:
    """Caller-supplied metadata for ``Diagram.from_text``."""

    title: str | None = None


@dataclass
class ParseResult:
    diagram_type: str
    config: dict[str, Any]
