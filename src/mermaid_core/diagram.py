"""The Diagram facade: a parsed model bound to its parser and renderer."""

from __future__ import annotations

import inspect
from typing import Any

from mermaid_core import config as config_api
from mermaid_core.diagram_api.detect import detect_type
from mermaid_core.diagram_api.registry import get_registry
from mermaid_core.types import (
    DiagramMetadata,
    HasParserState,
    SupportsClear,
    SupportsDiagramTitle,
)
from mermaid_core.utils import encode_entities


class Diagram:
    """A diagram parsed from text.

    The ``db`` is shared by every Diagram of the same type: building a new
    Diagram clears it (when the db supports clearing) and parses into it again.
    """

    __slots__ = ("_type", "_text", "_db", "_parser", "_renderer")

    def __init__(self, type: str, text: str, db: Any, parser: Any, renderer: Any) -> None:
        self._type = type
        self._text = text
        self._db = db
        self._parser = parser
        self._renderer = renderer

    @property
    def type(self) -> str:
        return self._type

    @property
    def text(self) -> str:
        return self._text

    @property
    def db(self) -> Any:
        return self._db

    @property
    def parser(self) -> Any:
        return self._parser

    @property
    def renderer(self) -> Any:
        return self._renderer

    @classmethod
    async def from_text(cls, text: str, metadata: DiagramMetadata | None = None) -> Diagram:
        """Detect, load and parse ``text`` into a Diagram.

        Args:
            text: Preprocessed diagram code.
            metadata: Caller-supplied metadata; only ``title`` is used.

        Raises:
            UnknownDiagramError: If the type cannot be detected or loaded.
            DiagramParseError: If the diagram's grammar rejects the text.
        """
        metadata = metadata or DiagramMetadata()
        config = config_api.get_config()
        diagram_type = detect_type(text, config)
        definition = await get_registry().resolve(diagram_type)

        text = encode_entities(text) + "\n"
        db, parser, renderer = definition.db, definition.parser, definition.renderer

        if isinstance(parser, HasParserState) and parser.parser is not None:
            parser.parser.yy = db
        if isinstance(db, SupportsClear):
            db.clear()
        if definition.init is not None:
            definition.init(config)
        # Legacy: front-matter titles must be passed in as metadata to apply.
        if metadata.title and isinstance(db, SupportsDiagramTitle):
            db.set_diagram_title(metadata.title)

        result = parser.parse(text)
        if inspect.isawaitable(result):
            await result
        return cls(diagram_type, text, db, parser, renderer)

    async def render(self, id: str, version: str) -> None:
        result = self.renderer.draw(self.text, id, version, self)
        if inspect.isawaitable(result):
            await result

    def get_parser(self) -> Any:
        return self.parser

    def get_type(self) -> str:
        return self.type

    def __repr__(self) -> str:
        return f"Diagram(type={self.type!r})"
