"""The info diagram definition: shows the library version."""

from __future__ import annotations

import re
from typing import Any

from mermaid_core.errors import DiagramParseError
from mermaid_core.types import DiagramDefinition

_INFO_RE = re.compile(r"^\s*info(\s+showInfo)?\s*$")


class InfoDb:
    """Holds whether ``showInfo`` was requested. Has no ``clear``; every parse overwrites it."""

    def __init__(self) -> None:
        self.show_info = False


class InfoParser:
    def __init__(self, db: InfoDb) -> None:
        self.db = db

    async def parse(self, text: str) -> None:
        m = _INFO_RE.match(text)
        if m is None:
            raise DiagramParseError(f"expected 'info', got {text.strip()!r}", 1)
        self.db.show_info = m.group(1) is not None


class InfoRenderer:
    def __init__(self) -> None:
        self.outputs: dict[str, str] = {}

    def draw(self, text: str, id: str, version: str, diagram: Any) -> None:
        self.outputs[id] = f"v{version}\n"


db = InfoDb()
diagram = DiagramDefinition(db=db, parser=InfoParser(db), renderer=InfoRenderer(), id="info")
