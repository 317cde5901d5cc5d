"""Exception types raised by mermaid-core."""

from __future__ import annotations


class MermaidError(Exception):
    """Base class for all mermaid-core errors."""


class UnknownDiagramError(MermaidError):
    """No diagram type matches the text, or a detected type has no loader."""


class DiagramNotFoundError(MermaidError, KeyError):
    """The diagram type is known but no definition has been registered yet."""

    def __init__(self, name: str) -> None:
        self.diagram_type = name
        super().__init__(f"Diagram {name} not found.")

    def __str__(self) -> str:
        return str(self.args[0])


class RegistrationConflictError(MermaidError, ValueError):
    """A different definition is already registered under the same id."""

    def __init__(self, name: str) -> None:
        self.diagram_type = name
        super().__init__(
            f"Diagram {name} is already registered with a different definition. "
            "Reset the registry before registering a replacement."
        )


class MalformedFrontMatterError(MermaidError, ValueError):
    """The front-matter block is not valid YAML or has the wrong shape."""


class MalformedDirectiveError(MermaidError, ValueError):
    """A ``%%{ ... }%%`` directive carries a body that is not valid JSON."""


class DiagramParseError(MermaidError, ValueError):
    """A diagram grammar rejected its input."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"Parse error on line {line}: {message}"
        super().__init__(message)
