"""mermaid-core: diagram text preprocessing and lazily-loaded diagram plugins."""

__version__ = "0.1.0"

from mermaid_core.api import get_diagram_from_text, parse, render  # noqa: E402
from mermaid_core.diagram import Diagram  # noqa: E402
from mermaid_core.diagram_api import (  # noqa: E402
    DiagramRegistry,
    DiagramState,
    add_detector,
    detect_type,
    get_diagram,
    get_registry,
    register_diagram,
    register_lazy_loaded_diagrams,
)
from mermaid_core.errors import (  # noqa: E402
    DiagramNotFoundError,
    DiagramParseError,
    MalformedDirectiveError,
    MalformedFrontMatterError,
    MermaidError,
    RegistrationConflictError,
    UnknownDiagramError,
)
from mermaid_core.lifecycle import init, reset  # noqa: E402
from mermaid_core.preprocess import preprocess_diagram  # noqa: E402
from mermaid_core.types import DiagramDefinition, DiagramMetadata, LoadedDiagram  # noqa: E402

__all__ = [
    "Diagram",
    "DiagramDefinition",
    "DiagramMetadata",
    "DiagramNotFoundError",
    "DiagramParseError",
    "DiagramRegistry",
    "DiagramState",
    "LoadedDiagram",
    "MalformedDirectiveError",
    "MalformedFrontMatterError",
    "MermaidError",
    "RegistrationConflictError",
    "UnknownDiagramError",
    "__version__",
    "add_detector",
    "detect_type",
    "get_diagram",
    "get_diagram_from_text",
    "get_registry",
    "init",
    "parse",
    "preprocess_diagram",
    "register_diagram",
    "register_lazy_loaded_diagrams",
    "render",
    "reset",
]
