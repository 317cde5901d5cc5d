"""Diagram plugin API: detection, front matter, comments and the registry."""

from mermaid_core.diagram_api.comments import cleanup_comments
from mermaid_core.diagram_api.detect import (
    add_detector,
    detect_type,
    get_diagram_loader,
    register_lazy_loaded_diagrams,
)
from mermaid_core.diagram_api.frontmatter import extract_front_matter
from mermaid_core.diagram_api.registry import (
    DiagramRegistry,
    DiagramState,
    get_diagram,
    get_registry,
    register_diagram,
)

__all__ = [
    "DiagramRegistry",
    "DiagramState",
    "add_detector",
    "cleanup_comments",
    "detect_type",
    "extract_front_matter",
    "get_diagram",
    "get_diagram_loader",
    "get_registry",
    "register_diagram",
    "register_lazy_loaded_diagrams",
]
