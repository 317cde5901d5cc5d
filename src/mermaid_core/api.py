"""High-level entry points: preprocess, detect, build and render in one call."""

from __future__ import annotations

from mermaid_core import __version__
from mermaid_core import config as config_api
from mermaid_core.diagram import Diagram
from mermaid_core.diagrams import add_diagrams
from mermaid_core.preprocess import preprocess_diagram
from mermaid_core.types import DiagramMetadata, ParseResult, PreprocessResult, TextOutputRenderer


def _process_and_set_configs(text: str) -> PreprocessResult:
    processed = preprocess_diagram(text)
    config_api.reset(config_api.get_site_config())
    config_api.add_directive(processed.config)
    return processed


async def get_diagram_from_text(text: str, metadata: DiagramMetadata | None = None) -> Diagram:
    return await Diagram.from_text(text, metadata)


async def parse(text: str) -> ParseResult:
    """Check that ``text`` is a valid diagram and report its type and config.

    Raises:
        UnknownDiagramError: If the diagram type is not recognized.
        DiagramParseError: If the diagram's grammar rejects the text.
    """
    add_diagrams()
    processed = _process_and_set_configs(text)
    diagram = await get_diagram_from_text(processed.code)
    return ParseResult(diagram_type=diagram.type, config=processed.config)


async def render(id: str, text: str) -> str | None:
    """Render ``text`` under element ``id``.

    The front-matter title is passed to the diagram as metadata. Returns the
    rendered text when the diagram's renderer keeps its output, else None.
    """
    add_diagrams()
    processed = _process_and_set_configs(text)
    diagram = await get_diagram_from_text(processed.code, DiagramMetadata(title=processed.title))
    await diagram.render(id, __version__)
    if isinstance(diagram.renderer, TextOutputRenderer):
        return diagram.renderer.outputs.pop(id, None)
    return None
