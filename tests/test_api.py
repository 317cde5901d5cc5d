"""Tests for mermaid_core.api: preprocess, build and render in one call."""

import pytest

import mermaid_core
from mermaid_core import config
from mermaid_core.api import parse, render
from mermaid_core.errors import DiagramParseError, UnknownDiagramError


@pytest.mark.asyncio
async def test_parse_reports_type_and_config():
    result = await parse("---\nconfig:\n  theme: forest\n---\nflowchart TD\nA-->B")
    assert result.diagram_type == "flowchart"
    assert result.config == {"theme": "forest"}
    assert config.get_config()["theme"] == "forest"


@pytest.mark.asyncio
async def test_parse_resets_previous_directives():
    await parse("%%{init: {'theme': 'dark'}}%%\ngraph TD\nA-->B")
    await parse("graph TD\nA-->B")
    assert config.get_config()["theme"] == "default"


@pytest.mark.asyncio
async def test_parse_unknown_type():
    with pytest.raises(UnknownDiagramError):
        await parse("doesnotexist\nA-->B")


@pytest.mark.asyncio
async def test_parse_error():
    with pytest.raises(DiagramParseError):
        await parse("info bogus")


@pytest.mark.asyncio
async def test_render_threads_front_matter_title():
    out = await render("chart", "---\ntitle: Hello\n---\nflowchart LR\n%% comment\nA[Start]-->B")
    assert out == (
        f"%% chart rendered by mermaid-core {mermaid_core.__version__}\n"
        "%% title: Hello\n"
        "%% curve: basis\n"
        "flowchart LR\n"
        "    A[Start]\n"
        "    B\n"
        "    A --> B\n"
    )


@pytest.mark.asyncio
async def test_render_info():
    assert await render("about", "info") == f"v{mermaid_core.__version__}\n"


@pytest.mark.asyncio
async def test_render_uses_flowchart_config_from_front_matter():
    out = await render("chart", "---\nconfig:\n  flowchart:\n    curve: linear\n---\ngraph TD\nA-->B")
    assert "%% curve: linear\n" in out


@pytest.mark.asyncio
async def test_parse_accepts_non_string_config_keys():
    result = await parse("---\nconfig:\n  flowchart:\n    1: a\n---\nflowchart TD\nA-->B")
    assert result.config == {"flowchart": {1: "a"}}
    assert config.get_config()["flowchart"][1] == "a"
