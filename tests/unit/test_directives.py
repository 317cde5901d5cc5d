"""Tests for mermaid_core.directives."""

import pytest

from mermaid_core import init
from mermaid_core.directives import detect_directive, detect_init, remove_directives
from mermaid_core.errors import MalformedDirectiveError
from mermaid_core.types import Directive


def test_detect_directive_returns_all_matches():
    text = '%%{init: {"theme": "dark"}}%%\n%%{wrap}%%\nflowchart TD\n'
    assert detect_directive(text) == [Directive("init", {"theme": "dark"}), Directive("wrap", None)]


def test_detect_directive_filters_by_type():
    text = '%%{init: {"theme": "dark"}}%%\n%%{wrap}%%\nflowchart TD\n'
    assert detect_directive(text, "wrap") == [Directive("wrap", None)]


def test_detect_directive_none_found():
    assert detect_directive("flowchart TD\n%% just a comment\nA-->B\n") == []


def test_detect_directive_word_argument():
    assert detect_directive("%%{ theme: dark }%%\npie\n") == [Directive("theme", "dark")]


def test_detect_directive_multiline_body():
    text = "%%{\n  init: {\n    'theme': 'forest'\n  }\n}%%\nflowchart TD\n"
    assert detect_directive(text, "init") == [Directive("init", {"theme": "forest"})]


def test_detect_directive_bad_json():
    with pytest.raises(MalformedDirectiveError):
        detect_directive("%%{init: {theme: dark}}%%\n")


def test_detect_init_merges_multiple():
    text = (
        '%%{init: {"theme": "dark", "flowchart": {"curve": "basis"}}}%%\n'
        '%%{initialize: {"flowchart": {"htmlLabels": false}}}%%\n'
        "flowchart TD\n"
    )
    assert detect_init(text) == {"theme": "dark", "flowchart": {"curve": "basis", "htmlLabels": False}}


def test_detect_init_absent():
    assert detect_init("%%{wrap}%%\nflowchart TD\n") is None


def test_detect_init_sanitizes():
    text = '%%{init: {"securityLevel": "loose", "__proto__": {}, "themeCSS": "<style>", "theme": "dark"}}%%\ngraph TD\n'
    assert detect_init(text) == {"theme": "dark"}


def test_detect_init_moves_config_under_diagram_type():
    init()
    text = "%%{init: {'config': {'curve': 'linear'}}}%%\nflowchart TD\nA-->B\n"
    assert detect_init(text) == {"flowchart": {"curve": "linear"}}


def test_remove_directives_strips_all():
    text = "%%{init: {'theme': 'dark'}}%%\n%%{wrap}%%\nflowchart TD\nA-->B\n"
    assert remove_directives(text) == "\n\nflowchart TD\nA-->B\n"


@pytest.mark.parametrize(
    "text",
    [
        "%%{init: {'theme': 'dark'}}%%\n%%{wrap}%%\nflowchart TD\nA-->B\n",
        "%%{%%{wrap}%%init}%%\ngraph TD\nA-->B",
        "%%%%{wrap}%%{wrap}%%\ngraph TD\n",
        "%%{%%{%%{wrap}%%wrap}%%wrap}%%\ngraph TD\n",
    ],
)
def test_remove_directives_is_idempotent(text):
    once = remove_directives(text)
    assert remove_directives(once) == once
    assert "%%{" not in once
