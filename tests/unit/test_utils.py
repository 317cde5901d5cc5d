"""Tests for mermaid_core.utils: merging and entity placeholders."""

from mermaid_core.utils import assign_with_depth, clean_and_merge, decode_entities, deep_merge, encode_entities


def test_clean_and_merge_is_deep_and_second_wins():
    front = {"theme": "forest", "flowchart": {"curve": "basis", "htmlLabels": False}}
    directive = {"theme": "dark", "flowchart": {"curve": "linear"}, "wrap": True}
    assert clean_and_merge(front, directive) == {
        "theme": "dark",
        "flowchart": {"curve": "linear", "htmlLabels": False},
        "wrap": True,
    }


def test_clean_and_merge_does_not_mutate_inputs():
    front = {"flowchart": {"curve": "basis"}}
    directive = {"flowchart": {"curve": "linear"}}
    merged = clean_and_merge(front, directive)
    merged["flowchart"]["extra"] = 1
    assert front == {"flowchart": {"curve": "basis"}}
    assert directive == {"flowchart": {"curve": "linear"}}


def test_deep_merge_replaces_non_mappings():
    assert deep_merge({"a": {"b": 1}}, {"a": 2}) == {"a": 2}
    assert deep_merge({"a": 2}, {"a": {"b": 1}}) == {"a": {"b": 1}}
    assert deep_merge(None, {}) == {}


def test_assign_with_depth_limits_recursion():
    dst = {"a": {"b": {"c": 1, "d": 2}}}
    assign_with_depth(dst, {"a": {"b": {"c": 3}}}, depth=1)
    assert dst == {"a": {"b": {"c": 3}}}


def test_encode_entities():
    assert encode_entities("A[#quot;hi#quot;]") == "A[ﬂ°quot¶ßhiﬂ°quot¶ß]"
    assert encode_entities("A[#35;]") == "A[ﬂ°°35¶ß]"


def test_encode_entities_keeps_style_colors():
    assert encode_entities("style A fill:#f9f;") == "style A fill:#f9f"
    assert encode_entities("classDef red fill:#f00;") == "classDef red fill:#f00"


def test_decode_entities():
    assert decode_entities("ﬂ°quot¶ßhiﬂ°°35¶ß") == "&quot;hi&#35;"
