import pytest

import mermaid_core


@pytest.fixture(autouse=True)
def clean_state():
    """Every test starts with an empty registry, no detectors and default config."""
    mermaid_core.reset()
    yield
    mermaid_core.reset()


@pytest.fixture
def builtin_diagrams():
    mermaid_core.init()
