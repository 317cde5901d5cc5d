"""Process-wide lifecycle: set up the built-in diagrams, or wipe every global."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mermaid_core import config as config_api
from mermaid_core import diagrams
from mermaid_core.diagram_api import detect, registry


def init(config: Mapping[str, Any] | None = None) -> None:
    """Apply ``config`` as the site configuration and add the built-in diagrams."""
    if config is not None:
        config_api.set_site_config(config)
    diagrams.add_diagrams()


def reset() -> None:
    """Forget registered diagrams, detectors, loaders and configuration."""
    registry.reset()
    detect.reset()
    diagrams.reset()
    config_api.reset()
