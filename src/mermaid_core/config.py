"""Process-wide configuration for mermaid-core.

The active configuration is the site configuration with every accepted
directive layered on top, in the order the directives were added.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from mermaid_core.utils import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "theme": "default",
    "securityLevel": "strict",
    "startOnLoad": True,
    "maxTextSize": 50000,
    "maxEdges": 500,
    "wrap": False,
    "secure": ["secure", "securityLevel", "startOnLoad", "maxTextSize", "maxEdges"],
    "flowchart": {
        "diagramPadding": 8,
        "htmlLabels": True,
        "curve": "basis",
    },
    "gantt": {
        "displayMode": "",
    },
}

_UNSAFE_FRAGMENTS = ("<", ">", "url(data:")

_site_config: dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
_directives: list[dict[str, Any]] = []
_current_config: dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)


def _update_current_config() -> None:
    global _current_config
    _current_config = deep_merge(_site_config, *_directives)


def get_config() -> dict[str, Any]:
    """Return a copy of the active configuration."""
    return copy.deepcopy(_current_config)


def get_site_config() -> dict[str, Any]:
    return copy.deepcopy(_site_config)


def set_site_config(conf: Mapping[str, Any]) -> dict[str, Any]:
    """Replace the site configuration with the defaults plus ``conf``."""
    global _site_config
    _site_config = deep_merge(DEFAULT_CONFIG, conf)
    _update_current_config()
    return get_site_config()


def update_site_config(conf: Mapping[str, Any]) -> dict[str, Any]:
    global _site_config
    _site_config = deep_merge(_site_config, conf)
    _update_current_config()
    return get_site_config()


def sanitize_directive(options: Any) -> None:
    """Strip keys and values a diagram author must not control, in place.

    Keys listed under ``secure`` in the site configuration and keys starting
    with ``__`` are dropped, as are string values that could smuggle markup.
    """
    if not isinstance(options, dict):
        return
    for key in {"secure", *_site_config.get("secure", [])}:
        if key in options:
            logger.debug("Denied attempt to modify a secure key: %s", key)
            del options[key]
    for key in list(options):
        if isinstance(key, str) and key.startswith("__"):
            del options[key]
    for key in list(options):
        value = options[key]
        if isinstance(value, str) and any(fragment in value for fragment in _UNSAFE_FRAGMENTS):
            del options[key]
        elif isinstance(value, dict):
            sanitize_directive(value)


def add_directive(directive: Mapping[str, Any]) -> None:
    """Layer a directive's configuration over the site configuration."""
    options = copy.deepcopy(dict(directive))
    sanitize_directive(options)
    _directives.append(options)
    _update_current_config()


def reset(config: Mapping[str, Any] = DEFAULT_CONFIG) -> None:
    """Drop all directives and restore the site configuration."""
    global _site_config
    _directives.clear()
    _site_config = copy.deepcopy(dict(config))
    _update_current_config()
