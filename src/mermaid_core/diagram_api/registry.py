"""Diagram registry: definitions by type tag, loaded on first use.

Each tag moves through ``UNREGISTERED -> LOADING -> REGISTERED``. A tag is
registered at most once per process; concurrent ``resolve`` calls for a tag
that is still loading share one in-flight load. A load that fails returns the
tag to ``UNREGISTERED`` so a later call can retry.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum, auto

from mermaid_core.errors import DiagramNotFoundError, RegistrationConflictError, UnknownDiagramError
from mermaid_core.types import DiagramDefinition, DiagramLoader

logger = logging.getLogger(__name__)


class DiagramState(Enum):
    UNREGISTERED = auto()
    LOADING = auto()
    REGISTERED = auto()


class DiagramRegistry:
    """Holds registered diagram definitions and the loaders for the rest."""

    def __init__(self, loaders: dict[str, DiagramLoader] | None = None) -> None:
        self._definitions: dict[str, DiagramDefinition] = {}
        self._loaders: dict[str, DiagramLoader] = dict(loaders or {})
        self._loading: dict[str, asyncio.Task[DiagramDefinition]] = {}

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, id: str, definition: DiagramDefinition) -> None:
        """Register ``definition`` under ``id``.

        Registering the same definition again is a no-op.

        Raises:
            RegistrationConflictError: If ``id`` already holds a different definition.
        """
        existing = self._definitions.get(id)
        if existing is not None:
            if existing is definition or existing == definition:
                logger.debug("Diagram %s already registered; skipping.", id)
                return
            raise RegistrationConflictError(id)
        self._definitions[id] = definition
        logger.debug("Registered diagram %s", id)

    def add_loader(self, id: str, loader: DiagramLoader) -> None:
        if id in self._loaders and self._loaders[id] is not loader:
            logger.warning("Loader for diagram %s already exists. Overwriting.", id)
        self._loaders[id] = loader

    # ── Lookup ────────────────────────────────────────────────────────────────

    def get(self, id: str) -> DiagramDefinition:
        """Return the registered definition for ``id``.

        Raises:
            DiagramNotFoundError: If ``id`` has not been registered (yet).
        """
        try:
            return self._definitions[id]
        except KeyError:
            raise DiagramNotFoundError(id) from None

    def state(self, id: str) -> DiagramState:
        if id in self._definitions:
            return DiagramState.REGISTERED
        if id in self._loading:
            return DiagramState.LOADING
        return DiagramState.UNREGISTERED

    def __contains__(self, id: object) -> bool:
        return id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"DiagramRegistry(registered={sorted(self._definitions)}, loaders={sorted(self._loaders)})"

    # ── Lazy loading ──────────────────────────────────────────────────────────

    async def resolve(self, id: str) -> DiagramDefinition:
        """Return the definition for ``id``, loading it on first use.

        Raises:
            UnknownDiagramError: If ``id`` is neither registered nor loadable.
            Exception: Whatever the loader raises, unchanged.
        """
        definition = self._definitions.get(id)
        if definition is not None:
            return definition

        task = self._loading.get(id)
        if task is None:
            loader = self._loaders.get(id)
            if loader is None:
                raise UnknownDiagramError(f"Diagram {id} not found.")
            task = asyncio.ensure_future(self._load(id, loader))
            self._loading[id] = task
        return await asyncio.shield(task)

    async def _load(self, id: str, loader: DiagramLoader) -> DiagramDefinition:
        logger.debug("Loading diagram %s", id)
        try:
            loaded = await loader()
            self.register(loaded.id, loaded.diagram)
        finally:
            self._loading.pop(id, None)
        return self.get(id)

    def reset(self) -> None:
        """Forget every definition, loader and in-flight load."""
        for task in self._loading.values():
            task.cancel()
        self._definitions.clear()
        self._loaders.clear()
        self._loading.clear()


_registry = DiagramRegistry()


def get_registry() -> DiagramRegistry:
    return _registry


def register_diagram(id: str, diagram: DiagramDefinition) -> None:
    _registry.register(id, diagram)


def get_diagram(id: str) -> DiagramDefinition:
    return _registry.get(id)


def reset() -> None:
    _registry.reset()
