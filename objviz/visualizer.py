"""
    Visualizer — the entry point of the library.

    Design Patterns applied
    ───────────────────────
    • Facade     – one object hides session creation, traversal, emitter
                   lookup and the sink.
    • Strategy   – pluggable emitters (DOT, JSON, third-party).

    Unlike a process-wide singleton, a Visualizer holds only immutable
    configuration and the emitter registry; every call gets its own
    ``Session``, so calls never share traversal state.
"""
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from .config import VisualizerConfig
from .exceptions import EmitterNotFoundError
from .models.document import GraphDocument
from .plugin_loader import PluginLoader, create_emitter_loader
from .plugins.base import EmitterPlugin
from .services.builder import GraphBuilder
from .session import Session
from .sink import default_file_name, write_document

logger = logging.getLogger(__name__)


class Visualizer:
    """
    Renders object graphs with a fixed configuration.

    Usage:
        viz = Visualizer(VisualizerConfig(max_nodes=500))
        text = viz.render(tree, whitelist=["data"])
        path = viz.write(tree, directory="out")
    """

    def __init__(
        self,
        config: Optional[VisualizerConfig] = None,
        emitter: Optional[str] = None,
        loader: Optional[PluginLoader[EmitterPlugin]] = None,
    ):
        """
        Args:
            config:  Traversal and rendering configuration.
            emitter: Default emitter name (overrides ``config.default_emitter``).
            loader:  Emitter registry; a fresh one is created if omitted.
        """
        self._config: VisualizerConfig = config or VisualizerConfig()
        self._emitter_name: str = emitter or self._config.default_emitter
        self._loader: PluginLoader[EmitterPlugin] = loader or create_emitter_loader()

    # ── Configuration ────────────────────────────────────────────

    @property
    def config(self) -> VisualizerConfig:
        return self._config

    @property
    def emitter_name(self) -> str:
        return self._emitter_name

    def get_emitter_names(self) -> List[str]:
        """Sorted list of available emitter names."""
        return self._loader.get_names()

    def get_emitter(self, name: Optional[str] = None) -> EmitterPlugin:
        """
        Look up an emitter by name.

        Raises:
            EmitterNotFoundError: If no emitter with that name is available.
        """
        name = name or self._emitter_name
        plugin = self._loader.get(name)
        if plugin is None:
            raise EmitterNotFoundError(
                f"Emitter '{name}' not found. "
                f"Available: {self._loader.get_names()}"
            )
        return plugin

    # ── Operations ───────────────────────────────────────────────

    def create_session(
        self,
        root: Any,
        whitelist: Optional[Iterable[str]] = None,
        blacklist: Optional[Iterable[str]] = None,
    ) -> Session:
        """Create the fresh, single-use context for one traversal of ``root``."""
        return Session(root, whitelist, blacklist, config=self._config)

    def build(
        self,
        root: Any,
        whitelist: Optional[Iterable[str]] = None,
        blacklist: Optional[Iterable[str]] = None,
    ) -> GraphDocument:
        """
        Walk ``root`` and return the node / edge records.

        Raises:
            InvalidInputError:   If ``root`` is None.
            TraversalLimitError: If a configured ceiling is exceeded.
        """
        session = self.create_session(root, whitelist, blacklist)
        document = GraphBuilder(session).build()
        if document.diagnostics:
            logger.warning("%s: %d member(s) could not be read",
                           document.root_type_name, len(document.diagnostics))
        return document

    def render(
        self,
        root: Any,
        whitelist: Optional[Iterable[str]] = None,
        blacklist: Optional[Iterable[str]] = None,
        emitter: Optional[str] = None,
    ) -> str:
        """Walk ``root`` and return the rendered document text."""
        plugin = self.get_emitter(emitter)
        document = self.build(root, whitelist, blacklist)
        return plugin.emit(document, self._config)

    def write(
        self,
        root: Any,
        path: Optional[Union[str, Path]] = None,
        whitelist: Optional[Iterable[str]] = None,
        blacklist: Optional[Iterable[str]] = None,
        emitter: Optional[str] = None,
        directory: Union[str, Path] = ".",
    ) -> Path:
        """
        Render ``root`` and write it atomically.

        The document is rendered completely before the sink is opened, so a
        failing traversal never touches the file system.

        Args:
            path:      Target file; defaults to ``<directory>/vis_<Type>.<ext>``.
            directory: Directory used when ``path`` is omitted.

        Returns:
            The path written.

        Raises:
            SinkError: If the file cannot be written.
        """
        plugin = self.get_emitter(emitter)
        document = self.build(root, whitelist, blacklist)
        text = plugin.emit(document, self._config)

        if path is None:
            path = Path(directory) / default_file_name(document.root_type_name, plugin.file_extension)
        return write_document(text, path)

    def __repr__(self) -> str:
        return f"Visualizer(emitter='{self._emitter_name}', loader={self._loader!r})"


# ── Module-level shortcuts ───────────────────────────────────────

def _configure(config: Optional[VisualizerConfig], options: dict) -> VisualizerConfig:
    config = config or VisualizerConfig()
    return replace(config, **options) if options else config


def visualize(
    root: Any,
    whitelist: Optional[Iterable[str]] = None,
    blacklist: Optional[Iterable[str]] = None,
    *,
    emitter: Optional[str] = None,
    config: Optional[VisualizerConfig] = None,
    **options: Any,
) -> str:
    """
    Return the graph description of ``root``.

    Extra keyword arguments override fields of ``config``
    (e.g. ``max_nodes=100``, ``collapse_containers=True``).
    """
    return Visualizer(_configure(config, options), emitter).render(root, whitelist, blacklist)


def write_visualization(
    root: Any,
    whitelist: Optional[Iterable[str]] = None,
    blacklist: Optional[Iterable[str]] = None,
    *,
    path: Optional[Union[str, Path]] = None,
    directory: Union[str, Path] = ".",
    emitter: Optional[str] = None,
    config: Optional[VisualizerConfig] = None,
    **options: Any,
) -> Path:
    """Render ``root`` and write it to ``path`` (default ``vis_<Type>.<ext>``)."""
    viz = Visualizer(_configure(config, options), emitter)
    return viz.write(root, path, whitelist, blacklist, directory=directory)
