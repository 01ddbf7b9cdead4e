"""
    Generic plugin discovery and loading via entry_points.

    Design Pattern: Service Locator / Registry
    ────────────────────────────────────────────
    Discovers installed emitter plugins at runtime by scanning the
    ``objviz.emitter`` entry-point group.  Built-in emitters are registered
    first so the library also works from a source checkout; an installed
    plugin with the same name replaces the built-in one.

    Genericity:
    ─────────────────────────
    PluginLoader[TPlugin] is generic over the plugin base class, so third
    party plugin families can reuse it without code duplication.
"""
import importlib.metadata
import logging
from typing import Dict, Generic, List, Mapping, Optional, Type, TypeVar

from .plugins.base import EmitterPlugin

logger = logging.getLogger(__name__)

# Generic type variable bounded to plugin ABCs
TPlugin = TypeVar('TPlugin')

# Entry-point group name (must match setup.py)
EMITTER_EP_GROUP = 'objviz.emitter'


class PluginLoader(Generic[TPlugin]):
    """
    Generic loader that discovers all installed plugins of a given type
    from a specific entry-point group.

    Usage:
        loader = PluginLoader(EmitterPlugin, 'objviz.emitter', BUILTIN_EMITTERS)
        plugins = loader.load_all()          # Dict[str, EmitterPlugin]
        dot = loader.get('dot')              # Optional[EmitterPlugin]
    """

    def __init__(
        self,
        plugin_base_class: Type[TPlugin],
        group: str,
        builtins: Optional[Mapping[str, Type[TPlugin]]] = None,
    ):
        """
        Args:
            plugin_base_class: The ABC that every discovered plugin must subclass.
            group:             The entry-point group to scan.
            builtins:          Plugins available without installation
                               (name → class).
        """
        self._base_class = plugin_base_class
        self._group = group
        self._builtins: Dict[str, Type[TPlugin]] = dict(builtins or {})
        self._plugins: Dict[str, TPlugin] = {}
        self._loaded = False

    def load_all(self) -> Dict[str, TPlugin]:
        """
        Discover and instantiate all plugins (cached after first call).

        Returns:
            Dict mapping plugin name → plugin instance.
        """
        if self._loaded:
            return self._plugins

        for name, plugin_cls in self._builtins.items():
            self._register(name, plugin_cls)

        try:
            entry_points = importlib.metadata.entry_points()

            # Python 3.10+ supports select(); older returns dict
            if hasattr(entry_points, 'select'):
                eps = entry_points.select(group=self._group)
            elif isinstance(entry_points, dict):
                eps = entry_points.get(self._group, [])
            else:
                eps = [ep for ep in entry_points if ep.group == self._group]

            for ep in eps:
                try:
                    self._register(ep.name, ep.load())
                except Exception as exc:
                    logger.error("Failed to load plugin '%s': %s", ep.name, exc)

        except Exception as exc:
            logger.error("Entry-point discovery failed: %s", exc)

        self._loaded = True
        return self._plugins

    def _register(self, name: str, plugin_cls: type) -> None:
        if not isinstance(plugin_cls, type) or not issubclass(plugin_cls, self._base_class):
            logger.warning(
                "Plugin '%s' does not subclass %s — skipped.",
                name, self._base_class.__name__
            )
            return
        if name in self._plugins and isinstance(self._plugins[name], plugin_cls):
            return
        self._plugins[name] = plugin_cls()
        logger.info("Loaded plugin: %s (%s)", name, plugin_cls.__name__)

    def get(self, name: str) -> Optional[TPlugin]:
        """
        Get a specific plugin by its name.

        Args:
            name: Plugin name (e.g. 'dot', 'json').

        Returns:
            Plugin instance, or None if not found.
        """
        if not self._loaded:
            self.load_all()
        return self._plugins.get(name)

    def get_names(self) -> List[str]:
        """Return sorted list of all discovered plugin names."""
        if not self._loaded:
            self.load_all()
        return sorted(self._plugins.keys())

    def reload(self) -> Dict[str, TPlugin]:
        """Force re-discovery of plugins (useful after hot-install)."""
        self._plugins.clear()
        self._loaded = False
        return self.load_all()

    def __len__(self) -> int:
        if not self._loaded:
            self.load_all()
        return len(self._plugins)

    def __contains__(self, name: str) -> bool:
        if not self._loaded:
            self.load_all()
        return name in self._plugins

    def __repr__(self) -> str:
        return (
            f"PluginLoader(base={self._base_class.__name__}, "
            f"group='{self._group}', loaded={len(self._plugins)})"
        )


# ── Convenience factory function ─────────────────────────────────

def create_emitter_loader() -> PluginLoader[EmitterPlugin]:
    """Create a loader for Emitter plugins, seeded with the built-in emitters."""
    from .emitters import BUILTIN_EMITTERS
    return PluginLoader(EmitterPlugin, EMITTER_EP_GROUP, BUILTIN_EMITTERS)
