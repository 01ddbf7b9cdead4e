"""
    Visualizer configuration — member visibility lists, traversal ceilings,
    rendering options.

    Provides a typed configuration object that controls which members are
    shown, skipped or expanded and how the resulting document is rendered.
"""
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Set

# Member-name fragments hidden unless whitelisted:
# dunder / name-mangled internals and ABC registration caches.
DEFAULT_BLACKLIST = ("__", "_abc_")


def as_names(names: Optional[Iterable[str]]) -> Iterable[str]:
    """A bare string is one name, not a sequence of one-letter names."""
    if names is None:
        return ()
    if isinstance(names, str):
        return [names]
    return names


@dataclass
class VisualizerConfig:
    """
    Controls traversal and rendering.

    Attributes:
        whitelist:             Exact member names whose values are shown and
                               which are always traversed.
        blacklist:             Substrings; any member name containing one is
                               skipped unless whitelisted.
        use_default_blacklist: Whether ``DEFAULT_BLACKLIST`` is applied as well.
        include_properties:    Whether ``property`` members are read.
        collapse_containers:   Render non-whitelisted containers as a single
                               ``count`` summary instead of expanding them.
        max_container_items:   Expand at most this many elements per container.
        max_value_length:      Truncate rendered values longer than this.
        max_nodes:             Ceiling on distinct nodes; ``None`` means unlimited.
        max_depth:             Ceiling on traversal depth; ``None`` means unlimited.
        tool_name:             Name written into the document header.
        rankdir:               Graphviz layout direction.
        default_emitter:       Emitter plugin used when none is requested.
    """
    whitelist: Set[str] = field(default_factory=set)
    blacklist: List[str] = field(default_factory=list)
    use_default_blacklist: bool = True
    include_properties: bool = True
    collapse_containers: bool = False
    max_container_items: Optional[int] = None
    max_value_length: int = 80
    max_nodes: Optional[int] = None
    max_depth: Optional[int] = None
    tool_name: str = "objviz"
    rankdir: str = "TB"
    default_emitter: str = "dot"

    def effective_blacklist(self) -> List[str]:
        """Compute the final ordered list of blacklisted fragments."""
        result = list(DEFAULT_BLACKLIST) if self.use_default_blacklist else []
        for entry in as_names(self.blacklist):
            if entry and entry not in result:
                result.append(entry)
        return result

    def with_lists(
        self,
        whitelist: Optional[Iterable[str]] = None,
        blacklist: Optional[Iterable[str]] = None,
    ) -> 'VisualizerConfig':
        """Return a copy extended with per-call whitelist / blacklist entries."""
        base = list(as_names(self.blacklist))
        return replace(
            self,
            whitelist=set(as_names(self.whitelist)) | set(as_names(whitelist)),
            blacklist=base + [b for b in as_names(blacklist) if b not in base],
        )
