# objviz/services/tracker.py
"""
    IdentityTracker — maps object identity to the address of its node.

    Lookups use ``id()``, never ``==``: two equal but distinct objects get
    two nodes, one object reached through two paths gets one node.  Tracked
    values are kept alive for the tracker's lifetime so an ``id()`` cannot
    be recycled by a different object mid-traversal.
"""
from typing import Any, Dict, Optional, Tuple

from ..models.edge import Address


class IdentityTracker:

    def __init__(self):
        self._entries: Dict[int, Tuple[Any, Address]] = {}

    def resolve(self, value: Any) -> Optional[Address]:
        """Return the address already assigned to ``value``, or None."""
        entry = self._entries.get(id(value))
        if entry is None:
            return None
        return entry[1]

    def register(self, value: Any, node_id: int, port: int = 0) -> Address:
        """
        Record the node assigned to ``value``.  Must be called right after
        the node id is allocated and before the value's members are visited.
        """
        key = id(value)
        if key in self._entries:
            raise ValueError(
                f"{type(value).__name__} at 0x{key:x} is already registered "
                f"as {self._entries[key][1]}"
            )
        address = Address(node_id, port)
        self._entries[key] = (value, address)
        return address

    def __contains__(self, value: Any) -> bool:
        return id(value) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
