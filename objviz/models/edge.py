"""
    Edge model - a directed reference from a record field to a record.
"""
from typing import Any, Dict, Optional


class Address:
    """
    Endpoint of an edge: a node, optionally narrowed to one of its ports.
    Rendered as ``N`` or ``N:port``.
    """

    __slots__ = ('node_id', 'port')

    def __init__(self, node_id: int, port: Optional[int] = None):
        self.node_id = node_id
        self.port = port

    @property
    def node(self) -> 'Address':
        """The same endpoint without the port (whole node)."""
        return Address(self.node_id)

    def __str__(self) -> str:
        if self.port is None:
            return str(self.node_id)
        return f"{self.node_id}:{self.port}"

    def __repr__(self) -> str:
        return f"Address({self})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Address):
            return False
        return self.node_id == other.node_id and self.port == other.port

    def __hash__(self) -> int:
        return hash((self.node_id, self.port))


class EdgeRecord:
    """
        Class for one edge of the output document.
        Source is always a field port; target is a whole node or a port.
    """

    def __init__(self, source: Address, target: Address):
        self.source = source
        self.target = target

    @property
    def is_self_loop(self) -> bool:
        return self.source.node_id == self.target.node_id

    def __repr__(self) -> str:
        return f"Edge({self.source} -> {self.target})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, EdgeRecord):
            return False
        return self.source == other.source and self.target == other.target

    def __hash__(self) -> int:
        return hash((self.source, self.target))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source': str(self.source),
            'target': str(self.target),
        }
