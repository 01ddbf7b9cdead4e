"""
    Graph document model - the two ordered output buffers of one
    visualization (node records, edge records) plus their metadata.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from .edge import Address, EdgeRecord
from .record import NodeRecord


@dataclass
class Diagnostic:
    """
    A recovered, traversal-local failure.

    Attributes:
        path:    Dotted path of the owning value (e.g. ``Person.spouse``).
        member:  Name of the member that could not be read.
        message: Human-readable cause.
    """
    path: str
    member: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}.{self.member}: {self.message}"


class GraphDocument:
    """
    Class for the result of one traversal.
    Nodes and edges are kept in allocation order.
    """

    def __init__(self, root_type_name: str, created: Optional[datetime] = None):
        self.root_type_name = root_type_name
        self.created = created or datetime.now()
        self.nodes: List[NodeRecord] = []
        self.edges: List[EdgeRecord] = []
        self.diagnostics: List[Diagnostic] = []
        self._index: Dict[int, NodeRecord] = {}

    def add_node(self, record: NodeRecord) -> None:
        if record.node_id in self._index:
            raise ValueError(f"Node with id {record.node_id} already exists")
        self.nodes.append(record)
        self._index[record.node_id] = record

    def add_edge(self, source: Address, target: Address) -> EdgeRecord:
        if source.node_id not in self._index:
            raise ValueError(f"Source node {source.node_id} not in document")
        if target.node_id not in self._index:
            raise ValueError(f"Target node {target.node_id} not in document")
        edge = EdgeRecord(source, target)
        self.edges.append(edge)
        return edge

    def get_node(self, node_id: int) -> Optional[NodeRecord]:
        return self._index.get(node_id)

    @property
    def root(self) -> Optional[NodeRecord]:
        return self._index.get(0)

    def nodes_of_type(self, type_name: str) -> List[NodeRecord]:
        return [n for n in self.nodes if n.type_name == type_name]

    def outgoing_edges(self, node_id: int) -> List[EdgeRecord]:
        return [e for e in self.edges if e.source.node_id == node_id]

    def incoming_edges(self, node_id: int) -> List[EdgeRecord]:
        return [e for e in self.edges if e.target.node_id == node_id]

    def get_number_of_nodes(self) -> int:
        return len(self.nodes)

    def get_number_of_edges(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        return (f"GraphDocument({self.root_type_name}, nodes={len(self.nodes)}, "
                f"edges={len(self.edges)}, diagnostics={len(self.diagnostics)})")
