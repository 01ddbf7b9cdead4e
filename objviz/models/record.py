"""
    Node record model - one visited object identity rendered as a record
    of addressable fields (ports).
"""
from typing import Any, Dict, List, Optional


class Field:
    """
    One addressable entry of a node record.

    Port 0 of every record is its header (the type name); member and element
    fields start at port 1.
    """

    def __init__(self, port: int, label: str, value: Optional[str] = None, is_null: bool = False):
        self.port = port
        self.label = label
        self.value = value
        self.is_null = is_null

    def __repr__(self) -> str:
        if self.is_null:
            return f"Field(<{self.port}> {self.label} (null))"
        if self.value is not None:
            return f"Field(<{self.port}> {self.label}: {self.value})"
        return f"Field(<{self.port}> {self.label})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Field):
            return False
        return (self.port, self.label, self.value, self.is_null) == \
               (other.port, other.label, other.value, other.is_null)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'port': self.port,
            'label': self.label,
            'value': self.value,
            'null': self.is_null,
        }


class NodeRecord:
    """
    Class for one node of the output document.

    A record is append-only while its owning value is being classified and
    is sealed once all direct members have been classified; the recursive
    visits of those members happen afterwards.
    """

    def __init__(self, node_id: int, type_name: str, is_root: bool = False):
        """
        Initialize a node record with its header field at port 0.

        Args:
            node_id:   Allocation-order id of the node (0 for the root)
            type_name: Runtime type name of the visited value
            is_root:   Whether this record represents the root value
        """
        self.node_id = node_id
        self.type_name = type_name
        self.is_root = is_root
        self.fields: List[Field] = [Field(0, type_name)]
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def next_port(self) -> int:
        return len(self.fields)

    def add_field(self, label: str, value: Optional[str] = None, is_null: bool = False) -> Field:
        """Append a field at the next free port and return it."""
        if self._sealed:
            raise ValueError(f"Node record {self.node_id} is sealed")
        entry = Field(self.next_port, label, value, is_null)
        self.fields.append(entry)
        return entry

    def set_header_value(self, value: str) -> None:
        """Attach a value to the header field (bare scalar roots)."""
        if self._sealed:
            raise ValueError(f"Node record {self.node_id} is sealed")
        self.fields[0].value = value

    def seal(self) -> None:
        self._sealed = True

    def get_field(self, port: int) -> Optional[Field]:
        if 0 <= port < len(self.fields):
            return self.fields[port]
        return None

    def find_field(self, label: str) -> Optional[Field]:
        """Return the first non-header field with the given label."""
        for entry in self.fields[1:]:
            if entry.label == label:
                return entry
        return None

    def __repr__(self) -> str:
        return f"NodeRecord({self.node_id}, {self.type_name}, fields={len(self.fields)})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.node_id,
            'type': self.type_name,
            'root': self.is_root,
            'fields': [f.to_dict() for f in self.fields],
        }
