# tests/core_test/test_models.py
"""
Tests for the output models (objviz/models/).

Covers:
    • NodeRecord ports, sealing, lookup and to_dict
    • Address / EdgeRecord rendering and equality
    • GraphDocument validation and queries
"""
import pytest

from objviz.models import Address, Diagnostic, EdgeRecord, Field, GraphDocument, NodeRecord
from tests.conftest import FIXED_CREATED


# ═════════════════════════════════════════════════════════════════
#  NODE RECORD
# ═════════════════════════════════════════════════════════════════

class TestNodeRecord:

    def test_header_is_port_zero(self):
        record = NodeRecord(0, "Person", is_root=True)
        assert record.fields == [Field(0, "Person")]
        assert record.next_port == 1

    def test_fields_get_consecutive_ports(self):
        record = NodeRecord(1, "Person")
        name = record.add_field("name", "Herbert")
        spouse = record.add_field("spouse")
        assert (name.port, spouse.port) == (1, 2)
        assert record.get_field(2) is spouse
        assert record.get_field(9) is None

    def test_sealed_record_rejects_fields(self):
        record = NodeRecord(0, "Box")
        record.seal()
        assert record.sealed
        with pytest.raises(ValueError, match="sealed"):
            record.add_field("late")
        with pytest.raises(ValueError):
            record.set_header_value("1")

    def test_find_field_skips_header(self):
        record = NodeRecord(0, "list")
        record.add_field("list")
        assert record.find_field("list").port == 1

    def test_to_dict(self):
        record = NodeRecord(0, "Box", is_root=True)
        record.add_field("ref", is_null=True)
        assert record.to_dict() == {
            'id': 0,
            'type': 'Box',
            'root': True,
            'fields': [
                {'port': 0, 'label': 'Box', 'value': None, 'null': False},
                {'port': 1, 'label': 'ref', 'value': None, 'null': True},
            ],
        }

    def test_field_repr(self):
        assert repr(Field(1, "age", "42")) == "Field(<1> age: 42)"
        assert repr(Field(2, "ref", is_null=True)) == "Field(<2> ref (null))"


# ═════════════════════════════════════════════════════════════════
#  ADDRESS / EDGE
# ═════════════════════════════════════════════════════════════════

class TestAddressAndEdge:

    def test_address_str(self):
        assert str(Address(4)) == "4"
        assert str(Address(4, 2)) == "4:2"

    def test_node_drops_port(self):
        assert Address(4, 2).node == Address(4)

    def test_address_hashable(self):
        assert len({Address(1, 0), Address(1, 0), Address(1)}) == 2

    def test_self_loop(self):
        assert EdgeRecord(Address(0, 2), Address(0)).is_self_loop
        assert not EdgeRecord(Address(0, 2), Address(1)).is_self_loop

    def test_edge_to_dict(self):
        assert EdgeRecord(Address(0, 1), Address(1)).to_dict() == {'source': '0:1', 'target': '1'}


# ═════════════════════════════════════════════════════════════════
#  DOCUMENT
# ═════════════════════════════════════════════════════════════════

@pytest.fixture
def document():
    doc = GraphDocument("Person", created=FIXED_CREATED)
    root = NodeRecord(0, "Person", is_root=True)
    root.add_field("spouse")
    doc.add_node(root)
    doc.add_node(NodeRecord(1, "Person"))
    doc.add_edge(Address(0, 1), Address(1))
    return doc


class TestGraphDocument:

    def test_counts(self, document):
        assert document.get_number_of_nodes() == 2
        assert document.get_number_of_edges() == 1
        assert document.root.node_id == 0

    def test_duplicate_node_raises(self, document):
        with pytest.raises(ValueError, match="already exists"):
            document.add_node(NodeRecord(1, "Person"))

    def test_edge_to_unknown_node_raises(self, document):
        with pytest.raises(ValueError, match="Target node 7"):
            document.add_edge(Address(0, 1), Address(7))
        with pytest.raises(ValueError, match="Source node 7"):
            document.add_edge(Address(7, 1), Address(0))

    def test_edge_queries(self, document):
        assert document.outgoing_edges(0) == [EdgeRecord(Address(0, 1), Address(1))]
        assert document.incoming_edges(1) == [EdgeRecord(Address(0, 1), Address(1))]
        assert document.incoming_edges(0) == []

    def test_nodes_of_type(self, document):
        assert [n.node_id for n in document.nodes_of_type("Person")] == [0, 1]
        assert document.nodes_of_type("Box") == []

    def test_diagnostic_str(self):
        diagnostic = Diagnostic("Person.kids[0]", "age", "RuntimeError: boom")
        assert str(diagnostic) == "Person.kids[0].age: RuntimeError: boom"
