# tests/samples_test/test_samples.py
"""
Tests for the bundled sample structures and their visualizations.
"""
import math

import pytest

from objviz.samples import get_sample, sample_names
from objviz.samples.lists import DoublyLinkedList, SinglyLinkedList
from objviz.samples.people import PersonDB
from objviz.samples.skip_list import SkipList
from objviz.samples.trees import AVLTree, BinaryTree
from objviz.visualizer import Visualizer


# ═════════════════════════════════════════════════════════════════
#  DATA STRUCTURES
# ═════════════════════════════════════════════════════════════════

class TestTrees:

    def test_binary_tree(self):
        tree = BinaryTree()
        for value in (5, 2, 8, 2, 9):
            tree.insert(value)
        assert tree.in_order() == [2, 2, 5, 8, 9]
        assert tree.contains(8)
        assert not tree.contains(7)

    def test_avl_stays_balanced(self):
        tree = AVLTree()
        for value in range(100):
            tree.add(value)
        assert len(tree) == 100
        assert list(tree) == list(range(100))
        assert tree.height() <= 1.45 * math.log2(102)


class TestLinkedLists:

    def test_singly_appends(self):
        items = SinglyLinkedList()
        for value in (1, 2, 3):
            items.insert(value)
        assert list(items) == [1, 2, 3]
        assert len(items) == 3

    def test_doubly_prepends_and_links_both_ways(self):
        links = DoublyLinkedList()
        c = links.insert("c")
        a = links.insert("a")
        links.insert_after(a, "b")
        assert links.titles() == ["a", "b", "c"]
        assert c.previous_link.title == "b"
        assert str(links) == "abc"

    def test_doubly_delete(self):
        links = DoublyLinkedList()
        links.insert("b")
        links.insert("a")
        assert links.delete().title == "a"
        assert links.titles() == ["b"]
        links.delete()
        assert links.is_empty
        assert links.delete() is None


class TestSkipList:

    @pytest.fixture
    def skip(self):
        skip = SkipList(seed=11)
        for value in (30, 10, 50, 20, 40):
            skip.add(value)
        return skip

    def test_iteration_is_sorted(self, skip):
        assert list(skip) == [10, 20, 30, 40, 50]
        assert skip.count == len(skip) == 5

    def test_find_and_contains(self, skip):
        assert 20 in skip
        assert 25 not in skip
        assert skip.height(20) >= 1
        assert skip.height(25) == 0

    def test_remove(self, skip):
        assert skip.remove(30)
        assert not skip.remove(30)
        assert list(skip) == [10, 20, 40, 50]
        assert skip.levels >= 1

    def test_levels_cover_tallest_tower(self, skip):
        assert skip.levels > max(skip.height(v) for v in skip) - 1

    def test_max_levels_zero_keeps_one_level(self):
        skip = SkipList(max_levels=0, seed=1)
        for value in range(20):
            skip.add(value)
        assert skip.levels == 1
        assert all(skip.height(v) == 1 for v in skip)

    def test_seed_is_reproducible(self):
        first, second = SkipList(seed=5), SkipList(seed=5)
        for value in range(30):
            first.add(value)
            second.add(value)
        assert first.levels == second.levels


# ═════════════════════════════════════════════════════════════════
#  SAMPLE CASES
# ═════════════════════════════════════════════════════════════════

@pytest.fixture
def viz():
    return Visualizer()


def _document(viz, name, seed=1):
    case = get_sample(name, seed)
    return case, viz.build(case.root, case.whitelist, case.blacklist)


class TestSampleCases:

    @pytest.mark.parametrize("name", sample_names())
    def test_every_sample_renders(self, viz, name):
        case = get_sample(name, seed=1)
        text = viz.render(case.root, case.whitelist, case.blacklist)
        assert text.splitlines()[-1] == "}"
        assert "struct0 [shape=record, style=filled" in text

    def test_unknown_sample(self):
        with pytest.raises(KeyError, match="unicorn"):
            get_sample("unicorn")

    def test_people_one_node_per_person(self, viz):
        _, doc = _document(viz, "people")
        names = sorted(n.find_field("name").value for n in doc.nodes_of_type("Person"))
        assert names == ["Alex", "David", "Fabian", "Herbert", "Karin", "Nico"]

    def test_persondb_reaches_whole_family(self, viz):
        case, doc = _document(viz, "persondb")
        assert isinstance(case.root, PersonDB)
        assert len(doc.nodes_of_type("Person")) == 6

    def test_avl_node_count(self, viz):
        _, doc = _document(viz, "avl")
        assert len(doc.nodes_of_type("AVLNode")) == 24

    def test_avl_seed_reproducible(self):
        assert get_sample("avl", 3).root.in_order() == get_sample("avl", 3).root.in_order()

    def test_skiplist_sentinels_per_level(self, viz):
        case, doc = _document(viz, "skiplist")
        levels = case.root.levels
        assert len(doc.nodes_of_type("SkipListHeader")) == levels
        assert len(doc.nodes_of_type("SkipListFooter")) == levels
        assert doc.root.find_field("random") is None

    def test_doubly_links_form_two_cycles(self, viz):
        _, doc = _document(viz, "doubly")
        links = doc.nodes_of_type("DoubleLink")
        assert len(links) == 3
        first = links[0].node_id
        assert any(e.target.node_id == first for e in doc.edges if e.source.node_id != 0)

    def test_queue_root_is_deque(self, viz):
        _, doc = _document(viz, "queue")
        assert doc.root.type_name == "deque"
        assert len(doc.nodes_of_type("Person")) == 4

    def test_tuple_inline_values(self, viz):
        _, doc = _document(viz, "tuple")
        assert [f.label for f in doc.root.fields] == ["tuple"] + [str(i) for i in range(10)]

    @pytest.mark.parametrize("name", ["bst", "avl"])
    def test_tree_root_reached_once(self, viz, name):
        _, doc = _document(viz, name)
        assert doc.root.find_field("_root") is not None
        assert doc.root.find_field("root") is None
        from_tree = [e for e in doc.edges if e.source.node_id == doc.root.node_id]
        assert len(from_tree) == 1
        top = from_tree[0].target.node_id
        assert [e.source.node_id for e in doc.edges if e.target.node_id == top] == [doc.root.node_id]
