"""
Sample data structures and the demo cases built from them.

Each case bundles a root value with the whitelist / blacklist that makes
its shape readable.  Random cases accept a seed for reproducible output.
"""
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .lists import DoubleLink, DoublyLinkedList, ListNode, SinglyLinkedList
from .people import Person, PersonDB, build_family
from .skip_list import SkipList, SkipListFooter, SkipListHeader, SkipListNode
from .trees import AVLNode, AVLTree, BinaryTree, TreeNode


@dataclass
class SampleCase:
    name: str
    description: str
    root: Any
    whitelist: List[str] = field(default_factory=list)
    blacklist: List[str] = field(default_factory=list)


def _avl(seed: Optional[int]) -> SampleCase:
    rnd = random.Random(seed)
    tree = AVLTree()
    for _ in range(24):
        tree.add(rnd.randint(0, 9999))
    return SampleCase("avl", "AVL tree of 24 random integers", tree, ["data"])


def _bst(seed: Optional[int]) -> SampleCase:
    tree = BinaryTree()
    tree.insert(30)
    for i in range(10):
        tree.insert(30 + i)
        tree.insert(30 - i)
    return SampleCase("bst", "Unbalanced binary search tree around 30", tree)


def _singly(seed: Optional[int]) -> SampleCase:
    items = SinglyLinkedList()
    for value in (100, 200, 300):
        items.insert(value)
    return SampleCase("singly", "Singly linked list 100 → 200 → 300", items, ["data"])


def _doubly(seed: Optional[int]) -> SampleCase:
    links = DoublyLinkedList()
    for title in ("3", "2", "1"):
        links.insert(title)
    return SampleCase("doubly", "Doubly linked list 1 ⇄ 2 ⇄ 3", links, ["title"])


def _skiplist(seed: Optional[int]) -> SampleCase:
    rnd = random.Random(seed)
    skip = SkipList(seed=seed)
    for _ in range(5):
        skip.add(rnd.randint(1, 9999))
    return SampleCase(
        "skiplist", "Skip list of 5 random integers", skip,
        whitelist=["levels", "max_levels", "value"],
        blacklist=["random", "size"],
    )


def _people(seed: Optional[int]) -> SampleCase:
    return SampleCase(
        "people", "Family graph with shared kids and friends", build_family(),
        whitelist=["age", "name", "friends"],
    )


def _persondb(seed: Optional[int]) -> SampleCase:
    herbert = build_family()
    alex = herbert.friends[0]
    nico = herbert.kids[0].friends[1]
    return SampleCase("persondb", "Person table referencing the family graph",
                      PersonDB([herbert, alex, nico]))


def _queue(seed: Optional[int]) -> SampleCase:
    hans = Person("Hans", 22)
    david = Person("David", 22)
    felix = Person("Felix", 21)
    susi = Person("Susi", 20)
    hans.spouse = susi
    susi.friends.extend([david, felix])
    david.friends.extend([felix, hans, susi])
    return SampleCase("queue", "deque of people with mutual friendships",
                      deque([david, felix, hans]), whitelist=["name"])


def _list(seed: Optional[int]) -> SampleCase:
    return SampleCase("list", "Plain list of eight integers", [1, 2, 3, 4, 5, 6, 7, 8])


def _tuple(seed: Optional[int]) -> SampleCase:
    return SampleCase("tuple", "Tuple of ten integers", tuple(range(10)))


SAMPLES: Dict[str, Callable[[Optional[int]], SampleCase]] = {
    'avl': _avl,
    'bst': _bst,
    'singly': _singly,
    'doubly': _doubly,
    'skiplist': _skiplist,
    'people': _people,
    'persondb': _persondb,
    'queue': _queue,
    'list': _list,
    'tuple': _tuple,
}


def sample_names() -> List[str]:
    return sorted(SAMPLES)


def get_sample(name: str, seed: Optional[int] = None) -> SampleCase:
    """
    Build the named sample case.

    Raises:
        KeyError: If no sample with that name exists.
    """
    try:
        factory = SAMPLES[name]
    except KeyError:
        raise KeyError(f"Unknown sample '{name}'. Available: {sample_names()}") from None
    return factory(seed)


__all__ = [
    'SampleCase',
    'SAMPLES',
    'sample_names',
    'get_sample',
    'TreeNode',
    'BinaryTree',
    'AVLNode',
    'AVLTree',
    'ListNode',
    'SinglyLinkedList',
    'DoubleLink',
    'DoublyLinkedList',
    'SkipListNode',
    'SkipListHeader',
    'SkipListFooter',
    'SkipList',
    'Person',
    'PersonDB',
    'build_family',
]
