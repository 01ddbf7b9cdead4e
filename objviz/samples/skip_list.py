"""
    Skip list — sample input with four-way links (next / previous / above /
    below) between value towers and header / footer sentinels.
"""
import random
import sys
from typing import Any, Iterator, Optional


class SkipListNode:
    """The basic data block of a skip list."""

    def __init__(self, value: Any):
        self.value = value
        self.next: Optional['SkipListNode'] = None
        self.previous: Optional['SkipListNode'] = None
        self.above: Optional['SkipListNode'] = None
        self.below: Optional['SkipListNode'] = None

    def is_header(self) -> bool:
        return False

    def is_footer(self) -> bool:
        return False


class SkipListHeader(SkipListNode):
    """Negative-infinity sentinel at the start of a level."""

    def __init__(self):
        super().__init__(None)

    def is_header(self) -> bool:
        return True


class SkipListFooter(SkipListNode):
    """Positive-infinity sentinel at the end of a level."""

    def __init__(self):
        super().__init__(None)

    def is_footer(self) -> bool:
        return True


class SkipList:
    """
    Ordered collection with probabilistic ``O(log n)`` search.

    Args:
        max_levels: Upper bound on the height of one value's tower.
        seed:       Seed of the coin flips (for reproducible shapes).
    """

    def __init__(self, max_levels: Optional[int] = None, seed: Optional[int] = None):
        self._top_left = self._empty_level()
        self._bottom_left = self._top_left
        self._levels = 1
        self._size = 0
        self._max_levels = sys.maxsize if max_levels is None else max_levels
        self.random = random.Random(seed)

    # ── Properties ───────────────────────────────────────────────

    @property
    def levels(self) -> int:
        return self._levels

    @property
    def max_levels(self) -> int:
        return self._max_levels

    @max_levels.setter
    def max_levels(self, value: int) -> None:
        self._max_levels = value

    @property
    def count(self) -> int:
        return self._size

    @property
    def head(self) -> SkipListNode:
        return self._bottom_left

    # ── Operations ───────────────────────────────────────────────

    def add(self, value: Any) -> None:
        value_levels = self._random_levels()

        # Grow the list until the new tower fits
        missing = value_levels + 1 - self._levels
        while missing > 0:
            level = self._empty_level()
            level.below = self._top_left
            self._top_left.above = level
            self._top_left = level
            self._levels += 1
            missing -= 1

        current = self._top_left
        last_above: Optional[SkipListNode] = None
        level_index = self._levels - 1

        while level_index >= 0 and current is not None:
            if level_index > value_levels:
                current = current.below
                level_index -= 1
                continue

            while not current.next.is_footer() and current.next.value < value:
                current = current.next

            node = SkipListNode(value)
            node.next = current.next
            node.previous = current
            node.next.previous = node
            current.next = node

            if last_above is not None:
                last_above.below = node
                node.above = last_above
            last_above = node

            current = current.below
            level_index -= 1

        self._size += 1

    def find(self, value: Any) -> Optional[SkipListNode]:
        """Return the top node of the tower holding ``value``, or None."""
        current = self._top_left
        while current is not None:
            while not current.next.is_footer() and current.next.value < value:
                current = current.next
            if not current.next.is_footer() and current.next.value == value:
                return current.next
            current = current.below
        return None

    def remove(self, value: Any) -> bool:
        node = self.find(value)
        if node is None:
            return False
        while node is not None:
            node.previous.next = node.next
            node.next.previous = node.previous
            node = node.below
        self._size -= 1
        self._clear_empty_levels()
        return True

    def height(self, value: Any) -> int:
        node = self.find(value)
        height = 0
        while node is not None:
            height += 1
            node = node.below
        return height

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        current = self._bottom_left.next
        while not current.is_footer():
            yield current.value
            current = current.next

    # ── Internals ────────────────────────────────────────────────

    @staticmethod
    def _empty_level() -> SkipListNode:
        header = SkipListHeader()
        footer = SkipListFooter()
        header.next = footer
        footer.previous = header
        return header

    def _random_levels(self) -> int:
        levels = 0
        while self.random.randint(0, 1) == 1 and levels < self._max_levels:
            levels += 1
        return levels

    def _clear_empty_levels(self) -> None:
        # the bottom level always stays
        while self._levels > 1 and self._top_left.next.is_footer():
            below = self._top_left.below
            below.above = None
            self._top_left = below
            self._levels -= 1
