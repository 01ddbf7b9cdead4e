"""
    Singly and doubly linked lists — sample inputs for the visualizer.
"""
from typing import Any, Iterator, List, Optional


class ListNode:
    def __init__(self, data: Any):
        self.data = data
        self.next: Optional['ListNode'] = None


class SinglyLinkedList:
    def __init__(self):
        self.head: Optional[ListNode] = None
        self._size = 0

    def insert(self, data: Any) -> ListNode:
        """Append ``data`` at the tail."""
        node = ListNode(data)
        if self.head is None:
            self.head = node
        else:
            current = self.head
            while current.next is not None:
                current = current.next
            current.next = node
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        current = self.head
        while current is not None:
            yield current.data
            current = current.next


class DoubleLink:
    def __init__(self, title: str):
        self.title = title
        self.previous_link: Optional['DoubleLink'] = None
        self.next_link: Optional['DoubleLink'] = None

    def __str__(self) -> str:
        return self.title


class DoublyLinkedList:
    """Every link points at both neighbours, so each adjacent pair is a 2-cycle."""

    def __init__(self):
        self._first: Optional[DoubleLink] = None

    @property
    def is_empty(self) -> bool:
        return self._first is None

    def insert(self, title: str) -> DoubleLink:
        """Prepend a new link and return it."""
        link = DoubleLink(title)
        link.next_link = self._first
        if self._first is not None:
            self._first.previous_link = link
        self._first = link
        return link

    def insert_after(self, link: DoubleLink, title: str) -> Optional[DoubleLink]:
        if link is None or not title:
            return None
        new_link = DoubleLink(title)
        new_link.previous_link = link
        if link.next_link is not None:
            link.next_link.previous_link = new_link
        new_link.next_link = link.next_link
        link.next_link = new_link
        return new_link

    def delete(self) -> Optional[DoubleLink]:
        """Remove and return the first link."""
        removed = self._first
        if removed is not None:
            self._first = removed.next_link
            if self._first is not None:
                self._first.previous_link = None
            removed.next_link = None
        return removed

    def titles(self) -> List[str]:
        result = []
        current = self._first
        while current is not None:
            result.append(current.title)
            current = current.next_link
        return result

    def __str__(self) -> str:
        return "".join(self.titles())
