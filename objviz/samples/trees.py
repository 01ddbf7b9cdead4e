"""
    Binary search tree and AVL tree — sample inputs for the visualizer.
"""
from typing import Iterator, List, Optional

from ..services.introspection import show_data


@show_data("data")
class TreeNode:
    def __init__(self, data: int):
        self.data = data
        self.left: Optional['TreeNode'] = None
        self.right: Optional['TreeNode'] = None


class BinaryTree:
    """Unbalanced binary search tree; duplicates go to the right."""

    def __init__(self):
        self._root: Optional[TreeNode] = None

    def insert(self, data: int) -> TreeNode:
        node = TreeNode(data)
        if self._root is None:
            self._root = node
            return node

        current = self._root
        while True:
            if data < current.data:
                if current.left is None:
                    current.left = node
                    return node
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return node
                current = current.right

    def contains(self, data: int) -> bool:
        current = self._root
        while current is not None:
            if data == current.data:
                return True
            current = current.left if data < current.data else current.right
        return False

    def in_order(self) -> List[int]:
        result: List[int] = []
        stack: List[TreeNode] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            result.append(current.data)
            current = current.right
        return result


class AVLNode(TreeNode):
    def __init__(self, data: int):
        super().__init__(data)
        self.height = 1


def _height(node: Optional[AVLNode]) -> int:
    return node.height if node is not None else 0


class AVLTree:
    """Self-balancing binary search tree (heights differ by at most one)."""

    def __init__(self):
        self._root: Optional[AVLNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return iter(self.in_order())

    def add(self, data: int) -> None:
        self._root = self._insert(self._root, data)
        self._size += 1

    def in_order(self) -> List[int]:
        result: List[int] = []

        def walk(node: Optional[AVLNode]) -> None:
            if node is None:
                return
            walk(node.left)
            result.append(node.data)
            walk(node.right)

        walk(self._root)
        return result

    def height(self) -> int:
        return _height(self._root)

    # ── Balancing ────────────────────────────────────────────────

    def _insert(self, node: Optional[AVLNode], data: int) -> AVLNode:
        if node is None:
            return AVLNode(data)
        if data < node.data:
            node.left = self._insert(node.left, data)
        else:
            node.right = self._insert(node.right, data)
        return self._rebalance(node)

    @staticmethod
    def _update(node: AVLNode) -> None:
        node.height = 1 + max(_height(node.left), _height(node.right))

    @staticmethod
    def _balance(node: AVLNode) -> int:
        return _height(node.left) - _height(node.right)

    def _rotate_right(self, node: AVLNode) -> AVLNode:
        pivot = node.left
        node.left = pivot.right
        pivot.right = node
        self._update(node)
        self._update(pivot)
        return pivot

    def _rotate_left(self, node: AVLNode) -> AVLNode:
        pivot = node.right
        node.right = pivot.left
        pivot.left = node
        self._update(node)
        self._update(pivot)
        return pivot

    def _rebalance(self, node: AVLNode) -> AVLNode:
        self._update(node)
        balance = self._balance(node)
        if balance > 1:
            if self._balance(node.left) < 0:
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)
        if balance < -1:
            if self._balance(node.right) > 0:
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)
        return node
