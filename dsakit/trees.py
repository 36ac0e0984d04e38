"""Binary search trees, AVL trees and stack-based traversals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False, slots=True)
class TreeNode:
    """A binary tree node; ``height`` is kept up to date by the AVL tree."""

    key: int
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)
    height: int = 1


def iterative_inorder(root: TreeNode | None) -> Iterator[int]:
    """Yield the keys of the tree in in-order, using an explicit stack."""
    stack: list[TreeNode] = []
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current.key
        current = current.right


def iterative_preorder(root: TreeNode | None) -> Iterator[int]:
    """Yield the keys of the tree in pre-order, using an explicit stack."""
    if root is None:
        return
    stack = [root]
    while stack:
        current = stack.pop()
        yield current.key
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def iterative_postorder(root: TreeNode | None) -> Iterator[int]:
    """Yield the keys of the tree in post-order, using two explicit stacks."""
    if root is None:
        return
    pending = [root]
    visited: list[TreeNode] = []
    while pending:
        current = pending.pop()
        visited.append(current)
        if current.left is not None:
            pending.append(current.left)
        if current.right is not None:
            pending.append(current.right)
    while visited:
        yield visited.pop().key


class BinarySearchTree:
    """An unbalanced binary search tree of distinct keys."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Insert ``value``; return False if it was already present."""
        if self.root is None:
            self.root = TreeNode(value)
            return True
        node = self.root
        while True:
            if value < node.key:
                if node.left is None:
                    node.left = TreeNode(value)
                    return True
                node = node.left
            elif value > node.key:
                if node.right is None:
                    node.right = TreeNode(value)
                    return True
                node = node.right
            else:
                return False

    def delete(self, value: int) -> bool:
        """Remove ``value``; return False if it was not present."""
        self.root, removed = self._delete(self.root, value)
        return removed

    @classmethod
    def _delete(
        cls, node: TreeNode | None, value: int
    ) -> tuple[TreeNode | None, bool]:
        if node is None:
            return None, False
        if value < node.key:
            node.left, removed = cls._delete(node.left, value)
            return node, removed
        if value > node.key:
            node.right, removed = cls._delete(node.right, value)
            return node, removed
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right, _ = cls._delete(node.right, successor.key)
        return node, True

    def __contains__(self, value: object) -> bool:
        node = self.root
        while node is not None:
            if value == node.key:
                return True
            node = node.left if value < node.key else node.right  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[int]:
        return iterative_inorder(self.root)

    def inorder(self) -> list[int]:
        """Return the keys in ascending order."""
        return list(iterative_inorder(self.root))

    def preorder(self) -> list[int]:
        """Return the keys in pre-order."""
        return list(iterative_preorder(self.root))

    def postorder(self) -> list[int]:
        """Return the keys in post-order."""
        return list(iterative_postorder(self.root))

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"


def _height(node: TreeNode | None) -> int:
    return 0 if node is None else node.height


def _update_height(node: TreeNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: TreeNode | None) -> int:
    return 0 if node is None else _height(node.left) - _height(node.right)


def _rotate_right(y: TreeNode) -> TreeNode:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: TreeNode) -> TreeNode:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def _avl_insert(node: TreeNode | None, key: int) -> tuple[TreeNode, bool]:
    if node is None:
        return TreeNode(key), True
    if key < node.key:
        node.left, added = _avl_insert(node.left, key)
    elif key > node.key:
        node.right, added = _avl_insert(node.right, key)
    else:
        return node, False

    _update_height(node)
    balance = _balance(node)

    if balance > 1 and node.left is not None:
        if key > node.left.key:
            node.left = _rotate_left(node.left)
        return _rotate_right(node), added
    if balance < -1 and node.right is not None:
        if key < node.right.key:
            node.right = _rotate_right(node.right)
        return _rotate_left(node), added
    return node, added


class AVLTree:
    """A self-balancing binary search tree of distinct keys."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: TreeNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, key: int) -> bool:
        """Insert ``key`` and rebalance; return False if it was already present."""
        self.root, added = _avl_insert(self.root, key)
        if added:
            self._size += 1
        return added

    def __iter__(self) -> Iterator[int]:
        return iterative_inorder(self.root)

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Return the height of the tree; an empty tree has height 0."""
        return _height(self.root)

    def root_key(self) -> int:
        """Return the key at the root."""
        if self.root is None:
            raise LookupError("tree is empty")
        return self.root.key

    def preorder(self) -> list[int]:
        """Return the keys in pre-order."""
        return list(iterative_preorder(self.root))

    def __repr__(self) -> str:
        return f"AVLTree({list(self)!r})"