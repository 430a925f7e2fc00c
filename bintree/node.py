"""Binary tree nodes with parent links, and the queries that work on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class Node:
    """A binary tree node holding an integer, linked to its parent and children."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child becomes its left child."""
        new = Node(value, self)
        if self.left is not None:
            self.left.parent = new
            new.left = self.left
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child becomes its right child."""
        new = Node(value, self)
        if self.right is not None:
            self.right.parent = new
            new.right = self.right
        self.right = new
        return new

    def delete(self) -> None:
        """Detach this subtree from its parent and break every link inside it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        for node in list(self._nodes_postorder()):
            node.left = None
            node.right = None
            node.parent = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def _children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def _nodes_preorder(self) -> Iterator[Node]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _nodes_inorder(self) -> Iterator[Node]:
        stack: list[Node] = []
        node: Node | None = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _nodes_postorder(self) -> Iterator[Node]:
        stack: list[tuple[Node, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def preorder(self) -> Iterator[int]:
        """Yield the values of the subtree in pre-order."""
        return (node.value for node in self._nodes_preorder())

    def inorder(self) -> Iterator[int]:
        """Yield the values of the subtree in in-order."""
        return (node.value for node in self._nodes_inorder())

    def postorder(self) -> Iterator[int]:
        """Yield the values of the subtree in post-order."""
        return (node.value for node in self._nodes_postorder())

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        levels = 0
        frontier: deque[Node] = deque([self])
        while frontier:
            levels += 1
            for _ in range(len(frontier)):
                frontier.extend(frontier.popleft()._children())
        return levels - 1

    def depth(self) -> int:
        """Number of edges from this node up to the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def size(self) -> int:
        """Number of nodes in the subtree."""
        return sum(1 for _ in self._nodes_preorder())

    def leaves(self) -> int:
        """Number of leaves in the subtree."""
        return sum(1 for node in self._nodes_preorder() if node.is_leaf())

    def nodes(self) -> int:
        """Number of nodes in the subtree with at least one child."""
        return sum(1 for node in self._nodes_preorder() if not node.is_leaf())

    def balance(self) -> int:
        """Balance factor: left subtree height minus right subtree height."""
        left = 1 + self.left.height() if self.left is not None else 0
        right = 1 + self.right.height() if self.right is not None else 0
        return left - right

    def is_full(self) -> bool:
        """Return True if every node has either zero or two children."""
        return all(
            (node.left is None) == (node.right is None)
            for node in self._nodes_preorder()
        )

    def is_perfect(self) -> bool:
        """Return True if the tree is full and all leaves sit on the same level."""
        height = self.height()
        stack: list[tuple[Node, int]] = [(self, 0)]
        while stack:
            node, level = stack.pop()
            if (node.left is None) != (node.right is None):
                return False
            if node.is_leaf():
                if level != height:
                    return False
                continue
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
        return True

    def sibling(self) -> Node | None:
        """The other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Node | None:
        """The sibling of this node's parent, or None."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        return parent.sibling()