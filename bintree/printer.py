"""Text rendering of binary trees, one line per level."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.node import Node


def _label(node: Node) -> str:
    return f"({node.value:03d})"


class _Canvas:
    """Rows of characters that grow to the right as they are written."""

    def __init__(self, rows: int) -> None:
        self._rows: list[list[str]] = [[] for _ in range(rows)]

    def put(self, row: int, col: int, char: str) -> None:
        line = self._rows[row]
        if col >= len(line):
            line.extend(" " * (col + 1 - len(line)))
        line[col] = char

    def lines(self) -> list[str]:
        return ["".join(line).rstrip(" ") for line in self._rows]


def _layout(node: Node | None, offset: int, depth: int, canvas: _Canvas) -> int:
    """Draw the subtree at the given column and level; return its width."""
    if node is None:
        return 0
    parent = node.parent
    is_left = parent is not None and parent.left is node
    label = _label(node)
    width = len(label)
    left = _layout(node.left, offset, depth + 1, canvas)
    right = _layout(node.right, offset + left + width, depth + 1, canvas)
    for i, char in enumerate(label):
        canvas.put(depth, offset + left + i, char)
    if depth:
        if is_left:
            start = offset + left + width // 2
            for i in range(width + right):
                canvas.put(depth - 1, start + i, "-")
        else:
            start = offset - width // 2
            for i in range(left + width):
                canvas.put(depth - 1, start + i, "-")
        canvas.put(depth - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return the drawing of the tree, each level on its own newline-terminated line."""
    if tree is None:
        return ""
    canvas = _Canvas(tree.height() + 1)
    _layout(tree, 0, 0, canvas)
    return "".join(line + "\n" for line in canvas.lines())


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to a stream, standard output by default."""
    out = sys.stdout if file is None else file
    out.write(render(tree))