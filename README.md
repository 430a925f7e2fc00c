# bintree

A small binary tree of integers whose nodes keep a link to their parent.
It has insertion that pushes existing children down, the three
depth-first traversals, a set of measurements and an ASCII renderer.
It is a library only: there is no command-line program.

## Installation

```
pip install bintree
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_left(128)
```

`insert_left` and `insert_right` return the new node. They put it
between a parent and its current child on that side; the old child
becomes the matching child of the new node.

Each `Node` has the attributes `value`, `parent`, `left` and `right`.

## Traversals

The traversal methods return iterators over the values of the subtree.

```python
list(root.preorder())   # [98, 12, 54, 402, 128]
list(root.inorder())    # [12, 54, 98, 128, 402]
list(root.postorder())  # [54, 12, 128, 402, 98]
```

## Measurements and relations

| Method         | Meaning                                                |
|----------------|--------------------------------------------------------|
| `height()`     | edges on the longest path down to a leaf (0 for a leaf)|
| `depth()`      | edges up to the root (0 for the root)                  |
| `size()`       | number of nodes in the subtree                         |
| `leaves()`     | number of nodes with no children                       |
| `nodes()`      | number of nodes with at least one child                |
| `balance()`    | height of the left side minus height of the right side |
| `is_leaf()`    | the node has no children                               |
| `is_root()`    | the node has no parent                                 |
| `is_full()`    | every node has either zero or two children             |
| `is_perfect()` | full, and every leaf is at the same depth              |
| `sibling()`    | the other child of the parent, or `None`               |
| `uncle()`      | the sibling of the parent, or `None`                   |

`delete()` detaches the subtree from its parent and clears every
parent and child link inside it.

## Printing

```python
from bintree.printer import render, print_tree

text = render(root)
print_tree(root)           # to standard output
print_tree(root, None)     # the same
```

For the tree built above the drawing is:

```
  .-------(098)-------.
(012)--.         .--(402)
     (054)     (128)
```

`render` returns the drawing as a string, one newline-terminated line
per level, with trailing spaces removed; for `None` it returns an empty
string. Values are shown as `(%03d)`. `print_tree` writes the same text
to the file object it is given, or to standard output when the file is
`None` or left out.