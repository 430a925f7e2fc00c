import io
import re

from bintree.node import Node
from bintree.printer import print_tree, render


def _sample_tree() -> Node:
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    left.insert_left(6)
    left.insert_right(56)
    right.insert_left(256)
    right.insert_right(512)
    return root


def _chain_tree() -> Node:
    root = Node(1)
    node = root.insert_right(2)
    node = node.insert_left(3)
    node.insert_right(4)
    root.insert_left(5)
    return root


def test_render_sample_tree():
    assert render(_sample_tree()).splitlines() == [
        "       .-------(098)-------.",
        "  .--(012)--.         .--(402)--.",
        "(006)     (056)     (256)     (512)",
    ]


def test_render_single_node():
    assert render(Node(1)) == "(001)\n"


def test_render_negative_value():
    assert render(Node(-5)) == "(-05)\n"


def test_render_none_is_empty():
    assert render(None) == ""


def test_line_count_matches_height():
    for tree in (_sample_tree(), _chain_tree(), Node(7)):
        assert len(render(tree).splitlines()) == tree.height() + 1


def test_every_line_ends_with_newline_and_has_no_trailing_spaces():
    text = render(_chain_tree())
    assert text.endswith("\n")
    for line in text.splitlines():
        assert line == line.rstrip(" ")


def test_labels_left_to_right_follow_inorder():
    for tree in (_sample_tree(), _chain_tree()):
        found = []
        for row in render(tree).splitlines():
            for match in re.finditer(r"\((-?\d+)\)", row):
                found.append((match.start(), int(match.group(1))))
        found.sort()
        assert [value for _, value in found] == list(tree.inorder())


def test_each_level_holds_its_nodes():
    tree = _sample_tree()
    rows = render(tree).splitlines()
    assert re.findall(r"\((\d+)\)", rows[1]) == ["012", "402"]
    assert len(re.findall(r"\(\d+\)", rows[2])) == tree.leaves()


def test_print_tree_writes_rendering():
    tree = _chain_tree()
    buffer = io.StringIO()
    print_tree(tree, buffer)
    assert buffer.getvalue() == render(tree)


def test_print_tree_defaults_to_stdout(capsys):
    tree = _sample_tree()
    print_tree(tree)
    assert capsys.readouterr().out == render(tree)


def test_print_tree_none_writes_nothing():
    buffer = io.StringIO()
    print_tree(None, buffer)
    assert buffer.getvalue() == ""