from algokit.binary_tree import BinaryTree, bst_insert
from algokit.complete_tree import CompleteTree
from algokit.tree_print import print_binary_tree, render_binary_tree
from algokit.tree_traversal import height


def _bst(keys):
    tree = None
    for key in keys:
        tree = bst_insert(tree, key)
    return tree


def test_empty_tree_renders_nothing():
    assert render_binary_tree(None) == []


def test_single_node():
    assert render_binary_tree(BinaryTree(1)) == ["1  "]


def test_node_with_two_children():
    tree = BinaryTree(2, BinaryTree(1), BinaryTree(3))
    assert render_binary_tree(tree) == ["2 -v  ", "1  3  "]


def test_lines_have_equal_width_and_count_matches_height():
    tree = _bst([12, 5, 18, 2, 9, 15, 19, 13, 17])
    lines = render_binary_tree(tree)
    assert len({len(line) for line in lines}) == 1
    assert len(lines) == height(tree) + 1
    assert lines[0].startswith("12 ")


def test_every_value_appears():
    data = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]
    text = "\n".join(render_binary_tree(CompleteTree(data)))
    for value in range(1, 9):
        assert str(value) in text


def test_print_writes_rendering(capsys):
    tree = _bst([5, 3, 8])
    print_binary_tree(tree)
    out = capsys.readouterr().out
    assert out == "".join(line + "\n" for line in render_binary_tree(tree))