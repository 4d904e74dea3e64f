"""
Unit tests for the read-only tree walks and their printers.
"""

import io
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.tree23 import traversal
from src.tree23.tree import Tree23


def seven_tree() -> Tree23:
    """1..7 ascending: root {4}, children {2} and {6}, leaves 1, 3, 5, 7."""
    return Tree23(range(1, 8))


def test_seven_tree_shape():
    tree = seven_tree()
    assert tree.root.keys() == [4]
    assert tree.root.left.keys() == [2]
    assert tree.root.mid.keys() == [6]
    assert tree.height() == 3


def test_in_order():
    assert list(traversal.in_order(seven_tree().root)) == [1, 2, 3, 4, 5, 6, 7]


def test_in_order_with_predicate():
    evens = list(seven_tree().in_order(lambda key: key % 2 == 0))
    assert evens == [2, 4, 6]


def test_in_order_with_three_nodes():
    tree = Tree23([10, 20, 30, 40, 50])
    assert tree.root.is_3node()
    assert list(tree.in_order()) == [10, 20, 30, 40, 50]


def test_pre_order():
    assert list(seven_tree().pre_order()) == [4, 2, 1, 3, 6, 5, 7]


def test_pre_order_places_right_key_before_right_subtree():
    tree = Tree23([10, 20, 30, 40, 50])
    # root {20, 40}: 20, {10}, {30}, 40, {50}
    assert list(tree.pre_order()) == [20, 10, 30, 40, 50]


def test_pre_order_with_predicate():
    assert list(seven_tree().pre_order(lambda key: key > 4)) == [6, 5, 7]


def test_level_order():
    levels = [(level, node.keys()) for level, node in seven_tree().level_order()]
    assert levels == [
        (0, [4]),
        (1, [2]), (1, [6]),
        (2, [1]), (2, [3]), (2, [5]), (2, [7]),
    ]


def test_walks_on_empty_tree():
    tree = Tree23()
    assert list(tree.in_order()) == []
    assert list(tree.pre_order()) == []
    assert list(tree.level_order()) == []


def test_print_in_order():
    out = io.StringIO()
    traversal.print_in_order(seven_tree().root, file=out)
    assert out.getvalue() == "1 2 3 4 5 6 7\n"


def test_print_pre_order_with_predicate():
    out = io.StringIO()
    traversal.print_pre_order(seven_tree().root, lambda key: key < 4, file=out)
    assert out.getvalue() == "2 1 3\n"


def test_print_empty_tree():
    for printer in (traversal.print_in_order, traversal.print_pre_order, traversal.print_level_order):
        out = io.StringIO()
        printer(None, file=out)
        assert out.getvalue() == "The tree is empty\n"


def test_print_level_order():
    out = io.StringIO()
    traversal.print_level_order(seven_tree().root, file=out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "Level 0:"
    assert lines[1] == "  keys=[4] 2-node leaf=False children=[[2], [6]]"
    assert "Level 1:" in lines
    assert "Level 2:" in lines
    assert "  keys=[7] 2-node leaf=True" in lines


def test_describe_node():
    tree = Tree23([1, 2])
    assert traversal.describe_node(tree.root) == "keys=[1, 2] 3-node leaf=True"


if __name__ == "__main__":
    test_functions = [
        obj for name, obj in list(globals().items())
        if name.startswith("test_") and callable(obj)
    ]
    passed = 0
    failed = 0
    for test_fn in test_functions:
        try:
            test_fn()
            passed += 1
            print(f"  PASS: {test_fn.__name__}")
        except Exception as e:
            failed += 1
            print(f"  FAIL: {test_fn.__name__}: {e}")

    print(f"\n{'='*60}")
    print(f"Results: {passed} passed, {failed} failed out of {passed + failed}")
    if failed == 0:
        print("All tests passed!")
    else:
        print("Some tests failed!")
        sys.exit(1)
