"""
Unit tests for Node23: structural predicates, extremal extraction and
every rebalance branch (borrow right, borrow left, merge, level collapse).
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.tree23.node import Node23


def leaf(*keys):
    return Node23(*keys)


def empty_leaf():
    return Node23()


# =========================================================================
# Tests: Predicates
# =========================================================================

def test_leaf_predicates():
    node = leaf(5)
    assert node.is_leaf()
    assert node.is_2node()
    assert not node.is_3node()
    assert not node.is_empty()
    assert node.is_balanced()
    assert node.keys() == [5]
    assert node.children() == []


def test_three_node_predicates():
    node = Node23(10, 20, leaf(5), leaf(15), leaf(25))
    assert not node.is_leaf()
    assert node.is_3node()
    assert node.keys() == [10, 20]
    assert [child.keys() for child in node.children()] == [[5], [15], [25]]
    assert node.is_balanced()


def test_empty_node():
    node = empty_leaf()
    assert node.is_empty()
    assert node.is_leaf()
    assert node.keys() == []


def test_is_balanced_detects_empty_child():
    assert not Node23(10, None, empty_leaf(), leaf(20)).is_balanced()
    assert not Node23(10, None, leaf(5), empty_leaf()).is_balanced()
    assert not Node23(10, 20, leaf(5), leaf(15), empty_leaf()).is_balanced()


def test_is_balanced_is_one_level_only():
    # An empty grandchild is not visible from the root.
    deep = Node23(10, None, Node23(5, None, empty_leaf(), leaf(7)), Node23(15, None, leaf(12), leaf(20)))
    assert deep.is_balanced()
    assert not deep.left.is_balanced()


def test_repr():
    assert repr(leaf(1, 2)) == "Node23([1, 2], leaf)"
    assert "internal" in repr(Node23(10, None, leaf(5), leaf(15)))


# =========================================================================
# Tests: Extremal Extraction
# =========================================================================

def test_replace_max_from_three_leaf():
    node = leaf(1, 2)
    assert node.replace_max() == 2
    assert node.keys() == [1]


def test_replace_max_from_two_leaf_leaves_it_empty():
    node = leaf(1)
    assert node.replace_max() == 1
    assert node.is_empty()


def test_replace_min_from_three_leaf_shifts_right_key():
    node = leaf(1, 2)
    assert node.replace_min() == 1
    assert node.left_key == 2
    assert node.right_key is None


def test_replace_min_from_two_leaf_leaves_it_empty():
    node = leaf(1)
    assert node.replace_min() == 1
    assert node.is_empty()


def test_replace_max_descends_right_of_three_node():
    node = Node23(10, 20, leaf(5), leaf(15), leaf(25, 30))
    assert node.replace_max() == 30
    assert node.right.keys() == [25]
    assert node.is_balanced()


def test_replace_max_rebalances_on_the_way_up():
    node = Node23(20, None, leaf(10), leaf(30))
    assert node.replace_max() == 30
    # Both leaves were 2-nodes: they merge and this node is left empty.
    assert node.is_empty()
    assert node.left.keys() == [10, 20]
    assert node.mid is None


def test_replace_min_borrows_from_sibling():
    node = Node23(20, None, leaf(10), leaf(30, 40))
    assert node.replace_min() == 10
    assert node.keys() == [30]
    assert node.left.keys() == [20]
    assert node.mid.keys() == [40]


# =========================================================================
# Tests: Rebalance
# =========================================================================

def test_rebalance_left_child_borrows_from_right_sibling():
    node = Node23(10, None, empty_leaf(), leaf(20, 30))
    node.rebalance()
    assert node.keys() == [20]
    assert node.left.keys() == [10]
    assert node.mid.keys() == [30]


def test_rebalance_mid_child_borrows_from_left_sibling():
    node = Node23(20, None, leaf(5, 10), empty_leaf())
    node.rebalance()
    assert node.keys() == [10]
    assert node.left.keys() == [5]
    assert node.mid.keys() == [20]


def test_rebalance_mid_child_of_three_node_borrows_from_right():
    node = Node23(10, 20, leaf(5), empty_leaf(), leaf(25, 30))
    node.rebalance()
    assert node.keys() == [10, 25]
    assert [c.keys() for c in node.children()] == [[5], [20], [30]]


def test_rebalance_right_child_borrows_from_mid():
    node = Node23(10, 20, leaf(5), leaf(12, 15), empty_leaf())
    node.rebalance()
    assert node.keys() == [10, 15]
    assert [c.keys() for c in node.children()] == [[5], [12], [20]]


def test_rebalance_merges_with_right_sibling_in_three_node():
    node = Node23(10, 20, empty_leaf(), leaf(15), leaf(25))
    node.rebalance()
    assert node.keys() == [20]
    assert [c.keys() for c in node.children()] == [[10, 15], [25]]
    assert node.right is None
    assert node.is_balanced()


def test_rebalance_right_child_merges_into_mid():
    node = Node23(10, 20, leaf(5), leaf(15), empty_leaf())
    node.rebalance()
    assert node.keys() == [10]
    assert [c.keys() for c in node.children()] == [[5], [15, 20]]


def test_rebalance_critical_case_collapses_level():
    node = Node23(10, None, leaf(5), empty_leaf())
    node.rebalance()
    # The node gave its only key to the merged child and is now empty,
    # keeping that child as its single descendant.
    assert node.is_empty()
    assert node.left.keys() == [5, 10]
    assert node.mid is None
    assert node.right is None


def test_rebalance_internal_hole_borrows_subtree_from_sibling():
    hole = Node23(None, None, leaf(10))
    sibling = Node23(70, 90, leaf(60), leaf(80), leaf(95))
    node = Node23(50, None, hole, sibling)
    node.rebalance()
    assert node.keys() == [70]
    assert node.left.keys() == [50]
    assert [c.keys() for c in node.left.children()] == [[10], [60]]
    assert node.mid.keys() == [90]
    assert [c.keys() for c in node.mid.children()] == [[80], [95]]


def test_rebalance_internal_hole_merges_with_sibling():
    hole = Node23(None, None, leaf(10))
    sibling = Node23(70, None, leaf(60), leaf(80))
    node = Node23(50, None, hole, sibling)
    node.rebalance()
    assert node.is_empty()
    merged = node.left
    assert merged.keys() == [50, 70]
    assert [c.keys() for c in merged.children()] == [[10], [60], [80]]


def test_rebalance_on_balanced_node_is_noop():
    node = Node23(10, None, leaf(5), leaf(15))
    node.rebalance()
    assert node.keys() == [10]
    assert [c.keys() for c in node.children()] == [[5], [15]]


# =========================================================================
# Main
# =========================================================================

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
