"""
Node of a 2-3 tree.

A node holds one key (2-node) or two keys (3-node). An internal node has
exactly one more child than it has keys; a leaf has no children. When a node
holds a single key it is always stored in left_key, and the node's children
are left and mid (right stays None).

Besides the structural predicates, a node carries the two primitives the
deletion engine is built from:

    replace_max / replace_min   remove the extremal key of a subtree
    rebalance                   repair a child emptied by a removal

Empty nodes ("holes") only exist while a removal is being repaired. A leaf
hole has no children; an internal hole keeps its single surviving child in
left. A hole is always fixed by its parent's rebalance(), or by the tree
itself when the hole is the root.
"""

from typing import Any, List, Optional


class Node23:
    """Leaf or internal node holding one or two keys."""

    __slots__ = ("left_key", "right_key", "left", "mid", "right")

    def __init__(
        self,
        left_key: Any = None,
        right_key: Any = None,
        left: Optional["Node23"] = None,
        mid: Optional["Node23"] = None,
        right: Optional["Node23"] = None,
    ) -> None:
        self.left_key = left_key
        self.right_key = right_key
        self.left = left
        self.mid = mid
        self.right = right

    # =========================================================================
    # Structural Queries
    # =========================================================================

    def is_leaf(self) -> bool:
        return self.left is None and self.mid is None and self.right is None

    def is_2node(self) -> bool:
        return self.right_key is None

    def is_3node(self) -> bool:
        return self.right_key is not None

    def is_empty(self) -> bool:
        return self.left_key is None

    def is_balanced(self) -> bool:
        """
        One-level balance check.

        A leaf is balanced. An internal node is balanced when none of its
        direct children is empty. Deeper levels are not inspected: callers
        re-check only the level they just mutated.
        """
        if self.is_leaf():
            return True
        if self.left is None or self.mid is None:
            return False
        if self.left.is_empty() or self.mid.is_empty():
            return False
        if self.is_3node():
            return self.right is not None and not self.right.is_empty()
        return True

    def keys(self) -> List[Any]:
        """Keys of this node in ascending order."""
        if self.left_key is None:
            return []
        if self.right_key is None:
            return [self.left_key]
        return [self.left_key, self.right_key]

    def children(self) -> List["Node23"]:
        """Children of this node from left to right."""
        return [child for child in (self.left, self.mid, self.right) if child is not None]

    def __repr__(self) -> str:
        kind = "leaf" if self.is_leaf() else "internal"
        return f"Node23({self.keys()}, {kind})"

    # =========================================================================
    # Extremal Extraction
    # =========================================================================

    def replace_max(self) -> Any:
        """
        Remove and return the largest key of this subtree.

        Descends through right (3-node) or mid (2-node). At the leaf the
        right key is taken if there is one; otherwise the left key is taken
        and the leaf is left empty, which the levels above repair on the way
        back up.
        """
        if not self.is_leaf():
            if self.right_key is not None:
                maximum = self.right.replace_max()
            else:
                maximum = self.mid.replace_max()
        elif self.right_key is not None:
            maximum = self.right_key
            self.right_key = None
        else:
            maximum = self.left_key
            self.left_key = None

        if not self.is_balanced():
            self.rebalance()

        return maximum

    def replace_min(self) -> Any:
        """
        Remove and return the smallest key of this subtree.

        Always descends through left. A 3-leaf shifts its right key into the
        left slot; a 2-leaf is left empty.
        """
        if not self.is_leaf():
            minimum = self.left.replace_min()
        else:
            minimum = self.left_key
            self.left_key = self.right_key
            self.right_key = None

        if not self.is_balanced():
            self.rebalance()

        return minimum

    # =========================================================================
    # Rebalancing
    # =========================================================================

    def rebalance(self) -> None:
        """
        Repair an empty child of this node.

        Loops until the node is balanced again or has itself become empty.
        In the latter case the deficiency has moved one level up and the
        parent (or the tree, at the root) takes over.
        """
        while not self.is_empty() and not self.is_balanced():
            if self.left.is_empty():
                self._repair_child(0)
            elif self.mid.is_empty():
                self._repair_child(1)
            else:
                self._repair_child(2)

    def _repair_child(self, idx: int) -> None:
        """Fill the empty child at position idx by borrowing or merging."""
        keys = self.keys()
        children = self.children()
        hole = children[idx]
        orphans = hole.children()

        # Try borrowing from right sibling.
        if idx + 1 < len(children) and children[idx + 1].is_3node():
            sibling = children[idx + 1]
            sib_keys, sib_children = sibling.keys(), sibling.children()
            # Separator moves down into the hole, sibling's smallest key moves up.
            hole._assign([keys[idx]], orphans + sib_children[:1])
            keys[idx] = sib_keys[0]
            sibling._assign(sib_keys[1:], sib_children[1:])

        # Try borrowing from left sibling.
        elif idx > 0 and children[idx - 1].is_3node():
            sibling = children[idx - 1]
            sib_keys, sib_children = sibling.keys(), sibling.children()
            hole._assign([keys[idx - 1]], sib_children[-1:] + orphans)
            keys[idx - 1] = sib_keys[-1]
            sibling._assign(sib_keys[:-1], sib_children[:-1])

        # Merge: prefer merging with the right sibling.
        elif idx + 1 < len(children):
            sibling = children[idx + 1]
            sibling._assign([keys[idx]] + sibling.keys(), orphans + sibling.children())
            del keys[idx]
            del children[idx]

        # Merge with the left sibling (rightmost child).
        else:
            sibling = children[idx - 1]
            sibling._assign(sibling.keys() + [keys[idx - 1]], sibling.children() + orphans)
            del keys[idx - 1]
            del children[idx]

        # A 2-node that merged gave away its only key: it is now an internal
        # hole whose single child is the merged node, i.e. this level collapses.
        self._assign(keys, children)

    def _assign(self, keys: List[Any], children: List["Node23"]) -> None:
        """Overwrite all key and child slots from ordered lists."""
        self.left_key = keys[0] if keys else None
        self.right_key = keys[1] if len(keys) > 1 else None
        self.left = children[0] if children else None
        self.mid = children[1] if len(children) > 1 else None
        self.right = children[2] if len(children) > 2 else None
