"""
2-3 tree: a balanced, ordered, duplicate-free container.

Every node holds one or two keys, and every leaf sits at the same depth.
Balance is kept by varying node fan-out instead of rotating on a stored
balance factor:

- add() descends to a leaf and, on the way back up, splits every 3-node
  that would overflow, promoting its median key. A split that reaches the
  root grows the tree by one level.
- remove() swaps an internal key with its in-order neighbour so that the
  removal happens at a leaf, then repairs emptied nodes bottom-up by
  borrowing from or merging with a sibling. A merge that empties the root
  shrinks the tree by one level.

Elements only need a consistent total order through "<". Two elements
neither of which is less than the other are considered equal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generator, Iterable, Iterator, List, Optional, Tuple

from src.common.comparable import compare
from src.common.logger import get_logger
from src.tree23 import traversal
from src.tree23.node import Node23

logger = get_logger(__name__)

Predicate = Callable[[Any], bool]


class AddStatus(Enum):
    """Outcome of inserting into a subtree."""
    DUPLICATE = "duplicate"  # an equal element is already stored
    ABSORBED = "absorbed"    # the subtree took the key without growing
    SPLIT = "split"          # the subtree split; graft `ascended` into the parent


@dataclass(frozen=True)
class AddResult:
    status: AddStatus
    ascended: Optional[Node23] = None


class RemoveStatus(Enum):
    """Outcome of removing from a subtree."""
    NOT_FOUND = "not_found"
    DELETED = "deleted"      # removed, subtree root still holds a key
    UNDERFLOW = "underflow"  # removed, subtree root is now empty


_ABSORBED = AddResult(AddStatus.ABSORBED)
_DUPLICATE = AddResult(AddStatus.DUPLICATE)


class Tree23:
    """
    Ordered set backed by a 2-3 tree.

    Args:
        elements: Optional iterable whose elements are added in order.
                  Duplicates among them are skipped.

    Not thread-safe: serialize mutating calls externally.
    """

    def __init__(self, elements: Optional[Iterable[Any]] = None) -> None:
        self._root: Optional[Node23] = None
        self._size: int = 0
        if elements is not None:
            self.add_all(elements)

    # =========================================================================
    # Insertion
    # =========================================================================

    def add(self, element: Any) -> bool:
        """Add an element. Returns False if an equal element already exists."""
        if element is None:
            raise TypeError("Tree23 cannot store None")

        # Empty tree: the first key becomes a single leaf.
        if self._root is None:
            self._root = Node23(element)
            self._size = 1
            return True

        result = self._add(self._root, element)
        if result.status is AddStatus.DUPLICATE:
            return False

        if result.status is AddStatus.SPLIT:
            self._root = result.ascended
            logger.debug(f"Root split on {element!r}, height is now {self.height()}")

        self._size += 1
        return True

    def add_all(self, elements: Iterable[Any]) -> bool:
        """
        Add every element. Returns True only if all of them were new.

        Elements added before a duplicate stay in the tree.
        """
        ok = True
        for element in elements:
            if not self.add(element):
                ok = False
        return ok

    def add_all_safe(self, elements: Iterable[Any]) -> bool:
        """
        Add every element, or none of them.

        On the first element that cannot be added, every element this call
        had already added is removed again and False is returned. A TypeError
        from an element that cannot be stored is re-raised after the same
        rollback.
        """
        inserted = []
        try:
            for element in elements:
                if not self.add(element):
                    logger.info(
                        f"Duplicate {element!r} in batch, rolling back {len(inserted)} insertions"
                    )
                    self._discard_all(inserted)
                    return False
                inserted.append(element)
        except TypeError:
            logger.info(f"Invalid element in batch, rolling back {len(inserted)} insertions")
            self._discard_all(inserted)
            raise
        return True

    def _discard_all(self, elements: List[Any]) -> None:
        for element in elements:
            self.remove(element)

    def _add(self, current: Node23, element: Any) -> AddResult:
        """
        Insert into the subtree rooted at current.

        Returns ABSORBED when the subtree took the key without growing, or
        SPLIT with a 2-node (one key, two children) that the caller must
        graft in at its own level.
        """
        cmp_left = compare(element, current.left_key)
        cmp_right = compare(element, current.right_key) if current.is_3node() else None

        # Equal to a key on the way down: already present.
        if cmp_left == 0 or cmp_right == 0:
            return _DUPLICATE

        if current.is_leaf():
            if current.is_3node():
                return AddResult(AddStatus.SPLIT, self._split(current, element, cmp_left, cmp_right))
            if cmp_left < 0:
                current.right_key = current.left_key
                current.left_key = element
            else:
                current.right_key = element
            return _ABSORBED

        # The new element is smaller than the left key.
        if cmp_left < 0:
            result = self._add(current.left, element)
            if result.status is not AddStatus.SPLIT:
                return result
            ascended = result.ascended
            if current.is_2node():
                current.right_key = current.left_key
                current.left_key = ascended.left_key
                current.right = current.mid
                current.mid = ascended.mid
                current.left = ascended.left
                return _ABSORBED
            # 3-node: the left key goes up, the right half becomes its sibling.
            right_part = Node23(current.right_key, None, current.mid, current.right)
            return AddResult(AddStatus.SPLIT, Node23(current.left_key, None, ascended, right_part))

        # Between the two keys, or anything larger than a lone left key.
        if cmp_right is None or cmp_right < 0:
            result = self._add(current.mid, element)
            if result.status is not AddStatus.SPLIT:
                return result
            ascended = result.ascended
            if current.is_2node():
                current.right_key = ascended.left_key
                current.right = ascended.mid
                current.mid = ascended.left
                return _ABSORBED
            # 3-node: the ascended key is the median and keeps going up.
            left_part = Node23(current.left_key, None, current.left, ascended.left)
            right_part = Node23(current.right_key, None, ascended.mid, current.right)
            return AddResult(AddStatus.SPLIT, Node23(ascended.left_key, None, left_part, right_part))

        # The new element is larger than the right key.
        result = self._add(current.right, element)
        if result.status is not AddStatus.SPLIT:
            return result
        left_part = Node23(current.left_key, None, current.left, current.mid)
        return AddResult(AddStatus.SPLIT, Node23(current.right_key, None, left_part, result.ascended))

    @staticmethod
    def _split(leaf: Node23, element: Any, cmp_left: int, cmp_right: int) -> Node23:
        """Split a full leaf around a third key; the median ascends."""
        if cmp_left < 0:
            return Node23(leaf.left_key, None, Node23(element), Node23(leaf.right_key))
        if cmp_right < 0:
            return Node23(element, None, Node23(leaf.left_key), Node23(leaf.right_key))
        return Node23(leaf.right_key, None, Node23(leaf.left_key), Node23(element))

    # =========================================================================
    # Deletion
    # =========================================================================

    def remove(self, element: Any) -> bool:
        """Remove an element. Returns True if an equal element was present."""
        if self._root is None or element is None:
            return False

        status = self._remove(self._root, element)
        if status is RemoveStatus.NOT_FOUND:
            return False

        self._size -= 1

        # The root gave away its last key: its only child (if any) replaces it.
        if status is RemoveStatus.UNDERFLOW:
            self._root = self._root.left
            logger.debug(f"Root collapsed after removing {element!r}, height is now {self.height()}")

        return True

    def _remove(self, current: Optional[Node23], element: Any) -> RemoveStatus:
        """
        Remove from the subtree rooted at current.

        A key found in an internal node is overwritten by its in-order
        neighbour, which is extracted from a leaf. Every node on the way back
        up repairs its children, and reports UNDERFLOW if the repair left it
        empty so that its own parent repairs it in turn.
        """
        # Fell off a leaf: the element is not in the tree.
        if current is None:
            return RemoveStatus.NOT_FOUND

        cmp_left = compare(element, current.left_key)

        if cmp_left == 0:
            if current.is_leaf():
                current.left_key = current.right_key
                current.right_key = None
            else:
                current.left_key = current.left.replace_max()

        elif cmp_left < 0:
            if self._remove(current.left, element) is RemoveStatus.NOT_FOUND:
                return RemoveStatus.NOT_FOUND

        elif current.is_2node():
            if self._remove(current.mid, element) is RemoveStatus.NOT_FOUND:
                return RemoveStatus.NOT_FOUND

        else:
            cmp_right = compare(element, current.right_key)
            if cmp_right == 0:
                if current.is_leaf():
                    current.right_key = None
                else:
                    current.right_key = current.right.replace_min()
            else:
                child = current.mid if cmp_right < 0 else current.right
                if self._remove(child, element) is RemoveStatus.NOT_FOUND:
                    return RemoveStatus.NOT_FOUND

        if not current.is_balanced():
            current.rebalance()

        return RemoveStatus.UNDERFLOW if current.is_empty() else RemoveStatus.DELETED

    def modify(self, which: Any, update: Any) -> bool:
        """
        Replace an element by another one.

        The old element is removed and the update added, since the update
        may sort elsewhere. Returns True iff which was present, even when
        the update collides with another stored element and is not added.
        An update that cannot be stored raises TypeError and leaves which
        in place.
        """
        if update is None:
            raise TypeError("Tree23 cannot store None")
        if not self.contains(which):
            return False
        self.remove(which)
        try:
            self.add(update)
        except TypeError:
            self.add(which)
            raise
        return True

    def clear(self) -> None:
        """Remove all elements."""
        self._root = None
        self._size = 0

    # =========================================================================
    # Queries
    # =========================================================================

    def find(self, element: Any) -> Optional[Any]:
        """Return the stored element equal to element, or None."""
        if element is None:
            return None
        current = self._root
        while current is not None:
            cmp_left = compare(element, current.left_key)
            if cmp_left == 0:
                return current.left_key
            if cmp_left < 0:
                current = current.left
            elif current.is_2node():
                current = current.mid
            else:
                cmp_right = compare(element, current.right_key)
                if cmp_right == 0:
                    return current.right_key
                current = current.mid if cmp_right < 0 else current.right
        return None

    def contains(self, element: Any) -> bool:
        return self.find(element) is not None

    def find_min(self) -> Optional[Any]:
        """Smallest element, or None if the tree is empty."""
        current = self._root
        if current is None:
            return None
        while current.left is not None:
            current = current.left
        return current.left_key

    def find_max(self) -> Optional[Any]:
        """Largest element, or None if the tree is empty."""
        current = self._root
        if current is None:
            return None
        while not current.is_leaf():
            current = current.right if current.is_3node() else current.mid
        return current.right_key if current.is_3node() else current.left_key

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Number of levels; 0 for an empty tree, 1 for a single leaf."""
        level = 0
        current = self._root
        while current is not None:
            level += 1
            current = current.left
        return level

    @property
    def root(self) -> Optional[Node23]:
        """Root node, for read-only inspection."""
        return self._root

    # =========================================================================
    # Traversal / Copy
    # =========================================================================

    def in_order(self, predicate: Optional[Predicate] = None) -> Generator[Any, None, None]:
        """Yield elements in ascending order, optionally filtered."""
        return traversal.in_order(self._root, predicate)

    def pre_order(self, predicate: Optional[Predicate] = None) -> Generator[Any, None, None]:
        """Yield elements in pre-order, optionally filtered."""
        return traversal.pre_order(self._root, predicate)

    def level_order(self) -> Generator[Tuple[int, Node23], None, None]:
        """Yield (level, node) pairs breadth-first, root at level 0."""
        return traversal.level_order(self._root)

    def clone(self) -> "Tree23":
        """
        Independent copy of this tree.

        Built by re-adding every element in order into a fresh tree, so the
        copy shares no nodes with the original.
        """
        return Tree23(self.in_order())

    # =========================================================================
    # Python Protocols
    # =========================================================================

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __iter__(self) -> Iterator[Any]:
        return self.in_order()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __copy__(self) -> "Tree23":
        return self.clone()

    def __repr__(self) -> str:
        return f"Tree23(size={self._size}, height={self.height()})"
