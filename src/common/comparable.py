"""
Ordering helpers shared by the tree and its element types.

The tree only ever asks one question of its elements: how do two of them
compare? compare() answers it with a three-way result built from the
element's own "<", and ComparablePlus lets an element type define that
result once (compare_to) and derive every relational operator from it.
"""

from typing import Any


def compare(a: Any, b: Any) -> int:
    """
    Three-way comparison of two elements.

    Returns a negative number if a < b, zero if they compare equal and a
    positive number if a > b. Equality is comparison-based: two elements
    neither of which is less than the other are equal, whatever __eq__ says.
    """
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


class ComparablePlus:
    """
    Mixin deriving relational operators from a single compare_to().

    Subclasses implement compare_to(other) returning a negative number, zero
    or a positive number. The Python operators (<, <=, >, >=) and the named
    helpers (less_than, greater_than, ...) are all derived from it.
    Equality operators are left to the subclass (a dataclass provides them),
    and equal_to / not_equal_to delegate to ==.
    """

    __slots__ = ()

    def compare_to(self, other: Any) -> int:
        raise NotImplementedError

    def _comparable(self, other: Any) -> bool:
        return isinstance(other, type(self)) or isinstance(self, type(other))

    def __lt__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) >= 0

    def less_than(self, other: Any) -> bool:
        return self.compare_to(other) < 0

    def greater_than(self, other: Any) -> bool:
        return self.compare_to(other) > 0

    def less_than_equal_to(self, other: Any) -> bool:
        return self.compare_to(other) <= 0

    def greater_than_equal_to(self, other: Any) -> bool:
        return self.compare_to(other) >= 0

    def equal_to(self, other: Any) -> bool:
        return self == other

    def not_equal_to(self, other: Any) -> bool:
        return self != other
