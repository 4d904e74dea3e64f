"""
Read-only walks over a 2-3 tree.

The generators take a root node (None for an empty tree) and an optional
predicate; only elements for which the predicate is true are yielded. The
print_* helpers write the same walks as text, one line per walk, and print
"The tree is empty" for an empty tree.

None of these functions mutate the tree. Do not add or remove elements while
a walk is in progress.
"""

import sys
from collections import deque
from typing import Any, Callable, Generator, Optional, TextIO, Tuple

from src.tree23.node import Node23

Predicate = Callable[[Any], bool]

EMPTY_MESSAGE = "The tree is empty"


def _keep(predicate: Optional[Predicate], element: Any) -> bool:
    return predicate is None or predicate(element)


def in_order(node: Optional[Node23], predicate: Optional[Predicate] = None) -> Generator[Any, None, None]:
    """Yield the subtree's elements in ascending order."""
    if node is None or node.is_empty():
        return
    if node.is_leaf():
        for key in node.keys():
            if _keep(predicate, key):
                yield key
        return
    yield from in_order(node.left, predicate)
    if _keep(predicate, node.left_key):
        yield node.left_key
    yield from in_order(node.mid, predicate)
    if node.is_3node():
        if _keep(predicate, node.right_key):
            yield node.right_key
        yield from in_order(node.right, predicate)


def pre_order(node: Optional[Node23], predicate: Optional[Predicate] = None) -> Generator[Any, None, None]:
    """
    Yield the subtree's elements in pre-order.

    Order per node: left key, left subtree, mid subtree, right key, right
    subtree.
    """
    if node is None or node.is_empty():
        return
    if _keep(predicate, node.left_key):
        yield node.left_key
    yield from pre_order(node.left, predicate)
    yield from pre_order(node.mid, predicate)
    if node.is_3node():
        if _keep(predicate, node.right_key):
            yield node.right_key
        yield from pre_order(node.right, predicate)


def level_order(node: Optional[Node23]) -> Generator[Tuple[int, Node23], None, None]:
    """Yield (level, node) pairs breadth-first, the root at level 0."""
    if node is None or node.is_empty():
        return
    queue = deque([(0, node)])
    while queue:
        level, current = queue.popleft()
        yield level, current
        for child in current.children():
            queue.append((level + 1, child))


def describe_node(node: Node23) -> str:
    """One-line summary of a node used by print_level_order."""
    kind = "3-node" if node.is_3node() else "2-node"
    children = ", ".join(str(child.keys()) for child in node.children())
    line = f"keys={node.keys()} {kind} leaf={node.is_leaf()}"
    if children:
        line += f" children=[{children}]"
    return line


def print_in_order(root: Optional[Node23], predicate: Optional[Predicate] = None, file: Optional[TextIO] = None) -> None:
    _print_walk(in_order(root, predicate), root, file)


def print_pre_order(root: Optional[Node23], predicate: Optional[Predicate] = None, file: Optional[TextIO] = None) -> None:
    _print_walk(pre_order(root, predicate), root, file)


def print_level_order(root: Optional[Node23], file: Optional[TextIO] = None) -> None:
    """Print one line per node, grouped under a header per level."""
    out = file if file is not None else sys.stdout
    if root is None or root.is_empty():
        print(EMPTY_MESSAGE, file=out)
        return
    current_level = -1
    for level, node in level_order(root):
        if level != current_level:
            current_level = level
            print(f"Level {level}:", file=out)
        print(f"  {describe_node(node)}", file=out)


def _print_walk(elements, root: Optional[Node23], file: Optional[TextIO]) -> None:
    out = file if file is not None else sys.stdout
    if root is None or root.is_empty():
        print(EMPTY_MESSAGE, file=out)
        return
    print(" ".join(str(element) for element in elements), file=out)
