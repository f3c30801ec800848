"""Tree node variants: a Leaf holds one point, an Internal node a splitting plane."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Leaf:
    point: Any


@dataclass(frozen=True)
class Internal:
    """
    Splitting hyperplane of a KD-tree.

    Every leaf under ``left`` has ``coordinate(axis) <= split`` and every leaf
    under ``right`` has ``coordinate(axis) >= split``. Either child may be
    None at the edges of a tree, never both.
    """
    split: float
    axis: int
    left: Optional[Any] = None
    right: Optional[Any] = None


def iter_leaves(root):
    """Yield the leaves below ``root`` left to right, without recursion."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        if isinstance(node, Leaf):
            yield node
            continue
        stack.append(node.right)
        stack.append(node.left)


def iter_internal(root, depth=0):
    """Yield ``(node, depth)`` for every Internal node below ``root``."""
    stack = [(root, depth)]
    while stack:
        node, d = stack.pop()
        if not isinstance(node, Internal):
            continue
        yield node, d
        stack.append((node.right, d + 1))
        stack.append((node.left, d + 1))


def tree_depth(root):
    """Number of levels from ``root`` down to its deepest leaf."""
    if root is None:
        return 0
    best = 0
    stack = [(root, 1)]
    while stack:
        node, d = stack.pop()
        if node is None:
            continue
        best = max(best, d)
        if isinstance(node, Internal):
            stack.append((node.left, d + 1))
            stack.append((node.right, d + 1))
    return best


def describe(node):
    """Render a subtree as ``[left |{split} right]`` with leaves as ``(x, y, ...)``."""
    if node is None:
        return "null"
    if isinstance(node, Leaf):
        return str(node.point)
    return f"[{describe(node.left)} |{{{node.split}}} {describe(node.right)}]"
