"""KD-Tree implementation for spatial partitioning of point entities."""

from .errors import DimensionMismatchError, EmptyInputError, EmptyTreeError
from .node import Internal, Leaf, describe, iter_leaves, tree_depth
from .point import SimplePoint
from .utils import time_function


def _check_dimension(points):
    dimension = points[0].dimension()
    if dimension < 1:
        raise DimensionMismatchError(f"Points must have at least one dimension, got {dimension}")
    for i, point in enumerate(points):
        if point.dimension() != dimension:
            raise DimensionMismatchError(
                f"Point {i} has dimension {point.dimension()}, expected {dimension}"
            )
    return dimension


def _build(points, depth, dimension):
    # one point, return a leaf
    if len(points) == 1:
        return Leaf(points[0])
    # split by axis cycling dimensions
    axis = depth % dimension
    # stable sort keeps input order among equal coordinates
    sorted_points = sorted(points, key=lambda p: p.coordinate(axis))
    # lower median goes left, so both sides are non-empty
    median_index = (len(sorted_points) - 1) // 2
    split = sorted_points[median_index].coordinate(axis)
    left = sorted_points[:median_index + 1]
    right = sorted_points[median_index + 1:]
    return Internal(
        split=split,
        axis=axis,
        left=_build(left, depth + 1, dimension) if left else None,
        right=_build(right, depth + 1, dimension) if right else None,
    )


def build_tree(points):
    """
    Build a KD-tree by recursive median partitioning.

    Args:
        points: Non-empty sequence of point entities of one dimension

    Returns:
        Root node (a Leaf for a single point, an Internal node otherwise)
    """
    points = list(points)
    if not points:
        raise EmptyInputError("Cannot build a KD-tree from zero points")
    dimension = _check_dimension(points)
    return _build(points, 0, dimension)


def query_root(tree, query_point):
    """
    Root node of ``tree`` checked against ``query_point``.

    Args:
        tree: KDTree or a bare root node
        query_point: Point entity the query is issued for

    Returns:
        Root node
    """
    root = tree.root if isinstance(tree, KDTree) else tree
    if not isinstance(root, (Leaf, Internal)):
        raise EmptyTreeError("Cannot query an empty KD-tree")
    first = next(iter_leaves(root), None)
    if first is None:
        raise EmptyTreeError("KD-tree has no leaves")
    dimension = first.point.dimension()
    if query_point.dimension() != dimension:
        raise DimensionMismatchError(
            f"Query has dimension {query_point.dimension()}, tree has dimension {dimension}"
        )
    return root


class KDTree:
    """Immutable KD-tree over point entities, built once and queried many times."""

    def __init__(self, points):
        points = list(points)
        if not points:
            raise EmptyInputError("Cannot build a KD-tree from zero points")
        self.dimension = _check_dimension(points)
        self.size = len(points)
        self.root = self.build(points)

    @classmethod
    def from_array(cls, array):
        """Build from an (N, D) array, one SimplePoint per row."""
        return cls(SimplePoint.from_array(array))

    @time_function
    def build(self, points, depth=0):
        return _build(points, depth, self.dimension)

    def leaves(self):
        """All stored points, in left to right tree order."""
        return [leaf.point for leaf in iter_leaves(self.root)]

    def depth(self):
        return tree_depth(self.root)

    def describe(self):
        return describe(self.root)

    def __len__(self):
        return self.size

    def __repr__(self):
        return f"KDTree(size={self.size}, dimension={self.dimension}, depth={self.depth()})"
