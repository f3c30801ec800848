"""K nearest neighbors search keeping a bounded, sorted candidate list."""

import numbers
from bisect import bisect_right

from .errors import InvalidArgumentError
from .kdtree import query_root
from .node import Leaf


class _Candidates:
    """At most ``k`` (distance, point) pairs kept in ascending distance order."""

    def __init__(self, k):
        self.k = k
        self.distances = []
        self.points = []

    def full(self):
        return len(self.distances) >= self.k

    def worst(self):
        return self.distances[-1]

    def offer(self, dist, point):
        if self.full() and dist >= self.worst():
            return
        # equal distances keep arrival order
        idx = bisect_right(self.distances, dist)
        self.distances.insert(idx, dist)
        self.points.insert(idx, point)
        if len(self.distances) > self.k:
            self.distances.pop()
            self.points.pop()


def find_k_nearest(tree, query_point, k):
    """
    Find the ``k`` stored points closest to ``query_point``.

    Args:
        tree: KDTree (or root node) to search
        query_point: Point entity to search around
        k: Number of neighbors, at least 1

    Returns:
        List of up to k points, nearest first. Asking for more points than
        the tree holds returns all of them.
    """
    if isinstance(k, bool) or not isinstance(k, numbers.Integral) or k <= 0:
        raise InvalidArgumentError(f"k must be a positive integer, got {k!r}")
    root = query_root(tree, query_point)

    candidates = _Candidates(int(k))
    stack = [(root, None)]

    while stack:
        node, plane_dist = stack.pop()
        if node is None:
            continue
        # The far side can only be skipped once k candidates are known
        if plane_dist is not None and candidates.full() and candidates.worst() <= plane_dist:
            continue

        if isinstance(node, Leaf):
            candidates.offer(query_point.distance_to(node.point), node.point)
            continue

        if node.right is None or node.left is None:
            stack.append((node.left if node.right is None else node.right, None))
            continue

        projected = node.split - query_point.coordinate(node.axis)
        if projected < 0:
            near_node, far_node = node.right, node.left
        else:
            near_node, far_node = node.left, node.right

        stack.append((far_node, abs(projected)))
        stack.append((near_node, None))

    return candidates.points
