"""Fixed-radius neighbor search."""

import math

from .comparator import sort_by_distance
from .errors import InvalidArgumentError
from .kdtree import query_root
from .node import Leaf


def find_within_radius(tree, query_point, radius, sorted=False):
    """
    Collect every stored point within ``radius`` of ``query_point``.

    Args:
        tree: KDTree (or root node) to search
        query_point: Point entity at the center of the search
        radius: Non-negative search radius, inclusive
        sorted: Order the result by distance to query_point

    Returns:
        List of points; traversal order unless sorted is set
    """
    if math.isnan(radius) or radius < 0:
        raise InvalidArgumentError(f"radius must be non-negative, got {radius!r}")
    root = query_root(tree, query_point)

    found = []
    stack = [root]

    while stack:
        node = stack.pop()
        if node is None:
            continue

        if isinstance(node, Leaf):
            if query_point.distance_to(node.point) <= radius:
                found.append(node.point)
            continue

        if node.right is None or node.left is None:
            stack.append(node.left if node.right is None else node.right)
            continue

        projected = node.split - query_point.coordinate(node.axis)
        if projected < 0:
            near_node, far_node = node.right, node.left
        else:
            near_node, far_node = node.left, node.right

        # the other side may hold points within the radius as well
        if abs(projected) <= radius:
            stack.append(far_node)
        stack.append(near_node)

    if sorted:
        return sort_by_distance(found, query_point)
    return found
