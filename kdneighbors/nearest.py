"""Single nearest neighbor search by branch-and-bound descent."""

from .kdtree import query_root
from .node import Leaf


def find_nearest(tree, query_point):
    """
    Iterative nearest neighbor search in a KD-tree.

    The side of each splitting plane that holds the query is explored first;
    the other side only while the best distance found so far is larger than
    the distance from the query to the plane.

    Args:
        tree: KDTree (or root node) to search
        query_point: Point entity to find the nearest neighbor for

    Returns:
        The stored point closest to query_point; the first one found wins ties
    """
    root = query_root(tree, query_point)
    # entries are (node, plane distance that must beat the best, or None)
    stack = [(root, None)]
    best, best_dist = None, float('inf')

    while stack:
        node, plane_dist = stack.pop()
        if node is None:
            continue
        if plane_dist is not None and best_dist <= plane_dist:
            continue

        if isinstance(node, Leaf):
            dist = query_point.distance_to(node.point)
            if best is None or dist < best_dist:
                best, best_dist = node.point, dist
            continue

        # Only one side, no pruning possible
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

    return best
