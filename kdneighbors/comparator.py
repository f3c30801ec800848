"""Ordering of points by their distance to a reference point."""

from functools import cmp_to_key


class DistanceComparator:
    """
    Three-way comparison of two points by distance to ``reference``.

    Equal distances compare as 0, so this is a total preorder; sort with a
    stable sort to keep equidistant points in their original order.
    """

    def __init__(self, reference):
        self.reference = reference

    def compare(self, a, b):
        dist_a = self.reference.distance_to(a)
        dist_b = self.reference.distance_to(b)
        if dist_a < dist_b:
            return -1
        if dist_a > dist_b:
            return 1
        return 0

    __call__ = compare

    def key(self):
        return cmp_to_key(self.compare)


def sort_by_distance(points, reference):
    """Return ``points`` as a new list ordered by distance to ``reference``."""
    return sorted(points, key=DistanceComparator(reference).key())
