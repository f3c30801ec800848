"""Point entities that can be stored in a KD-tree."""

import numpy as np


class PointEntity:
    """
    Capability set required of anything indexed by a KD-tree.

    Subclasses (or any duck-typed object) provide per-axis coordinate access,
    a Euclidean distance to another entity of the same type and their
    dimensionality.
    """

    def coordinate(self, axis):
        raise NotImplementedError

    def distance_to(self, other):
        raise NotImplementedError

    def dimension(self):
        raise NotImplementedError

    def __str__(self):
        values = ", ".join(str(self.coordinate(d)) for d in range(self.dimension()))
        return f"({values})"


class SimplePoint(PointEntity):
    """A point backed by a copy of its coordinates as a float array."""

    def __init__(self, coordinates):
        """
        Create a point from a sequence of coordinates.

        Args:
            coordinates: Sequence or 1D array of scalars (copied)
        """
        self.p = np.array(coordinates, dtype=np.float64).reshape(-1)

    @classmethod
    def from_array(cls, array):
        """
        Create one point per row of an (N, D) array.

        Args:
            array: Array-like of shape (N, D)

        Returns:
            List of N points
        """
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 2:
            raise ValueError(f"Expected an (N, D) array, got shape {array.shape}")
        return [cls(row) for row in array]

    @staticmethod
    def to_array(points):
        """Stack the coordinates of a sequence of points into an (N, D) array."""
        if len(points) == 0:
            return np.empty((0, 0))
        return np.array([[p.coordinate(d) for d in range(p.dimension())] for p in points],
                        dtype=np.float64)

    def coordinate(self, axis):
        return float(self.p[axis])

    def distance_to(self, other):
        return float(np.linalg.norm(self.p - other.p))

    def dimension(self):
        return self.p.shape[0]

    def __eq__(self, other):
        if not isinstance(other, SimplePoint):
            return NotImplemented
        return self.p.shape == other.p.shape and bool(np.all(self.p == other.p))

    def __hash__(self):
        return hash(tuple(self.p.tolist()))

    def __repr__(self):
        return f"SimplePoint({self.p.tolist()})"

    def __str__(self):
        return "(" + ", ".join(str(v) for v in self.p.tolist()) + ")"
