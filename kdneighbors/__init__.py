"""
kdneighbors - Neighbor search on an immutable KD-tree

A small spatial index library featuring:
- Median-split KD-tree over any point type with coordinate and distance access
- Nearest neighbor, k-nearest neighbors and fixed-radius search
- Parallel batch queries
- Point sources for binary masks, arrays and point cloud files
"""

from .batch import find_k_nearest_many, find_nearest_many, find_within_radius_many
from .comparator import DistanceComparator, sort_by_distance
from .errors import (DimensionMismatchError, EmptyInputError, EmptyTreeError,
                     InvalidArgumentError, KDTreeError)
from .kdtree import KDTree, build_tree
from .knearest import find_k_nearest
from .nearest import find_nearest
from .node import Internal, Leaf
from .point import PointEntity, SimplePoint
from .point_sources import points_from_array, points_from_file, points_from_mask
from .radius import find_within_radius
from .visualization import plot_neighbors, plot_search_times

__version__ = "1.0.0"
__all__ = ["KDTree", "build_tree", "Leaf", "Internal", "PointEntity", "SimplePoint",
           "find_nearest", "find_k_nearest", "find_within_radius",
           "DistanceComparator", "sort_by_distance",
           "find_nearest_many", "find_k_nearest_many", "find_within_radius_many",
           "points_from_array", "points_from_file", "points_from_mask",
           "KDTreeError", "EmptyInputError", "DimensionMismatchError",
           "EmptyTreeError", "InvalidArgumentError",
           "plot_neighbors", "plot_search_times"]
