"""General utility functions."""

import time
from functools import wraps
import numpy as np


def time_function(func):
    """
    Decorator to time function execution.
    For recursive functions, only times the top-level call.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        if not hasattr(wrapper, '_in_call'):
            wrapper._in_call = False

        if not wrapper._in_call:
            wrapper._in_call = True
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
                elapsed = time.time() - start_time
                print(f"{func.__name__} took {elapsed:.6f} seconds")
                return result
            finally:
                wrapper._in_call = False
        else:
            return func(*args, **kwargs)

    return wrapper


def random_points(rng, num_points, num_dimensions, min_value, max_value):
    """
    Uniform random coordinates in [min_value, max_value).

    Args:
        rng: numpy Generator
        num_points: Number of rows
        num_dimensions: Number of columns
        min_value: Lower bound
        max_value: Upper bound

    Returns:
        Array of shape (num_points, num_dimensions)
    """
    return rng.random((num_points, num_dimensions)) * (max_value - min_value) + min_value


def exhaustive_distances(points_array, query):
    """Euclidean distance from ``query`` (array of shape (D,)) to every row of ``points_array``."""
    return np.linalg.norm(points_array - np.asarray(query, dtype=np.float64), axis=1)


def nearest_neighbor_exhaustive(points_array, query):
    """
    Exhaustive nearest neighbor search.

    Args:
        points_array: Numpy array of points (N, D)
        query: Query coordinates (D,)

    Returns:
        Tuple of (index, distance); the first of several equidistant rows wins
    """
    dists = exhaustive_distances(points_array, query)
    idx = int(np.argmin(dists))
    return idx, float(dists[idx])


def k_nearest_exhaustive(points_array, query, k):
    """Indices and distances of the ``k`` closest rows, nearest first."""
    dists = exhaustive_distances(points_array, query)
    order = np.argsort(dists, kind='stable')[:k]
    return order, dists[order]


def within_radius_exhaustive(points_array, query, radius):
    """Indices of all rows within ``radius`` of ``query``, in input order."""
    dists = exhaustive_distances(points_array, query)
    return np.nonzero(dists <= radius)[0]
