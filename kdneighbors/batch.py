"""Parallel queries of many points against one completed KD-tree."""

import numpy as np
from joblib import Parallel, delayed

from .knearest import find_k_nearest
from .nearest import find_nearest
from .point import SimplePoint
from .radius import find_within_radius


def _as_queries(queries):
    if isinstance(queries, np.ndarray):
        return SimplePoint.from_array(queries)
    return list(queries)


def _run(func, tree, queries, args, n_jobs, backend):
    # The tree is never modified by a query, so workers can share it
    return Parallel(n_jobs=n_jobs, backend=backend)(
        delayed(func)(tree, q, *args) for q in _as_queries(queries)
    )


def find_nearest_many(tree, queries, n_jobs=4, backend='loky'):
    """
    Nearest neighbor of every query point, using parallel processing.

    Args:
        tree: Completed KDTree
        queries: Sequence of point entities or an (M, D) array
        n_jobs: Number of joblib workers
        backend: joblib backend ('loky', 'threading', ...)

    Returns:
        List of M points, in query order
    """
    return _run(find_nearest, tree, queries, (), n_jobs, backend)


def find_k_nearest_many(tree, queries, k, n_jobs=4, backend='loky'):
    """The ``k`` nearest neighbors of every query point, one list per query."""
    return _run(find_k_nearest, tree, queries, (k,), n_jobs, backend)


def find_within_radius_many(tree, queries, radius, sorted=False, n_jobs=4, backend='loky'):
    """All points within ``radius`` of every query point, one list per query."""
    return _run(find_within_radius, tree, queries, (radius, sorted), n_jobs, backend)
