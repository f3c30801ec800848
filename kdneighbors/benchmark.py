"""Regression check of KD-tree searches against exhaustive search, with timings."""

import time

import numpy as np

from .kdtree import KDTree
from .knearest import find_k_nearest
from .nearest import find_nearest
from .point import SimplePoint
from .utils import k_nearest_exhaustive, nearest_neighbor_exhaustive, random_points

DEFAULT_SEED = 435435435


def _setup(num_dimensions, num_points, num_tests, min_value, max_value, seed):
    rng = np.random.default_rng(seed)
    points_array = random_points(rng, num_points, num_dimensions, min_value, max_value)
    # queries also fall outside the populated box
    queries_array = random_points(rng, num_tests, num_dimensions, 2 * min_value, 2 * max_value)

    start = time.time()
    tree = KDTree.from_array(points_array)
    setup_time = time.time() - start
    return points_array, queries_array, tree, setup_time


def _summary(title, result):
    print(f"\n{'='*70}")
    print(title)
    print(f"{'='*70}")
    print(f"KD-tree setup:           {result['setup_time']:.3f}s")
    print(f"KD-tree search:          {result['kd_time']:.3f}s")
    print(f"KD-tree all together:    {result['setup_time'] + result['kd_time']:.3f}s")
    print(f"Exhaustive search:       {result['exhaustive_time']:.3f}s")
    print(f"Result:                  {'passed' if result['passed'] else 'FAILED'}")
    print(f"{'='*70}\n")


def check_nearest(num_dimensions=3, num_points=100000, num_tests=1000,
                  min_value=-5.0, max_value=5.0, seed=DEFAULT_SEED):
    """
    Compare find_nearest with an exhaustive search for random queries.

    Args:
        num_dimensions: Dimension of the points
        num_points: Number of indexed points
        num_tests: Number of queries
        min_value: Lower bound of point coordinates
        max_value: Upper bound of point coordinates
        seed: Seed of the random generator

    Returns:
        Dictionary with 'passed', 'setup_time', 'kd_time', 'exhaustive_time'
        and 'mismatch' (None, or details of the first disagreeing query)
    """
    points_array, queries_array, tree, setup_time = _setup(
        num_dimensions, num_points, num_tests, min_value, max_value, seed
    )
    queries = SimplePoint.from_array(queries_array)

    start = time.time()
    kd_results = [find_nearest(tree, q) for q in queries]
    kd_time = time.time() - start

    start = time.time()
    exhaustive = [nearest_neighbor_exhaustive(points_array, q.p) for q in queries]
    exhaustive_time = time.time() - start

    mismatch = None
    for query, found, (idx, dist) in zip(queries, kd_results, exhaustive):
        if not np.isclose(query.distance_to(found), dist, rtol=1e-9, atol=1e-12):
            mismatch = {
                'query': str(query),
                'kd_tree': str(found),
                'kd_distance': query.distance_to(found),
                'exhaustive': str(SimplePoint(points_array[idx])),
                'exhaustive_distance': dist,
            }
            print(f"Nearest neighbor to: {mismatch['query']}")
            print(f"KD-Tree says: {mismatch['kd_tree']} ({mismatch['kd_distance']})")
            print(f"Exhaustive says: {mismatch['exhaustive']} ({mismatch['exhaustive_distance']})")
            break

    result = {
        'description': 'Nearest neighbor',
        'passed': mismatch is None,
        'setup_time': setup_time,
        'kd_time': kd_time,
        'exhaustive_time': exhaustive_time,
        'mismatch': mismatch,
    }
    _summary(f"NEAREST NEIGHBOR CHECK - {num_points:,} points, {num_tests:,} queries", result)
    return result


def check_k_nearest(neighbors=3, num_dimensions=3, num_points=100000, num_tests=1000,
                    min_value=-5.0, max_value=5.0, seed=DEFAULT_SEED):
    """
    Compare find_k_nearest with an exhaustive search for random queries.

    The tree passes when, for every query, the distances of its k results
    match the k smallest exhaustive distances in order. Returns the same
    dictionary as check_nearest.
    """
    points_array, queries_array, tree, setup_time = _setup(
        num_dimensions, num_points, num_tests, min_value, max_value, seed
    )
    queries = SimplePoint.from_array(queries_array)

    start = time.time()
    kd_results = [find_k_nearest(tree, q, neighbors) for q in queries]
    kd_time = time.time() - start

    start = time.time()
    exhaustive = [k_nearest_exhaustive(points_array, q.p, neighbors) for q in queries]
    exhaustive_time = time.time() - start

    mismatch = None
    for query, found, (order, dists) in zip(queries, kd_results, exhaustive):
        kd_dists = np.array([query.distance_to(p) for p in found])
        if kd_dists.shape != dists.shape or not np.allclose(kd_dists, dists, rtol=1e-9, atol=1e-12):
            mismatch = {
                'query': str(query),
                'kd_tree': [str(p) for p in found],
                'exhaustive': [str(SimplePoint(points_array[i])) for i in order],
            }
            for j, (a, b) in enumerate(zip(mismatch['kd_tree'], mismatch['exhaustive']), 1):
                print(f"{j} - Nearest neighbor to: {mismatch['query']}")
                print(f"KD-Tree says: {a}")
                print(f"Exhaustive says: {b}")
            break

    result = {
        'description': f'{neighbors}-nearest neighbors',
        'passed': mismatch is None,
        'setup_time': setup_time,
        'kd_time': kd_time,
        'exhaustive_time': exhaustive_time,
        'mismatch': mismatch,
    }
    _summary(f"{neighbors}-NEAREST NEIGHBORS CHECK - {num_points:,} points, {num_tests:,} queries",
             result)
    return result
