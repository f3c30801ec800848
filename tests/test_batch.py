# -*- coding: utf-8 -*-
"""Tests for parallel batch queries."""

import numpy as np

from kdneighbors import (SimplePoint, find_k_nearest, find_k_nearest_many, find_nearest,
                         find_nearest_many, find_within_radius, find_within_radius_many)


def test_nearest_many_matches_single_queries(tree, queries):
    results = find_nearest_many(tree, queries[:40], n_jobs=2, backend='threading')
    assert results == [find_nearest(tree, q) for q in queries[:40]]


def test_nearest_many_with_processes(tree, queries):
    """Process workers get a pickled copy of the tree and return equal points."""
    results = find_nearest_many(tree, queries[:10], n_jobs=2, backend='loky')
    assert results == [find_nearest(tree, q) for q in queries[:10]]


def test_k_nearest_many_accepts_arrays(tree):
    queries_array = np.array([[0.0, 0.0, 0.0], [4.0, -4.0, 1.0]])
    results = find_k_nearest_many(tree, queries_array, 4, n_jobs=1)
    assert len(results) == 2
    for row, found in zip(queries_array, results):
        assert found == find_k_nearest(tree, SimplePoint(row), 4)


def test_within_radius_many_keeps_query_order(tree, queries):
    results = find_within_radius_many(tree, queries[:20], 2.5, sorted=True,
                                      n_jobs=2, backend='threading')
    for q, found in zip(queries[:20], results):
        assert found == find_within_radius(tree, q, 2.5, sorted=True)
