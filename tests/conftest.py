# -*- coding: utf-8 -*-
"""Shared fixtures for the kdneighbors test suite."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from kdneighbors import KDTree, SimplePoint


@pytest.fixture
def rng():
    """Seeded random generator so every run sees the same points."""
    return np.random.default_rng(435435435)


@pytest.fixture
def points_array(rng):
    """2000 random 3D points in [-5, 5]."""
    return rng.random((2000, 3)) * 10 - 5


@pytest.fixture
def points(points_array):
    return SimplePoint.from_array(points_array)


@pytest.fixture
def tree(points):
    return KDTree(points)


@pytest.fixture
def queries(rng):
    """200 random 3D query points in [-10, 10]."""
    return SimplePoint.from_array(rng.random((200, 3)) * 20 - 10)


@pytest.fixture
def three_points():
    return [
        SimplePoint([1, 1, 0]),
        SimplePoint([0, 1, 1]),
        SimplePoint([1, 0, 1]),
    ]
