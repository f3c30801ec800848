# -*- coding: utf-8 -*-
"""Tests for points, tree nodes and tree construction."""

from collections import Counter

import numpy as np
import pytest

from kdneighbors import (DimensionMismatchError, EmptyInputError, Internal, KDTree, Leaf,
                         SimplePoint, build_tree)
from kdneighbors.node import iter_internal, iter_leaves


def test_simple_point_basics():
    """Coordinates are copied and distance is Euclidean."""
    coords = np.array([3.0, 4.0])
    p = SimplePoint(coords)
    coords[0] = 100.0
    assert p.coordinate(0) == 3.0
    assert p.dimension() == 2
    assert p.distance_to(SimplePoint([0, 0])) == pytest.approx(5.0)
    assert str(p) == "(3.0, 4.0)"


def test_simple_point_equality_and_hash():
    assert SimplePoint([1, 2, 3]) == SimplePoint([1.0, 2.0, 3.0])
    assert SimplePoint([1, 2, 3]) != SimplePoint([1, 2, 4])
    assert SimplePoint([1, 2]) != SimplePoint([1, 2, 0])
    assert len({SimplePoint([1, 2]), SimplePoint([1, 2])}) == 1


def test_simple_point_array_round_trip(points_array):
    points = SimplePoint.from_array(points_array)
    assert len(points) == len(points_array)
    np.testing.assert_array_equal(SimplePoint.to_array(points), points_array)


def test_from_array_rejects_1d():
    with pytest.raises(ValueError):
        SimplePoint.from_array([1.0, 2.0, 3.0])


def test_every_point_in_exactly_one_leaf(points, tree):
    """Leaves and input points are the same multiset."""
    leaves = [leaf.point for leaf in iter_leaves(tree.root)]
    assert len(leaves) == len(points)
    assert Counter(map(id, leaves)) == Counter(map(id, points))
    assert len(tree) == len(points)
    assert tree.leaves() == leaves


def test_partition_invariant(tree):
    """Left leaves are <= split and right leaves are >= split on the node's axis."""
    for node, depth in iter_internal(tree.root):
        assert node.axis == depth % tree.dimension
        for leaf in iter_leaves(node.left):
            assert leaf.point.coordinate(node.axis) <= node.split
        for leaf in iter_leaves(node.right):
            assert leaf.point.coordinate(node.axis) >= node.split


def test_tree_is_balanced(tree):
    # 2000 points need 11 levels of splits plus the leaf level
    assert tree.depth() <= 12


def test_duplicates_are_kept(three_points):
    points = three_points + [SimplePoint([1, 1, 0]), SimplePoint([1, 1, 0])]
    tree = KDTree(points)
    assert len(tree.leaves()) == 5
    assert sum(1 for p in tree.leaves() if p == SimplePoint([1, 1, 0])) == 3


def test_all_identical_points_terminate():
    points = [SimplePoint([2.0, 2.0]) for _ in range(50)]
    tree = KDTree(points)
    assert len(tree.leaves()) == 50


def test_build_is_deterministic(points):
    assert build_tree(points) == build_tree(points)


def test_single_point_is_a_leaf():
    p = SimplePoint([1.0, 2.0, 3.0])
    root = build_tree([p])
    assert isinstance(root, Leaf)
    assert root.point is p


def test_two_points_split_on_first_axis():
    a, b = SimplePoint([5.0, 0.0]), SimplePoint([1.0, 9.0])
    root = build_tree([a, b])
    assert isinstance(root, Internal)
    assert root.axis == 0
    assert root.split == 1.0
    assert root.left == Leaf(b)
    assert root.right == Leaf(a)


def test_nodes_are_immutable(tree):
    with pytest.raises(AttributeError):
        tree.root.split = 0.0


def test_empty_input():
    with pytest.raises(EmptyInputError):
        build_tree([])
    with pytest.raises(EmptyInputError):
        KDTree([])


def test_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        KDTree([SimplePoint([1, 2]), SimplePoint([1, 2, 3])])


def test_empty_input_is_a_value_error():
    """Callers that only know about ValueError still catch build errors."""
    with pytest.raises(ValueError):
        KDTree([])


def test_from_array(points_array):
    tree = KDTree.from_array(points_array)
    assert tree.dimension == 3
    assert len(tree) == len(points_array)


def test_describe(three_points):
    tree = KDTree(three_points)
    assert tree.describe() == "[[(0.0, 1.0, 1.0) |{1.0} (1.0, 1.0, 0.0)] |{1.0} (1.0, 0.0, 1.0)]"
    assert repr(tree) == "KDTree(size=3, dimension=3, depth=3)"
