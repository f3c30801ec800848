# -*- coding: utf-8 -*-
"""Tests for the plotting helpers."""

import os

import pytest

from kdneighbors import SimplePoint, find_within_radius, plot_neighbors, plot_search_times


def test_plot_neighbors_writes_file(tmp_path, tree, points):
    query = SimplePoint([0.0, 0.0, 0.0])
    found = find_within_radius(tree, query, 1.5, sorted=True)
    save_path = str(tmp_path / "neighbors.png")
    plot_neighbors(points, query, found, radius=1.5, save_path=save_path)
    assert os.path.exists(save_path)


def test_plot_neighbors_without_results(tmp_path, points):
    save_path = str(tmp_path / "empty.png")
    plot_neighbors(points, SimplePoint([50.0, 50.0, 50.0]), [], save_path=save_path)
    assert os.path.exists(save_path)


def test_plot_neighbors_needs_two_axes(tmp_path):
    with pytest.raises(ValueError):
        plot_neighbors([SimplePoint([1.0])], SimplePoint([0.0]), [],
                       save_path=str(tmp_path / "x.png"))


def test_plot_search_times(tmp_path, capsys):
    results = [
        {'description': 'Nearest neighbor', 'setup_time': 0.5, 'kd_time': 0.2,
         'exhaustive_time': 3.0, 'passed': True},
        {'description': '3-nearest neighbors', 'setup_time': 0.5, 'kd_time': 0.4,
         'exhaustive_time': 3.5, 'passed': True},
    ]
    save_path = str(tmp_path / "times.png")
    plot_search_times(results, save_path=save_path)
    assert os.path.exists(save_path)
    assert "Nearest neighbor" in capsys.readouterr().out
