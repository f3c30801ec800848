"""Turn images, arrays and point cloud files into point entities."""

import os

import numpy as np

from .point import SimplePoint


def points_from_mask(image, threshold=127):
    """
    One 2D point per pixel brighter than ``threshold``.

    Args:
        image: 2D array (rows are y, columns are x)
        threshold: Pixels strictly above this value are kept

    Returns:
        List of SimplePoint(x, y), scanned row by row
    """
    image = np.asarray(image)
    if image.ndim != 2:
        raise ValueError(f"Expected a 2D image, got shape {image.shape}")
    ys, xs = np.nonzero(image > threshold)
    return [SimplePoint((x, y)) for y, x in zip(ys, xs)]


def points_from_array(array):
    """
    Convert an array to points.

    Args:
        array: (N, D) array, or a 1D array of N values for 1D points

    Returns:
        List of N SimplePoint objects
    """
    array = np.asarray(array, dtype=np.float64)
    if array.ndim == 1:
        array = array[:, np.newaxis]
    return SimplePoint.from_array(array)


def _load_point_cloud(filepath):
    # Open3D is only needed for point cloud formats
    import open3d as o3d

    pcd = o3d.io.read_point_cloud(filepath)
    return np.asarray(pcd.points)


def _load_text(filepath):
    with open(filepath) as f:
        first = f.readline()
    delimiter = ',' if ',' in first else None
    return np.loadtxt(filepath, delimiter=delimiter, ndmin=2)


def points_from_file(filepath):
    """
    Load points from file.

    Supported formats: .npy, .txt/.csv/.xyz (one point per line) and
    .ply/.pcd point clouds (read with Open3D).

    Args:
        filepath: Path to the file

    Returns:
        List of SimplePoint objects
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"File {filepath} not found")

    ext = os.path.splitext(filepath)[1].lower()
    if ext == '.npy':
        array = np.load(filepath)
    elif ext in ('.txt', '.csv', '.xyz'):
        array = _load_text(filepath)
    elif ext in ('.ply', '.pcd'):
        array = _load_point_cloud(filepath)
    else:
        raise ValueError(f"Unknown point file format: {ext}")

    return points_from_array(array)
