#!/usr/bin/env python3
"""
Main entry point for KD-tree neighbor search.

This script provides a command-line interface for checking the tree against
exhaustive search, running the small demo, and querying points loaded from
a file.
"""

import argparse
import sys

from kdneighbors import (KDTree, KDTreeError, SimplePoint, find_k_nearest, find_nearest,
                         find_within_radius, points_from_file)
from kdneighbors.benchmark import DEFAULT_SEED, check_k_nearest, check_nearest
from kdneighbors.visualization import plot_neighbors, plot_search_times


def run_check(dimensions=3, num_points=100000, num_queries=1000, neighbors=3,
              seed=DEFAULT_SEED, plot=False):
    """Check nearest and k-nearest searches against exhaustive search."""
    results = [
        check_k_nearest(neighbors, dimensions, num_points, num_queries, seed=seed),
        check_nearest(dimensions, num_points, num_queries, seed=seed),
    ]
    for result in results:
        status = "successful" if result['passed'] else "FAILED"
        print(f"{result['description']} test {status}")

    if plot:
        plot_search_times(results)

    return all(r['passed'] for r in results)


def run_demo():
    """Two nearest neighbors of (2, 0, 0) among three points."""
    points = [
        SimplePoint([1, 1, 0]),
        SimplePoint([0, 1, 1]),
        SimplePoint([1, 0, 1]),
    ]
    tree = KDTree(points)
    print(f"Tree: {tree.describe()}")

    reference = SimplePoint([2, 0, 0])
    nearest = find_k_nearest(tree, reference, 2)
    for point in nearest:
        print(f"{point} (distance: {reference.distance_to(point):.4f})")
    return nearest


def run_query(filepath, coordinates, k=None, radius=None, sort=False, plot=False):
    """Load points from a file and run one query against them."""
    print(f"\nLoading points from {filepath}...")
    points = points_from_file(filepath)
    print(f"  Points: {len(points):,}")

    tree = KDTree(points)
    print(f"  {tree!r}")

    query = SimplePoint(coordinates)
    if radius is not None:
        print(f"\nPoints within {radius} of {query}:")
        found = find_within_radius(tree, query, radius, sorted=sort)
    elif k is not None:
        print(f"\n{k} nearest neighbors of {query}:")
        found = find_k_nearest(tree, query, k)
    else:
        print(f"\nNearest neighbor of {query}:")
        found = [find_nearest(tree, query)]

    for point in found:
        print(f"  {point} (distance: {query.distance_to(point):.4f})")
    print(f"Found: {len(found)}")

    if plot:
        plot_neighbors(points, query, found, radius=radius)
    return found


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='KD-tree neighbor search',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Compare the tree with exhaustive search
  python run_kdtree.py check

  # Smaller, faster check with a timing plot
  python run_kdtree.py check --points 10000 --queries 100 --plot

  # Two nearest neighbors of (2, 0, 0) among three points
  python run_kdtree.py demo

  # Nearest neighbor of a point among points loaded from a file
  python run_kdtree.py query --file points.txt --point 0 0 0

  # All points within a radius, sorted by distance
  python run_kdtree.py query --file scene.ply --point 1 2 3 --radius 5 --sorted
        """
    )

    subparsers = parser.add_subparsers(dest='mode', help='Mode')

    check_parser = subparsers.add_parser('check', help='Check the tree against exhaustive search')
    check_parser.add_argument('--dimensions', type=int, default=3, help='Point dimension')
    check_parser.add_argument('--points', type=int, default=100000, help='Number of points')
    check_parser.add_argument('--queries', type=int, default=1000, help='Number of queries')
    check_parser.add_argument('--neighbors', type=int, default=3,
                              help='k for the k-nearest neighbors check')
    check_parser.add_argument('--seed', type=int, default=DEFAULT_SEED, help='Random seed')
    check_parser.add_argument('--plot', action='store_true', help='Plot search times')

    subparsers.add_parser('demo', help='Run the three point demo')

    query_parser = subparsers.add_parser('query', help='Query points loaded from a file')
    query_parser.add_argument('--file', type=str, required=True,
                              help='Points file (.npy, .txt, .csv, .xyz, .ply, .pcd)')
    query_parser.add_argument('--point', type=float, nargs='+', required=True,
                              help='Query coordinates')
    group = query_parser.add_mutually_exclusive_group()
    group.add_argument('--nearest', action='store_true', help='Nearest neighbor (default)')
    group.add_argument('--k', type=int, default=None, help='Number of nearest neighbors')
    group.add_argument('--radius', type=float, default=None, help='Search radius')
    query_parser.add_argument('--sorted', action='store_true',
                              help='Sort radius results by distance')
    query_parser.add_argument('--plot', action='store_true', help='Plot the result')

    args = parser.parse_args(argv)

    # Default to the demo if no mode is given
    if args.mode is None:
        print("No mode specified. Running the demo...")
        run_demo()
        return 0

    try:
        if args.mode == 'check':
            passed = run_check(args.dimensions, args.points, args.queries,
                               args.neighbors, args.seed, args.plot)
            return 0 if passed else 1
        elif args.mode == 'demo':
            run_demo()
        elif args.mode == 'query':
            run_query(args.file, args.point, k=args.k, radius=args.radius,
                      sort=args.sorted, plot=args.plot)
    except (KDTreeError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}")
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
