"""Visualization utilities for neighbor searches."""

import matplotlib.pyplot as plt
import numpy as np

from .point import SimplePoint


def plot_neighbors(points, query, neighbors, radius=None, save_path='neighbors.png', show=False):
    """
    Scatter the first two axes of the indexed points, a query and its neighbors.

    Args:
        points: All indexed points
        query: Query point
        neighbors: Points returned by a search
        radius: Optional search radius, drawn as a circle around the query
        save_path: Path to save the plot
        show: Open a window with the plot
    """
    if query.dimension() < 2:
        raise ValueError("Plotting needs points with at least two dimensions")
    all_xy = SimplePoint.to_array(points)[:, :2]
    fig, ax = plt.subplots(figsize=(8, 8))

    ax.scatter(all_xy[:, 0], all_xy[:, 1], s=8, color='#999999', label='Points')

    if len(neighbors) > 0:
        nb_xy = SimplePoint.to_array(neighbors)[:, :2]
        ax.scatter(nb_xy[:, 0], nb_xy[:, 1], s=30, color='#2E86AB', label='Neighbors')
        # Number neighbors in the order they were returned
        for i, (x, y) in enumerate(nb_xy, 1):
            ax.annotate(str(i), (x, y), textcoords='offset points', xytext=(4, 4), fontsize=8)

    qx, qy = query.coordinate(0), query.coordinate(1)
    ax.scatter([qx], [qy], s=80, marker='x', color='red', label='Query')

    if radius is not None:
        ax.add_patch(plt.Circle((qx, qy), radius, fill=False, color='red',
                                linestyle='--', alpha=0.7))

    ax.set_xlabel('Axis 0', fontsize=12)
    ax.set_ylabel('Axis 1', fontsize=12)
    title = f'{len(neighbors)} neighbors of {query}'
    if radius is not None:
        title += f' (radius {radius})'
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.set_aspect('equal', adjustable='datalim')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='best')

    plt.tight_layout()
    plt.savefig(save_path, dpi=150)
    print(f"Neighbor plot saved to '{save_path}'")
    if show:
        plt.show()
    plt.close(fig)


def plot_search_times(results, save_path='search_times.png', show=False):
    """
    Compare KD-tree and exhaustive search times side-by-side.

    Args:
        results: List of dictionaries from benchmark.check_nearest /
                 check_k_nearest ('description', 'setup_time', 'kd_time',
                 'exhaustive_time', 'passed' keys)
        save_path: Path to save the plot
        show: Open a window with the plot
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    descriptions = [r['description'] for r in results]
    x_pos = np.arange(len(descriptions))
    width = 0.35

    kd_totals = [r['setup_time'] + r['kd_time'] for r in results]
    exhaustive = [r['exhaustive_time'] for r in results]

    ax.bar(x_pos - width / 2, kd_totals, width, color='#2E86AB', alpha=0.8,
           label='KD-tree (setup + search)')
    ax.bar(x_pos + width / 2, exhaustive, width, color='orange', alpha=0.8,
           label='Exhaustive')

    for i, (kd, ex) in enumerate(zip(kd_totals, exhaustive)):
        ax.text(i - width / 2, kd, f'{kd:.2f}s', ha='center', va='bottom', fontsize=9)
        ax.text(i + width / 2, ex, f'{ex:.2f}s', ha='center', va='bottom', fontsize=9)

    ax.set_xticks(x_pos)
    ax.set_xticklabels(descriptions)
    ax.set_ylabel('Time (s)', fontsize=12)
    ax.set_title('Search Time Comparison', fontsize=14, fontweight='bold')
    ax.grid(True, alpha=0.3, axis='y')
    ax.legend(loc='best')

    plt.tight_layout()
    plt.savefig(save_path, dpi=150)
    print(f"\nComparison plot saved to '{save_path}'")
    if show:
        plt.show()
    plt.close(fig)

    print("\nFinal Results:")
    print(f"{'Search':<30} {'KD-tree':<12} {'Exhaustive':<12} {'Passed':<8}")
    print("-" * 62)
    for r, kd in zip(results, kd_totals):
        print(f"{r['description']:<30} {kd:<12.3f} {r['exhaustive_time']:<12.3f} {str(r['passed']):<8}")
