"""
Reusable geometric constructions: jagged silhouette edges, sampled
ellipses and point-up five-pointed stars.

All point sequences are returned as (N, 2) float arrays.
"""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from evergreen.rng import TreeRandom


# =============================================================================
# ROUNDING
# =============================================================================

def round_half_up(x: float) -> int:
    """Round to nearest integer, halves away from zero (2.5 -> 3)."""
    if x < 0:
        return -int(math.floor(-x + 0.5))
    return int(math.floor(x + 0.5))


# =============================================================================
# JAGGED EDGES
# =============================================================================

MIN_EDGE_POINTS = 20


def edge_point_count(width: float) -> int:
    """Samples per silhouette edge: 20 + round(width * 5), never below 20."""
    return max(MIN_EDGE_POINTS, MIN_EDGE_POINTS + round_half_up(width * 5))


def jagged_edge(
    y_from: float,
    y_to: float,
    base_x: Callable[[float], float],
    jitter_scale: float,
    randomness: float,
    num_points: int,
    rng: TreeRandom,
    descending: bool = False,
) -> np.ndarray:
    """
    Sample a jittered edge between two heights.

    For each of `num_points` evenly spaced samples, x is `base_x(progress)`
    plus a lateral jag

        (rand() - 0.5) * jitter_scale * randomness * (1 - progress * 0.5)

    so the jag halves toward progress = 1. With `descending`, progress runs
    1 -> 0 along the walk, which mirrors an ascending edge.

    One draw is taken per sample regardless of `randomness`.

    Args:
        y_from: Height of the first sample
        y_to: Height of the last sample
        base_x: Shape function of progress in [0, 1]
        jitter_scale: Jag amplitude at randomness = 1
        randomness: Jag multiplier
        num_points: Number of samples (>= 2)
        rng: Shared random stream
        descending: Measure progress as 1 - i / (n - 1)

    Returns:
        (num_points, 2) array of edge points in walk order
    """
    ys = np.linspace(y_from, y_to, num_points)
    xs = np.empty(num_points)
    for i in range(num_points):
        t = i / (num_points - 1)
        progress = 1 - t if descending else t
        jag = (rng.next() - 0.5) * jitter_scale * randomness * (1 - progress * 0.5)
        xs[i] = base_x(progress) + jag
    return np.column_stack([xs, ys])


# =============================================================================
# CIRCLES AND ELLIPSES
# =============================================================================

def circle_points(
    center: tuple[float, float],
    radius_x: float,
    radius_y: float,
    samples: int,
) -> np.ndarray:
    """
    Parametric ellipse sampled at `samples` angles over [0, 2*pi].

    Both endpoints are included, so the first and last points coincide.
    """
    theta = np.linspace(0.0, 2.0 * math.pi, samples)
    return np.column_stack([
        center[0] + radius_x * np.cos(theta),
        center[1] + radius_y * np.sin(theta),
    ])


# =============================================================================
# STAR
# =============================================================================

STAR_TIPS = 5


def star_angles() -> np.ndarray:
    """Ten vertex angles, tip first at pi/2, alternating tip / valley clockwise."""
    angles = np.zeros(STAR_TIPS * 2)
    for i in range(STAR_TIPS):
        outer = math.pi / 2 - i * 2 * math.pi / STAR_TIPS
        angles[2 * i] = outer
        angles[2 * i + 1] = outer - math.pi / STAR_TIPS
    return angles


def star_points(
    center: tuple[float, float],
    outer_radius: float,
    inner_radius: float,
) -> np.ndarray:
    """Closed 10-vertex point-up star with alternating outer / inner radii."""
    angles = star_angles()
    radii = np.tile([outer_radius, inner_radius], STAR_TIPS)
    return np.column_stack([
        center[0] + radii * np.cos(angles),
        center[1] + radii * np.sin(angles),
    ])
