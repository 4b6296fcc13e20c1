"""
Decorations drawn over the foliage: snow, ornaments and the top star.

Snow and ornaments are scattered inside a cone that narrows with height
above the trunk:

    progress = (y - trunk_height) / height
    max_x = base_width / 2 * (1 - progress) * spread

Snow uses spread 0.8 over the lower 90% of the tree, ornaments use 0.7
over the lower 85%. The star is deterministic and draws nothing from the
random stream.
"""

import numpy as np

from evergreen.config import Color
from evergreen.geometry import circle_points, star_points
from evergreen.rng import TreeRandom
from evergreen.shapes import Ellipse, Polygon, Shape

SNOW_COLOR: Color = (0.95, 0.97, 1.0)
SNOW_OPACITY = 0.8
GROUND_SNOW_POINTS = 50
GROUND_LEVEL = -0.5

ORNAMENT_COLORS: tuple[Color, ...] = (
    (1.0, 0.0, 0.0),
    (1.0, 0.84, 0.0),
    (0.0, 0.0, 1.0),
    (0.5, 0.0, 0.5),
    (1.0, 0.5, 0.0),
    (0.0, 0.8, 0.8),
)
ORNAMENT_EDGE: Color = (0.2, 0.2, 0.2)
ORNAMENT_SAMPLES = 30
SHINE_SAMPLES = 15
SHINE_OPACITY = 0.6

STAR_EDGE: Color = (0.8, 0.6, 0.0)
STAR_INNER_RATIO = 0.4
GLOW_RINGS = 3
GLOW_OPACITY = 0.1


def snow_patch_count(layer_count: int) -> int:
    return 30 + layer_count * 10


def ornament_count(layer_count: int) -> int:
    return 10 + layer_count * 3


def _cone_position(
    rng: TreeRandom,
    height: float,
    trunk_height: float,
    base_width: float,
    height_range: float,
    spread: float,
) -> tuple[float, float]:
    y = trunk_height + rng.next() * height * height_range
    progress = (y - trunk_height) / height
    max_x = base_width / 2 * (1 - progress) * spread
    x = (rng.next() - 0.5) * 2 * max_x
    return x, y


# =============================================================================
# SNOW
# =============================================================================

def build_snow(
    height: float,
    trunk_height: float,
    base_width: float,
    layer_count: int,
    rng: TreeRandom,
) -> list[Shape]:
    """
    Snow patches on the foliage followed by one ground drift.

    Patches are flattened ellipses (radius_y = radius_x / 2) of radius
    0.1-0.3. The drift is a 50-point wavy line

        y = 0.3 * sin(2x) * rand() + 0.1,  x in [-base_width, base_width]

    closed down to y = -0.5 at both ends.
    """
    shapes: list[Shape] = []
    for _ in range(snow_patch_count(layer_count)):
        x, y = _cone_position(rng, height, trunk_height, base_width, 0.9, 0.8)
        radius = 0.1 + rng.next() * 0.2
        shapes.append(Ellipse(
            center=(x, y),
            radius_x=radius,
            radius_y=radius * 0.5,
            fill=SNOW_COLOR,
            opacity=SNOW_OPACITY,
            tag="snow",
        ))

    ground_x = np.linspace(-base_width, base_width, GROUND_SNOW_POINTS)
    waves = np.array([rng.next() for _ in range(GROUND_SNOW_POINTS)])
    ground_y = 0.3 * np.sin(ground_x * 2) * waves + 0.1
    outline = np.vstack([
        np.column_stack([ground_x, ground_y]),
        [[base_width, GROUND_LEVEL], [-base_width, GROUND_LEVEL]],
    ])
    shapes.append(Polygon(points=outline, fill=SNOW_COLOR, tag="ground_snow"))
    return shapes


# =============================================================================
# ORNAMENTS
# =============================================================================

def build_ornaments(
    height: float,
    trunk_height: float,
    base_width: float,
    layer_count: int,
    rng: TreeRandom,
) -> list[Shape]:
    """
    Round baubles, each followed by its shine.

    Each ornament has radius 0.15-0.25, a palette color, a thin dark edge
    and a white highlight of a quarter its radius offset up and to the left.
    """
    shapes: list[Shape] = []
    for _ in range(ornament_count(layer_count)):
        x, y = _cone_position(rng, height, trunk_height, base_width, 0.85, 0.7)
        radius = 0.15 + rng.next() * 0.1
        color = ORNAMENT_COLORS[rng.choice_index(len(ORNAMENT_COLORS))]

        shapes.append(Polygon(
            points=circle_points((x, y), radius, radius, ORNAMENT_SAMPLES),
            fill=color,
            edge_color=ORNAMENT_EDGE,
            edge_width=0.5,
            tag="ornament",
        ))

        shine_center = (x - radius * 0.3, y + radius * 0.3)
        shine_radius = radius * 0.25
        shapes.append(Polygon(
            points=circle_points(shine_center, shine_radius, shine_radius, SHINE_SAMPLES),
            fill=(1.0, 1.0, 1.0),
            opacity=SHINE_OPACITY,
            tag="ornament_shine",
        ))
    return shapes


# =============================================================================
# STAR
# =============================================================================

def build_star(center: tuple[float, float], size: float, color: Color) -> list[Shape]:
    """
    Five-pointed star plus three soft glow halos.

    Halo r (1..3) uses outer radius size * (1 + 0.2r) and inner radius
    0.4 * size * (1 + 0.1r) at opacity 0.1.
    """
    outer = size
    inner = size * STAR_INNER_RATIO

    shapes: list[Shape] = [Polygon(
        points=star_points(center, outer, inner),
        fill=color,
        edge_color=STAR_EDGE,
        edge_width=1.5,
        tag="star",
    )]
    for r in range(1, GLOW_RINGS + 1):
        shapes.append(Polygon(
            points=star_points(center, outer * (1 + r * 0.2), inner * (1 + r * 0.1)),
            fill=color,
            opacity=GLOW_OPACITY,
            tag="star_glow",
        ))
    return shapes
