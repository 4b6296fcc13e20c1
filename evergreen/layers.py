"""
Foliage tiers.

Each layer is a jagged triangle: the left edge climbs from the base to the
apex, the right edge walks back down, and together they close one polygon.
With enough randomness the layer also gets short highlight strokes that
read as branches.

Layer layout (bottom to top, i = 1..N):
    bottom = current_y - layer_height * 0.2
    top = current_y + layer_height
    width = base_width * (1 - (i - 1) / N) ** 0.7
    current_y <- top - layer_height * 0.15
"""

from dataclasses import dataclass

import numpy as np

from evergreen.config import Color, TreeParameters
from evergreen.geometry import edge_point_count, jagged_edge, round_half_up
from evergreen.rng import TreeRandom
from evergreen.shapes import Line, Polygon, Shape

TAPER_EXPONENT = 0.7
BOTTOM_OVERHANG = 0.2  # Layer starts this fraction of a layer height below current_y
OVERLAP = 0.15  # Vertical overlap between successive layers
JAG_SCALE = 0.1  # Jag amplitude as a fraction of layer width
BRANCH_THRESHOLD = 0.1


@dataclass(frozen=True)
class LayerSpec:
    """Deterministic geometry of one tier, before randomness."""

    index: int  # 1-based, bottom layer first
    bottom: float
    top: float
    width_factor: float
    width: float
    color: Color


def width_factor(index: int, layer_count: int) -> float:
    return 1 - (index - 1) / layer_count


def layer_layout(params: TreeParameters) -> list[LayerSpec]:
    """Compute bottom, top, width and color of every layer, bottom to top."""
    theme = params.color_theme
    layer_height = params.layer_height
    current_y = params.trunk_height

    specs = []
    for i in range(1, params.layer_count + 1):
        bottom = current_y - layer_height * BOTTOM_OVERHANG
        top = current_y + layer_height
        factor = width_factor(i, params.layer_count)
        specs.append(LayerSpec(
            index=i,
            bottom=bottom,
            top=top,
            width_factor=factor,
            width=params.base_width * factor ** TAPER_EXPONENT,
            color=theme.foliage_color(i),
        ))
        current_y = top - layer_height * OVERLAP
    return specs


def build_layer(
    y_bottom: float,
    y_top: float,
    width: float,
    fill: Color,
    randomness: float,
    highlight: Color,
    rng: TreeRandom,
) -> list[Shape]:
    """
    Build one foliage tier.

    Args:
        y_bottom: Base of the tier
        y_top: Apex of the tier (> y_bottom)
        width: Target base width
        fill: Foliage color
        randomness: Width variation and jag amount
        highlight: Branch stroke color
        rng: Shared random stream

    Returns:
        [foliage polygon, branch line, ...]; the polygon comes first so the
        branch strokes draw over it
    """
    if randomness > 0:
        width = width * (1 + (rng.next() - 0.5) * randomness)

    num_points = edge_point_count(width)
    jitter = width * JAG_SCALE

    left = jagged_edge(
        y_bottom, y_top,
        lambda progress: -width / 2 * (1 - progress),
        jitter, randomness, num_points, rng,
    )
    right = jagged_edge(
        y_top, y_bottom,
        lambda progress: width / 2 * (1 - progress),
        jitter, randomness, num_points, rng,
        descending=True,
    )

    outline = np.concatenate([left, right])
    shapes: list[Shape] = [Polygon(points=outline, fill=fill, tag="foliage")]
    shapes.extend(build_branches(y_bottom, y_top, width, highlight, randomness, rng))
    return shapes


def branch_count(randomness: float) -> int:
    if randomness < BRANCH_THRESHOLD:
        return 0
    return round_half_up(5 + randomness * 10)


def build_branches(
    y_bottom: float,
    y_top: float,
    width: float,
    color: Color,
    randomness: float,
    rng: TreeRandom,
) -> list[Line]:
    """
    Short highlight strokes inside a tier.

    Each stroke starts near the trunk axis in the lower 80% of the tier and
    reaches outward on a random side, dropping slightly. Nothing is drawn
    (and nothing is drawn from `rng`) when randomness < 0.1.
    """
    layer_height = y_top - y_bottom
    lines = []
    for _ in range(branch_count(randomness)):
        branch_y = y_bottom + rng.next() * layer_height * 0.8
        progress = (branch_y - y_bottom) / layer_height
        max_width = width * (1 - progress) * 0.4

        if rng.next() > 0.5:
            x1 = -rng.next() * max_width * 0.3
            x2 = -rng.next() * max_width
        else:
            x1 = rng.next() * max_width * 0.3
            x2 = rng.next() * max_width

        y2 = branch_y - layer_height * 0.1 * rng.next()
        lines.append(Line(
            p1=(x1, branch_y),
            p2=(x2, y2),
            color=color,
            width=1 + rng.next(),
            tag="branch",
        ))
    return lines
