"""
Trunk rectangle with vertical bark strokes.
"""

import numpy as np

from evergreen.config import Color
from evergreen.geometry import round_half_up
from evergreen.rng import TreeRandom
from evergreen.shapes import Line, Polygon, Shape

BARK_COLOR: Color = (0.3, 0.2, 0.1)
BARK_LINE_WIDTH = 0.5
BARK_INSET = 0.1


def bark_line_count(width: float) -> int:
    return round_half_up(width * 3)


def build_trunk(width: float, height: float, color: Color, rng: TreeRandom) -> list[Shape]:
    """
    Build the trunk shapes.

    The rectangle spans [-w/2, w/2] x [0, h]. Bark lines are spaced evenly
    across the width, each shifted by (rand() - 0.5) * width * 0.1, and run
    from y = 0.1 to y = height - 0.1. Narrow trunks (width < ~0.17) get none.

    Returns:
        [trunk polygon, bark line, ...]
    """
    rect = np.array([
        [-width / 2, 0.0],
        [width / 2, 0.0],
        [width / 2, height],
        [-width / 2, height],
    ])
    shapes: list[Shape] = [Polygon(points=rect, fill=color, tag="trunk")]

    num_lines = bark_line_count(width)
    for i in range(1, num_lines + 1):
        x = -width / 2 + (i - 0.5) * width / num_lines
        x = x + (rng.next() - 0.5) * width * 0.1
        shapes.append(Line(
            p1=(x, BARK_INSET),
            p2=(x, height - BARK_INSET),
            color=BARK_COLOR,
            width=BARK_LINE_WIDTH,
            tag="bark",
        ))
    return shapes
