"""
Drawable shapes and the scene container.

The generator's only output is an ordered list of these shapes. List order
is paint order: later shapes are drawn on top of earlier ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from evergreen.config import Color
from evergreen.geometry import circle_points


@dataclass(eq=False)
class Polygon:
    """Filled closed polygon. `points` is an (N, 2) array."""

    points: np.ndarray
    fill: Color
    edge_color: Color | None = None
    edge_width: float = 0.0
    opacity: float = 1.0
    tag: str = ""

    kind = "polygon"

    def to_dict(self) -> dict:
        return {
            "type": self.kind,
            "tag": self.tag,
            "points": [[float(x), float(y)] for x, y in self.points],
            "fill": list(self.fill),
            "edge_color": list(self.edge_color) if self.edge_color is not None else None,
            "edge_width": self.edge_width,
            "opacity": self.opacity,
        }


@dataclass(eq=False)
class Line:
    """Straight stroke from p1 to p2."""

    p1: tuple[float, float]
    p2: tuple[float, float]
    color: Color
    width: float = 1.0
    tag: str = ""

    kind = "line"

    def to_dict(self) -> dict:
        return {
            "type": self.kind,
            "tag": self.tag,
            "p1": [float(self.p1[0]), float(self.p1[1])],
            "p2": [float(self.p2[0]), float(self.p2[1])],
            "color": list(self.color),
            "width": self.width,
        }


@dataclass(eq=False)
class Ellipse:
    """Axis-aligned filled ellipse."""

    center: tuple[float, float]
    radius_x: float
    radius_y: float
    fill: Color
    opacity: float = 1.0
    tag: str = ""

    kind = "ellipse"

    def points(self, samples: int = 20) -> np.ndarray:
        """Polygon approximation of the outline."""
        return circle_points(self.center, self.radius_x, self.radius_y, samples)

    def to_dict(self) -> dict:
        return {
            "type": self.kind,
            "tag": self.tag,
            "center": [float(self.center[0]), float(self.center[1])],
            "radius_x": self.radius_x,
            "radius_y": self.radius_y,
            "fill": list(self.fill),
            "opacity": self.opacity,
        }


Shape = Polygon | Line | Ellipse


@dataclass(frozen=True)
class Bounds:
    """View rectangle of a scene."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def to_dict(self) -> dict[str, float]:
        return {
            "min_x": self.min_x,
            "max_x": self.max_x,
            "min_y": self.min_y,
            "max_y": self.max_y,
        }


@dataclass
class Scene:
    """Ordered shapes plus view bounds, produced fresh by each `generate` call."""

    shapes: list[Shape] = field(default_factory=list)
    bounds: Bounds = field(default_factory=lambda: Bounds(-1.0, 1.0, -0.5, 1.0))

    def with_tag(self, tag: str) -> list[Shape]:
        return [s for s in self.shapes if s.tag == tag]

    def count(self, tag: str) -> int:
        return len(self.with_tag(tag))

    def to_dict(self) -> dict:
        return {
            "shapes": [s.to_dict() for s in self.shapes],
            "bounds": self.bounds.to_dict(),
        }
