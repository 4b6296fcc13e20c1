"""
Configuration and type definitions for the evergreen tree generator.

This module defines the generation parameters, the fixed color themes and
the control ranges used when sampling random trees.

Parameters:
    height: Foliage height above the trunk
    layer_count: Number of stacked foliage tiers (>= 2)
    trunk_width, trunk_height: Trunk rectangle size
    randomness: Jag / width-variation amount, nominally in [0, 0.5]
    theme: Color theme name (unknown names resolve to Classic)
    show_ornaments, show_star, show_snow: Decoration toggles
    seed: Seed for the per-call PRNG
"""

from dataclasses import dataclass

import numpy as np

Color = tuple[float, float, float]


class InvalidParameter(ValueError):
    """Raised when a numeric tree parameter is out of range."""


@dataclass(frozen=True)
class ColorTheme:
    """
    A named palette.

    `foliage` runs dark to light; layers past the last entry reuse it.
    """

    name: str
    foliage: tuple[Color, Color, Color, Color]
    trunk: Color
    highlight: Color
    star: Color
    background: Color

    def foliage_color(self, layer_index: int) -> Color:
        """Color for a 1-based layer index, clamped to the last foliage shade."""
        return self.foliage[min(layer_index, len(self.foliage)) - 1]


THEMES: dict[str, ColorTheme] = {
    "Classic": ColorTheme(
        name="Classic",
        foliage=((0.1, 0.4, 0.1), (0.15, 0.5, 0.15), (0.2, 0.55, 0.2), (0.25, 0.6, 0.25)),
        trunk=(0.4, 0.25, 0.1),
        highlight=(0.3, 0.6, 0.3),
        star=(1.0, 0.84, 0.0),
        background=(0.85, 0.92, 1.0),
    ),
    "Winter": ColorTheme(
        name="Winter",
        foliage=((0.2, 0.35, 0.3), (0.25, 0.4, 0.35), (0.3, 0.45, 0.4), (0.35, 0.5, 0.45)),
        trunk=(0.35, 0.25, 0.2),
        highlight=(0.5, 0.6, 0.55),
        star=(0.9, 0.95, 1.0),
        background=(0.75, 0.82, 0.9),
    ),
    "Autumn": ColorTheme(
        name="Autumn",
        foliage=((0.3, 0.35, 0.15), (0.35, 0.4, 0.18), (0.4, 0.45, 0.2), (0.45, 0.5, 0.22)),
        trunk=(0.45, 0.3, 0.15),
        highlight=(0.5, 0.55, 0.3),
        star=(1.0, 0.6, 0.2),
        background=(0.95, 0.9, 0.8),
    ),
    "Festive": ColorTheme(
        name="Festive",
        foliage=((0.05, 0.35, 0.1), (0.08, 0.4, 0.12), (0.1, 0.45, 0.15), (0.12, 0.5, 0.18)),
        trunk=(0.5, 0.3, 0.15),
        highlight=(0.2, 0.5, 0.25),
        star=(1.0, 0.9, 0.3),
        background=(0.15, 0.1, 0.2),
    ),
}

THEME_NAMES: tuple[str, ...] = tuple(THEMES)
DEFAULT_THEME = "Classic"


def theme_for(name: str) -> ColorTheme:
    """Look up a theme by name. Unknown names fall back to Classic."""
    return THEMES.get(name, THEMES[DEFAULT_THEME])


# Recommended control ranges: (low, high)
PARAMETER_LIMITS: dict[str, tuple[float, float]] = {
    "height": (3.0, 20.0),
    "layer_count": (2, 10),
    "trunk_width": (0.3, 2.5),
    "trunk_height": (0.5, 4.0),
    "randomness": (0.0, 0.5),
}


@dataclass(frozen=True)
class TreeParameters:
    """
    Immutable input to a single generation call.

    Validation runs on construction and again in `generate`, so an invalid
    value never produces a partial scene.
    """

    height: float = 10.0
    layer_count: int = 5
    trunk_width: float = 1.0
    trunk_height: float = 1.5
    randomness: float = 0.2  # Nominal range [0, 0.5]; higher is allowed
    theme: str = DEFAULT_THEME
    show_ornaments: bool = False
    show_star: bool = True
    show_snow: bool = False
    seed: int = 42

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.height > 0:
            raise InvalidParameter(f"height must be > 0, got {self.height}")
        integral = isinstance(self.layer_count, (int, np.integer))
        if not integral or isinstance(self.layer_count, bool):
            raise InvalidParameter(f"layer_count must be an integer, got {self.layer_count!r}")
        if self.layer_count < 2:
            raise InvalidParameter(f"layer_count must be >= 2, got {self.layer_count}")
        if not self.trunk_width > 0:
            raise InvalidParameter(f"trunk_width must be > 0, got {self.trunk_width}")
        if not self.trunk_height > 0:
            raise InvalidParameter(f"trunk_height must be > 0, got {self.trunk_height}")
        if not self.randomness >= 0:
            raise InvalidParameter(f"randomness must be >= 0, got {self.randomness}")

    @property
    def color_theme(self) -> ColorTheme:
        return theme_for(self.theme)

    @property
    def base_width(self) -> float:
        """Width of the bottom layer before taper and randomness."""
        return self.height * 0.8

    @property
    def layer_height(self) -> float:
        return self.height / self.layer_count


@dataclass(frozen=True)
class RenderStyle:
    """Figure settings used by the matplotlib renderer."""

    figsize: tuple[float, float] = (8.0, 6.0)
    dpi: int = 300
    title: str = "Your Evergreen Tree"
    title_fontsize: int = 14


def random_parameters(seed: int | None = None) -> TreeParameters:
    """
    Sample a complete set of tree parameters.

    Every sampled value lies inside PARAMETER_LIMITS.
    The sampler uses its own generator; the returned parameters carry a
    separate tree seed for the geometry itself.

    Args:
        seed: Seed for the parameter sampler (None = fresh entropy)

    Returns:
        Randomized TreeParameters
    """
    rng = np.random.default_rng(seed)

    height = float(rng.integers(5, 16))
    layer_count = int(rng.integers(3, 9))
    trunk_width = 0.5 + rng.random() * 1.5
    trunk_height = 1.0 + rng.random() * 2.0
    randomness = rng.random() * 0.5
    theme = THEME_NAMES[int(rng.integers(len(THEME_NAMES)))]

    return TreeParameters(
        height=height,
        layer_count=layer_count,
        trunk_width=float(trunk_width),
        trunk_height=float(trunk_height),
        randomness=float(randomness),
        theme=theme,
        show_ornaments=bool(rng.random() > 0.5),
        show_star=bool(rng.random() > 0.3),
        show_snow=bool(rng.random() > 0.5),
        seed=int(rng.integers(1, 10001)),
    )
