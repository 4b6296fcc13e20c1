"""
matplotlib renderer for generated scenes.

Shapes are added with zorder equal to their position in the scene, so the
figure preserves the generator's paint order.
"""

from __future__ import annotations

import logging

import matplotlib.pyplot as plt
from matplotlib.patches import Ellipse as MplEllipse
from matplotlib.patches import Polygon as MplPolygon

from evergreen.config import ColorTheme, RenderStyle, TreeParameters, theme_for
from evergreen.generator import generate
from evergreen.shapes import Ellipse, Line, Polygon, Scene

logger = logging.getLogger(__name__)


def draw_shape(ax: plt.Axes, shape, zorder: float) -> None:
    """Add one scene shape to the axes."""
    if isinstance(shape, Polygon):
        ax.add_patch(MplPolygon(
            shape.points,
            closed=True,
            facecolor=shape.fill,
            edgecolor=shape.edge_color if shape.edge_color is not None else "none",
            linewidth=shape.edge_width if shape.edge_color is not None else 0.0,
            alpha=shape.opacity,
            zorder=zorder,
        ))
    elif isinstance(shape, Ellipse):
        ax.add_patch(MplEllipse(
            shape.center,
            2 * shape.radius_x,
            2 * shape.radius_y,
            facecolor=shape.fill,
            edgecolor="none",
            alpha=shape.opacity,
            zorder=zorder,
        ))
    elif isinstance(shape, Line):
        ax.plot(
            [shape.p1[0], shape.p2[0]],
            [shape.p1[1], shape.p2[1]],
            color=shape.color,
            linewidth=shape.width,
            zorder=zorder,
        )
    else:
        raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def render_scene(
    scene: Scene,
    theme: ColorTheme | None = None,
    style: RenderStyle | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """
    Render a scene onto a new figure.

    Args:
        scene: Generated scene
        theme: Supplies the background color (Classic if None)
        style: Figure settings

    Returns:
        (figure, axes) tuple
    """
    if theme is None:
        theme = theme_for("Classic")
    if style is None:
        style = RenderStyle()

    fig, ax = plt.subplots(figsize=style.figsize)
    fig.patch.set_facecolor(theme.background)
    ax.set_facecolor(theme.background)

    for i, shape in enumerate(scene.shapes):
        draw_shape(ax, shape, zorder=i + 1)

    bounds = scene.bounds
    ax.set_aspect("equal")
    ax.set_xlim(bounds.min_x, bounds.max_x)
    ax.set_ylim(bounds.min_y, bounds.max_y)
    ax.set_xticks([])
    ax.set_yticks([])
    for spine in ax.spines.values():
        spine.set_visible(False)
    if style.title:
        ax.set_title(style.title, fontsize=style.title_fontsize)

    return fig, ax


def save_scene(
    scene: Scene,
    filepath: str,
    theme: ColorTheme | None = None,
    style: RenderStyle | None = None,
) -> None:
    """Render and save a scene; the format follows the file extension."""
    if style is None:
        style = RenderStyle()
    fig, _ = render_scene(scene, theme, style)
    try:
        fig.savefig(filepath, dpi=style.dpi, facecolor=fig.get_facecolor(), bbox_inches="tight")
    finally:
        plt.close(fig)
    logger.info("Saved %d shapes to %s", len(scene.shapes), filepath)


def render_tree(
    parameters: TreeParameters | None = None,
    style: RenderStyle | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Generate and render a tree in its own theme."""
    if parameters is None:
        parameters = TreeParameters()
    return render_scene(generate(parameters), parameters.color_theme, style)


def save_tree(
    filepath: str,
    parameters: TreeParameters | None = None,
    style: RenderStyle | None = None,
) -> None:
    """Generate, render and save a tree."""
    if parameters is None:
        parameters = TreeParameters()
    save_scene(generate(parameters), filepath, parameters.color_theme, style)
