"""
Exporters for trees and scenes.

`export_script` writes a standalone Python script for a parameter set. The
script does not copy the algorithm and does not import this package: it
replays the shapes of the generated scene as plain matplotlib calls, in
paint order, so it runs anywhere numpy and matplotlib are installed and
always draws exactly what `generate` produced.

`scene_to_json` serializes a generated scene through the output schema.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from evergreen.config import Color, RenderStyle, TreeParameters
from evergreen.generator import generate
from evergreen.schema import OutputSchema
from evergreen.shapes import Ellipse, Line, Polygon, Scene

logger = logging.getLogger(__name__)

PARAMETER_FIELDS = (
    "height",
    "layer_count",
    "trunk_width",
    "trunk_height",
    "randomness",
    "theme",
    "show_ornaments",
    "show_star",
    "show_snow",
    "seed",
)


def _rgb(color: Color) -> str:
    return f"({color[0]:.3f}, {color[1]:.3f}, {color[2]:.3f})"


def _num(value: float) -> str:
    return repr(float(value))


def _xy(point) -> str:
    return f"({_num(point[0])}, {_num(point[1])})"


def _color(color: Color | None) -> str:
    if color is None:
        return '"none"'
    return "(" + ", ".join(_num(c) for c in color) + ")"


def shape_statement(shape, zorder: int) -> str:
    """One matplotlib call drawing `shape`, mirroring `render.draw_shape`."""
    if isinstance(shape, Polygon):
        points = ", ".join(f"[{_num(x)}, {_num(y)}]" for x, y in shape.points)
        edge_width = shape.edge_width if shape.edge_color is not None else 0.0
        return (
            f"ax.add_patch(Polygon(np.array([{points}]), closed=True, "
            f"facecolor={_color(shape.fill)}, edgecolor={_color(shape.edge_color)}, "
            f"linewidth={_num(edge_width)}, alpha={_num(shape.opacity)}, zorder={zorder}))"
        )
    if isinstance(shape, Ellipse):
        return (
            f"ax.add_patch(Ellipse({_xy(shape.center)}, {_num(2 * shape.radius_x)}, "
            f"{_num(2 * shape.radius_y)}, facecolor={_color(shape.fill)}, edgecolor=\"none\", "
            f"alpha={_num(shape.opacity)}, zorder={zorder}))"
        )
    if isinstance(shape, Line):
        return (
            f"ax.plot([{_num(shape.p1[0])}, {_num(shape.p2[0])}], "
            f"[{_num(shape.p1[1])}, {_num(shape.p2[1])}], "
            f"color={_color(shape.color)}, linewidth={_num(shape.width)}, zorder={zorder})"
        )
    raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def export_script(
    parameters: TreeParameters,
    output: str = "evergreen_tree.png",
    generated_at: datetime | None = None,
    style: RenderStyle | None = None,
) -> str:
    """
    Build the source of a standalone script that draws this tree.

    Args:
        parameters: Tree to reproduce
        output: Image path the script saves to
        generated_at: Timestamp for the header (defaults to now)
        style: Figure settings baked into the script

    Returns:
        Script source text. It needs only numpy and matplotlib.
    """
    if generated_at is None:
        generated_at = datetime.now()
    if style is None:
        style = RenderStyle()
    theme = parameters.color_theme
    scene = generate(parameters)
    bounds = scene.bounds

    code: list[str] = []
    code.append('"""')
    code.append("Evergreen tree")
    code.append("")
    code.append("Auto-generated by the evergreen tree generator.")
    code.append(f"Generated: {generated_at.isoformat(timespec='seconds')}")
    code.append('"""')
    code.append("")
    code.append("import matplotlib.pyplot as plt")
    code.append("import numpy as np")
    code.append("from matplotlib.patches import Ellipse, Polygon")
    code.append("")
    code.append("# Color theme: " + theme.name)
    for i, shade in enumerate(theme.foliage, start=1):
        code.append(f"#   foliage {i}: {_rgb(shade)}")
    code.append(f"#   trunk: {_rgb(theme.trunk)}")
    code.append(f"#   highlight: {_rgb(theme.highlight)}")
    code.append(f"#   star: {_rgb(theme.star)}")
    code.append(f"#   background: {_rgb(theme.background)}")
    code.append("")
    code.append("PARAMETERS = {")
    for name in PARAMETER_FIELDS:
        code.append(f"    {name!r}: {getattr(parameters, name)!r},")
    code.append("}")
    code.append("")
    code.append(f"BACKGROUND = {_color(theme.background)}")
    code.append(
        f"BOUNDS = ({_num(bounds.min_x)}, {_num(bounds.max_x)}, "
        f"{_num(bounds.min_y)}, {_num(bounds.max_y)})"
    )
    code.append(f"OUTPUT = {output!r}")
    code.append("")
    code.append("")
    code.append("def draw_tree():")
    code.append(f"    fig, ax = plt.subplots(figsize={_xy(style.figsize)})")
    code.append("    fig.patch.set_facecolor(BACKGROUND)")
    code.append("    ax.set_facecolor(BACKGROUND)")

    tag = None
    for i, shape in enumerate(scene.shapes):
        if shape.tag != tag:
            tag = shape.tag
            code.append("")
            code.append(f"    # {tag}")
        code.append("    " + shape_statement(shape, zorder=i + 1))

    code.append("")
    code.append('    ax.set_aspect("equal")')
    code.append("    ax.set_xlim(BOUNDS[0], BOUNDS[1])")
    code.append("    ax.set_ylim(BOUNDS[2], BOUNDS[3])")
    code.append("    ax.set_xticks([])")
    code.append("    ax.set_yticks([])")
    code.append("    for spine in ax.spines.values():")
    code.append("        spine.set_visible(False)")
    if style.title:
        code.append(f"    ax.set_title({style.title!r}, fontsize={style.title_fontsize!r})")
    code.append("    return fig, ax")
    code.append("")
    code.append("")
    code.append('if __name__ == "__main__":')
    code.append("    fig, ax = draw_tree()")
    code.append(
        f"    fig.savefig(OUTPUT, dpi={style.dpi!r}, facecolor=fig.get_facecolor(), "
        'bbox_inches="tight")'
    )
    code.append(f'    print("Saved", {len(scene.shapes)}, "shapes to", OUTPUT)')
    return "\n".join(code) + "\n"


def write_script(
    filepath: str | Path,
    parameters: TreeParameters,
    output: str = "evergreen_tree.png",
    style: RenderStyle | None = None,
) -> Path:
    """Write the standalone script for `parameters` to `filepath`."""
    path = Path(filepath)
    path.write_text(export_script(parameters, output, style=style), encoding="utf-8")
    logger.info("Exported tree script to %s", path)
    return path


def scene_to_json(scene: Scene, indent: int | None = None) -> str:
    return OutputSchema.from_scene(scene).model_dump_json(indent=indent)


def write_scene_json(filepath: str | Path, scene: Scene, indent: int | None = 2) -> Path:
    """Write a scene as JSON to `filepath`."""
    path = Path(filepath)
    path.write_text(scene_to_json(scene, indent), encoding="utf-8")
    logger.info("Wrote %d shapes to %s", len(scene.shapes), path)
    return path
