"""
Evergreen Tree Generator

Procedurally synthesizes a 2D evergreen tree illustration from a handful of
parameters and a seed. Generation is deterministic: the same parameters
always produce the same ordered list of shapes.

Modules:
    config: Tree parameters, color themes and control ranges
    rng: Seedable uniform random stream
    geometry: Jagged edges, ellipse sampling, star points
    shapes: Polygon / Line / Ellipse shapes and the Scene container
    trunk: Trunk rectangle and bark strokes
    layers: Foliage tier layout and jagged tier polygons
    decorations: Snow, ornaments and the top star
    generator: Scene composition in paint order
    render: matplotlib rendering and image export
    schema: Validated input / output schema for service use
    export: Reproduction scripts and scene JSON
"""

from evergreen.config import (
    PARAMETER_LIMITS,
    THEME_NAMES,
    THEMES,
    ColorTheme,
    InvalidParameter,
    RenderStyle,
    TreeParameters,
    random_parameters,
    theme_for,
)
from evergreen.export import export_script, scene_to_json, write_scene_json, write_script
from evergreen.generator import compute_bounds, generate
from evergreen.geometry import circle_points, jagged_edge, star_points
from evergreen.render import render_scene, render_tree, save_scene, save_tree
from evergreen.rng import TreeRandom
from evergreen.schema import InputSchema, OutputSchema, apply
from evergreen.shapes import Bounds, Ellipse, Line, Polygon, Scene, Shape

__all__ = [
    # Config
    "ColorTheme",
    "InvalidParameter",
    "PARAMETER_LIMITS",
    "RenderStyle",
    "THEMES",
    "THEME_NAMES",
    "TreeParameters",
    "random_parameters",
    "theme_for",
    # Randomness and geometry
    "TreeRandom",
    "circle_points",
    "jagged_edge",
    "star_points",
    # Shapes
    "Bounds",
    "Ellipse",
    "Line",
    "Polygon",
    "Scene",
    "Shape",
    # Generation
    "compute_bounds",
    "generate",
    # Rendering
    "render_scene",
    "render_tree",
    "save_scene",
    "save_tree",
    # Service and export
    "InputSchema",
    "OutputSchema",
    "apply",
    "export_script",
    "scene_to_json",
    "write_scene_json",
    "write_script",
]
