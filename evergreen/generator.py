"""
Scene composition.

`generate` maps a TreeParameters value to an ordered Scene. Shapes are
emitted back to front:

    trunk -> layers (bottom to top) -> snow -> ornaments -> star

Random draws happen in exactly that order from a single TreeRandom seeded
with `parameters.seed`. Reordering any stage changes every tree produced
for a given seed.
"""

import logging

from evergreen.config import TreeParameters
from evergreen.decorations import build_ornaments, build_snow, build_star
from evergreen.layers import build_layer, layer_layout
from evergreen.rng import TreeRandom
from evergreen.shapes import Bounds, Scene
from evergreen.trunk import build_trunk

logger = logging.getLogger(__name__)

STAR_HEIGHT = 0.95  # Star center, as a fraction of foliage height
STAR_SIZE = 0.08
VIEW_MARGIN = 1.0


def compute_bounds(params: TreeParameters) -> Bounds:
    """Symmetric view box: half base width plus a margin, ground to top."""
    max_x = params.base_width / 2 + VIEW_MARGIN
    max_y = params.trunk_height + params.height + VIEW_MARGIN
    return Bounds(min_x=-max_x, max_x=max_x, min_y=-0.5, max_y=max_y)


def generate(parameters: TreeParameters) -> Scene:
    """
    Generate a tree scene.

    Args:
        parameters: Tree parameters including the seed

    Returns:
        Scene with shapes in paint order and view bounds

    Raises:
        InvalidParameter: If a numeric parameter is out of range. Nothing
            is generated in that case.
    """
    parameters.validate()
    theme = parameters.color_theme

    rng = TreeRandom(parameters.seed)
    scene = Scene()

    scene.shapes.extend(build_trunk(
        parameters.trunk_width, parameters.trunk_height, theme.trunk, rng
    ))
    logger.debug("trunk: %d shapes", len(scene.shapes))

    for spec in layer_layout(parameters):
        scene.shapes.extend(build_layer(
            spec.bottom,
            spec.top,
            spec.width,
            spec.color,
            parameters.randomness,
            theme.highlight,
            rng,
        ))
    logger.debug("layers: %d layers, %d shapes total", parameters.layer_count, len(scene.shapes))

    if parameters.show_snow:
        scene.shapes.extend(build_snow(
            parameters.height,
            parameters.trunk_height,
            parameters.base_width,
            parameters.layer_count,
            rng,
        ))

    if parameters.show_ornaments:
        scene.shapes.extend(build_ornaments(
            parameters.height,
            parameters.trunk_height,
            parameters.base_width,
            parameters.layer_count,
            rng,
        ))

    if parameters.show_star:
        center = (0.0, parameters.trunk_height + parameters.height * STAR_HEIGHT)
        scene.shapes.extend(build_star(center, parameters.height * STAR_SIZE, theme.star))
    logger.debug("decorations: %d shapes total, %d draws", len(scene.shapes), rng.draws)

    scene.bounds = compute_bounds(parameters)
    logger.debug("bounds: %s", scene.bounds)
    return scene
