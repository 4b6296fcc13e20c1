"""
Tests for snow, ornament and star decorations.
"""

import numpy as np
import pytest

from evergreen.decorations import (
    ORNAMENT_COLORS,
    ORNAMENT_EDGE,
    SNOW_COLOR,
    STAR_EDGE,
    build_ornaments,
    build_snow,
    build_star,
    ornament_count,
    snow_patch_count,
)
from evergreen.rng import TreeRandom
from evergreen.shapes import Ellipse, Polygon

HEIGHT = 10.0
TRUNK_HEIGHT = 1.5
BASE_WIDTH = 8.0


class TestSnow:
    """Tests for snow patches and the ground drift."""

    def test_counts(self) -> None:
        assert snow_patch_count(5) == 80
        shapes = build_snow(HEIGHT, TRUNK_HEIGHT, BASE_WIDTH, 5, TreeRandom(1))
        assert len(shapes) == 80 + 1
        assert all(isinstance(s, Ellipse) and s.tag == "snow" for s in shapes[:-1])
        assert shapes[-1].tag == "ground_snow"

    def test_draw_count(self) -> None:
        rng = TreeRandom(1)
        build_snow(HEIGHT, TRUNK_HEIGHT, BASE_WIDTH, 3, rng)
        assert rng.draws == 3 * snow_patch_count(3) + 50

    def test_patches_inside_cone(self) -> None:
        patches = build_snow(HEIGHT, TRUNK_HEIGHT, BASE_WIDTH, 6, TreeRandom(4))[:-1]
        for p in patches:
            x, y = p.center
            assert TRUNK_HEIGHT <= y <= TRUNK_HEIGHT + HEIGHT * 0.9
            progress = (y - TRUNK_HEIGHT) / HEIGHT
            assert abs(x) <= BASE_WIDTH / 2 * (1 - progress) * 0.8 + 1e-12

    def test_patch_shape(self) -> None:
        patches = build_snow(HEIGHT, TRUNK_HEIGHT, BASE_WIDTH, 4, TreeRandom(2))[:-1]
        for p in patches:
            assert 0.1 <= p.radius_x < 0.3
            assert p.radius_y == pytest.approx(p.radius_x * 0.5)
            assert p.fill == SNOW_COLOR
            assert p.opacity == 0.8

    def test_ellipse_polygon_approximation(self) -> None:
        patch = build_snow(HEIGHT, TRUNK_HEIGHT, BASE_WIDTH, 2, TreeRandom(2))[0]
        pts = patch.points()
        assert pts.shape == (20, 2)
        np.testing.assert_allclose(pts[0], [patch.center[0] + patch.radius_x, patch.center[1]])

    def test_ground_drift(self) -> None:
        ground = build_snow(HEIGHT, TRUNK_HEIGHT, BASE_WIDTH, 2, TreeRandom(5))[-1]
        assert isinstance(ground, Polygon)
        assert ground.points.shape == (52, 2)
        assert ground.opacity == 1.0
        assert ground.fill == SNOW_COLOR

        wave = ground.points[:50]
        np.testing.assert_allclose(wave[:, 0], np.linspace(-BASE_WIDTH, BASE_WIDTH, 50))
        assert np.all(np.abs(wave[:, 1] - 0.1) <= 0.3)
        np.testing.assert_array_equal(ground.points[50:], [[BASE_WIDTH, -0.5], [-BASE_WIDTH, -0.5]])


class TestOrnaments:
    """Tests for ornaments and their shine highlights."""

    def test_counts_and_order(self) -> None:
        assert ornament_count(5) == 25
        shapes = build_ornaments(HEIGHT, TRUNK_HEIGHT, BASE_WIDTH, 5, TreeRandom(3))
        assert len(shapes) == 2 * 25
        assert [s.tag for s in shapes[0::2]] == ["ornament"] * 25
        assert [s.tag for s in shapes[1::2]] == ["ornament_shine"] * 25

    def test_draw_count(self) -> None:
        rng = TreeRandom(3)
        build_ornaments(HEIGHT, TRUNK_HEIGHT, BASE_WIDTH, 4, rng)
        assert rng.draws == 4 * ornament_count(4)

    def test_ornament_style(self) -> None:
        shapes = build_ornaments(HEIGHT, TRUNK_HEIGHT, BASE_WIDTH, 5, TreeRandom(6))
        for ornament, shine in zip(shapes[0::2], shapes[1::2]):
            assert ornament.points.shape == (30, 2)
            assert ornament.fill in ORNAMENT_COLORS
            assert ornament.edge_color == ORNAMENT_EDGE
            assert ornament.edge_width == 0.5
            assert shine.points.shape == (15, 2)
            assert shine.fill == (1.0, 1.0, 1.0)
            assert shine.opacity == 0.6
            assert shine.edge_color is None

    def test_ornament_geometry(self) -> None:
        shapes = build_ornaments(HEIGHT, TRUNK_HEIGHT, BASE_WIDTH, 5, TreeRandom(7))
        for ornament, shine in zip(shapes[0::2], shapes[1::2]):
            center = ornament.points[:-1].mean(axis=0)
            radius = np.hypot(*(ornament.points[0] - center))
            assert 0.15 - 1e-9 <= radius <= 0.25 + 1e-9

            x, y = center
            assert TRUNK_HEIGHT - 1e-9 <= y <= TRUNK_HEIGHT + HEIGHT * 0.85 + 1e-9
            progress = (y - TRUNK_HEIGHT) / HEIGHT
            assert abs(x) <= BASE_WIDTH / 2 * (1 - progress) * 0.7 + 1e-9

            shine_center = shine.points[:-1].mean(axis=0)
            np.testing.assert_allclose(
                shine_center, [x - radius * 0.3, y + radius * 0.3], atol=1e-9
            )
            shine_radius = np.hypot(*(shine.points[0] - shine_center))
            assert shine_radius == pytest.approx(radius * 0.25)

    def test_palette_used(self) -> None:
        colors = set()
        for seed in range(5):
            shapes = build_ornaments(HEIGHT, TRUNK_HEIGHT, BASE_WIDTH, 8, TreeRandom(seed))
            colors.update(s.fill for s in shapes[0::2])
        assert colors == set(ORNAMENT_COLORS)


class TestStar:
    """Tests for the top star and its glow."""

    def test_star_then_three_glows(self) -> None:
        shapes = build_star((0.0, 11.0), 0.8, (1.0, 0.84, 0.0))
        assert [s.tag for s in shapes] == ["star", "star_glow", "star_glow", "star_glow"]

    def test_star_style(self) -> None:
        color = (1.0, 0.84, 0.0)
        star = build_star((0.0, 11.0), 0.8, color)[0]
        assert star.points.shape == (10, 2)
        assert star.fill == color
        assert star.edge_color == STAR_EDGE
        assert star.edge_width == 1.5
        assert star.opacity == 1.0

    def test_star_radii(self) -> None:
        star = build_star((0.0, 11.0), 0.8, (1.0, 1.0, 1.0))[0]
        radii = np.hypot(star.points[:, 0], star.points[:, 1] - 11.0)
        np.testing.assert_allclose(radii[0::2], 0.8)
        np.testing.assert_allclose(radii[1::2], 0.32)

    def test_glow_rings(self) -> None:
        size = 0.8
        glows = build_star((0.0, 11.0), size, (1.0, 1.0, 1.0))[1:]
        for r, glow in enumerate(glows, start=1):
            radii = np.hypot(glow.points[:, 0], glow.points[:, 1] - 11.0)
            np.testing.assert_allclose(radii[0::2], size * (1 + r * 0.2))
            np.testing.assert_allclose(radii[1::2], size * 0.4 * (1 + r * 0.1))
            assert glow.opacity == 0.1
            assert glow.edge_color is None

    def test_star_uses_no_randomness(self) -> None:
        a = build_star((0.0, 5.0), 1.0, (1.0, 1.0, 1.0))
        b = build_star((0.0, 5.0), 1.0, (1.0, 1.0, 1.0))
        for sa, sb in zip(a, b):
            np.testing.assert_array_equal(sa.points, sb.points)
