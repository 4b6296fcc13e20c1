"""
Tests for the validated service interface.
"""

import pytest
from pydantic import ValidationError

from evergreen.config import TreeParameters
from evergreen.generator import generate
from evergreen.schema import InputSchema, OutputSchema, apply


class TestInputSchema:
    """Tests for input validation."""

    def test_defaults_match_parameters(self) -> None:
        assert InputSchema().to_parameters() == TreeParameters()

    def test_round_trip_parameters(self) -> None:
        params = TreeParameters(height=6.0, layer_count=3, theme="Autumn", show_snow=True, seed=5)
        assert InputSchema.from_parameters(params).to_parameters() == params

    @pytest.mark.parametrize(
        "inputs",
        [
            {"height": 0},
            {"height": -2.5},
            {"layer_count": 1},
            {"trunk_width": 0},
            {"trunk_height": -1},
            {"randomness": -0.2},
            {"layer_count": "many"},
        ],
    )
    def test_invalid_inputs_rejected(self, inputs: dict) -> None:
        with pytest.raises(ValidationError):
            InputSchema.model_validate(inputs)

    def test_unknown_theme_accepted(self) -> None:
        params = InputSchema(theme="Aurora").to_parameters()
        assert params.color_theme.name == "Classic"


class TestApply:
    """Tests for the apply endpoint."""

    def test_empty_inputs_use_defaults(self) -> None:
        result = apply({})
        assert set(result) == {"shapes", "bounds"}
        assert len(result["shapes"]) == len(generate(TreeParameters()).shapes)

    def test_repeated_calls_identical(self) -> None:
        inputs = {"randomness": 0.4, "show_ornaments": True, "show_snow": True, "seed": 99}
        assert apply(inputs) == apply(inputs)

    def test_json_ready_output(self) -> None:
        result = apply({"show_snow": True})
        shape = result["shapes"][0]
        assert isinstance(shape["points"], list)
        assert isinstance(shape["points"][0], list)
        assert isinstance(shape["fill"], list)

    def test_negative_seed(self) -> None:
        result = apply({"seed": -7, "randomness": 0.3})
        assert result == apply({"seed": -7, "randomness": 0.3})
        assert len(result["shapes"]) > 0

    def test_invalid_inputs_raise(self) -> None:
        with pytest.raises(ValidationError):
            apply({"layer_count": 1})

    def test_shape_types_discriminated(self) -> None:
        scene = generate(TreeParameters(randomness=0.3, show_snow=True, seed=4))
        output = OutputSchema.from_scene(scene)
        kinds = [type(s).__name__ for s in output.shapes]
        assert kinds[0] == "PolygonSchema"
        assert "LineSchema" in kinds
        assert "EllipseSchema" in kinds
        assert [s.tag for s in output.shapes] == [s.tag for s in scene.shapes]
