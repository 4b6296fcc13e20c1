# Service API module for the evergreen generator
# Validated parameters in, JSON-ready scene out

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from evergreen.config import DEFAULT_THEME, TreeParameters
from evergreen.generator import generate
from evergreen.shapes import Scene

#
# Schemata
#

Point = tuple[float, float]
RGB = tuple[float, float, float]


class InputSchema(BaseModel):
    """Input schema for a single tree generation call."""

    # Dimensions
    height: float = Field(default=10.0, gt=0, description="Foliage height")
    layer_count: int = Field(default=5, ge=2, description="Number of foliage layers")
    trunk_width: float = Field(default=1.0, gt=0, description="Trunk width")
    trunk_height: float = Field(default=1.5, gt=0, description="Trunk height")

    # Appearance
    randomness: float = Field(
        default=0.2, ge=0, description="Natural-look amount, nominally [0, 0.5]"
    )
    theme: str = Field(
        default=DEFAULT_THEME,
        description="Classic, Winter, Autumn or Festive (others fall back to Classic)",
    )

    # Decorations
    show_ornaments: bool = Field(default=False, description="Scatter ornaments")
    show_star: bool = Field(default=True, description="Star on top")
    show_snow: bool = Field(default=False, description="Snow patches and ground drift")

    seed: int = Field(default=42, description="Seed for the geometry random stream")

    def to_parameters(self) -> TreeParameters:
        return TreeParameters(**self.model_dump())

    @classmethod
    def from_parameters(cls, parameters: TreeParameters) -> "InputSchema":
        return cls(
            height=parameters.height,
            layer_count=parameters.layer_count,
            trunk_width=parameters.trunk_width,
            trunk_height=parameters.trunk_height,
            randomness=parameters.randomness,
            theme=parameters.theme,
            show_ornaments=parameters.show_ornaments,
            show_star=parameters.show_star,
            show_snow=parameters.show_snow,
            seed=parameters.seed,
        )


class PolygonSchema(BaseModel):
    type: Literal["polygon"] = "polygon"
    tag: str = Field(description="Role of the shape in the tree")
    points: list[Point] = Field(description="Outline vertices in order")
    fill: RGB
    edge_color: RGB | None = None
    edge_width: float = 0.0
    opacity: float = 1.0


class LineSchema(BaseModel):
    type: Literal["line"] = "line"
    tag: str = Field(description="Role of the shape in the tree")
    p1: Point
    p2: Point
    color: RGB
    width: float = 1.0


class EllipseSchema(BaseModel):
    type: Literal["ellipse"] = "ellipse"
    tag: str = Field(description="Role of the shape in the tree")
    center: Point
    radius_x: float
    radius_y: float
    fill: RGB
    opacity: float = 1.0


ShapeSchema = Annotated[
    Union[PolygonSchema, LineSchema, EllipseSchema], Field(discriminator="type")
]


class BoundsSchema(BaseModel):
    min_x: float
    max_x: float
    min_y: float
    max_y: float


class OutputSchema(BaseModel):
    """Output schema: shapes in paint order plus view bounds."""

    shapes: list[ShapeSchema] = Field(description="Shapes, back to front")
    bounds: BoundsSchema = Field(description="View rectangle")

    @classmethod
    def from_scene(cls, scene: Scene) -> "OutputSchema":
        return cls.model_validate(scene.to_dict())


#
# Required endpoints
#


def apply(inputs: dict) -> dict:
    """
    Validate inputs, generate a tree and return the scene as plain data.

    Every call seeds its own random stream, so concurrent calls never
    interfere.

    Raises:
        pydantic.ValidationError: If the inputs do not match InputSchema
    """
    parameters = InputSchema.model_validate(inputs).to_parameters()
    scene = generate(parameters)
    return OutputSchema.from_scene(scene).model_dump(mode="json")
