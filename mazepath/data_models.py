import json
import os
import typing as t

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mazepath.exceptions import MazeValidationError


class Coordinate(t.NamedTuple):
    x: int
    y: int


class CoordinateModel(BaseModel):
    x: int
    y: int

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.x, self.y)


class WallModel(BaseModel):
    x: int
    y: int
    cost: float | None = None
    """Traversal cost across the wall. None means the boundary is impassable."""

    @property
    def cell(self) -> Coordinate:
        return Coordinate(self.x, self.y)


class JumpModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: CoordinateModel = Field(alias="from")
    to: CoordinateModel
    cost: float

    @property
    def origin(self) -> Coordinate:
        return self.from_.to_coordinate()

    @property
    def destination(self) -> Coordinate:
        return self.to.to_coordinate()


class QuestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: CoordinateModel = Field(alias="from")
    to: CoordinateModel

    @property
    def start(self) -> Coordinate:
        return self.from_.to_coordinate()

    @property
    def goal(self) -> Coordinate:
        return self.to.to_coordinate()


class MazeModel(BaseModel):
    width: int
    height: int
    hwalls: t.List[WallModel] = []
    """Horizontal walls: gate moves between (x, y - 1) and (x, y)."""

    vwalls: t.List[WallModel] = []
    """Vertical walls: gate moves between (x - 1, y) and (x, y)."""

    jumps: t.List[JumpModel] = []
    quests: t.List[QuestModel] = []

    @field_validator("hwalls", "vwalls", "jumps", "quests", mode="before")
    @classmethod
    def _none_as_empty(cls, value: t.Any) -> t.Any:
        return [] if value is None else value


DuplicateWallPolicy = t.Literal["first", "last", "reject"]


class SearchConfigYamlModel(BaseModel):
    default_step_cost: float = 1.0
    duplicate_wall_policy: DuplicateWallPolicy = "first"
    validate_coordinates: bool = True


def _read_document(file_path: str) -> t.Any:
    with open(file_path, "r") as stream:
        if os.path.splitext(file_path)[1].lower() in (".yaml", ".yml"):
            return yaml.safe_load(stream)
        return json.load(stream)


def maze_from_dict(data: t.Any) -> MazeModel:
    try:
        return MazeModel.model_validate(data)
    except ValidationError as e:
        raise MazeValidationError(f"Malformed maze description: {e}") from e


def maze_from_file(file_path: str) -> MazeModel:
    try:
        data = _read_document(file_path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise MazeValidationError(f"Could not parse {file_path}: {e}") from e
    return maze_from_dict(data)


def search_config_from_yaml(file_path: str) -> SearchConfigYamlModel:
    with open(file_path, "r") as stream:
        try:
            config = yaml.safe_load(stream)
        except yaml.YAMLError as e:
            raise MazeValidationError(f"Could not parse {file_path}: {e}") from e
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise MazeValidationError(
            f"Search config {file_path} must be a mapping, got {type(config).__name__}"
        )
    try:
        return SearchConfigYamlModel(**config)
    except ValidationError as e:
        raise MazeValidationError(f"Malformed search config: {e}") from e
