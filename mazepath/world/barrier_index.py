"""
Directional barrier lookup.

Horizontal walls sit on the boundary below the cell they are attached to, so the
record at (x, y) gates moves between (x, y - 1) and (x, y). Vertical walls sit on
the boundary left of their cell, so the record at (x, y) gates moves between
(x - 1, y) and (x, y). The direction of travel across a boundary never changes
which record is consulted.
"""

import math
import typing as t

from mazepath.data_models import Coordinate, DuplicateWallPolicy, WallModel
from mazepath.exceptions import DuplicateWallError, MazeValidationError
from mazepath.utils import utils
from mazepath.world.grid import GridGeometry


class EdgeResolution:
    pass


class Blocked(EdgeResolution):
    def __eq__(self, other: t.Any):
        return isinstance(other, Blocked)

    def __hash__(self):
        return hash(Blocked)

    def __repr__(self):
        return "Blocked()"


class Passable(EdgeResolution):
    def __init__(self, cost: float):
        self.cost = cost

    def __eq__(self, other: t.Any):
        if isinstance(other, Passable):
            return self.cost == other.cost
        return NotImplemented

    def __hash__(self):
        return hash((Passable, self.cost))

    def __repr__(self):
        return f"Passable(cost={self.cost})"


BLOCKED = Blocked()


def wall_resolution(wall: WallModel) -> EdgeResolution:
    if wall.cost is None:
        return BLOCKED
    return Passable(wall.cost)


def index_walls(
    walls: t.Sequence[WallModel],
    *,
    collection: str,
    grid: GridGeometry,
    policy: DuplicateWallPolicy = "first",
    logger: utils.PathfinderLogger | None = None,
) -> t.Dict[Coordinate, WallModel]:
    """Maps each wall record to the cell it is attached to.

    Records sharing a cell are resolved by ``policy``: ``first`` keeps the earliest
    loaded record, ``last`` the latest, and ``reject`` raises DuplicateWallError.
    """
    index: t.Dict[Coordinate, WallModel] = {}
    for i, wall in enumerate(walls):
        cell = wall.cell
        if not grid.contains(cell):
            raise MazeValidationError(
                f"{collection}[{i}] at ({cell.x}, {cell.y}) lies outside "
                f"the {grid.width}x{grid.height} grid"
            )
        if wall.cost is not None and not math.isfinite(wall.cost):
            raise MazeValidationError(
                f"{collection}[{i}] at ({cell.x}, {cell.y}) has non-finite cost "
                f"{wall.cost}"
            )
        if wall.cost is not None and wall.cost < 0 and logger is not None:
            logger.append(
                utils.PathfinderLog(
                    f"{collection}[{i}] at ({cell.x}, {cell.y}) has negative cost "
                    f"{wall.cost}, shortest paths are not guaranteed"
                )
            )
        if cell in index:
            if policy == "reject":
                raise DuplicateWallError(collection, cell)
            if logger is not None:
                logger.append(
                    utils.PathfinderLog(
                        f"Duplicate {collection} record at ({cell.x}, {cell.y}), "
                        f"keeping the {policy} one"
                    )
                )
            if policy == "first":
                continue
        index[cell] = wall
    return index


class BarrierIndex:
    def __init__(
        self,
        *,
        grid: GridGeometry,
        hwalls: t.Sequence[WallModel] | None = None,
        vwalls: t.Sequence[WallModel] | None = None,
        default_step_cost: float = utils.DEFAULT_STEP_COST,
        duplicate_wall_policy: DuplicateWallPolicy = "first",
        logger: utils.PathfinderLogger | None = None,
    ):
        self.grid = grid
        self.default_step_cost = default_step_cost
        self.hwalls = index_walls(
            hwalls or [],
            collection="hwalls",
            grid=grid,
            policy=duplicate_wall_policy,
            logger=logger,
        )
        self.vwalls = index_walls(
            vwalls or [],
            collection="vwalls",
            grid=grid,
            policy=duplicate_wall_policy,
            logger=logger,
        )

    def _resolve(
        self, walls: t.Dict[Coordinate, WallModel], cell: Coordinate
    ) -> EdgeResolution:
        wall = walls.get(cell)
        if wall is None:
            return Passable(self.default_step_cost)
        return wall_resolution(wall)

    def resolve_vertical_move(self, x: int, y: int) -> EdgeResolution:
        """Resolves a move between (x, y - 1) and (x, y), in either direction."""
        return self._resolve(self.hwalls, Coordinate(x, y))

    def resolve_horizontal_move(self, x: int, y: int) -> EdgeResolution:
        """Resolves a move between (x - 1, y) and (x, y), in either direction."""
        return self._resolve(self.vwalls, Coordinate(x, y))

    def resolve_move(self, source: Coordinate, target: Coordinate) -> EdgeResolution:
        dx, dy = target.x - source.x, target.y - source.y
        if abs(dx) + abs(dy) != 1:
            raise ValueError(f"{source} and {target} are not adjacent cells")
        if dx != 0:
            return self.resolve_horizontal_move(max(source.x, target.x), source.y)
        return self.resolve_vertical_move(source.x, max(source.y, target.y))
