import math
import typing as t

from mazepath.data_models import Coordinate, JumpModel
from mazepath.exceptions import MazeValidationError
from mazepath.world.grid import GridGeometry


class JumpIndex:
    """One-way jump edges grouped by origin cell, in load order."""

    def __init__(
        self, *, grid: GridGeometry, jumps: t.Sequence[JumpModel] | None = None
    ):
        self.grid = grid
        self.jumps_from: t.Dict[Coordinate, t.List[JumpModel]] = dict()
        self.nb_jumps = 0
        for i, jump in enumerate(jumps or []):
            self._check(i, jump)
            self.jumps_from.setdefault(jump.origin, []).append(jump)
            self.nb_jumps += 1

    def _check(self, i: int, jump: JumpModel):
        for name, cell in (("from", jump.origin), ("to", jump.destination)):
            if not self.grid.contains(cell):
                raise MazeValidationError(
                    f"jumps[{i}] endpoint '{name}' ({cell.x}, {cell.y}) lies outside "
                    f"the {self.grid.width}x{self.grid.height} grid"
                )
        if not math.isfinite(jump.cost):
            raise MazeValidationError(f"jumps[{i}] has non-finite cost {jump.cost}")
        if jump.cost < 0:
            raise MazeValidationError(
                f"jumps[{i}] has negative cost {jump.cost}, jump costs must be >= 0"
            )

    def get_jumps(self, cell: Coordinate) -> t.List[JumpModel]:
        return self.jumps_from.get(cell, [])

    def get_edges(self, cell: Coordinate) -> t.List[t.Tuple[Coordinate, float]]:
        return [(jump.destination, jump.cost) for jump in self.get_jumps(cell)]

    def __len__(self):
        return self.nb_jumps
