import typing as t

from typing_extensions import Self

from mazepath.data_models import Coordinate, MazeModel
from mazepath.exceptions import CoordinateOutOfRangeError, MazeValidationError
from mazepath.utils import utils


class GridGeometry:
    def __init__(self, *, width: int, height: int):
        if width < 0 or height < 0:
            raise MazeValidationError(
                f"Grid dimensions must be non-negative, got {width}x{height}"
            )
        self.width = width
        self.height = height

    @classmethod
    def from_maze(cls, maze: MazeModel) -> Self:
        return cls(width=maze.width, height=maze.height)

    @property
    def nb_cells(self) -> int:
        return self.width * self.height

    def contains(self, cell: t.Sequence[int]) -> bool:
        return utils.is_in_matrix(cell, self.width, self.height)

    def check_contains(self, cell: t.Sequence[int]):
        if not self.contains(cell):
            raise CoordinateOutOfRangeError(
                (cell[0], cell[1]), width=self.width, height=self.height
            )

    def get_neighbors(
        self,
        cell: Coordinate,
        neighborhood: t.Sequence[t.Tuple[int, int]] = utils.TAXI_NEIGHBORHOOD,
    ) -> t.List[Coordinate]:
        """Returns the in-grid cells adjacent to ``cell``, in ``neighborhood`` order."""
        neighbors = []
        for i, j in neighborhood:
            neighbor = Coordinate(cell[0] + i, cell[1] + j)
            if self.contains(neighbor):
                neighbors.append(neighbor)
        return neighbors

    def __repr__(self):
        return f"GridGeometry(width={self.width}, height={self.height})"
