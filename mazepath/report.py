import typing as t

from pydantic import BaseModel

from mazepath.data_models import Coordinate
from mazepath.pathfinder import PathResult


class QueryReport(BaseModel):
    start: Coordinate
    goal: Coordinate

    found: bool = False
    """Whether the goal was reachable from the start"""

    cost: float | None = None
    """Total path cost, None when the goal is unreachable
    """

    path: t.List[Coordinate] = []
    """Cells from start to goal inclusive
    """

    expanded: int = 0
    """The number of cells finalized by the search
    """

    search_time: float = 0.0
    """Wall-clock time spent in the search, in seconds
    """

    @classmethod
    def from_result(
        cls,
        *,
        start: Coordinate,
        goal: Coordinate,
        result: PathResult,
        search_time: float = 0.0,
    ) -> "QueryReport":
        return cls(
            start=start,
            goal=goal,
            found=result.found,
            cost=result.cost if result.found else None,
            path=result.path,
            expanded=result.expanded,
            search_time=search_time,
        )


class RunReport(BaseModel):
    maze_file: str
    width: int
    height: int
    queries: t.List[QueryReport] = []

    def save(self, path: str):
        with open(path, "w") as f:
            f.write(self.model_dump_json(indent=4))
