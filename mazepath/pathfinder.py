import math
import typing as t

from mazepath.algorithms import graph_search
from mazepath.data_models import Coordinate, MazeModel, SearchConfigYamlModel
from mazepath.utils import utils
from mazepath.world.barrier_index import BarrierIndex, Passable
from mazepath.world.grid import GridGeometry
from mazepath.world.jump_index import JumpIndex

Edge = t.Tuple[Coordinate, float]


class PathResult:
    def __init__(
        self,
        path: t.Sequence[Coordinate] | None = None,
        cost: float = math.inf,
        expanded: int = 0,
    ):
        self.path: t.List[Coordinate] = list(path) if path else []
        self.cost = cost
        self.expanded = expanded

    @property
    def found(self) -> bool:
        return not math.isinf(self.cost)

    def __eq__(self, other: t.Any):
        if isinstance(other, PathResult):
            return self.path == other.path and self.cost == other.cost
        return NotImplemented

    def __repr__(self):
        return f"PathResult(path={self.path}, cost={self.cost})"


class PathfinderEngine:
    """Shortest-path engine over a maze grid with walls and one-way jumps.

    The grid geometry, barrier index and jump index are built once from the maze
    and never modified afterwards, so a single engine can serve any number of
    independent queries.
    """

    def __init__(
        self,
        *,
        grid: GridGeometry,
        barriers: BarrierIndex,
        jumps: JumpIndex,
        config: SearchConfigYamlModel | None = None,
        logger: utils.PathfinderLogger | None = None,
    ):
        self.grid = grid
        self.barriers = barriers
        self.jumps = jumps
        self.config = config or SearchConfigYamlModel()
        self.logger = logger if logger is not None else utils.PathfinderLogger(False)

    @classmethod
    def from_maze(
        cls,
        maze: MazeModel,
        config: SearchConfigYamlModel | None = None,
        logger: utils.PathfinderLogger | None = None,
    ) -> "PathfinderEngine":
        config = config or SearchConfigYamlModel()
        if logger is None:
            logger = utils.PathfinderLogger(printout=False)

        grid = GridGeometry.from_maze(maze)
        barriers = BarrierIndex(
            grid=grid,
            hwalls=maze.hwalls,
            vwalls=maze.vwalls,
            default_step_cost=config.default_step_cost,
            duplicate_wall_policy=config.duplicate_wall_policy,
            logger=logger,
        )
        jumps = JumpIndex(grid=grid, jumps=maze.jumps)
        logger.append(
            utils.PathfinderLog(
                f"Engine built for a {grid.width}x{grid.height} grid with "
                f"{len(barriers.hwalls)} horizontal walls, {len(barriers.vwalls)} "
                f"vertical walls and {len(jumps)} jumps."
            )
        )
        return cls(
            grid=grid, barriers=barriers, jumps=jumps, config=config, logger=logger
        )

    def get_neighbors(self, cell: Coordinate) -> t.List[Edge]:
        """Outgoing edges of ``cell``: right, left, up and down grid moves that are not
        blocked by a wall, followed by the jumps departing from ``cell`` in load order.
        """
        edges: t.List[Edge] = []
        for neighbor in self.grid.get_neighbors(cell):
            resolution = self.barriers.resolve_move(cell, neighbor)
            if isinstance(resolution, Passable):
                edges.append((neighbor, resolution.cost))
        edges.extend(self.jumps.get_edges(cell))
        return edges

    def search(
        self, start: t.Sequence[int], goal: t.Sequence[int], query: int | None = None
    ) -> PathResult:
        start, goal = Coordinate(*start), Coordinate(*goal)
        if self.config.validate_coordinates:
            self.grid.check_contains(start)
            self.grid.check_contains(goal)

        result = graph_search.new_generic_dijkstra(
            start,
            exit_condition=lambda current: current == goal,
            get_neighbors=self.get_neighbors,
        )

        if not result.found:
            self.logger.append(
                utils.PathfinderLog(
                    f"{utils.format_cell(goal)} is unreachable from "
                    f"{utils.format_cell(start)} ({len(result.close_set)} cells explored).",
                    query,
                )
            )
            return PathResult([], math.inf, expanded=len(result.close_set))

        path = graph_search.reconstruct_path(result.came_from, goal)
        cost = result.gscore[goal]
        self.logger.append(
            utils.PathfinderLog(
                f"Path from {utils.format_cell(start)} to {utils.format_cell(goal)} "
                f"found with cost {utils.format_cost(cost)} in {len(path) - 1} moves.",
                query,
            )
        )
        return PathResult(path, cost, expanded=len(result.close_set))


def build(
    maze: MazeModel,
    config: SearchConfigYamlModel | None = None,
    logger: utils.PathfinderLogger | None = None,
) -> PathfinderEngine:
    return PathfinderEngine.from_maze(maze, config=config, logger=logger)


def search(
    engine: PathfinderEngine,
    start: t.Sequence[int],
    goal: t.Sequence[int],
    query: int | None = None,
) -> PathResult:
    return engine.search(start, goal, query=query)
