import os
import time
import typing as t

import typer

from mazepath import pathfinder
from mazepath.data_models import (
    Coordinate,
    MazeModel,
    SearchConfigYamlModel,
    maze_from_file,
    search_config_from_yaml,
)
from mazepath.exceptions import CoordinateOutOfRangeError, MazeValidationError
from mazepath.report import QueryReport, RunReport
from mazepath.utils import utils

DEFAULT_MAZE_FILE = "maze.json"

app = typer.Typer()


def resolve_maze_file(maze_file: t.Optional[str]) -> str:
    if maze_file is None:
        print(
            f"WARNING: no file passed as arg. Falling back to default {DEFAULT_MAZE_FILE}"
        )
    elif os.path.isfile(maze_file):
        return maze_file
    else:
        print(f"WARNING: Can't find file {maze_file}")

    if not os.path.isfile(DEFAULT_MAZE_FILE):
        print(f"WARNING: Can't find default file {DEFAULT_MAZE_FILE}")
        raise typer.Exit(code=1)
    return DEFAULT_MAZE_FILE


def load_engine(
    maze_file: str, config_file: t.Optional[str], verbose: bool
) -> t.Tuple[MazeModel, pathfinder.PathfinderEngine]:
    config = (
        search_config_from_yaml(config_file) if config_file else SearchConfigYamlModel()
    )
    logger = utils.PathfinderLogger(printout=verbose)
    maze = maze_from_file(maze_file)
    logger.append(utils.PathfinderLog(f"Maze file {maze_file} successfully loaded."))
    return maze, pathfinder.build(maze, config=config, logger=logger)


def fail(message: str) -> t.NoReturn:
    print(f"ERROR: {message}")
    raise typer.Exit(code=2)


@app.command()
def distances(
    maze_file: t.Annotated[t.Optional[str], typer.Argument()] = None,
    config_file: t.Annotated[t.Optional[str], typer.Option("--config")] = None,
    report_file: t.Annotated[t.Optional[str], typer.Option("--report")] = None,
    verbose: t.Annotated[bool, typer.Option("--verbose")] = False,
):
    """Prints the shortest distance for every quest listed in the maze file."""
    maze_file = resolve_maze_file(maze_file)
    try:
        maze, engine = load_engine(maze_file, config_file, verbose)
        report = RunReport(maze_file=maze_file, width=maze.width, height=maze.height)
        for i, quest in enumerate(maze.quests):
            start_time = time.perf_counter()
            result = engine.search(quest.start, quest.goal, query=i)
            search_time = time.perf_counter() - start_time
            print(
                f"distance from {utils.format_cell(quest.start)} to "
                f"{utils.format_cell(quest.goal)}: {utils.format_cost(result.cost)}"
            )
            report.queries.append(
                QueryReport.from_result(
                    start=quest.start,
                    goal=quest.goal,
                    result=result,
                    search_time=search_time,
                )
            )
    except (MazeValidationError, CoordinateOutOfRangeError, OSError) as e:
        fail(str(e))

    if report_file:
        report.save(report_file)


@app.command()
def path(
    maze_file: str,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    config_file: t.Annotated[t.Optional[str], typer.Option("--config")] = None,
    verbose: t.Annotated[bool, typer.Option("--verbose")] = False,
):
    """Prints the cost and the cells of the shortest path between two cells."""
    try:
        _, engine = load_engine(maze_file, config_file, verbose)
        result = engine.search(Coordinate(x1, y1), Coordinate(x2, y2))
    except (MazeValidationError, CoordinateOutOfRangeError, OSError) as e:
        fail(str(e))

    print(f"cost: {utils.format_cost(result.cost)}")
    if result.found:
        print(" -> ".join(utils.format_cell(cell) for cell in result.path))
    else:
        print("unreachable")


if __name__ == "__main__":
    app()
