from mazepath import pathfinder
from mazepath.data_models import Coordinate, maze_from_file


maze = maze_from_file("tests/scenarios/walled_corridor.json")
engine = pathfinder.build(maze)
result = engine.search(Coordinate(0, 0), Coordinate(2, 0))
assert result.found
assert result.path == [Coordinate(0, 0), Coordinate(2, 0)]
assert result.cost == 0.5
