import json
import math

from mazepath.utils import utils


class TestUtils:
    def test_format_cost(self):
        assert utils.format_cost(2.0) == "2.0"
        assert utils.format_cost(0.5) == "0.5"
        assert utils.format_cost(3) == "3.0"
        assert utils.format_cost(math.inf) == "Infinity"

    def test_format_cost_scientific_notation(self):
        assert utils.format_cost(1e-5) == "1.0E-5"
        assert utils.format_cost(0.000123) == "1.23E-4"
        assert utils.format_cost(1.5e7) == "1.5E7"
        assert utils.format_cost(12345678.9) == "1.23456789E7"
        assert utils.format_cost(0.001) == "0.001"
        assert utils.format_cost(9999999.0) == "9999999.0"
        assert utils.format_cost(0.0) == "0.0"
        assert utils.format_cost(math.nan) == "NaN"

    def test_format_cell(self):
        assert utils.format_cell((1, 2)) == "(1, 2)"

    def test_manhattan_distance(self):
        assert utils.manhattan_distance((0, 0), (2, 3)) == 5.0
        assert utils.manhattan_distance((2, 3), (0, 0), c_cost=2.0) == 10.0

    def test_is_in_matrix(self):
        assert utils.is_in_matrix((0, 0), 1, 1)
        assert not utils.is_in_matrix((1, 0), 1, 1)
        assert not utils.is_in_matrix((0, 0), 0, 0)


class TestPathfinderLogger:
    def test_append_and_print(self, capsys):
        logger = utils.PathfinderLogger()
        logger.append(utils.PathfinderLog("Maze loaded."))
        logger.append(utils.PathfinderLog("Goal reached.", 3))
        out = capsys.readouterr().out
        assert "'Maze loaded.'" in out
        assert "At query 3: 'Goal reached.'" in out
        assert logger.messages() == ["Maze loaded.", "Goal reached."]

    def test_silent(self, capsys):
        logger = utils.PathfinderLogger(printout=False)
        logger.append(utils.PathfinderLog("quiet"))
        assert capsys.readouterr().out == ""
        assert len(logger) == 1

    def test_to_json(self):
        log = utils.PathfinderLog("hello", 1, timestamp="now")
        assert json.loads(log.toJSON()) == {
            "message": "hello",
            "query": 1,
            "timestamp": "now",
        }
