import json
import os
import shutil

from typer.testing import CliRunner

from mazepath.main import app


class TestE2E:
    def setup_method(self):
        self.scenarios_folder = os.path.abspath(
            os.path.join(os.path.dirname(__file__), "../scenarios")
        )
        self.runner = CliRunner()

    def scenario(self, name: str) -> str:
        return os.path.join(self.scenarios_folder, name)

    def test_walled_corridor_distances(self):
        """Tests the jump, the one-way restriction and the zero-length quest"""
        result = self.runner.invoke(
            app, ["distances", self.scenario("walled_corridor.json")]
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "distance from (0, 0) to (2, 0): 0.5",
            "distance from (2, 0) to (0, 0): Infinity",
            "distance from (1, 0) to (1, 0): 0.0",
        ]

    def test_open_grid_distances(self):
        result = self.runner.invoke(app, ["distances", self.scenario("open_grid.json")])
        assert result.exit_code == 0
        assert "distance from (0, 0) to (3, 2): 5.0" in result.stdout
        assert "distance from (3, 0) to (0, 0): 3.0" in result.stdout

    def test_yaml_maze(self):
        result = self.runner.invoke(
            app, ["distances", self.scenario("costed_column.yaml")]
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "distance from (0, 0) to (0, 2): 2.5",
            "distance from (0, 2) to (0, 0): 2.5",
        ]

    def test_duplicate_wall_policies(self):
        first = self.runner.invoke(
            app, ["distances", self.scenario("duplicate_walls.json")]
        )
        assert "distance from (0, 0) to (1, 0): 3.0" in first.stdout

        last = self.runner.invoke(
            app,
            [
                "distances",
                self.scenario("duplicate_walls.json"),
                "--config",
                self.scenario("keep_last_wall.yaml"),
            ],
        )
        assert "distance from (0, 0) to (1, 0): Infinity" in last.stdout

        rejected = self.runner.invoke(
            app,
            [
                "distances",
                self.scenario("duplicate_walls.json"),
                "--config",
                self.scenario("reject_duplicate_walls.yaml"),
            ],
        )
        assert rejected.exit_code == 2
        assert "ERROR: Duplicate wall records in vwalls at (1, 0)" in rejected.stdout

    def test_malformed_maze(self):
        result = self.runner.invoke(
            app, ["distances", self.scenario("wall_outside_grid.json")]
        )
        assert result.exit_code == 2
        assert result.stdout.startswith("ERROR: hwalls[0]")

    def test_report(self, tmp_path):
        report_file = str(tmp_path / "report.json")
        result = self.runner.invoke(
            app,
            [
                "distances",
                self.scenario("walled_corridor.json"),
                "--report",
                report_file,
            ],
        )
        assert result.exit_code == 0
        with open(report_file) as f:
            report = json.load(f)
        assert (report["width"], report["height"]) == (3, 1)
        assert len(report["queries"]) == 3
        jump_query, reverse_query, _ = report["queries"]
        assert jump_query["found"]
        assert jump_query["cost"] == 0.5
        assert jump_query["path"] == [[0, 0], [2, 0]]
        assert not reverse_query["found"]
        assert reverse_query["cost"] is None
        assert reverse_query["path"] == []

    def test_verbose(self):
        result = self.runner.invoke(
            app, ["distances", self.scenario("walled_corridor.json"), "--verbose"]
        )
        assert result.exit_code == 0
        assert "successfully loaded" in result.stdout
        assert "Engine built for a 3x1 grid" in result.stdout

    def test_falls_back_to_default_maze_file(self, tmp_path, monkeypatch):
        shutil.copy(self.scenario("open_grid.json"), tmp_path / "maze.json")
        monkeypatch.chdir(tmp_path)

        result = self.runner.invoke(app, ["distances"])
        assert result.exit_code == 0
        assert result.stdout.splitlines()[0] == (
            "WARNING: no file passed as arg. Falling back to default maze.json"
        )
        assert "distance from (0, 0) to (3, 2): 5.0" in result.stdout

        result = self.runner.invoke(app, ["distances", "missing.json"])
        assert result.exit_code == 0
        assert result.stdout.splitlines()[0] == "WARNING: Can't find file missing.json"

    def test_no_maze_file_at_all(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = self.runner.invoke(app, ["distances", "missing.json"])
        assert result.exit_code == 1
        assert result.stdout.splitlines() == [
            "WARNING: Can't find file missing.json",
            "WARNING: Can't find default file maze.json",
        ]

    def test_path_command(self):
        result = self.runner.invoke(
            app, ["path", self.scenario("open_grid.json"), "0", "0", "2", "0"]
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "cost: 2.0",
            "(0, 0) -> (1, 0) -> (2, 0)",
        ]

    def test_path_command_unreachable(self):
        result = self.runner.invoke(
            app, ["path", self.scenario("walled_corridor.json"), "2", "0", "0", "0"]
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["cost: Infinity", "unreachable"]

    def test_path_command_out_of_range(self):
        result = self.runner.invoke(
            app, ["path", self.scenario("open_grid.json"), "0", "0", "9", "0"]
        )
        assert result.exit_code == 2
        assert "out of range" in result.stdout

    def test_broken_search_config(self, tmp_path):
        for name, content in [("list.yaml", "- a\n- b\n"), ("bad.yaml", "x: [1\n")]:
            config = tmp_path / name
            config.write_text(content)
            result = self.runner.invoke(
                app,
                [
                    "distances",
                    self.scenario("open_grid.json"),
                    "--config",
                    str(config),
                ],
            )
            assert result.exit_code == 2
            assert result.stdout.startswith("ERROR:")

    def test_tiny_costs_use_scientific_notation(self, tmp_path):
        maze = tmp_path / "tiny.json"
        maze.write_text(
            json.dumps(
                {
                    "width": 2,
                    "height": 1,
                    "vwalls": [{"x": 1, "y": 0, "cost": 1e-5}],
                    "quests": [{"from": {"x": 0, "y": 0}, "to": {"x": 1, "y": 0}}],
                }
            )
        )
        result = self.runner.invoke(app, ["distances", str(maze)])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["distance from (0, 0) to (1, 0): 1.0E-5"]
