"""Tests for CLI interface."""

import json
from pathlib import Path

import pytest

from astar_search.cli.main import main_cli, create_parser
from astar_search.cli.commands import build_overrides, result_to_dict
from astar_search.cli.utils import save_results, format_duration
from astar_search.search.astar import SearchResult, SearchStatistics
from astar_search.grid import Coord
from astar_search.config.config_manager import default_config_dir

PROJECT_CONF_DIR = str(default_config_dir())


@pytest.fixture
def open_map(tmp_path):
    map_file = tmp_path / "open.txt"
    map_file.write_text("3 3\ns  \n   \n  g\n", encoding='utf-8')
    return map_file


@pytest.fixture
def walled_map(tmp_path):
    map_file = tmp_path / "walled.txt"
    map_file.write_text("3 3\ns# \n## \n  g\n", encoding='utf-8')
    return map_file


class TestCLIParser:
    """Test CLI argument parsing."""

    def test_create_parser(self):
        parser = create_parser()
        assert parser.prog == 'astar-search'

    def test_solve_command_parsing(self):
        parser = create_parser()

        args = parser.parse_args(['solve', 'map.txt'])
        assert args.command == 'solve'
        assert args.map_file == 'map.txt'
        assert args.connectivity is None
        assert args.no_heuristic is False
        assert args.random_ties is False
        assert args.no_color is False

        args = parser.parse_args([
            '-c', 'search.log_interval=5', '-c', 'render.color=false',
            'solve', 'map.txt',
            '--connectivity', '8',
            '--no-heuristic',
            '--random-ties',
            '--no-color'
        ])
        assert args.config == ['search.log_interval=5', 'render.color=false']
        assert args.connectivity == 8
        assert args.no_heuristic is True
        assert args.random_ties is True
        assert args.no_color is True

    def test_invalid_connectivity(self):
        parser = create_parser()

        with pytest.raises(SystemExit):
            parser.parse_args(['solve', 'map.txt', '--connectivity', '6'])

    def test_config_command_parsing(self):
        parser = create_parser()

        args = parser.parse_args(['config', 'show'])
        assert args.command == 'config'
        assert args.config_action == 'show'

        args = parser.parse_args(['config', 'validate'])
        assert args.config_action == 'validate'

    def test_global_options(self):
        parser = create_parser()

        args = parser.parse_args(['-vv', '-o', 'out.json', '--config-dir', 'conf', 'solve', 'map.txt'])
        assert args.verbose == 2
        assert args.output == 'out.json'
        assert args.config_dir == 'conf'
        assert args.quiet is False

    def test_build_overrides(self):
        parser = create_parser()
        args = parser.parse_args([
            '-c', 'grid.connectivity=4',
            'solve', 'map.txt', '--connectivity', '8', '--no-heuristic', '--no-color'
        ])

        assert build_overrides(args) == [
            'grid.connectivity=8',
            'search.use_heuristic=false',
            'render.color=false',
            'grid.connectivity=4',
        ]


class TestCLIUtils:
    """Test CLI utility functions."""

    def test_format_duration(self):
        assert format_duration(0.0000005) == "0.5µs"
        assert format_duration(0.25) == "250.0ms"
        assert format_duration(2.5) == "2.50s"
        assert format_duration(125) == "2m 5.0s"

    def test_save_results(self, tmp_path):
        output = tmp_path / "nested" / "result.json"

        save_results({'path': [Coord(0, 0), Coord(1, 0)], 'cost': 1}, output)

        with open(output) as f:
            data = json.load(f)
        assert data == {'path': [[0, 0], [1, 0]], 'cost': 1}

    def test_result_to_dict(self):
        result = SearchResult(
            path=[Coord(0, 0), Coord(0, 1)],
            cost=1,
            expansion_count=1,
            statistics=SearchStatistics(nodes_expanded=1, nodes_generated=3)
        )

        data = result_to_dict(result, 'map.txt')

        assert data['success'] is True
        assert data['path'] == [[0, 0], [0, 1]]
        assert data['cost'] == 1
        assert data['statistics']['nodes_generated'] == 3

    def test_result_to_dict_no_path(self):
        data = result_to_dict(None, 'map.txt')

        assert data['success'] is False
        assert data['map_file'] == 'map.txt'


class TestMainCLI:
    """Test running commands through main_cli."""

    def test_no_command(self, capsys):
        assert main_cli([]) == 1
        assert 'usage' in capsys.readouterr().out

    def test_solve(self, open_map, capsys):
        exit_code = main_cli(['--config-dir', PROJECT_CONF_DIR, 'solve', str(open_map), '--no-color'])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "from: (0, 0) -> to: (2, 2)" in out
        assert "cost: 4" in out
        assert "path length: 5" in out
        assert out.count('•') == 3

    def test_solve_with_diagonals(self, open_map, capsys):
        exit_code = main_cli([
            '--config-dir', PROJECT_CONF_DIR,
            '-c', 'grid.connectivity=8',
            'solve', str(open_map), '--no-color'
        ])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "cost: 2" in out

    def test_solve_colored(self, open_map, capsys):
        assert main_cli(['--config-dir', PROJECT_CONF_DIR, 'solve', str(open_map)]) == 0

        assert "\033[32m✓\033[0m" in capsys.readouterr().out

    def test_solve_outside_checkout_uses_packaged_config(self, open_map, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        exit_code = main_cli(['solve', str(open_map), '--no-color'])

        assert exit_code == 0
        assert "cost: 4" in capsys.readouterr().out

    def test_solve_no_path(self, walled_map, capsys):
        exit_code = main_cli(['--config-dir', PROJECT_CONF_DIR, 'solve', str(walled_map)])

        assert exit_code == 1
        assert "couldn't find goal" in capsys.readouterr().out

    def test_solve_writes_json(self, open_map, tmp_path):
        output = tmp_path / "result.json"

        exit_code = main_cli([
            '--config-dir', PROJECT_CONF_DIR, '-q', '-o', str(output),
            'solve', str(open_map), '--no-heuristic'
        ])

        assert exit_code == 0
        with open(output) as f:
            data = json.load(f)
        assert data['success'] is True
        assert data['cost'] == 4
        assert data['path'][0] == [0, 0]
        assert data['path'][-1] == [2, 2]
        assert data['map_file'] == str(open_map)
        assert data['statistics']['nodes_expanded'] == data['expansion_count']

    def test_solve_missing_map(self, tmp_path):
        assert main_cli(['--config-dir', PROJECT_CONF_DIR, 'solve', str(tmp_path / "none.txt")]) == 1

    def test_config_show(self, capsys):
        assert main_cli(['--config-dir', PROJECT_CONF_DIR, 'config', 'show']) == 0

        out = capsys.readouterr().out
        assert "search:" in out
        assert "connectivity: 4" in out

    def test_config_validate(self, capsys):
        assert main_cli(['--config-dir', PROJECT_CONF_DIR, 'config', 'validate']) == 0
        assert "Configuration is valid" in capsys.readouterr().out

    def test_config_validate_rejects_override(self, capsys):
        exit_code = main_cli([
            '--config-dir', PROJECT_CONF_DIR, '-c', 'grid.connectivity=5', 'config', 'validate'
        ])

        assert exit_code == 1
        assert "Configuration validation failed" in capsys.readouterr().out
