"""Tests for the command-line interface."""

import yaml
from click.testing import CliRunner

from site_percolation.cli.main import cli


def test_run_percolates(tmp_path):
    site_file = tmp_path / "input3.txt"
    site_file.write_text("3\n0 0\n1 0\n2 0\n")

    result = CliRunner().invoke(cli, ['run', str(site_file)])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["3 open sites", "percolates"]


def test_run_with_full_query(tmp_path):
    site_file = tmp_path / "input3.txt"
    site_file.write_text("3\n0 0\n1 0\n2 0\n2 2\n")

    result = CliRunner().invoke(cli, ['run', str(site_file), '2', '2'])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["4 open sites", "percolates", "false"]


def test_run_reports_out_of_bounds(tmp_path):
    site_file = tmp_path / "bad.txt"
    site_file.write_text("2\n0 2\n")

    result = CliRunner().invoke(cli, ['run', str(site_file)])

    assert result.exit_code == 1
    assert "column index 2" in result.output


def test_run_negative_coordinate_reaches_bounds_check(tmp_path):
    site_file = tmp_path / "input.txt"
    site_file.write_text("2\n0 0\n")

    result = CliRunner().invoke(cli, ['run', str(site_file), '-1', '0'])

    assert result.exit_code == 1
    assert "row index -1" in result.output


def test_run_requires_row_and_col(tmp_path):
    site_file = tmp_path / "input.txt"
    site_file.write_text("2\n")

    result = CliRunner().invoke(cli, ['run', str(site_file), '1'])

    assert result.exit_code == 2


def test_run_config(tmp_path):
    inputs = tmp_path / "inputs"
    inputs.mkdir()
    (inputs / "a.txt").write_text("2\n0 0\n1 0\n")
    (inputs / "b.txt").write_text("2\n0 0\n")
    config_path = tmp_path / "run.yaml"
    config_path.write_text(yaml.safe_dump({
        "run_name": "demo",
        "input": {"base_dir": str(inputs), "pattern": "*.txt"},
        "output": {"base_dir": str(tmp_path / "out")},
        "query": {"full": [1, 0]},
    }))

    runner = CliRunner()
    result = runner.invoke(cli, ['run-config', '--config', str(config_path)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "out" / "results" / "a.txt.result").read_text() == "2\tTrue\tTrue\n"
    assert (tmp_path / "out" / "results" / "b.txt.result").read_text() == "1\tFalse\tFalse\n"
    assert (tmp_path / "out" / "results.csv").exists()

    status = runner.invoke(cli, ['status', '--config', str(config_path)])
    assert status.exit_code == 0
    assert "2/2 (100.0%) complete, 0 pending" in status.output
