"""End-to-end tests for the pattern-catalog command line."""

import json

import pytest
import yaml

from src.cli.main import main


class TestListCommand:
    """Test listing demos."""

    def test_list_json(self, capsys):
        assert main(["--format", "json", "list"]) == 0
        demos = json.loads(capsys.readouterr().out)["demos"]
        assert len(demos) == 21
        assert demos[0]["category"] == "behavioral"
        assert {"name": "iterator", "category": "behavioral",
                "summary": "Traverse friends and coworkers of a profile lazily"} in demos

    def test_list_by_category(self, capsys):
        assert main(["--format", "json", "list", "--category", "structural"]) == 0
        demos = json.loads(capsys.readouterr().out)["demos"]
        assert [d["name"] for d in demos] == [
            "adapter", "bridge", "composite", "decorator", "flyweight", "proxy",
        ]

    def test_list_table_is_default(self, capsys):
        assert main(["list"]) == 0
        out = capsys.readouterr().out
        assert "Name" in out
        assert "chain-of-responsibility" in out
        assert "proxy" in out

    def test_list_plain(self, capsys):
        assert main(["--format", "list", "list", "--category", "creational"]) == 0
        out = capsys.readouterr().out
        assert "singleton (creational)" in out


class TestDescribeCommand:
    """Test describing a demo."""

    def test_describe_yaml(self, capsys):
        assert main(["describe", "flyweight", "--format", "yaml"]) == 0
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["name"] == "flyweight"
        assert data["category"] == "structural"
        assert "Problem:" in data["description"]

    def test_global_format_applies_to_describe(self, capsys):
        assert main(["--format", "json", "describe", "iterator"]) == 0
        assert json.loads(capsys.readouterr().out)["name"] == "iterator"

    def test_describe_unknown_demo(self, capsys):
        assert main(["describe", "monad"]) == 1
        body = json.loads(capsys.readouterr().out)
        assert body["error"] == "DEMO_NOT_FOUND"
        assert "iterator" in body["details"]["available"]


class TestRunCommand:
    """Test running demos."""

    def test_run_single_demo(self, capsys):
        assert main(["run", "state"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "=== state (behavioral) ==="
        assert lines[-1] == "Final state: stopped"

    def test_run_several_demos_in_given_order(self, capsys):
        assert main(["run", "strategy", "adapter"]) == 0
        out = capsys.readouterr().out
        assert out.index("=== strategy (behavioral) ===") < out.index("=== adapter (structural) ===")

    def test_run_all(self, capsys):
        assert main(["run", "--all"]) == 0
        out = capsys.readouterr().out
        assert out.count("=== ") == 21

    def test_unknown_name_runs_nothing(self, capsys):
        assert main(["run", "state", "monad"]) == 1
        out = capsys.readouterr().out
        assert "Playing..." not in out
        assert json.loads(out)["details"]["available"]

    def test_headers_can_be_disabled(self, capsys, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"catalog": {"show_headers": False}}))
        assert main(["--config", str(config_file), "run", "adapter"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Round peg r=5 fits hole r=5: True"

    def test_logging_goes_to_stderr(self, capsys):
        assert main(["--log-level", "DEBUG", "run", "proxy"]) == 0
        captured = capsys.readouterr()
        assert "Running demo" in captured.err
        assert "Running demo" not in captured.out


class TestUsageErrors:
    """Test argument and configuration errors."""

    def test_run_without_names(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["run"])
        assert exc_info.value.code == 2

    def test_run_names_and_all(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "state", "--all"])
        assert exc_info.value.code == 2

    def test_missing_command(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "pattern-catalog 1.0.0" in capsys.readouterr().out

    def test_invalid_config_file(self, capsys, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"catalog": {"output_format": "xml"}}))
        assert main(["--config", str(config_file), "list"]) == 1
        assert json.loads(capsys.readouterr().out)["error"] == "CONFIGURATION_ERROR"

    def test_disabled_category_demo_not_found(self, capsys, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"catalog": {"enabled_categories": ["creational"]}}))
        assert main(["--config", str(config_file), "run", "iterator"]) == 1
        assert json.loads(capsys.readouterr().out)["error"] == "DEMO_NOT_FOUND"
