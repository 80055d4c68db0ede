"""Tests for the click front end."""

import json

import pytest
from click.testing import CliRunner

from arc import cli
from arc.config import Config
from arc.ui import farewell, greeting


@pytest.fixture
def config(tmp_path):
    return Config(data_dir=tmp_path / "data")


@pytest.fixture
def runner(monkeypatch, config):
    monkeypatch.setattr(cli, "load_config", lambda: config)
    return CliRunner()


class TestChat:
    def test_session_until_bye(self, runner, config):
        result = runner.invoke(cli.main, ["chat"], input="todo buy milk\nlist\nbye\nlist\n")

        assert result.exit_code == 0
        assert greeting() in result.output
        assert "1.[ ] buy milk" in result.output
        assert farewell() in result.output
        # Nothing after bye is processed
        assert result.output.count("Here are the tasks in your list:") == 1

        saved = json.loads((config.data_dir / "tasks.json").read_text())
        assert saved == [{"kind": "todo", "title": "buy milk", "is_done": False}]

    def test_default_subcommand_is_chat(self, runner):
        result = runner.invoke(cli.main, [], input="bye\n")
        assert result.exit_code == 0
        assert farewell() in result.output

    def test_errors_do_not_end_session(self, runner):
        result = runner.invoke(cli.main, ["chat"], input="foo\nlist extra\nbye\n")
        assert result.exit_code == 0
        assert "Error: I'm sorry, but I don't know what that means :-(" in result.output
        assert "Error: The arguments given to this command are invalid." in result.output
        assert farewell() in result.output

    def test_end_of_input_exits_cleanly(self, runner):
        result = runner.invoke(cli.main, ["chat"], input="todo a\n")
        assert result.exit_code == 0

    def test_loads_previous_session(self, runner):
        runner.invoke(cli.main, ["chat"], input="note plan trip /desc book flights\nbye\n")
        result = runner.invoke(cli.main, ["chat"], input="notes\nbye\n")
        assert "1.plan trip: book flights" in result.output


class TestDo:
    def test_runs_one_command(self, runner):
        result = runner.invoke(cli.main, ["do", "deadline submit report /by 31/12/2024"])
        assert result.exit_code == 0
        assert "[ ] submit report (by: Dec 31 2024)" in result.output

        result = runner.invoke(cli.main, ["do", "list"])
        assert "1.[ ] submit report (by: Dec 31 2024)" in result.output

    def test_error_exit_code(self, runner):
        result = runner.invoke(cli.main, ["do", "deadline x /by tomorrow"])
        assert result.exit_code == 1
        assert "Error: Date format should be dd/mm/yyyy" in result.output

    def test_storage_failure_exit_code(self, runner, config, monkeypatch):
        def fail(self, collection):
            raise OSError("read-only")

        monkeypatch.setattr(cli.FileStorage, "save", fail)
        result = runner.invoke(cli.main, ["do", "todo a"])
        assert result.exit_code == 1
        assert "read-only" in result.output
