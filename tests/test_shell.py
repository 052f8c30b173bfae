"""
Tests for the interactive shell.
"""
import click
import pytest
from unittest.mock import MagicMock
from click.testing import CliRunner

from tasklist.cli import cli
from tasklist.models import TaskListing
from tasklist.services import TaskListService
from tasklist.shell import TaskShell, format_listing


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


def run_shell(runner, lines, args=("--memory",)):
    """Run the shell with one input line per entry."""
    return runner.invoke(cli, [*args, "shell"], input="".join(f"{line}\n" for line in lines))


class TestFormatListing:
    """Tests for format_listing."""

    def test_empty(self):
        assert format_listing([]) == "Your Todos:\n  No todos yet."

    def test_markers(self):
        text = format_listing([TaskListing(1, False, "a"), TaskListing(2, True, "b")])
        assert text.splitlines() == ["Your Todos:", "  1. [ ] a", "  2. [x] b"]


class TestShellLoop:
    """Tests for the read-dispatch loop."""

    def test_exit(self, runner):
        result = run_shell(runner, ["exit"])
        assert result.exit_code == 0
        assert "Welcome to Todo CLI!" in result.output
        assert "See you next time!" in result.output

    def test_end_of_input_exits(self, service, monkeypatch, capsys):
        lines = iter(["add", "buy milk"])

        def fake_input(prompt=""):
            try:
                return next(lines)
            except StopIteration:
                raise EOFError()

        monkeypatch.setattr("click.termui.visible_prompt_func", fake_input)
        TaskShell(service).run()

        assert [t.title for t in service.tasks] == ["buy milk"]
        assert "See you next time!" in capsys.readouterr().out

    def test_command_is_case_insensitive(self, runner):
        result = run_shell(runner, ["  ADD ", "buy milk", "List", "exit"])
        assert result.exit_code == 0
        assert "1. [ ] buy milk" in result.output

    def test_unknown_command(self, runner):
        result = run_shell(runner, ["frobnicate", "exit"])
        assert "The chosen action is not supported. Please select again!" in result.output

    def test_empty_command_is_unknown(self, runner):
        result = run_shell(runner, ["", "exit"])
        assert "not supported" in result.output

    def test_add_list_toggle_delete(self, runner):
        result = run_shell(runner, [
            "add", "buy milk",
            "add", "walk dog",
            "toggle", "1",
            "delete", "2",
            "list",
            "exit",
        ])
        assert result.exit_code == 0
        assert result.output.count("Todo added") == 2
        assert "Todo completion status toggled!" in result.output
        assert "Todo deleted!" in result.output
        final_listing = result.output.rsplit("Your Todos:", 1)[1]
        assert "1. [x] buy milk" in final_listing
        assert "walk dog" not in final_listing

    def test_toggle_invalid_number(self, runner):
        result = run_shell(runner, ["add", "a", "toggle", "one", "list", "exit"])
        assert "Invalid number." in result.output
        assert "1. [ ] a" in result.output.rsplit("Your Todos:", 1)[1]

    @pytest.mark.parametrize("position", ["0", "2", "-1"])
    def test_delete_out_of_range(self, runner, position):
        result = run_shell(runner, ["add", "a", "delete", position, "list", "exit"])
        assert "Index out of range." in result.output
        assert "1. [ ] a" in result.output.rsplit("Your Todos:", 1)[1]

    def test_shell_persists_to_file_store(self, runner, store_dir):
        run_shell(runner, ["add", "buy milk", "exit"], args=())
        result = runner.invoke(cli, ["list"])
        assert "1. [ ] buy milk" in result.output
        assert (store_dir / "todos.json").exists()


class TestShellValidation:
    """The shell never calls toggle/delete with an unchecked index."""

    def test_out_of_range_never_reaches_service(self, runner):
        service = MagicMock(spec=TaskListService)
        service.list_tasks.return_value = []
        service.is_in_range.return_value = False

        result = runner.invoke(
            _shell_command(service), input="toggle\n1\ndelete\n1\nexit\n"
        )

        assert result.exit_code == 0
        service.is_in_range.assert_called_with(0)
        service.toggle_completion.assert_not_called()
        service.delete_task.assert_not_called()


def _shell_command(service):
    """Wrap a TaskShell over the given service in a click command."""
    @click.command()
    def command():
        TaskShell(service).run()

    return command
