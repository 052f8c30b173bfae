"""
Tests for the argparse entry point and the Command lifecycle.
"""
import argparse

import pytest

from tasklist.__main__ import Command, get_command, list_commands, main, register_command
from tasklist.commands.cli import CLICommand
from tasklist.commands.shell import ShellCommand
from tasklist.storage import InMemoryTaskStore


class RecordingCommand(Command):
    """Command that records its lifecycle."""

    def __init__(self, args=None):
        super().__init__(args)
        self.calls = []

    def init(self):
        super().init()
        self.calls.append("init")

    def run(self) -> int:
        self.calls.append("run")
        return 0

    def cleanup(self):
        super().cleanup()
        self.calls.append("cleanup")


class TestCommand:
    """Tests for the Command base class."""

    def test_name_from_class(self):
        assert ShellCommand.get_name() == "shell"
        assert CLICommand.get_name() == "cli"

    def test_description_from_docstring(self):
        assert RecordingCommand.get_description() == "Command that records its lifecycle."

    def test_context_manager_lifecycle(self):
        cmd = RecordingCommand()
        with cmd:
            cmd.run()
        assert cmd.calls == ["init", "run", "cleanup"]

    def test_cleanup_runs_on_error(self):
        cmd = RecordingCommand()
        with pytest.raises(RuntimeError):
            with cmd:
                raise RuntimeError("boom")
        assert cmd.calls == ["init", "cleanup"]

    def test_description_is_first_docstring_line(self):
        assert ShellCommand.get_description() == "Run the interactive todo shell."

    def test_shell_command_owns_service_for_session(self):
        cmd = ShellCommand(argparse.Namespace(name=None, store_dir=None, memory=True))
        assert cmd.service is None
        with cmd:
            assert isinstance(cmd.service.store, InMemoryTaskStore)
        assert cmd.service is None

    def test_register_command(self):
        register_command(RecordingCommand)
        assert get_command("recording") is RecordingCommand
        assert "recording" in list_commands()


class TestMain:
    """Tests for main()."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "COMMAND" in capsys.readouterr().out

    def test_builtin_commands_registered(self):
        main([])
        commands = list_commands()
        assert commands["shell"] is ShellCommand
        assert commands["cli"] is CLICommand

    def test_cli_passthrough(self, capsys, store_dir):
        assert main(["cli", "add", "buy", "milk"]) == 0
        assert main(["cli", "list"]) == 0
        assert "1. [ ] buy milk" in capsys.readouterr().out
        assert (store_dir / "todos.json").exists()

    def test_cli_passthrough_exit_code(self):
        assert main(["cli", "toggle", "1"]) == 1

    def test_shell_command(self, monkeypatch, capsys):
        lines = iter(["add", "buy milk", "list", "exit"])
        monkeypatch.setattr("click.termui.visible_prompt_func", lambda prompt="": next(lines))
        assert main(["shell", "--memory"]) == 0
        out = capsys.readouterr().out
        assert "1. [ ] buy milk" in out
        assert "See you next time!" in out

    def test_shell_command_uses_named_store(self, monkeypatch, store_dir):
        lines = iter(["add", "x", "exit"])
        monkeypatch.setattr("click.termui.visible_prompt_func", lambda prompt="": next(lines))
        assert main(["shell", "--name", "work"]) == 0
        assert (store_dir / "work.json").exists()
