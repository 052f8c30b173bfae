"""
Interactive read-dispatch loop over a TaskListService.

Positions are entered 1-based and validated with is_in_range before the
service is called, so toggle/delete never see a bad index from here.
"""
import logging
from typing import Iterable, Optional

import click

from tasklist.models import TaskListing
from tasklist.services import TaskListService

logger = logging.getLogger(__name__)

COMMANDS = ("add", "list", "toggle", "delete", "exit")
COMMAND_PROMPT = f"What would you like to do? ({', '.join(COMMANDS)})"


def format_listing(listings: Iterable[TaskListing]) -> str:
    """Format task listings for display."""
    lines = ["Your Todos:"]
    for listing in listings:
        marker = "[x]" if listing.completed else "[ ]"
        lines.append(f"  {listing.position}. {marker} {listing.title}")
    if len(lines) == 1:
        lines.append("  No todos yet.")
    return "\n".join(lines)


class TaskShell:
    """Interactive shell for one task list session."""

    def __init__(self, service: TaskListService):
        self.service = service

    def run(self) -> None:
        """Prompt for commands until 'exit' or end of input."""
        click.echo("Welcome to Todo CLI!")
        try:
            while True:
                command = self._input_command()
                if command == "exit":
                    break
                self._handle_command(command)
        except click.Abort:
            # Ctrl-C or end of input while prompting
            click.echo()
            logger.debug("Shell input ended")
        click.echo("Thanks for using Todo CLI! See you next time!")

    # -------------------- command dispatch --------------------
    def _input_command(self) -> str:
        return self._prompt(COMMAND_PROMPT).strip().lower()

    def _handle_command(self, command: str) -> None:
        if command == "add":
            self._add()
        elif command == "list":
            self._list()
        elif command == "toggle":
            self._toggle()
        elif command == "delete":
            self._delete()
        else:
            click.echo("The chosen action is not supported. Please select again!")

    # -------------------- user-interactive flows --------------------
    def _add(self) -> None:
        title = self._prompt("Enter todo title")
        self.service.add_task(title)
        click.echo("Todo added")

    def _list(self) -> None:
        click.echo(format_listing(self.service.list_tasks()))

    def _toggle(self) -> None:
        self._list()
        index = self._input_index("toggle")
        if index is None:
            return
        self.service.toggle_completion(index)
        click.echo("Todo completion status toggled!")

    def _delete(self) -> None:
        self._list()
        index = self._input_index("delete")
        if index is None:
            return
        self.service.delete_task(index)
        click.echo("Todo deleted!")

    def _input_index(self, action: str) -> Optional[int]:
        """Read a 1-based position and return it 0-based, or None if unusable."""
        raw = self._prompt(f"Enter the number of the todo to {action}").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            click.echo("Invalid number.")
            return None
        if not self.service.is_in_range(index):
            click.echo("Index out of range.")
            return None
        return index

    @staticmethod
    def _prompt(text: str) -> str:
        return click.prompt(text, default="", show_default=False)
