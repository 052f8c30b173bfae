#!/usr/bin/env python3
"""
tasklist - Main entry point

Parses the subcommand, builds the matching Command and runs it inside its
init/cleanup lifecycle.
"""
import argparse
import sys
import logging
from abc import ABC, abstractmethod
from typing import Optional, Dict, List

from tasklist.config import configure_logging

logger = logging.getLogger(__name__)


class Command(ABC):
    """
    Base class for argparse subcommands.

    A command declares its options in add_arguments() and is run as a context
    manager around run(). Override init() to acquire what run() needs from the
    parsed args; cleanup() runs on the way out even if run() raises.
    """

    def __init__(self, args: Optional[argparse.Namespace] = None):
        self.args = args

    @classmethod
    def get_name(cls) -> str:
        """Subcommand name: "ShellCommand" -> "shell"."""
        return cls.__name__.replace("Command", "").lower()

    @classmethod
    def get_description(cls) -> str:
        """First line of the class docstring, for help text."""
        doc = (cls.__doc__ or "").strip()
        return doc.splitlines()[0] if doc else f"{cls.__name__} command"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        pass

    def init(self) -> None:
        pass

    @abstractmethod
    def run(self) -> int:
        """
        Execute the command.

        Returns:
            Exit code (0 for success, non-zero for failure)
        """

    def cleanup(self) -> None:
        pass

    def __enter__(self):
        self.init()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup()
        return False


_COMMANDS: Dict[str, type] = {}


def register_command(command_class: type) -> None:
    """Register a command class."""
    name = command_class.get_name()
    _COMMANDS[name] = command_class


def get_command(name: str) -> Optional[type]:
    """Get a registered command class by name."""
    return _COMMANDS.get(name)


def list_commands() -> Dict[str, type]:
    """List all registered commands."""
    return _COMMANDS.copy()


def _register_builtin_commands() -> None:
    # Imported here to avoid circular imports with tasklist.commands
    from tasklist.commands.shell import ShellCommand
    from tasklist.commands.cli import CLICommand
    register_command(ShellCommand)
    register_command(CLICommand)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the tasklist package."""
    configure_logging()

    parser = argparse.ArgumentParser(
        description="tasklist - command-line todo list manager",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to run",
        metavar="COMMAND"
    )

    _register_builtin_commands()

    for name, cmd_class in _COMMANDS.items():
        subparser = subparsers.add_parser(
            name,
            help=cmd_class.get_description(),
            description=cmd_class.get_description()
        )
        cmd_class.add_arguments(subparser)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cmd_class = get_command(args.command)
    if not cmd_class:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1

    try:
        cmd = cmd_class(args)
        with cmd:
            return cmd.run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"Command failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
