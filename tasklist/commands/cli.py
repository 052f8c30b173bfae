"""
CLI command - Run the one-shot command-line tool.

This wraps the click-based CLI.
"""
import argparse
import logging
from tasklist.__main__ import Command

logger = logging.getLogger(__name__)


class CLICommand(Command):
    """Run a one-shot todo command (add, list, toggle, delete)."""

    @classmethod
    def add_arguments(cls, parser):
        """Add CLI-specific arguments."""
        # The CLI uses click internally, so we just pass through remaining args
        parser.add_argument(
            "cli_args",
            nargs=argparse.REMAINDER,
            help="Arguments to pass to the CLI tool"
        )

    def run(self) -> int:
        """Run the click CLI with the remaining arguments."""
        from tasklist.cli import cli

        click_args = list(getattr(self.args, "cli_args", None) or [])
        logger.debug(f"Running click CLI with args {click_args}")
        try:
            cli.main(args=click_args, prog_name="tasklist cli")
            return 0
        except SystemExit as e:
            # Click uses SystemExit for exit codes
            if e.code is None:
                return 0
            return e.code if isinstance(e.code, int) else 1
