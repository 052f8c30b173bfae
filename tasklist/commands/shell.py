"""
Shell command - Run the interactive todo shell.
"""
import logging
from tasklist.__main__ import Command

logger = logging.getLogger(__name__)


class ShellCommand(Command):
    """Run the interactive todo shell."""

    def __init__(self, args=None):
        super().__init__(args)
        self.service = None

    @classmethod
    def add_arguments(cls, parser):
        """Add shell-specific arguments."""
        parser.add_argument(
            "--name",
            type=str,
            default=None,
            help="Store name (overrides TASKLIST_STORE_NAME)"
        )
        parser.add_argument(
            "--store-dir",
            type=str,
            default=None,
            help="Directory of the store file (overrides TASKLIST_STORE_DIR)"
        )
        parser.add_argument(
            "--memory",
            action="store_true",
            help="Use a volatile in-memory store (nothing is saved)"
        )

    def init(self):
        """Build the task list service for the session."""
        # Import here to avoid circular dependencies
        from tasklist.cli import build_service

        self.service = build_service(
            store_name=getattr(self.args, "name", None),
            store_dir=getattr(self.args, "store_dir", None),
            memory=getattr(self.args, "memory", False),
        )
        logger.debug(f"Shell session store: {type(self.service.store).__name__}")

    def run(self) -> int:
        """Run the shell until the user exits."""
        from tasklist.shell import TaskShell

        TaskShell(self.service).run()
        return 0

    def cleanup(self):
        """Release the session's service."""
        if self.service is not None:
            logger.debug(f"Shell session ended with {len(self.service)} task(s)")
            self.service = None
