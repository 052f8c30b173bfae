"""
Volatile in-process task store.
"""
import logging
from typing import List, Sequence

from tasklist.models import Task
from tasklist.storage.interface import TaskStore

logger = logging.getLogger(__name__)


class InMemoryTaskStore(TaskStore):
    """Keeps the last saved snapshot in memory for the life of the process."""

    def __init__(self):
        self._tasks: List[Task] = []

    def save(self, tasks: Sequence[Task]) -> None:
        self._tasks = list(tasks)
        logger.debug(f"Saved {len(self._tasks)} task(s) in memory")

    def load(self) -> List[Task]:
        return list(self._tasks)
