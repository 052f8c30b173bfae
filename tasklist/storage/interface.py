"""
Abstract persistence interface for task lists.

Implementations store and return full snapshots of the task list: every save
replaces the whole record, every load returns the whole record.
"""
from abc import ABC, abstractmethod
from typing import List, Sequence

from tasklist.models import Task


class TaskStore(ABC):
    """Abstract save/load capability used by TaskListService."""

    @abstractmethod
    def save(self, tasks: Sequence[Task]) -> None:
        """
        Replace the persisted record with the given tasks, preserving order.

        Must accept an empty sequence (clears the record). Must not raise on
        I/O failure; implementations log the failure and return.

        Args:
            tasks: Complete ordered task list to persist
        """
        pass

    @abstractmethod
    def load(self) -> List[Task]:
        """
        Return the most recently saved tasks, in order.

        An empty list means "no record": nothing saved yet, or the record is
        missing or unreadable. Must not raise.

        Returns:
            A new list the caller may own and mutate
        """
        pass
