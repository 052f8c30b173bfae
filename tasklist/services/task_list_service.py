"""
Task list service - business logic for the ordered to-do list.
This layer contains no console or CLI dependencies.

Every mutation changes the in-memory list first and then hands a full
snapshot to the store. Store failures are absorbed by the store, so a
mutation always takes effect for the running session even when it could not
be persisted.
"""
import logging
from typing import List

from tasklist.exceptions import TaskIndexError
from tasklist.models import Task, TaskListing
from tasklist.storage import TaskStore

logger = logging.getLogger(__name__)


class TaskListService:
    """Service owning the session's task list."""

    def __init__(self, store: TaskStore):
        """
        Initialize the service and load the persisted tasks.

        Args:
            store: TaskStore used for every save; fixed for the service's lifetime
        """
        self._store = store
        self._tasks: List[Task] = list(store.load() or [])
        logger.debug(f"Task list initialized with {len(self._tasks)} task(s)")

    @property
    def store(self) -> TaskStore:
        return self._store

    @property
    def tasks(self) -> List[Task]:
        """Copy of the current task list."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def add_task(self, title: str) -> Task:
        """
        Append a new, not yet completed task.

        Titles are not validated; an empty title is accepted.

        Args:
            title: Task title

        Returns:
            The created task
        """
        task = Task.new(title)
        self._tasks.append(task)
        logger.info(f"Added task {task.id}: {title!r}")
        self._save()
        return task

    def list_tasks(self) -> List[TaskListing]:
        """
        List tasks for display.

        Returns:
            One TaskListing per task, in order, with 1-based positions
        """
        return [
            TaskListing(position=index + 1, completed=task.is_completed, title=task.title)
            for index, task in enumerate(self._tasks)
        ]

    def toggle_completion(self, index: int) -> Task:
        """
        Flip the completion flag of the task at a 0-based position.

        Args:
            index: 0-based position

        Returns:
            The updated task

        Raises:
            TaskIndexError: If index is out of range (nothing changes or saves)
        """
        self._check_index(index)
        task = self._tasks[index].toggled()
        self._tasks[index] = task
        logger.info(f"Toggled task {task.id} to completed={task.is_completed}")
        self._save()
        return task

    def delete_task(self, index: int) -> Task:
        """
        Remove the task at a 0-based position; later tasks shift down by one.

        Args:
            index: 0-based position

        Returns:
            The removed task

        Raises:
            TaskIndexError: If index is out of range (nothing changes or saves)
        """
        self._check_index(index)
        task = self._tasks.pop(index)
        logger.info(f"Deleted task {task.id}: {task.title!r}")
        self._save()
        return task

    def is_in_range(self, index: int) -> bool:
        """Return True if index is a valid 0-based position."""
        return 0 <= index < len(self._tasks)

    def _check_index(self, index: int) -> None:
        if not self.is_in_range(index):
            raise TaskIndexError(index, len(self._tasks))

    def _save(self) -> None:
        self._store.save(list(self._tasks))
