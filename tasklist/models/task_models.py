"""
Task models.

Task is immutable; the only state change a task ever sees (completion) is
expressed by replacing it with a toggled copy.
"""
from typing import List, NamedTuple
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, TypeAdapter


class Task(BaseModel):
    """A single to-do item.

    All three fields are required when validating, so a persisted record
    missing any of ``id``, ``title`` or ``isCompleted`` is rejected. The
    completion flag is only accepted under its persisted key ``isCompleted``.
    Use Task.new() to create a fresh task.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    title: StrictStr
    is_completed: StrictBool = Field(alias="isCompleted")

    @classmethod
    def new(cls, title: str) -> "Task":
        """Create a not yet completed task with a fresh id."""
        return cls(id=uuid4(), title=title, isCompleted=False)

    def toggled(self) -> "Task":
        """Return a copy of this task with the completion flag flipped."""
        return self.model_copy(update={"is_completed": not self.is_completed})


class TaskListing(NamedTuple):
    """Display row for one task: 1-based position, completion flag, title."""
    position: int
    completed: bool
    title: str


# Validates and serializes whole task lists (the persisted document)
TaskListAdapter = TypeAdapter(List[Task])
