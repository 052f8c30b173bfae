"""
Data models for tasklist.
"""
from tasklist.models.task_models import Task, TaskListing, TaskListAdapter

__all__ = ["Task", "TaskListing", "TaskListAdapter"]
