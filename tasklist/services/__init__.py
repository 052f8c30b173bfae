"""
Service layer for business logic.
Services contain pure business logic without console or CLI dependencies.
"""

from tasklist.services.task_list_service import TaskListService

__all__ = ["TaskListService"]
