"""
Standard exceptions for the application.
"""
from tasklist.exceptions.errors import (
    ServiceError,
    TaskIndexError,
    StorageError,
)

__all__ = [
    "ServiceError",
    "TaskIndexError",
    "StorageError",
]
