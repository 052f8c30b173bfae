"""
Exception hierarchy for tasklist.

All tasklist-specific exceptions inherit from ServiceError so callers (the
interactive shell and the click CLI) can catch a single base type.
"""
from typing import Any


# ============================================================================
# Base Exception Class
# ============================================================================

class ServiceError(Exception):
    """Base exception for all tasklist errors.

    Attributes:
        message: Human-readable error message
        context: Dictionary of additional context
        original_error: Optional original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        """Initialize service error.

        Args:
            message: Human-readable error message
            context: Optional dictionary of additional context
            original_error: Optional original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_error = original_error

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization.

        Returns:
            Dictionary representation of the exception
        """
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
        }
        if self.context:
            result["context"] = self.context
        if self.original_error:
            result["original_error"] = {
                "type": type(self.original_error).__name__,
                "message": str(self.original_error)
            }
        return result


# ============================================================================
# Task List Exceptions
# ============================================================================

class TaskIndexError(ServiceError, IndexError):
    """Raised when a list position does not address an existing task.

    Also an IndexError, so code written against plain list semantics
    keeps working.

    Attributes:
        index: The 0-based position that was requested
        size: Number of tasks in the list at the time of the request
    """

    def __init__(
        self,
        index: int,
        size: int,
        *,
        message: str | None = None,
        context: dict[str, Any] | None = None
    ):
        if message is None:
            message = f"Task index {index} out of range for list of {size} task(s)"

        super().__init__(message, context=context)
        self.index = index
        self.size = size
        self.context.setdefault("index", index)
        self.context.setdefault("size", size)


class StorageError(ServiceError):
    """Raised when reading or writing the persisted task record fails.

    Stores raise this internally and absorb it at their boundary; it never
    reaches TaskListService callers.

    Attributes:
        operation: "load" or "save"
        path: Optional path of the backing file
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        path: str | None = None,
        original_error: Exception | None = None,
        context: dict[str, Any] | None = None
    ):
        super().__init__(message, context=context, original_error=original_error)
        self.operation = operation
        self.path = path
        self.context.setdefault("operation", operation)
        if path is not None:
            self.context.setdefault("path", path)
