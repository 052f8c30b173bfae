"""
Storage abstraction layer.
Provides a clean interface for task persistence that can be swapped out.
"""
from .interface import TaskStore
from .memory_store import InMemoryTaskStore
from .json_file_store import JSONFileTaskStore
from .factory import create_store

__all__ = [
    'TaskStore',
    'InMemoryTaskStore',
    'JSONFileTaskStore',
    'create_store',
]
