"""
Factory for the configured task store.
"""
import logging
from typing import Optional

from tasklist.config import Settings, get_settings
from tasklist.storage.interface import TaskStore
from tasklist.storage.json_file_store import JSONFileTaskStore
from tasklist.storage.memory_store import InMemoryTaskStore

logger = logging.getLogger(__name__)


def create_store(
    settings: Optional[Settings] = None,
    name: Optional[str] = None,
    backend: Optional[str] = None,
) -> TaskStore:
    """
    Create a task store from settings.

    Args:
        settings: Settings to use. If None, uses get_settings().
        name: Store name overriding settings.store_name
        backend: "file" or "memory", overriding settings.storage_backend

    Returns:
        A fresh TaskStore instance

    Raises:
        ValueError: If the backend is unknown
    """
    settings = settings or get_settings()
    backend = backend or settings.storage_backend

    if backend == "memory":
        logger.debug("Using in-memory task store")
        return InMemoryTaskStore()
    if backend == "file":
        store = JSONFileTaskStore(
            name or settings.store_name,
            directory=settings.store_dir,
            extension=settings.store_extension,
        )
        logger.debug(f"Using JSON file task store at {store.path}")
        return store
    raise ValueError(f"Unsupported storage backend: {backend}")
