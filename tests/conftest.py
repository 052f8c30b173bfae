"""
Pytest configuration and shared fixtures.
Every test runs with the store directory pointed at a temporary directory so
nothing ever touches the real home directory.
"""
import pytest

from tasklist.config import get_settings
from tasklist.services import TaskListService
from tasklist.storage import InMemoryTaskStore, JSONFileTaskStore


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point settings at a temp store dir and reset the settings cache."""
    for var in ("TASKLIST_STORE_NAME", "TASKLIST_STORE_EXTENSION",
                "TASKLIST_STORAGE_BACKEND", "TASKLIST_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    store_dir = tmp_path / "store"
    monkeypatch.setenv("TASKLIST_STORE_DIR", str(store_dir))
    # Keep a stray .env in the working directory out of the settings
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield store_dir
    get_settings.cache_clear()


@pytest.fixture
def store_dir(isolated_settings):
    """Directory holding file-backed stores for this test."""
    return isolated_settings


@pytest.fixture
def memory_store():
    """Fresh volatile store."""
    return InMemoryTaskStore()


@pytest.fixture
def file_store(store_dir):
    """Fresh file-backed store named 'todos' in the temp store dir."""
    return JSONFileTaskStore("todos", directory=store_dir)


@pytest.fixture
def service(memory_store):
    """TaskListService over a volatile store."""
    return TaskListService(memory_store)
