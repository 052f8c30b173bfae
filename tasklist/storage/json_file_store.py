"""
File-backed task store.

The whole task list is written as one JSON document on every save and read
back whole on load. Writes go to a temporary file in the target directory and
are renamed over the target, so a reader sees either the old document or the
new one, never a partial write.
"""
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence, Union

from tasklist.config import DEFAULT_STORE_EXTENSION, ensure_store_directory, get_store_path
from tasklist.exceptions import StorageError
from tasklist.models import Task, TaskListAdapter
from tasklist.storage.interface import TaskStore

logger = logging.getLogger(__name__)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _atomic_write(path: Path, payload: bytes) -> None:
    """Write payload via write-to-temp + rename in the same directory.

    ``path`` should already be resolved, so a symlinked store file is
    rewritten at its target and the link itself is left in place. The new
    file keeps the mode of the file it replaces, or gets the umask default
    when there is none.
    """
    try:
        mode = stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        mode = 0o666 & ~_current_umask()
    fd, tmp_path = tempfile.mkstemp(
        dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, str(path))
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


class JSONFileTaskStore(TaskStore):
    """Persists the task list as a JSON array at ``<directory>/<name><extension>``."""

    def __init__(
        self,
        name: str,
        directory: Optional[Union[str, Path]] = None,
        extension: str = DEFAULT_STORE_EXTENSION,
    ):
        """
        Initialize the store. No file is touched until save() or load().

        Args:
            name: Logical store name, used as the file's base name
            directory: Directory holding the file (configured store_dir if None)
            extension: File extension including the leading dot
        """
        self.name = name
        self.path = get_store_path(name, directory=directory, extension=extension)

    def save(self, tasks: Sequence[Task]) -> None:
        try:
            self._write(tasks)
        except StorageError as e:
            logger.error(f"Error when saving todos: {e.message}", exc_info=e.original_error)
            return
        logger.debug(f"Saved {len(tasks)} task(s) to {self.path}")

    def load(self) -> List[Task]:
        try:
            tasks = self._read()
        except StorageError as e:
            logger.warning(f"Empty or invalid store file, loading empty todo list: {e.message}")
            return []
        logger.debug(f"Loaded {len(tasks)} task(s) from {self.path}")
        return tasks

    def _write(self, tasks: Sequence[Task]) -> None:
        try:
            payload = TaskListAdapter.dump_json(list(tasks), by_alias=True, indent=2)
            target = self.path.resolve()
            ensure_store_directory(target)
            _atomic_write(target, payload)
        except (OSError, RuntimeError, ValueError) as e:
            raise StorageError(
                f"Failed to write {self.path}: {e}",
                operation="save",
                path=str(self.path),
                original_error=e,
            ) from e

    def _read(self) -> List[Task]:
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            logger.info(f"No store file at {self.path}, starting with an empty todo list")
            return []
        except OSError as e:
            raise StorageError(
                f"Failed to read {self.path}: {e}",
                operation="load",
                path=str(self.path),
                original_error=e,
            ) from e

        try:
            tasks = TaskListAdapter.validate_json(data)
        except ValueError as e:
            raise StorageError(
                f"Malformed content in {self.path}: {e}",
                operation="load",
                path=str(self.path),
                original_error=e,
            ) from e

        if len({task.id for task in tasks}) != len(tasks):
            raise StorageError(
                f"Duplicate task ids in {self.path}",
                operation="load",
                path=str(self.path),
            )
        return tasks
