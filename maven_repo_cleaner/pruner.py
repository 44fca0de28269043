from __future__ import annotations

import logging
import os
from collections import deque
from pathlib import Path

from .base import CleanupResult
from .formatting import format_size
from .rules import is_local_metadata, should_evaluate, stale_suffix


LOGGER = logging.getLogger("maven_repo_cleaner")


class RepositoryPruner:
    """Breadth-first sweep of a local Maven repository.

    Directories are always descended into. Files are only queued when they sit
    in a ``-SNAPSHOT`` folder or are the local metadata file, and are deleted
    when they turn out to be stale. Failing to delete the local metadata file
    stops the sweep; every other filesystem error is logged and skipped.
    """

    def clean(self, target_path: str | Path) -> CleanupResult:
        result = CleanupResult()
        queue: deque[Path] = deque([Path(target_path)])

        while queue:
            path = queue.popleft()
            if path.is_dir():
                self._expand_directory(path, queue, result)
            elif not self._evaluate_file(path, result):
                result.halted = True
                break

        LOGGER.info("[CLEANUP]: Deleted size: %s", format_size(result.bytes_freed))
        return result

    def _expand_directory(self, directory: Path, queue: deque[Path], result: CleanupResult) -> None:
        folder_name = directory.name
        if not folder_name:
            return

        try:
            children = list(directory.iterdir())
        except OSError as exc:
            LOGGER.error("[CLEANUP]: Failed to read directory '%s': %s", directory, exc)
            result.errors += 1
            return

        for child in children:
            try:
                if child.is_symlink() and child.is_dir():
                    LOGGER.debug("[CLEANUP]: Not following directory link: %s", child)
                elif child.is_dir():
                    queue.append(child)
                elif child.is_file() and should_evaluate(folder_name, child.name):
                    queue.append(child)
            except OSError as exc:
                LOGGER.error("[CLEANUP]: Failed to read directory entry '%s': %s", child, exc)
                result.errors += 1

        LOGGER.debug("[CLEANUP]: Scanning: %s", directory)

    def _evaluate_file(self, file_path: Path, result: CleanupResult) -> bool:
        """Delete *file_path* when eligible. Returns False when the sweep must stop."""
        folder_name = file_path.parent.name
        file_name = file_path.name
        if not folder_name or not file_name:
            return True

        if is_local_metadata(file_name):
            LOGGER.info("[CLEANUP]: Deleting: %s", file_path)
            try:
                file_path.unlink()
            except OSError as exc:
                LOGGER.error("[CLEANUP]: Failed to delete file '%s': %s", file_path, exc)
                result.errors += 1
                return False
            result.files_removed += 1
            return True

        if stale_suffix(folder_name, file_name) is None:
            return True

        LOGGER.info("[CLEANUP]: Deleting: %s", file_path)
        file_size = _file_size(file_path)
        try:
            file_path.unlink()
        except OSError as exc:
            LOGGER.error("[CLEANUP]: Failed to delete file '%s': %s", file_path, exc)
            result.errors += 1
            return True

        result.files_removed += 1
        result.bytes_freed += file_size
        return True


def _file_size(file_path: Path) -> int:
    try:
        return int(os.lstat(file_path).st_size)
    except OSError as exc:
        LOGGER.warning("[CLEANUP]: Unable to stat '%s', counting 0 bytes: %s", file_path, exc)
        return 0
