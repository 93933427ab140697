"""
File shuffling after extraction – merging the Server folder into the
installation directory and removing temporary artifacts.

Source removal and cleanup are best-effort: instead of raising, these helpers
return the paths they could not remove.
"""

import os
import shutil
import time
from typing import Iterable, Optional

from hytale_installer.utils.log import get_logger

log = get_logger(__name__)

RMTREE_ATTEMPTS = 5
RMTREE_DELAY = 0.2


def _try_remove(path: str, remover) -> bool:
    try:
        remover(path)
        return True
    except OSError:
        return False


def move_all(src_dir: str, dest_dir: str) -> list[str]:
    """Recursively move the contents of *src_dir* into *dest_dir*.

    Files are copied first (a failed copy raises), then the source is
    removed.  Returns the source paths that could not be removed.
    """
    leftovers: list[str] = []
    with os.scandir(src_dir) as it:
        entries = list(it)

    for entry in entries:
        src_path = os.path.join(src_dir, entry.name)
        dest_path = os.path.join(dest_dir, entry.name)

        if entry.is_dir(follow_symlinks=False):
            os.makedirs(dest_path, exist_ok=True)
            leftovers.extend(move_all(src_path, dest_path))
            if not _try_remove(src_path, os.rmdir):
                leftovers.append(src_path)
        else:
            shutil.copy2(src_path, dest_path)
            if not _try_remove(src_path, os.remove):
                leftovers.append(src_path)

    return leftovers


def delete_files(paths: Iterable[str]) -> list[str]:
    """Unlink every path.  Missing files are fine; returns the ones that failed."""
    failed: list[str] = []
    for path in paths:
        if not path:
            continue
        try:
            os.remove(path)
        except FileNotFoundError:
            continue
        except OSError as exc:
            log.debug("Could not delete %s: %s", path, exc)
            failed.append(path)
    return failed


def _is_protected(path: str) -> bool:
    full = os.path.abspath(path)
    if os.path.dirname(full) == full:
        # filesystem (or drive) root
        return True
    return os.path.normcase(full) == os.path.normcase(os.getcwd())


def _rmtree_with_retry(path: str) -> None:
    for attempt in range(1, RMTREE_ATTEMPTS + 1):
        try:
            shutil.rmtree(path)
            return
        except FileNotFoundError:
            return
        except OSError:
            if attempt == RMTREE_ATTEMPTS:
                raise
            time.sleep(RMTREE_DELAY)


def delete_dirs(paths: Iterable[Optional[str]]) -> list[str]:
    """Recursively remove every directory in *paths*.

    Empty entries, the filesystem root and the current working directory are
    skipped.  Failures are logged as warnings and returned.
    """
    failed: list[str] = []
    for path in paths:
        if not path or _is_protected(path):
            continue
        try:
            _rmtree_with_retry(path)
        except OSError as exc:
            log.warning("Failed to delete %s: %s", path, exc)
            failed.append(path)
    return failed
