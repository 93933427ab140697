"""
Zip handling – unpacking archives entry by entry and finding the archive the
downloader just produced.
"""

import os
import shutil
import zipfile

from hytale_installer.errors import ExtractionError, NotFoundError
from hytale_installer.utils.log import get_logger
from hytale_installer.utils.paths import ensure_dir

log = get_logger(__name__)


def _entry_target(target_dir: str, name: str) -> str:
    root = os.path.realpath(target_dir)
    dest = os.path.realpath(os.path.join(root, name))
    if dest != root and not dest.startswith(root + os.sep):
        raise ExtractionError(f"Archive entry escapes target folder: {name}")
    return dest


def extract_all(zip_path: str, target_dir: str) -> None:
    """Extract every entry of *zip_path* into *target_dir* in listing order.

    Later entries overwrite earlier ones with the same path.  Any failure
    aborts the whole extraction with ExtractionError.
    """
    try:
        ensure_dir(target_dir)
        with zipfile.ZipFile(zip_path, "r") as zf:
            for info in zf.infolist():
                dest = _entry_target(target_dir, info.filename)
                if info.is_dir():
                    os.makedirs(dest, exist_ok=True)
                    continue
                os.makedirs(os.path.dirname(dest), exist_ok=True)
                with zf.open(info) as src, open(dest, "wb") as dst:
                    shutil.copyfileobj(src, dst)
    except ExtractionError:
        raise
    except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile) as exc:
        raise ExtractionError(f"Failed to extract {zip_path}: {exc}") from exc


def find_newest_zip(directory: str) -> str:
    """Return the most recently modified ``*.zip`` file in *directory*."""
    log.info("Searching for newest ZIP...")
    newest = None
    newest_time = 0.0
    with os.scandir(directory) as it:
        for entry in it:
            if not entry.name.endswith(".zip") or not entry.is_file():
                continue
            mtime = entry.stat().st_mtime
            if newest is None or mtime > newest_time:
                newest, newest_time = entry.path, mtime

    if newest is None:
        raise NotFoundError("No downloaded ZIP found")

    log.info("Newest ZIP: %s", newest)
    return newest
