"""
Centralised path helpers.  Every path the installer touches is derived once
from the installation directory and carried around in a RuntimePaths.
"""

import os
from dataclasses import dataclass
from typing import Optional

from hytale_installer.config import (
    CONFIG_FILE,
    DOWNLOADER_DIR,
    DOWNLOADER_ZIP,
    LOG_FILE,
    QUICKSTART_FILE,
    SERVER_DIR,
    get_base_dir,
)


@dataclass(frozen=True)
class RuntimePaths:
    root_dir: str
    downloader_zip: str
    extract_dir: str
    log_file: str
    config_file: str
    server_dir: str
    quickstart_file: str

    @classmethod
    def from_root(cls, root_dir: Optional[str] = None) -> "RuntimePaths":
        root = os.path.abspath(root_dir or get_base_dir())
        return cls(
            root_dir=root,
            downloader_zip=os.path.join(root, DOWNLOADER_ZIP),
            extract_dir=os.path.join(root, DOWNLOADER_DIR),
            log_file=os.path.join(root, LOG_FILE),
            config_file=os.path.join(root, CONFIG_FILE),
            server_dir=os.path.join(root, SERVER_DIR),
            quickstart_file=os.path.join(root, QUICKSTART_FILE),
        )


def ensure_dir(path: str) -> str:
    """Create *path* (and parents) if it doesn't exist.  Returns the path."""
    os.makedirs(path, exist_ok=True)
    return path
