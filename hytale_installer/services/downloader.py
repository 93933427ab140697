"""
Manages the Hytale downloader executable – picking the right binary for the
platform, downloading and unpacking it, and invoking it to fetch the server.
"""

import os
import sys
from typing import Optional

import requests

from hytale_installer.config import DOWNLOADER_LINUX, DOWNLOADER_WINDOWS
from hytale_installer.errors import (
    DownloadError,
    DownloaderError,
    DownloaderSpawnError,
    NotFoundError,
    UnsupportedPlatformError,
)
from hytale_installer.utils.log import get_logger
from hytale_installer.utils.process import run_inherited, split_args

log = get_logger(__name__)

_DOWNLOADERS = {
    "win32": DOWNLOADER_WINDOWS,
    "linux": DOWNLOADER_LINUX,
}

_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    "Accept": "application/zip,*/*",
    "Accept-Language": "en-US,en;q=0.9",
    "Referer": "https://hytale.com/",
}

_CHUNK_SIZE = 64 * 1024


def get_downloader_exe(platform: Optional[str] = None) -> str:
    """Return the downloader binary name for *platform* (defaults to this host)."""
    platform = platform or sys.platform
    exe = _DOWNLOADERS.get(platform)
    if not exe:
        raise UnsupportedPlatformError(f"Unsupported OS: {platform}")
    return exe


# ---------------------------------------------------------------------------
# HTTP download
# ---------------------------------------------------------------------------

def fetch_file(url: str, dest: str, timeout: int = 60) -> None:
    """GET *url* once and stream the body into *dest*.

    Anything but a plain 200 (redirects included) is a DownloadError.  A
    partially written *dest* is removed again on failure.
    """
    written = False
    try:
        with requests.get(
            url,
            headers=_HEADERS,
            stream=True,
            allow_redirects=False,
            timeout=timeout,
        ) as resp:
            if resp.status_code != 200:
                raise DownloadError(
                    f"Download failed: {resp.status_code}", status_code=resp.status_code
                )
            written = True
            with open(dest, "wb") as f:
                for chunk in resp.iter_content(chunk_size=_CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
    except requests.RequestException as exc:
        _discard(dest, written)
        raise DownloadError(f"Download failed: {exc}") from exc
    except OSError as exc:
        _discard(dest, written)
        raise DownloadError(f"Could not write {dest}: {exc}") from exc


def _discard(path: str, written: bool) -> None:
    if not written:
        return
    try:
        os.remove(path)
    except OSError:
        pass


# ---------------------------------------------------------------------------
# Invoke the downloader
# ---------------------------------------------------------------------------

def make_executable(exe_path: str) -> None:
    """chmod 755 the unpacked downloader (Linux ships it without the x bit)."""
    if not os.path.isfile(exe_path):
        raise NotFoundError(f"Downloader binary not found: {exe_path}")
    os.chmod(exe_path, 0o755)


def run_downloader(exe_path: str, args: str, cwd: str) -> None:
    """Run the downloader in *cwd* and wait; raise unless it exits with 0."""
    cmd = [os.path.abspath(exe_path), *split_args(args)]
    try:
        rc = run_inherited(cmd, cwd=cwd)
    except OSError as exc:
        raise DownloaderSpawnError(f"Could not start downloader {exe_path}: {exc}") from exc

    if rc < 0:
        # POSIX: negative return code == killed by that signal
        raise DownloaderError(f"Downloader terminated by signal {-rc}", signal=-rc)
    if rc != 0:
        raise DownloaderError(f"Downloader exited with code {rc}", exit_code=rc)
