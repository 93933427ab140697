"""
First-time setup – the whole install sequence, from fetching the downloader
to starting the server.

Every step runs in order and any exception aborts the rest; main() turns it
into exit code 1.
"""

import os
import sys
from dataclasses import dataclass
from typing import Optional

from hytale_installer.config import DOWNLOADER_ZIP_URL
from hytale_installer.errors import NotFoundError
from hytale_installer.services import archive
from hytale_installer.services import downloader as dl
from hytale_installer.services import files
from hytale_installer.services import server as server_svc
from hytale_installer.services import settings
from hytale_installer.services.settings import InstallerConfig
from hytale_installer.utils.java import check_java
from hytale_installer.utils.log import get_logger
from hytale_installer.utils.paths import RuntimePaths

log = get_logger(__name__)


@dataclass
class InstallContext:
    paths: RuntimePaths
    config: InstallerConfig
    platform: str
    downloader_exe: str

    @property
    def downloader_path(self) -> str:
        return os.path.join(self.paths.extract_dir, self.downloader_exe)


def build_context(
    paths: RuntimePaths,
    platform: Optional[str] = None,
) -> InstallContext:
    """Resolve the platform binary, then load the config.

    The platform check comes first so an unsupported OS fails before the
    config file is touched.
    """
    platform = platform or sys.platform
    exe = dl.get_downloader_exe(platform)
    config = settings.load(paths.config_file)
    return InstallContext(paths=paths, config=config, platform=platform, downloader_exe=exe)


def install(ctx: InstallContext) -> str:
    """Download, unpack and arrange the server files.  Returns the server zip used."""
    paths = ctx.paths

    check_java()

    log.info("Downloading Hytale downloader...")
    dl.fetch_file(DOWNLOADER_ZIP_URL, paths.downloader_zip)

    log.info("Extracting Hytale downloader...")
    archive.extract_all(paths.downloader_zip, paths.extract_dir)

    if ctx.platform == "linux":
        dl.make_executable(ctx.downloader_path)
        log.info("Set Linux executable permissions")

    log.info("Running Hytale downloader...")
    dl.run_downloader(ctx.downloader_path, ctx.config.downloader_args, cwd=paths.root_dir)

    log.info("Detecting downloaded version...")
    server_zip = archive.find_newest_zip(paths.root_dir)

    log.info("Extracting Hytale server assets...")
    archive.extract_all(server_zip, paths.root_dir)

    log.info("Preparing assets...")
    if not os.path.isdir(paths.server_dir):
        raise NotFoundError("Unexpected zip structure – no Server folder found.")
    leftovers = files.move_all(paths.server_dir, paths.root_dir)
    if leftovers:
        log.debug("Left behind while moving assets: %s", leftovers)

    return server_zip


def clean_up(ctx: InstallContext, server_zip: str) -> None:
    paths = ctx.paths
    if not ctx.config.clean_up:
        log.info("Cleanup skipped")
        return

    log.info("Cleaning up...")
    files.delete_files([paths.downloader_zip, server_zip, paths.quickstart_file])
    files.delete_dirs([paths.extract_dir, paths.server_dir])


def run_install(ctx: InstallContext) -> Optional[int]:
    """Run every step.  Returns the server exit code (None if not started)."""
    server_zip = install(ctx)
    clean_up(ctx, server_zip)
    log.info("Done.")
    return server_svc.start(ctx)
