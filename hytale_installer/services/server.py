"""
Final step – launching HytaleServer.jar with the configured arguments.

The server runs in the foreground on the installer's console; the installer
waits for it and reports its exit code but never restarts it.
"""

from typing import TYPE_CHECKING, Optional

from hytale_installer.config import SERVER_JAR
from hytale_installer.services.settings import InstallerConfig
from hytale_installer.utils.log import get_logger
from hytale_installer.utils.process import spawn_inherited, split_args

if TYPE_CHECKING:
    from hytale_installer.services.installer import InstallContext

log = get_logger(__name__)


def build_java_cmd(config: InstallerConfig) -> list[str]:
    """``java <javaArgs…> -jar HytaleServer.jar <hytaleArgs…>``"""
    return [
        "java",
        *split_args(config.java_args),
        "-jar",
        SERVER_JAR,
        *split_args(config.hytale_args),
    ]


def start(ctx: "InstallContext") -> Optional[int]:
    """Start the server if enabled and wait for it.

    Returns the server's exit code, or None if the start was skipped or the
    process could not be spawned.
    """
    if not ctx.config.start_server:
        log.info("Server start skipped. Exiting...")
        return None

    cmd = build_java_cmd(ctx.config)
    log.info("Starting server with:")
    log.info(" ".join(cmd))

    try:
        process = spawn_inherited(cmd, cwd=ctx.paths.root_dir)
    except OSError as exc:
        log.error("Failed to start server: %s", exc)
        return None

    rc = process.wait()
    log.info("Server exited with code %d", rc)
    return rc
