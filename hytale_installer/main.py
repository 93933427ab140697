"""
Entry point for the Hytale Server Installer.
"""

import argparse
import sys
import traceback

from hytale_installer.config import APP_NAME, INSTALLER_VERSION
from hytale_installer.services.installer import build_context, run_install
from hytale_installer.utils.log import get_logger, setup_logging
from hytale_installer.utils.paths import RuntimePaths


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="hytale-installer", description=APP_NAME)
    parser.add_argument(
        "--root-dir",
        type=str,
        default=None,
        help="Installation directory (defaults to the exe folder when bundled, else the cwd)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {INSTALLER_VERSION}")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    paths = RuntimePaths.from_root(args.root_dir)

    setup_logging(paths.log_file)
    log = get_logger()

    try:
        ctx = build_context(paths)
        log.info("=== HYTALE SERVER INSTALLER | Version %s ===", INSTALLER_VERSION)
        run_install(ctx)
    except Exception:
        log.error("FATAL ERROR: %s", traceback.format_exc().rstrip())
        return 1

    if ctx.config.start_server:
        log.info("Exiting installer...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
