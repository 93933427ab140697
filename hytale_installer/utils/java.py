"""
Java detection utility.
"""

import re
import subprocess
import sys

from hytale_installer.config import MIN_JAVA_VERSION
from hytale_installer.errors import JavaEnvironmentError
from hytale_installer.utils.log import get_logger

log = get_logger(__name__)

_CREATION_FLAGS = getattr(subprocess, "CREATE_NO_WINDOW", 0) if sys.platform == "win32" else 0

_VERSION_RE = re.compile(r'version\s+"(\d+)', re.IGNORECASE)


def parse_java_version(output: str) -> int:
    """Extract the major version from ``java -version`` output."""
    m = _VERSION_RE.search(output or "")
    if not m:
        raise JavaEnvironmentError("Cannot parse Java version")
    return int(m.group(1))


def check_java(min_version: int = MIN_JAVA_VERSION) -> int:
    """
    Make sure a Java runtime >= *min_version* is on PATH.

    Returns the detected major version, raises JavaEnvironmentError otherwise.
    """
    try:
        result = subprocess.run(
            ["java", "-version"],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            creationflags=_CREATION_FLAGS,
        )
    except OSError as exc:
        raise JavaEnvironmentError("Java not installed or not accessible") from exc

    # java -version prints to stderr on most JDKs; we merge via STDOUT
    output = (result.stdout or "").strip()
    if result.returncode != 0 and not output:
        raise JavaEnvironmentError("Java not installed or not accessible")

    version = parse_java_version(output)
    if version < min_version:
        raise JavaEnvironmentError(
            f"Java {version} was detected but {min_version}+ is required"
        )

    log.info("Java %d - OK", version)
    return version
