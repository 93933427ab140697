"""
Exceptions raised by the installer steps.

Everything except ConfigParseError is fatal and ends up in main(), which logs
it and exits with status 1.
"""

from typing import Optional


class InstallerError(Exception):
    """Base exception for the installer."""


class JavaEnvironmentError(InstallerError):
    """Raised when Java is missing, unparsable, or too old."""


class UnsupportedPlatformError(InstallerError):
    """Raised when no downloader binary exists for the host OS."""


class DownloadError(InstallerError):
    """Raised when an HTTP download fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ExtractionError(InstallerError):
    """Raised when a zip archive cannot be read or written out."""


class DownloaderError(InstallerError):
    """Raised when the Hytale downloader exits unsuccessfully."""

    def __init__(
        self,
        message: str,
        exit_code: Optional[int] = None,
        signal: Optional[int] = None,
    ):
        super().__init__(message)
        self.exit_code = exit_code
        self.signal = signal


class DownloaderSpawnError(InstallerError):
    """Raised when the Hytale downloader cannot be started at all."""


class NotFoundError(InstallerError):
    """Raised when an expected file or folder is missing."""


class ConfigParseError(InstallerError):
    """Raised when installer-config.json is malformed. Recovered by defaults."""
