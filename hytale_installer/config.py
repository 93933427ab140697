"""
Application-wide constants.

User-editable options live in installer-config.json (see services/settings.py).
This module only holds static constants.
"""

import os
import sys


# ---------------------------------------------------------------------------
# Path resolution – works both in dev mode and when bundled with PyInstaller
# ---------------------------------------------------------------------------

def get_base_dir() -> str:
    """Return the default installation directory."""
    if getattr(sys, "frozen", False):
        # Running as a PyInstaller bundle – install next to the exe
        return os.path.dirname(os.path.abspath(sys.executable))
    return os.getcwd()


# ---------------------------------------------------------------------------
# Installer metadata
# ---------------------------------------------------------------------------

INSTALLER_VERSION = "1.0.0"
APP_NAME = "Hytale Server Installer"

# ---------------------------------------------------------------------------
# Hytale downloader / server names (relative to the installation directory)
# ---------------------------------------------------------------------------

DOWNLOADER_WINDOWS = "hytale-downloader-windows-amd64.exe"
DOWNLOADER_LINUX = "hytale-downloader-linux-amd64"
DOWNLOADER_ZIP_URL = "https://downloader.hytale.com/hytale-downloader.zip"
DOWNLOADER_ZIP = "hytale-downloader.zip"
DOWNLOADER_DIR = "hytale-downloader"
SERVER_DIR = "Server"
SERVER_JAR = "HytaleServer.jar"
QUICKSTART_FILE = "QUICKSTART.md"

LOG_FILE = "installer.log"
CONFIG_FILE = "installer-config.json"

MIN_JAVA_VERSION = 25
