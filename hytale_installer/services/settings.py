"""
Installer options stored next to the installer in installer-config.json.

The file is created with defaults on first run.  Keys missing from the file
keep their default, unknown keys are ignored, and a malformed file is logged
and replaced by the defaults in memory (the file itself is left alone).
"""

import json
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hytale_installer.config import CONFIG_FILE
from hytale_installer.errors import ConfigParseError
from hytale_installer.utils.log import get_logger

log = get_logger(__name__)


class InstallerConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    start_server: bool = Field(default=True, alias="startServer")
    clean_up: bool = Field(default=True, alias="cleanUp")
    downloader_args: str = Field(default="", alias="downloaderArgs")
    java_args: str = Field(
        default="-Xms2G -Xmx4G -XX:AOTCache=HytaleServer.aot", alias="javaArgs"
    )
    hytale_args: str = Field(default="--assets Assets.zip --bind 5520", alias="hytaleArgs")

    def to_file_dict(self) -> dict:
        """Return the config with the camelCase keys used on disk."""
        return self.model_dump(by_alias=True)


DEFAULT_CONFIG = InstallerConfig()


def _parse(raw: str) -> InstallerConfig:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigParseError("expected a JSON object")
    try:
        return InstallerConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigParseError(str(exc)) from exc


def save(config: InstallerConfig, config_file: str) -> None:
    with open(config_file, "w", encoding="utf-8") as f:
        json.dump(config.to_file_dict(), f, indent=2)


def load(config_file: str) -> InstallerConfig:
    """Load *config_file*, creating it with defaults if absent.  Never raises."""
    try:
        if not os.path.isfile(config_file):
            save(DEFAULT_CONFIG, config_file)
            log.info("Created default %s", CONFIG_FILE)
            return DEFAULT_CONFIG

        with open(config_file, "r", encoding="utf-8") as f:
            raw = f.read()
        return _parse(raw)
    except (OSError, UnicodeDecodeError, ConfigParseError) as exc:
        log.error("Failed to load %s: %s", CONFIG_FILE, exc)
        return DEFAULT_CONFIG
