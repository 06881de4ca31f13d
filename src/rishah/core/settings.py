"""
Settings Store - Persist the front end's preferences as one JSON file.

The settings blob is opaque: it is checked for JSON syntax on save and
otherwise stored and returned byte-for-byte. The file location is derived
from the environment on every call.
"""

from __future__ import annotations

import json
import logging
import os
import platform
import tempfile
from pathlib import Path
from typing import Callable

from rishah.core.errors import (
    FileWriteError,
    MalformedSettingsError,
    SettingsLocationError,
)

logger = logging.getLogger(__name__)


APP_NAMESPACE = "rishah"
EMPTY_SETTINGS = "{}"
SETTINGS_FILE_MODE = 0o644


def user_config_dir() -> Path:
    """
    Get the per-user configuration directory for this platform.

    Raises:
        SettingsLocationError: If the directory cannot be determined
    """
    system = platform.system()

    if system == "Windows":
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise SettingsLocationError("%APPDATA% is not defined")
        return Path(appdata)

    try:
        home = Path.home()
    except RuntimeError as e:
        raise SettingsLocationError(f"home directory is not defined: {e}") from e

    if system == "Darwin":
        return home / "Library" / "Application Support"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        xdg_path = Path(xdg)
        if not xdg_path.is_absolute():
            raise SettingsLocationError(f"path in $XDG_CONFIG_HOME is relative: {xdg}")
        return xdg_path
    return home / ".config"


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON value: {name}")


def validate_settings(blob: str) -> bytes:
    """
    Check that a settings blob is valid JSON.

    Returns:
        The blob encoded as UTF-8, ready to write

    Raises:
        MalformedSettingsError: If the blob does not parse or encode
    """
    try:
        json.loads(blob, parse_constant=_reject_constant)
        return blob.encode("utf-8")
    except (ValueError, TypeError) as e:
        raise MalformedSettingsError(f"invalid JSON: {e}") from e


class SettingsStore:
    """
    Load and save the settings blob.

    Usage:
        store = SettingsStore()
        store.save('{"theme": "dark"}')
        blob = store.load()
    """

    def __init__(
        self,
        namespace: str = APP_NAMESPACE,
        config_dir: Callable[[], Path] = user_config_dir,
    ):
        self.namespace = namespace
        self._config_dir = config_dir

    def get_settings_path(self) -> Path:
        """
        Get the settings file path, creating its directory if needed.

        Raises:
            SettingsLocationError: If the config directory is unknown
            FileWriteError: If the settings directory cannot be created
        """
        settings_dir = self._config_dir() / self.namespace
        try:
            settings_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileWriteError(
                f"failed to create settings directory {settings_dir}: {e}", settings_dir
            ) from e
        return settings_dir / f"{self.namespace}-settings.json"

    def load(self) -> str:
        """
        Load the settings blob.

        Returns:
            The stored JSON text, or "{}" if nothing usable is stored
        """
        try:
            path = self.get_settings_path()
        except (SettingsLocationError, FileWriteError) as e:
            logger.warning(f"Settings location unavailable, using defaults: {e}")
            return EMPTY_SETTINGS

        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            return EMPTY_SETTINGS
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read settings {path}, using defaults: {e}")
            return EMPTY_SETTINGS

    def save(self, blob: str) -> Path:
        """
        Validate and store a settings blob, replacing the whole file.

        Args:
            blob: JSON text, written exactly as given

        Returns:
            Path of the settings file

        Raises:
            MalformedSettingsError: If the blob is not valid JSON
            SettingsLocationError: If the config directory is unknown
            FileWriteError: If the file cannot be written
        """
        data = validate_settings(blob)

        path = self.get_settings_path()
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "wb",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(data)
            os.chmod(tmp_name, SETTINGS_FILE_MODE)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise FileWriteError(f"failed to write settings {path}: {e}", path) from e

        logger.debug(f"Saved settings to {path}")
        return path
