"""
Core module - Startup documents, settings and file I/O.

This module provides the pieces of the bridge that run without Qt:
- Startup: Resolve a `.tldr` document passed on the command line
- Settings: Persist the front end's JSON settings blob
- Files: Verbatim document and export writes
- Errors: Exception hierarchy returned to the front end
"""

from rishah.core.errors import (
    BridgeError,
    DocumentLoadError,
    FileReadError,
    FileWriteError,
    InvalidPayloadError,
    MalformedSettingsError,
    ResourceError,
    SettingsLocationError,
)

from rishah.core.files import (
    decode_base64,
    read_text_file,
    write_base64_file,
    write_text_file,
)

from rishah.core.settings import (
    APP_NAMESPACE,
    EMPTY_SETTINGS,
    SettingsStore,
    user_config_dir,
    validate_settings,
)

from rishah.core.startup import (
    ResolvedDocument,
    load_startup_document,
    normalize_startup_paths,
    resolve_startup_document,
)


__all__ = [
    # errors.py
    "BridgeError",
    "DocumentLoadError",
    "FileReadError",
    "FileWriteError",
    "InvalidPayloadError",
    "MalformedSettingsError",
    "ResourceError",
    "SettingsLocationError",
    # files.py
    "decode_base64",
    "read_text_file",
    "write_base64_file",
    "write_text_file",
    # settings.py
    "APP_NAMESPACE",
    "EMPTY_SETTINGS",
    "SettingsStore",
    "user_config_dir",
    "validate_settings",
    # startup.py
    "ResolvedDocument",
    "load_startup_document",
    "normalize_startup_paths",
    "resolve_startup_document",
]
