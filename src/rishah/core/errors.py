"""
Bridge Errors - Exception hierarchy shared by the native bridge.

Absence (no startup document, no settings file) is never an error; these
exceptions cover input validation, resource failures and external-process
failures, and are returned to the front end verbatim.
"""

from __future__ import annotations

from pathlib import Path


class BridgeError(Exception):
    """Base exception for bridge operations."""
    pass


class ResourceError(BridgeError):
    """A file or directory operation failed."""

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class FileReadError(ResourceError):
    """Reading a file failed."""
    pass


class FileWriteError(ResourceError):
    """Writing a file or creating a directory failed."""
    pass


class DocumentLoadError(FileReadError):
    """The startup document was requested but could not be read."""
    pass


class SettingsLocationError(ResourceError):
    """The per-user configuration directory could not be determined."""
    pass


class MalformedSettingsError(BridgeError):
    """Settings blob is not valid JSON."""
    pass


class InvalidPayloadError(BridgeError):
    """Base64 payload could not be decoded."""
    pass
