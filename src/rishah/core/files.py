"""
Document Files - Verbatim reads and writes on behalf of the front end.

Drawings are UTF-8 text owned by the front end; exports arrive as base64
and are written as raw bytes. Nothing here validates file contents.
"""

from __future__ import annotations

import base64
import binascii
import logging
from pathlib import Path

from rishah.core.errors import FileReadError, FileWriteError, InvalidPayloadError

logger = logging.getLogger(__name__)


def read_text_file(path: str | Path) -> str:
    """Read a UTF-8 text file."""
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(f"failed to read file {path}: {e}", path) from e


def write_text_file(path: str | Path, content: str) -> None:
    """
    Write text to a file as UTF-8, replacing any previous content.

    Text that cannot be encoded is rejected before the file is opened.
    """
    try:
        data = content.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidPayloadError(f"content is not valid UTF-8 text: {e}") from e

    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise FileWriteError(f"failed to write file {path}: {e}", path) from e


def decode_base64(payload: str) -> bytes:
    """
    Decode standard base64.

    Raises:
        InvalidPayloadError: If the payload is not valid base64
    """
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidPayloadError(f"failed to decode base64 data: {e}") from e


def write_base64_file(path: str | Path, payload: str) -> int:
    """
    Decode a base64 payload and write the bytes to a file.

    The payload is decoded before the file is opened, so malformed input
    never creates or truncates the target.

    Returns:
        Number of bytes written
    """
    data = decode_base64(payload)
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise FileWriteError(f"failed to write file {path}: {e}", path) from e

    logger.debug(f"Wrote {len(data)} bytes to {path}")
    return len(data)
