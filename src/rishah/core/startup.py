"""
Startup Document - Resolve a drawing passed on the command line.

The operating system may hand us several comma-joined paths in a single
argument, and drag-and-drop on some platforms leaves a stray separator after
the file name. Only the first matching `.tldr` path is ever loaded.
"""

from __future__ import annotations

import logging
import ntpath
import os
from dataclasses import dataclass
from typing import Sequence

from rishah.core.errors import DocumentLoadError

logger = logging.getLogger(__name__)


DOCUMENT_SUFFIX = ".tldr"

# Backslash is what the drag-and-drop artifact leaves on Windows
TRAILING_SEPARATORS = "\\" + os.sep


@dataclass(frozen=True)
class ResolvedDocument:
    """A startup document that was found and read."""
    path: str
    content: str

    def as_list(self) -> list[str]:
        """Return the `[path, content]` pair handed to the front end."""
        return [self.path, self.content]


def _split_tokens(args: Sequence[str]) -> list[str]:
    tokens = []
    for arg in args:
        tokens.extend(part for part in arg.split(",") if part)
    return tokens


def _has_document_suffix(token: str) -> bool:
    lower = token.lower()
    if lower.endswith(DOCUMENT_SUFFIX):
        return True
    return (
        len(lower) > len(DOCUMENT_SUFFIX)
        and lower[-1] in TRAILING_SEPARATORS
        and lower[:-1].endswith(DOCUMENT_SUFFIX)
    )


def _is_absolute(path: str) -> bool:
    # Drive-letter paths count as absolute on every platform
    return os.path.isabs(path) or ntpath.isabs(path)


def normalize_startup_paths(args: Sequence[str]) -> list[str]:
    """
    Turn raw startup arguments into absolute candidate document paths.

    Args:
        args: Command-line arguments without the program name

    Returns:
        Candidate paths in argument order, possibly empty
    """
    candidates = []
    for token in _split_tokens(args):
        if not _has_document_suffix(token):
            continue

        clean = token.rstrip(TRAILING_SEPARATORS)
        if _is_absolute(clean):
            candidates.append(clean)
            continue

        try:
            cwd = os.getcwd()
        except OSError:
            candidates.append(clean)
        else:
            candidates.append(os.path.normpath(os.path.join(cwd, clean)))

    return candidates


def load_startup_document(candidates: Sequence[str]) -> ResolvedDocument | None:
    """
    Read the first candidate path.

    Returns:
        The loaded document, or None when no document was requested

    Raises:
        DocumentLoadError: If the first candidate cannot be read
    """
    if not candidates:
        return None

    path = candidates[0]
    if len(candidates) > 1:
        logger.info(f"Ignoring {len(candidates) - 1} extra startup document(s)")

    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"failed to read file {path}: {e}", path) from e

    logger.info(f"Loaded startup document {path}")
    return ResolvedDocument(path=path, content=content)


def resolve_startup_document(args: Sequence[str]) -> ResolvedDocument | None:
    """Normalize startup arguments and load the first document found."""
    return load_startup_document(normalize_startup_paths(args))
