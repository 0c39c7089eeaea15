"""Resolve and validate external executables."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from ..errors import BinaryNotFoundError

logger = logging.getLogger(__name__)


def locate_binary(binary_name: str) -> Path:
    """
    Resolve *binary_name* through the executable search path.

    The lookup runs on every call; callers cache the resolved path themselves.

    Raises:
        BinaryNotFoundError: If no executable named *binary_name* is on PATH
    """
    resolved = shutil.which(binary_name)
    if not resolved:
        raise BinaryNotFoundError.not_on_path(binary_name)
    logger.debug("Resolved %s to %s", binary_name, resolved)
    return Path(resolved)


def validate_binary(path: Path | str, binary_name: str | None = None) -> Path:
    """
    Check that *path* exists, is a regular file and is executable by the current user.

    Raises:
        BinaryNotFoundError: With a message distinguishing "not found" from "not executable"
    """
    binary = Path(path)
    label = binary_name or binary.name
    if not binary.exists() or binary.is_dir():
        raise BinaryNotFoundError.missing_file(label, str(binary))
    if not os.access(binary, os.X_OK):
        raise BinaryNotFoundError.not_executable(label, str(binary))
    return binary


def ensure_working_directory(path: Path | str) -> Path:
    """Create the working directory (and parents) when missing."""
    directory = Path(path)
    if not directory.exists():
        logger.info("Creating working directory %s", directory)
        directory.mkdir(parents=True, exist_ok=True)
    return directory


__all__ = ["ensure_working_directory", "locate_binary", "validate_binary"]
