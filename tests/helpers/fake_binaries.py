"""Executable shell scripts standing in for the Cardano binaries."""

from __future__ import annotations

import stat
import sys
from pathlib import Path

import pytest

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="fake binaries are POSIX shell scripts")


def write_script(directory: Path, body: str, name: str = "fake-binary") -> Path:
    """Write an executable ``/bin/sh`` script and return its path."""
    script = directory / name
    script.write_text(f"#!/bin/sh\n{body}\n")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script
