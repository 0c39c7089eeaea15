"""
Minimum-version enforcement for wrapped binaries.

Versions are compared as opaque tokens: runs of digits compare as integers and
everything else compares as text, so ``10.2`` sorts after ``9.9``. Pre-release
and build-metadata suffixes get no special meaning.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple, Union

from .errors import UnsupportedVersionError

_MODULE_LOGGER = logging.getLogger(__name__)

_TOKEN_PATTERN = re.compile(r"\d+|[^\d.\-+_\s]+")

_Token = Tuple[int, Union[int, str]]


def _tokenize(version: str) -> List[_Token]:
    tokens: List[_Token] = []
    for match in _TOKEN_PATTERN.finditer(version.strip()):
        text = match.group()
        if text.isdigit():
            tokens.append((0, int(text)))
        else:
            tokens.append((1, text))
    return tokens


def compare_versions(left: str, right: str) -> int:
    """Return -1, 0 or 1 as *left* sorts before, equal to, or after *right*."""
    left_tokens = _tokenize(left)
    right_tokens = _tokenize(right)
    for left_token, right_token in zip(left_tokens, right_tokens):
        if left_token != right_token:
            return -1 if left_token < right_token else 1
    if len(left_tokens) == len(right_tokens):
        return 0
    return -1 if len(left_tokens) < len(right_tokens) else 1


def check_version(
    current: str,
    minimum: str,
    *,
    binary_name: str = "binary",
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Fail closed when *current* is older than *minimum*.

    Raises:
        UnsupportedVersionError: If *current* sorts before *minimum*
    """
    if compare_versions(current, minimum) >= 0:
        return
    log = logger or _MODULE_LOGGER
    log.warning("%s version %s is below the minimum supported version %s", binary_name, current, minimum)
    raise UnsupportedVersionError(current, minimum)


__all__ = ["check_version", "compare_versions"]
