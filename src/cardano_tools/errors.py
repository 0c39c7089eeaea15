"""
Error types raised by the process core, binary wrappers and command builders.

Every failure propagates to the immediate caller with enough context to
re-run the underlying command by hand: the binary path or full argument
vector plus the captured diagnostic text.
"""

from __future__ import annotations

from typing import Sequence

UNKNOWN_ERROR = "Unknown error"


class CardanoToolsError(Exception):
    """Base exception for all cardano_tools failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BinaryNotFoundError(CardanoToolsError):
    """A configured binary could not be resolved or is not executable."""

    @classmethod
    def not_configured(cls, binary_name: str) -> "BinaryNotFoundError":
        return cls(f"{binary_name} path not configured")

    @classmethod
    def not_on_path(cls, binary_name: str) -> "BinaryNotFoundError":
        return cls(f"{binary_name} not found on PATH")

    @classmethod
    def missing_file(cls, binary_name: str, path: str) -> "BinaryNotFoundError":
        return cls(f"{binary_name} binary file not found: {path}")

    @classmethod
    def not_executable(cls, binary_name: str, path: str) -> "BinaryNotFoundError":
        return cls(f"{binary_name} binary file is not executable: {path}")


class CommandFailedError(CardanoToolsError):
    """An invocation exited non-zero or failed to launch."""

    def __init__(self, command: Sequence[str], detail: str | None) -> None:
        self.command = list(command)
        self.detail = detail if detail else UNKNOWN_ERROR
        super().__init__(f"Command failed: {' '.join(self.command)}. Error: {self.detail}")


class ProcessAlreadyRunningError(CardanoToolsError):
    """start() was called on a supervised handle that is still running."""

    def __init__(self, binary_name: str = "process") -> None:
        self.binary_name = binary_name
        super().__init__(f"Process is already running: {binary_name}")


class InvalidParametersError(CardanoToolsError, ValueError):
    """Pre-flight validation of command builder parameters failed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid parameters: {message}")


class UnsupportedVersionError(CardanoToolsError):
    """The installed binary is older than the minimum supported version."""

    def __init__(self, current: str, minimum: str) -> None:
        self.current = current
        self.minimum = minimum
        super().__init__(f"Unsupported version: {current}. Minimum required: {minimum}")


class FileAlreadyExistsError(CardanoToolsError):
    """Refusing to overwrite an existing file."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File already exists: {path}")


class MissingFileError(CardanoToolsError):
    """A required input file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File not found: {path}")


class InvalidOutputError(CardanoToolsError):
    """A binary returned output that could not be interpreted."""

    @classmethod
    def unparseable_version(cls, output: str) -> "InvalidOutputError":
        return cls(f"Could not parse version from: {output}")


class NodeNotSyncedError(CardanoToolsError):
    """The node has not reached full sync."""

    def __init__(self, progress: float) -> None:
        self.progress = progress
        super().__init__(f"Node is not fully synced. Current sync progress: {progress}%")


class DeviceError(CardanoToolsError):
    """Hardware wallet device error."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Hardware wallet device error: {message}")


class ConfigurationMissingError(CardanoToolsError):
    """A wrapper was constructed without the configuration section it needs."""

    @classmethod
    def section(cls, name: str) -> "ConfigurationMissingError":
        return cls(f"{name} configuration missing")

    @classmethod
    def value(cls, name: str, purpose: str) -> "ConfigurationMissingError":
        return cls(f"{name} is required for {purpose}")


__all__ = [
    "UNKNOWN_ERROR",
    "BinaryNotFoundError",
    "CardanoToolsError",
    "CommandFailedError",
    "ConfigurationMissingError",
    "DeviceError",
    "FileAlreadyExistsError",
    "InvalidOutputError",
    "InvalidParametersError",
    "MissingFileError",
    "NodeNotSyncedError",
    "ProcessAlreadyRunningError",
    "UnsupportedVersionError",
]
