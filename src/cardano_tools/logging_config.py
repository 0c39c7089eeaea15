"""
Centralized logging configuration.

``setup_logging`` configures the root logger once per process with:
- Console output
- File output to <log dir>/{service_name}.log when a service name is given
- Fresh log file on each start unless LOG_APPEND=1
"""

import logging
import logging.handlers
import os
import sys
import threading
from pathlib import Path
from typing import Optional, Union

from .config import env_path, env_str

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Union[int, str, None]) -> int:
    if isinstance(level, int):
        return level
    raw = level if level is not None else env_str("CARDANO_TOOLS_LOG_LEVEL", or_value="INFO")
    resolved = logging.getLevelName(str(raw).upper())
    if not isinstance(resolved, int):
        _MODULE_LOGGER.warning("Unknown log level %r; falling back to INFO", raw)
        return logging.INFO
    return resolved


def _log_directory() -> Path:
    configured = env_path("CARDANO_TOOLS_LOG_DIR")
    return configured if configured else Path.cwd() / "logs"


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as exc:  # Best-effort cleanup operation
            _MODULE_LOGGER.debug("Handler close failed: %s", exc)
    logger.handlers = []


def _build_console_handler(level: int) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(_FORMAT, _DATE_FORMAT))
    console_handler.setLevel(level)
    return console_handler


def _build_file_handler(service_name: Optional[str], level: int) -> Optional[logging.Handler]:
    if not service_name:
        return None

    logs_dir = _log_directory()
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"{service_name}.log"
    file_mode = "a" if os.getenv("LOG_APPEND") == "1" else "w"

    file_handler = logging.handlers.WatchedFileHandler(log_path, mode=file_mode)
    file_handler.setFormatter(logging.Formatter(_FORMAT, _DATE_FORMAT))
    file_handler.setLevel(level)
    return file_handler


def _suppress_noisy_third_parties() -> None:
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def setup_logging(service_name: Optional[str] = None, level: Union[int, str, None] = None) -> None:
    """Configure the root logger for command-line tools and daemons built on cardano_tools."""

    with _config_lock:
        root_logger = logging.getLogger()
        resolved_level = _resolve_level(level)

        _close_handlers(root_logger)
        root_logger.addHandler(_build_console_handler(resolved_level))

        file_handler = _build_file_handler(service_name, resolved_level)
        if file_handler:
            root_logger.addHandler(file_handler)

        root_logger.setLevel(resolved_level)
        _suppress_noisy_third_parties()


__all__ = ["setup_logging"]
