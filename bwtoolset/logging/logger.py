# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Structured JSON logging for bwtoolset.

All toolset loggers live under the `bwtoolset` logger. Modules grab theirs
with `get_logger(__name__)` at import time and never attach handlers
themselves; `configure_logging` installs the JSON handlers once, on the
`bwtoolset` logger, and every module logger propagates up to it.

Log lines go to stderr so they never mix with the CLI's results on stdout.
One line per record:

  {"ts": "2026-...", "level": "ERROR", "module": "bwtoolset.config.loader",
   "msg": "Invalid config file", "path": "frameworks/Java/gemini/config.toml"}
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "bwtoolset"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Attributes every LogRecord has; anything else on a record came from `extra`.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """
    Formats a log record as a single JSON object.

    Mandatory keys are ts, level, module and msg. Fields passed through the
    `extra` kwarg are merged in as-is; values that JSON can't encode (paths,
    mostly) fall back to str().
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                entry[key] = value
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def _resolve_log_level(level_name: str) -> int:
    upper = level_name.upper()
    if upper not in _VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level '{level_name}'. Must be one of: {', '.join(_VALID_LOG_LEVELS)}"
        )
    return getattr(logging, upper)


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for a toolset module.

    Names outside the `bwtoolset` namespace are nested under it so that
    configure_logging always governs them.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    log_level: str = "WARNING",
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Install JSON handlers on the `bwtoolset` logger.

    Safe to call more than once: previous handlers are closed and replaced,
    so the last call wins.

    Args:
        log_level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
        log_file: Optional file that receives the same lines as stderr.

    Returns:
        The configured `bwtoolset` logger.

    Raises:
        ValueError: If log_level is not a known level name.
    """
    level = _resolve_log_level(log_level)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = JsonFormatter()

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setFormatter(formatter)
    root.addHandler(stderr_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    root.propagate = False
    return root
