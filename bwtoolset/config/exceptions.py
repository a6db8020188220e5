# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Custom exceptions for the configuration loader.

We keep these separate so that the CLI and any orchestration layer can catch
toolset failures without importing the loader machinery. Plain I/O failures
(missing file, permission denied) are not wrapped; they surface as the
builtin OSError subclasses.
"""

from pathlib import Path
from typing import Union


class ToolsetError(Exception):
    """Base for all toolset errors."""


class InvalidConfigError(ToolsetError):
    """
    Raised when a config file cannot be parsed, or one of its blocks does not
    match the expected shape (missing required field, wrong type, bad syntax).

    The offending file and the underlying parser diagnostic are kept as
    attributes so callers can report them without re-parsing the message.
    """

    def __init__(self, file_path: Union[str, Path], diagnostic: object) -> None:
        self.file_path = str(file_path)
        self.diagnostic = diagnostic
        super().__init__(f"Invalid config file {self.file_path}:\n{diagnostic}")


class LanguageNotFoundError(ToolsetError):
    """Raised when no directory in a config path matches the framework name."""

    def __init__(self, framework_name: str, file_path: Union[str, Path]) -> None:
        self.framework_name = framework_name
        self.file_path = str(file_path)
        super().__init__(
            f"Could not find language for framework '{framework_name}' in path {self.file_path}"
        )


class BwDirError(ToolsetError):
    """Raised when the benchmark root directory cannot be resolved."""
