# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Path utilities for the toolset.

Every framework lives under a single benchmark root:

    <bw_dir>/frameworks/<Language>/<framework>/config.toml

The root comes from the BW_HOME environment variable, falling back to the
current working directory.
"""

import os
from pathlib import Path
from typing import Optional

from bwtoolset.config.exceptions import BwDirError

BW_HOME_ENV = "BW_HOME"
FRAMEWORKS_DIR = "frameworks"
CONFIG_FILE_NAMES: tuple[str, ...] = ("config.toml", "config.yaml", "config.yml")


def get_bw_dir(override: Optional[Path] = None) -> Path:
    """
    Resolve the benchmark root directory.

    Args:
        override: Explicit root, e.g. from a CLI flag. Takes precedence over
                  the environment.

    Returns:
        Absolute path to the benchmark root.

    Raises:
        BwDirError: If the resolved path is not an existing directory.
    """
    if override is not None:
        candidate = override
    elif os.environ.get(BW_HOME_ENV):
        candidate = Path(os.environ[BW_HOME_ENV])
    else:
        candidate = Path.cwd()

    resolved = candidate.expanduser().resolve()
    if not resolved.is_dir():
        raise BwDirError(f"Benchmark root is not a directory: {resolved}")
    return resolved


def find_config_files(bw_dir: Path) -> list[Path]:
    """
    Every framework config file under `<bw_dir>/frameworks/*/*/`.

    Sorted so callers iterate frameworks in the same order on every run.
    A framework directory with both a TOML and a YAML file contributes only
    the first in CONFIG_FILE_NAMES order.
    """
    frameworks_dir = bw_dir / FRAMEWORKS_DIR
    if not frameworks_dir.is_dir():
        return []

    found: list[Path] = []
    for framework_dir in sorted(frameworks_dir.glob("*/*")):
        if not framework_dir.is_dir():
            continue
        for file_name in CONFIG_FILE_NAMES:
            candidate = framework_dir / file_name
            if candidate.is_file():
                found.append(candidate)
                break
    return found
