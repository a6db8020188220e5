# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Subcommand handlers for the bwtoolset CLI.

Each function here corresponds to one CLI subcommand and returns an exit
code. Results go to stdout; diagnostics go through the structured logger
on stderr.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from bwtoolset.cli.exit_codes import CONFIG_ERROR, RUNTIME_ERROR, SUCCESS, USER_ERROR
from bwtoolset.config.exceptions import BwDirError, ToolsetError
from bwtoolset.config.loader import load_project, load_projects
from bwtoolset.config.schema import Project
from bwtoolset.logging.logger import configure_logging, get_logger
from bwtoolset.utils.paths import find_config_files, get_bw_dir

logger = get_logger(__name__)


def _setup(args: argparse.Namespace) -> None:
    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(args.log_level, log_file)


def _resolve_bw_dir(args: argparse.Namespace) -> Optional[Path]:
    """Returns None (after logging) when the root can't be resolved."""
    override = Path(args.bw_dir) if args.bw_dir else None
    try:
        return get_bw_dir(override)
    except BwDirError as err:
        logger.error("Benchmark root not found", extra={"error": str(err)})
        return None


def _project_summary(project: Project, test_type: Optional[str]) -> dict[str, object]:
    tests = [test.specify_test_type(test_type) for test in project.tests]
    return {
        "name": project.name,
        "language": project.language,
        "framework": project.framework.model_dump(),
        "tests": [{**test.model_dump(), "tag": test.get_tag()} for test in tests],
    }


def _write_json(payload: object) -> None:
    sys.stdout.write(json.dumps(payload, indent=2) + "\n")
    sys.stdout.flush()


def handle_show(args: argparse.Namespace) -> int:
    """Print one config file's project as JSON."""
    _setup(args)
    config_path = Path(args.config)

    try:
        project = load_project(config_path)
    except ToolsetError as err:
        logger.error("Configuration error", extra={"command": "show", "error": str(err)})
        return CONFIG_ERROR
    except OSError as err:
        logger.error("Cannot read config file", extra={"path": str(config_path), "error": str(err)})
        return USER_ERROR

    _write_json(_project_summary(project, args.test_type))
    return SUCCESS


def handle_list(args: argparse.Namespace) -> int:
    """Print the name of every test under the benchmark root, one per line."""
    _setup(args)
    bw_dir = _resolve_bw_dir(args)
    if bw_dir is None:
        return USER_ERROR

    try:
        projects = load_projects(bw_dir)
    except ToolsetError as err:
        logger.error("Configuration error", extra={"command": "list", "error": str(err)})
        return CONFIG_ERROR
    except OSError as err:
        logger.error("Runtime error", extra={"command": "list", "error": str(err)}, exc_info=True)
        return RUNTIME_ERROR

    language = args.language.lower() if args.language else None
    for project in projects:
        if language is not None and project.language.lower() != language:
            continue
        for test in project.tests:
            sys.stdout.write(test.name + "\n")
    sys.stdout.flush()
    return SUCCESS


def handle_validate(args: argparse.Namespace) -> int:
    """
    Load each given config file, or every config under the benchmark root
    when none are given, and report all the broken ones.
    """
    _setup(args)
    if args.configs:
        config_files = [Path(path) for path in args.configs]
    else:
        bw_dir = _resolve_bw_dir(args)
        if bw_dir is None:
            return USER_ERROR
        config_files = find_config_files(bw_dir)

    failures = 0
    for config_file in config_files:
        try:
            load_project(config_file)
        except (ToolsetError, OSError) as err:
            failures += 1
            sys.stdout.write(f"FAIL {config_file}: {err}\n")
            continue
        sys.stdout.write(f"ok   {config_file}\n")
    sys.stdout.flush()

    logger.info(
        "Validation finished",
        extra={"checked": len(config_files), "failed": failures},
    )
    return CONFIG_ERROR if failures else SUCCESS
