# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for bwtoolset.

Usage:
    bwtoolset show frameworks/Java/gemini/config.toml --test-type json
    bwtoolset list --bw-dir /path/to/benchmarks --language Java
    bwtoolset validate
"""

import argparse
import sys

from bwtoolset import __version__
from bwtoolset.cli.commands import handle_list, handle_show, handle_validate
from bwtoolset.cli.exit_codes import USER_ERROR


def _build_global_parser() -> argparse.ArgumentParser:
    """
    Parent parser with the options every subcommand inherits. add_help=False
    so its help doesn't collide with the subcommand parsers.
    """
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging verbosity level.",
    )
    parent.add_argument(
        "--log-file",
        type=str,
        default=None,
        dest="log_file",
        help="Also write log lines to this file.",
    )
    parent.add_argument(
        "--bw-dir",
        type=str,
        default=None,
        dest="bw_dir",
        help="Benchmark root directory (defaults to $BW_HOME, then the working directory).",
    )
    return parent


def _register_subcommands(
    subparsers: argparse._SubParsersAction,  # type: ignore[type-arg]
    parent: argparse.ArgumentParser,
) -> None:
    show = subparsers.add_parser(
        "show", parents=[parent], help="Print a config file's project as JSON."
    )
    show.add_argument("config", help="Path to a framework config file.")
    show.add_argument(
        "--test-type",
        default=None,
        dest="test_type",
        help="Only keep this route type (json, plaintext, ...) in each test's urls.",
    )
    show.set_defaults(func=handle_show)

    list_parser = subparsers.add_parser(
        "list", parents=[parent], help="List every test under the benchmark root."
    )
    list_parser.add_argument(
        "--language", default=None, help="Only list tests for this language."
    )
    list_parser.set_defaults(func=handle_list)

    validate = subparsers.add_parser(
        "validate", parents=[parent], help="Check that config files load cleanly."
    )
    validate.add_argument(
        "configs",
        nargs="*",
        help="Config files to check. Defaults to every config under the benchmark root.",
    )
    validate.set_defaults(func=handle_validate)


def main() -> None:
    """
    Main CLI entrypoint, referenced by pyproject.toml's [project.scripts].

    With no subcommand we show help and exit with USER_ERROR.
    """
    parent = _build_global_parser()

    root_parser = argparse.ArgumentParser(
        prog="bwtoolset",
        description="Load and validate benchmark framework config files.",
    )
    root_parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = root_parser.add_subparsers(dest="command")
    _register_subcommands(subparsers, parent)

    args = root_parser.parse_args()

    if getattr(args, "func", None) is None:
        root_parser.print_help()
        sys.exit(USER_ERROR)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
