# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Config loader — turns a framework's config file into typed values.

The pipeline for one file:
  1. Read the text from disk (I/O errors propagate untouched)
  2. Parse it as TOML, or YAML for .yaml/.yml files, into a plain dict
  3. Validate the `framework` and `main` blocks against Config
  4. Validate every other top-level block on its own as a TestBlock
  5. Build named Tests from the blocks, in document order

Any parse or validation failure raises InvalidConfigError naming the file.
Nothing is cached; each call reads the file again and returns fresh values.
"""

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from bwtoolset.config.exceptions import InvalidConfigError, LanguageNotFoundError
from bwtoolset.config.schema import Config, Framework, Project, Test, TestBlock
from bwtoolset.logging.logger import get_logger
from bwtoolset.utils.paths import find_config_files

logger = get_logger(__name__)

FRAMEWORK_KEY = "framework"
MAIN_KEY = "main"

_YAML_SUFFIXES = (".yaml", ".yml")


def _parse_document(file: Path, contents: str) -> dict[str, Any]:
    """Parse config text by file suffix. TOML unless the suffix says YAML."""
    try:
        if file.suffix.lower() in _YAML_SUFFIXES:
            parsed = yaml.safe_load(contents)
        else:
            parsed = tomllib.loads(contents)
    except (tomllib.TOMLDecodeError, yaml.YAMLError) as err:
        logger.error("Config file is not parseable", extra={"path": str(file), "error": str(err)})
        raise InvalidConfigError(file, err) from err

    if not isinstance(parsed, dict):
        diagnostic = f"expected a table of blocks, got {type(parsed).__name__}"
        logger.error("Config file is not a table", extra={"path": str(file), "error": diagnostic})
        raise InvalidConfigError(file, diagnostic)

    # YAML 1.1 resolves keys like `on` or `1` to bools and ints; block keys must stay strings.
    bad_keys = [key for key in parsed if not isinstance(key, str)]
    if bad_keys:
        diagnostic = f"block names must be strings, got {bad_keys!r}"
        logger.error("Config file has non-string block names", extra={"path": str(file), "error": diagnostic})
        raise InvalidConfigError(file, diagnostic)
    return parsed


def _read_document(file: Path) -> dict[str, Any]:
    try:
        contents = file.read_text(encoding="utf-8")
    except UnicodeDecodeError as err:
        logger.error("Config file is not valid UTF-8", extra={"path": str(file), "error": str(err)})
        raise InvalidConfigError(file, err) from err
    return _parse_document(file, contents)


def _validate_config(file: Path, document: dict[str, Any]) -> Config:
    try:
        return Config.model_validate(document)
    except ValidationError as err:
        logger.error("Config file failed validation", extra={"path": str(file), "error": str(err)})
        raise InvalidConfigError(file, err) from err


def derive_test_name(framework: Framework, key: str) -> str:
    """`main` is named after the framework; any other block is `<framework>-<key>`."""
    base = framework.get_name().lower()
    if key == MAIN_KEY:
        return base
    return f"{base}-{key}"


def get_framework_by_config_file(file: Path) -> Framework:
    """
    Parse a config file and return its framework block.

    Raises:
        InvalidConfigError: The file doesn't parse, or lacks a valid
            `framework` or `main` block.
        OSError: The file can't be read.
    """
    file = Path(file)
    config = _validate_config(file, _read_document(file))
    logger.debug("Parsed framework", extra={"path": str(file), "framework": config.framework.name})
    return config.framework


def get_test_implementations_by_config_file(file: Path) -> list[Test]:
    """
    Parse a config file and return one Test per block other than `framework`.

    Tests come back in the order their blocks appear in the file. If any
    block is malformed the whole call fails; no partial list is returned.

    Raises:
        InvalidConfigError: The file or any of its test blocks is malformed.
        OSError: The file can't be read.
    """
    file = Path(file)
    document = _read_document(file)
    config = _validate_config(file, document)

    block_keys = [key for key in document if key != FRAMEWORK_KEY]

    tests: list[Test] = []
    for key in block_keys:
        try:
            block = TestBlock.model_validate(document[key])
        except ValidationError as err:
            logger.error(
                "Test block failed validation",
                extra={"path": str(file), "block": key, "error": str(err)},
            )
            raise InvalidConfigError(file, err) from err
        tests.append(Test.from_block(derive_test_name(config.framework, key), block))

    logger.debug(
        "Parsed test implementations",
        extra={"path": str(file), "tests": [test.name for test in tests]},
    )
    return tests


def get_project_name_by_config_file(file: Path) -> str:
    """The name of the directory holding the config file."""
    file = Path(file)
    parent_name = file.parent.name
    if not parent_name:
        raise InvalidConfigError(file, "config file has no named parent directory")
    return parent_name


def get_language_by_config_file(framework: Framework, file: Path) -> str:
    """
    Work out the language from where the config file sits.

    Configs live at `.../<Language>/<framework>/config.toml`. We find the
    directory named after the framework (case-insensitive, nearest the file
    first) and return the name of the directory that contains it.

    Raises:
        LanguageNotFoundError: No directory matches the framework name, or the
            matching directory has no named parent.
    """
    file = Path(file)
    wanted = framework.get_name().lower()

    framework_dir: Optional[Path] = None
    for ancestor in Path(os.path.normpath(file)).parents:
        if ancestor.name.lower() == wanted:
            framework_dir = ancestor
            break

    if framework_dir is None or framework_dir.parent.name in ("", ".", ".."):
        raise LanguageNotFoundError(wanted, file)

    return framework_dir.parent.name


def load_project(file: Path) -> Project:
    """Build the full Project for one config file."""
    file = Path(file)
    framework = get_framework_by_config_file(file)
    project = Project(
        name=get_project_name_by_config_file(file),
        language=get_language_by_config_file(framework, file),
        framework=framework,
        tests=get_test_implementations_by_config_file(file),
    )
    logger.info(
        "Loaded project",
        extra={"path": str(file), "language": project.language, "test_count": len(project.tests)},
    )
    return project


def load_projects(bw_dir: Path) -> list[Project]:
    """
    Load every project under `<bw_dir>/frameworks`.

    The first malformed config stops the walk; its error propagates.
    """
    return [load_project(config_file) for config_file in find_config_files(bw_dir)]
