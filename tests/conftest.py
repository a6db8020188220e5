# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for bwtoolset tests.

Most fixtures build a small benchmark root under tmp_path laid out the way
real frameworks are:

    <tmp>/frameworks/Java/gemini/config.toml
"""

import textwrap
from pathlib import Path
from typing import Callable

import pytest

GEMINI_CONFIG = textwrap.dedent("""\
    [framework]
    name = "Gemini"
    authors = ["Jane Doe", "John Roe"]
    github = "https://github.com/example/gemini"

    [main]
    urls = { json = "/json", plaintext = "/plaintext", db = "/db" }
    approach = "Realistic"
    classification = "Fullstack"
    database = "MySQL"
    database_os = "Linux"
    os = "Linux"
    orm = "Micro"
    platform = "Servlet"
    webserver = "Resin"
    versus = "servlet"
    tags = ["broken"]

    [postgres]
    urls = { db = "/db", query = "/query?queries=" }
    approach = "Realistic"
    classification = "Fullstack"
    database = "Postgres"
    database_os = "Linux"
    os = "Linux"
    platform = "Servlet"
    webserver = "Resin"
    versus = "servlet"
    dockerfile = "gemini-postgres.dockerfile"
""")


def _write_config(bw_dir: Path, language: str, framework_dir: str, content: str,
                  file_name: str = "config.toml") -> Path:
    target_dir = bw_dir / "frameworks" / language / framework_dir
    target_dir.mkdir(parents=True, exist_ok=True)
    config_file = target_dir / file_name
    config_file.write_text(content, encoding="utf-8")
    return config_file


@pytest.fixture()
def bw_dir(tmp_path: Path) -> Path:
    """An empty benchmark root."""
    root = tmp_path / "bw"
    root.mkdir()
    return root


@pytest.fixture()
def gemini_config(bw_dir: Path) -> Path:
    """A valid two-test config at frameworks/Java/gemini/config.toml."""
    return _write_config(bw_dir, "Java", "gemini", GEMINI_CONFIG)


@pytest.fixture()
def missing_urls_config(bw_dir: Path) -> Path:
    """Valid framework and main blocks, but a second block without urls."""
    content = GEMINI_CONFIG + textwrap.dedent("""\

        [mongodb]
        approach = "Realistic"
        classification = "Fullstack"
        os = "Linux"
        platform = "Servlet"
        webserver = "Resin"
        versus = "servlet"
    """)
    return _write_config(bw_dir, "Java", "gemini", content)


@pytest.fixture()
def broken_toml_config(bw_dir: Path) -> Path:
    """A file that isn't valid TOML at all."""
    return _write_config(bw_dir, "Java", "gemini", "[framework\nname = = gemini")


@pytest.fixture()
def gemini_content() -> str:
    """Text of the valid gemini config, for tests that tweak it."""
    return GEMINI_CONFIG


@pytest.fixture()
def write_config(bw_dir: Path) -> Callable[..., Path]:
    """
    Write a config file under the benchmark root.

    Call as write_config(language, framework_dir, content, file_name="config.toml").
    """
    def _write(language: str, framework_dir: str, content: str,
               file_name: str = "config.toml") -> Path:
        return _write_config(bw_dir, language, framework_dir, content, file_name)

    return _write
