# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for resolving a config file's language from its directory layout."""

from pathlib import Path

import pytest

from bwtoolset.config.exceptions import LanguageNotFoundError
from bwtoolset.config.loader import get_language_by_config_file
from bwtoolset.config.schema import Framework


class TestLanguageResolution:
    def test_language_is_directory_above_framework(self) -> None:
        path = Path("/bw/frameworks/Java/gemini/config.toml")
        assert get_language_by_config_file(Framework(name="gemini"), path) == "Java"

    def test_framework_match_is_case_insensitive(self) -> None:
        path = Path("/bw/frameworks/Java/gemini/config.toml")
        assert get_language_by_config_file(Framework(name="Gemini"), path) == "Java"

    def test_directory_case_is_preserved(self) -> None:
        path = Path("/bw/frameworks/JavaScript/Express/config.toml")
        assert get_language_by_config_file(Framework(name="express"), path) == "JavaScript"

    def test_relative_path(self) -> None:
        path = Path("frameworks/Rust/actix/config.toml")
        assert get_language_by_config_file(Framework(name="actix"), path) == "Rust"

    def test_nearest_match_wins(self) -> None:
        path = Path("/bw/gemini/frameworks/Java/gemini/config.toml")
        assert get_language_by_config_file(Framework(name="gemini"), path) == "Java"

    def test_real_config_file(self, gemini_config: Path) -> None:
        assert get_language_by_config_file(Framework(name="Gemini"), gemini_config) == "Java"

    def test_file_name_is_not_a_candidate(self) -> None:
        path = Path("/bw/frameworks/Java/other/gemini")
        with pytest.raises(LanguageNotFoundError):
            get_language_by_config_file(Framework(name="gemini"), path)

    def test_no_matching_directory_raises(self) -> None:
        path = Path("/bw/frameworks/Java/gemini/config.toml")
        with pytest.raises(LanguageNotFoundError) as excinfo:
            get_language_by_config_file(Framework(name="Fiber"), path)
        assert excinfo.value.framework_name == "fiber"
        assert excinfo.value.file_path == str(path)

    def test_framework_directory_at_root_raises(self) -> None:
        path = Path("gemini/config.toml")
        with pytest.raises(LanguageNotFoundError):
            get_language_by_config_file(Framework(name="gemini"), path)

    def test_parent_references_are_normalized(self) -> None:
        path = Path("/bw/frameworks/Java/gemini/../gemini/config.toml")
        assert get_language_by_config_file(Framework(name="gemini"), path) == "Java"

    def test_parent_reference_is_not_a_language(self) -> None:
        path = Path("../gemini/config.toml")
        with pytest.raises(LanguageNotFoundError):
            get_language_by_config_file(Framework(name="gemini"), path)
