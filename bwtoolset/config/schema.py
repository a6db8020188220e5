# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe schemas for framework config files.

A config file has one reserved `framework` block and any number of test
blocks. The `main` block is the canonical test and must always be present:

    [framework]
    name = "gemini"
    authors = ["Jane Doe"]

    [main]
    urls = { json = "/json", plaintext = "/plaintext" }
    approach = "Realistic"
    ...

All models are frozen pydantic v2 models. Unknown keys are ignored rather
than rejected, since framework maintainers routinely carry notes and
display fields the toolset has no use for.

Test names never come from the file. A test block is first validated as a
TestBlock (no name), and the loader then builds the final Test by supplying
the derived name, so a Test is never observable without one.
"""

from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from bwtoolset.utils.paths import get_bw_dir

TAG_PREFIX = "bw.test."


@runtime_checkable
class Named(Protocol):
    """Anything the orchestrator can refer to by name."""

    def get_name(self) -> str: ...


class Framework(BaseModel):
    """The framework under test. Identity is the lowercased name."""

    model_config = ConfigDict(frozen=True, extra="ignore", validate_default=True)

    name: str = Field(description="Framework name exactly as written in the file")
    authors: Optional[list[str]] = Field(default=None, description="Framework authors")
    github: Optional[str] = Field(default=None, description="Source repository link")

    def get_name(self) -> str:
        return self.name


class TestBlock(BaseModel):
    """
    One test implementation block as written in the file.

    This is the raw record; it has no name. See Test for the named value the
    rest of the toolset works with.
    """

    __test__ = False

    model_config = ConfigDict(frozen=True, extra="ignore", validate_default=True)

    urls: dict[str, str] = Field(description="Route type (json, plaintext, ...) to URL path")
    approach: str
    classification: str
    orm: Optional[str] = None
    platform: str
    webserver: str
    os: str
    database_os: Optional[str] = None
    database: Optional[str] = None
    versus: str = Field(description="Baseline test this one is compared against")
    tags: Optional[list[str]] = None
    dockerfile: Optional[str] = Field(
        default=None, description="Container build file, relative to the framework dir"
    )


class Test(TestBlock):
    """A test implementation with its derived name."""

    name: str

    @classmethod
    def from_block(cls, name: str, block: TestBlock) -> "Test":
        return cls(name=name, **block.model_dump())

    def get_name(self) -> str:
        return self.name

    def get_tag(self) -> str:
        """Label used by the orchestrator for containers and processes."""
        return f"{TAG_PREFIX}{self.name}"

    def specify_test_type(self, test_type: Optional[str] = None) -> "Test":
        """
        Narrow the urls to a single route type.

        With no test_type the test is returned as-is. Since tests are frozen,
        a narrowed copy is returned rather than changing this one.
        """
        if test_type is None:
            return self
        urls = {key: url for key, url in self.urls.items() if key == test_type}
        return self.model_copy(update={"urls": urls})


class Config(BaseModel):
    """
    The typed shape every config file must satisfy.

    Only `framework` and `main` are checked here; other test blocks are
    validated one by one when the tests are enumerated.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", validate_default=True)

    framework: Framework
    main: TestBlock


class Project(BaseModel):
    """
    The unit of data the toolset operates on: a language, a framework and its
    tests, plus enough to find the framework directory again on disk.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    name: str = Field(description="Name of the directory holding the config file")
    language: str
    framework: Framework
    tests: list[Test] = Field(default_factory=list)

    def get_path(self, bw_dir: Optional[Path] = None) -> Path:
        """Returns `<bw_dir>/frameworks/<language>/<framework name, lowercased>`."""
        root = bw_dir if bw_dir is not None else get_bw_dir()
        return root / "frameworks" / self.language / self.framework.get_name().lower()
