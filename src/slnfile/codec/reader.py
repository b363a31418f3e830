# Copyright 2026 slnfile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Single-pass reader for solution files.

Converts a line stream into a :class:`SolutionFile` model. The reader holds
exactly one line of lookahead and fails on the first line that does not
match the grammar; it never returns a partially populated document.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterator
from typing import NoReturn, TextIO, TypeVar

from slnfile.codec import grammar
from slnfile.codec.errors import ConversionError, StructuralError, TrailingContentError
from slnfile.model.entities import (
    NESTED_PROJECTS,
    PROJECT_CONFIGURATION_PLATFORMS,
    SOLUTION_CONFIGURATION_PLATFORMS,
    GeneralSection,
    GlobalSection,
    NestedProjectsSection,
    ProjectBuildConfigurationMapping,
    ProjectConfigurationPlatformsSection,
    ProjectNesting,
    ProjectReference,
    SolutionBuildConfigurationMapping,
    SolutionConfigurationPlatformsSection,
    SolutionFile,
)
from slnfile.model.types import PreOrPostSolution, Version

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def read(stream: TextIO) -> SolutionFile:
    """Read a solution file from a text stream positioned at its first line.

    Args:
        stream: Readable text stream. Line endings may be ``\\r\\n`` or ``\\n``.

    Returns:
        The fully populated SolutionFile.

    Raises:
        StructuralError: If a line does not have the expected shape, or the
            stream ends early.
        TrailingContentError: If content follows the terminating line.
        ConversionError: If a GUID, version, build configuration, platform,
            indicator or pre/post marker is invalid.
    """
    solution = _Reader(stream).read()
    logger.debug(
        "Read solution file: %d project(s), %d global section(s)",
        len(solution.project_references),
        len(solution.global_sections),
    )
    return solution


def parse(text: str) -> SolutionFile:
    """Parse solution file text. See :func:`read`."""
    return read(io.StringIO(text, newline=""))


# ################
# Implementation
# ################

_T = TypeVar("_T")

_BYTE_ORDER_MARK = "\ufeff"

_SECTION_HEADER_SHAPE = "'GlobalSection(<name>) = <preSolution|postSolution>'"
_SOLUTION_CONFIGURATION_SHAPE = "'Cfg|Platform = Cfg|Platform'"
_PROJECT_CONFIGURATION_SHAPE = "'{GUID}.Cfg|Platform.Indicator = Cfg|Platform'"
_NESTED_PROJECT_SHAPE = "'{ChildGUID} = {ParentGUID}'"


class _Reader:
    """Line cursor plus the per-block parsing routines."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._line_number = 0
        self._raw_line = ""

    def read(self) -> SolutionFile:
        first = self._next("blank first line")
        if first.lstrip(_BYTE_ORDER_MARK).strip():
            self._fail("blank first line", first)

        format_line = self._next("format version line")
        if not grammar.is_format_version_line(format_line):
            self._fail(f"'{grammar.FORMAT_VERSION_PREFIX}<major>.<minor>'", format_line)
        format_version = self._convert(grammar.to_version, grammar.last_token(format_line))

        self._next("editor moniker line")
        moniker = self._raw_line.rstrip("\r\n")

        visual_studio_version = self._read_version_assignment(grammar.VISUAL_STUDIO_VERSION_KEY)
        minimum_version = self._read_version_assignment(grammar.MINIMUM_VISUAL_STUDIO_VERSION_KEY)

        projects: list[ProjectReference] = []
        line = self._next("'Project' or 'Global'")
        while grammar.is_project_start(line):
            projects.append(self._read_project(line))
            line = self._next("'Project' or 'Global'")

        if not grammar.is_global_start(line):
            self._fail("'Project' or 'Global'", line)
        sections = self._read_global_sections()

        self._expect_end_of_stream()

        return SolutionFile(
            format_version=format_version,
            visual_studio_moniker=moniker,
            visual_studio_version=visual_studio_version,
            minimum_visual_studio_version=minimum_version,
            project_references=projects,
            global_sections=sections,
        )

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _next(self, expected: str) -> str:
        """Advance to the next line and return it trimmed.

        Raises StructuralError naming *expected* if the stream is exhausted.
        """
        raw = self._stream.readline()
        if raw == "":
            raise StructuralError(expected, None, self._line_number + 1)
        self._line_number += 1
        self._raw_line = raw
        return raw.strip()

    def _fail(self, expected: str, found: str) -> NoReturn:
        raise StructuralError(expected, found, self._line_number)

    def _convert(self, converter: Callable[[str], _T], token: str) -> _T:
        """Run a grammar converter, attaching the current line number to failures."""
        try:
            return converter(token)
        except ConversionError as exc:
            raise ConversionError(exc.token, exc.expected, self._line_number) from None

    def _assignment(self, line: str, shape: str) -> tuple[str, str]:
        parts = grammar.split_assignment(line)
        if parts is None:
            self._fail(shape, line)
        return parts

    def _expect_end_of_stream(self) -> None:
        """Accept end of stream, or one blank line followed by end of stream."""
        raw = self._stream.readline()
        if raw == "":
            return
        self._line_number += 1
        if raw.strip():
            raise TrailingContentError(raw.strip(), self._line_number)
        rest = self._stream.readline()
        if rest != "":
            raise TrailingContentError(rest.strip(), self._line_number + 1)

    # ------------------------------------------------------------------
    # Header and project blocks
    # ------------------------------------------------------------------

    def _read_version_assignment(self, key: str) -> Version:
        expected = f"'{key} = <version>'"
        line = self._next(expected)
        if not grammar.is_assignment_line(line, key):
            self._fail(expected, line)
        return self._convert(grammar.to_version, grammar.last_token(line))

    def _read_project(self, line: str) -> ProjectReference:
        """Parse: Project("{TYPE}") = "Name", "Path", "{GUID}" followed by EndProject."""
        fields = grammar.extract_project_fields(line)
        if fields is None:
            self._fail('project line of the form Project("{TYPE}") = "Name", "Path", "{GUID}"', line)
        type_token, name, path, guid_token = fields
        project = ProjectReference(
            project_type_guid=self._convert(grammar.to_guid, type_token),
            name=name,
            relative_path=path,
            project_guid=self._convert(grammar.to_guid, guid_token),
        )

        end = self._next(f"'{grammar.PROJECT_END}'")
        if not grammar.is_project_end(end):
            self._fail(f"'{grammar.PROJECT_END}'", end)
        return project

    # ------------------------------------------------------------------
    # Global block
    # ------------------------------------------------------------------

    def _read_global_sections(self) -> list[GlobalSection]:
        sections: list[GlobalSection] = []
        line = self._next(f"'{grammar.GLOBAL_END}'")
        while not grammar.is_global_end(line):
            sections.append(self._read_global_section(line))
            line = self._next(f"'{grammar.GLOBAL_END}'")
        return sections

    def _read_global_section(self, line: str) -> GlobalSection:
        """Parse a section header and dispatch on the section name."""
        header = grammar.extract_section_header(line) if grammar.is_global_section_start(line) else None
        if header is None:
            self._fail(f"{_SECTION_HEADER_SHAPE} or '{grammar.GLOBAL_END}'", line)
        name, marker = header
        pre_or_post = self._convert(grammar.to_pre_or_post_solution, marker)

        if name == SOLUTION_CONFIGURATION_PLATFORMS:
            return self._read_solution_configuration_platforms(pre_or_post)
        if name == PROJECT_CONFIGURATION_PLATFORMS:
            return self._read_project_configuration_platforms(pre_or_post)
        if name == NESTED_PROJECTS:
            return self._read_nested_projects(pre_or_post)
        return GeneralSection(name=name, pre_or_post_solution=pre_or_post, lines=list(self._section_lines()))

    def _section_lines(self) -> Iterator[str]:
        """Yield the trimmed content lines of the current section up to its closer."""
        expected = f"'{grammar.GLOBAL_SECTION_END}'"
        line = self._next(expected)
        while not grammar.is_global_section_end(line):
            yield line
            line = self._next(expected)

    def _read_solution_configuration_platforms(
        self, pre_or_post: PreOrPostSolution
    ) -> SolutionConfigurationPlatformsSection:
        section = SolutionConfigurationPlatformsSection(pre_or_post_solution=pre_or_post)
        for line in self._section_lines():
            left, right = self._assignment(line, _SOLUTION_CONFIGURATION_SHAPE)
            section.mappings.append(
                SolutionBuildConfigurationMapping(
                    solution_build_configuration=self._convert(grammar.to_solution_build_configuration, left),
                    mapped_solution_build_configuration=self._convert(grammar.to_solution_build_configuration, right),
                )
            )
        return section

    def _read_project_configuration_platforms(
        self, pre_or_post: PreOrPostSolution
    ) -> ProjectConfigurationPlatformsSection:
        section = ProjectConfigurationPlatformsSection(pre_or_post_solution=pre_or_post)
        for line in self._section_lines():
            left, right = self._assignment(line, _PROJECT_CONFIGURATION_SHAPE)
            key = grammar.split_project_configuration_key(left)
            if key is None:
                self._fail(_PROJECT_CONFIGURATION_SHAPE, line)
            guid_token, configuration_token, indicator_token = key
            section.mappings.append(
                ProjectBuildConfigurationMapping(
                    project_guid=self._convert(grammar.to_guid, guid_token),
                    solution_build_configuration=self._convert(
                        grammar.to_solution_build_configuration, configuration_token
                    ),
                    indicator=self._convert(grammar.to_indicator, indicator_token),
                    mapped_solution_build_configuration=self._convert(grammar.to_solution_build_configuration, right),
                )
            )
        return section

    def _read_nested_projects(self, pre_or_post: PreOrPostSolution) -> NestedProjectsSection:
        section = NestedProjectsSection(pre_or_post_solution=pre_or_post)
        for line in self._section_lines():
            left, right = self._assignment(line, _NESTED_PROJECT_SHAPE)
            section.nestings.append(
                ProjectNesting(
                    project_guid=self._convert(grammar.to_guid, left),
                    parent_project_guid=self._convert(grammar.to_guid, right),
                )
            )
        return section
