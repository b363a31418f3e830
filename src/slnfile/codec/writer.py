# Copyright 2026 slnfile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Writer for solution files.

Emits the exact text form consumed by :mod:`slnfile.codec.reader`. Global
sections are written in the canonical order expected by the format's
consumers, independent of the order in which the model stores them:

1. ``SolutionConfigurationPlatforms`` (required)
2. ``ProjectConfigurationPlatforms`` (optional)
3. ``SolutionProperties`` (required)
4. ``NestedProjects`` (optional)
5. ``ExtensibilityGlobals`` (optional)
6. every other section, in stored order

The first section matching a slot claims it; later duplicates fall through
to the remainder.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TextIO

from slnfile.codec import grammar
from slnfile.codec.errors import InvariantError
from slnfile.model.entities import (
    EXTENSIBILITY_GLOBALS,
    NESTED_PROJECTS,
    PROJECT_CONFIGURATION_PLATFORMS,
    SOLUTION_CONFIGURATION_PLATFORMS,
    SOLUTION_PROPERTIES,
    GeneralSection,
    GlobalSection,
    NestedProjectsSection,
    ProjectConfigurationPlatformsSection,
    SolutionConfigurationPlatformsSection,
    SolutionFile,
)
from slnfile.model.types import format_guid

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

CRLF = "\r\n"
LF = "\n"


def write(solution: SolutionFile, stream: TextIO, newline: str = CRLF) -> None:
    """Write *solution* to a text stream.

    Every global section is checked before the first line is written, so a
    failure leaves the stream untouched.

    Args:
        solution: The document to write.
        stream: Writable text stream. Open files with ``newline=""`` so that
            *newline* reaches the file unchanged.
        newline: Line terminator, ``"\\r\\n"`` by default.

    Raises:
        InvariantError: If a required section is missing or a section cannot be serialized.
    """
    sections = canonical_section_order(solution.global_sections)
    for section in sections:
        if not isinstance(section, _SERIALIZABLE_SECTIONS):
            raise InvariantError(f"Unable to serialize global section type: {type(section).__name__}")

    logger.debug(
        "Writing solution file: %d project(s), %d global section(s)",
        len(solution.project_references),
        len(sections),
    )
    writer = _IndentedWriter(stream, newline)
    writer.write_line()
    writer.write_line(grammar.format_format_version_line(solution.format_version))
    writer.write_line(solution.visual_studio_moniker)
    writer.write_line(
        grammar.format_assignment(grammar.VISUAL_STUDIO_VERSION_KEY, str(solution.visual_studio_version))
    )
    writer.write_line(
        grammar.format_assignment(
            grammar.MINIMUM_VISUAL_STUDIO_VERSION_KEY, str(solution.minimum_visual_studio_version)
        )
    )

    for project in solution.project_references:
        writer.write_line(grammar.format_project_line(project))
        writer.write_line(grammar.PROJECT_END)

    writer.write_line(grammar.GLOBAL)
    with writer.indented():
        for section in sections:
            _write_section(writer, section)
    writer.write_line(grammar.GLOBAL_END)


def serialize(solution: SolutionFile, newline: str = CRLF) -> str:
    """Serialize *solution* to a string. See :func:`write`."""
    buffer = io.StringIO(newline="")
    write(solution, buffer, newline)
    return buffer.getvalue()


def canonical_section_order(sections: Sequence[GlobalSection]) -> list[GlobalSection]:
    """Return *sections* in canonical write order.

    A stable partition: each ordering slot claims the first unclaimed section
    it matches, then the unclaimed sections follow in their original order.
    Applying it to its own output returns the same sequence.

    Raises:
        InvariantError: If ``SolutionConfigurationPlatforms`` or
            ``SolutionProperties`` is missing.
    """
    claimed: list[int] = []
    for rule in _ORDERING_RULES:
        index = next(
            (i for i, section in enumerate(sections) if i not in claimed and rule.matches(section)),
            None,
        )
        if index is None:
            if rule.required:
                raise InvariantError(f"Missing required global section: {rule.name}")
            continue
        claimed.append(index)
    remainder = [i for i in range(len(sections)) if i not in claimed]
    return [sections[i] for i in claimed + remainder]


def section_content_lines(section: GlobalSection) -> list[str]:
    """Render the body lines of a global section, without indentation.

    Raises:
        InvariantError: If the section type has no writer.
    """
    if isinstance(section, SolutionConfigurationPlatformsSection):
        return [
            grammar.format_assignment(str(m.solution_build_configuration), str(m.mapped_solution_build_configuration))
            for m in section.mappings
        ]
    if isinstance(section, ProjectConfigurationPlatformsSection):
        return [
            grammar.format_assignment(
                grammar.format_project_configuration_key(m.project_guid, m.solution_build_configuration, m.indicator),
                str(m.mapped_solution_build_configuration),
            )
            for m in section.mappings
        ]
    if isinstance(section, NestedProjectsSection):
        return [
            grammar.format_assignment(format_guid(n.project_guid), format_guid(n.parent_project_guid))
            for n in section.nestings
        ]
    if isinstance(section, GeneralSection):
        return list(section.lines)
    raise InvariantError(f"Unable to serialize global section type: {type(section).__name__}")


# ################
# Implementation
# ################

_SERIALIZABLE_SECTIONS = (
    SolutionConfigurationPlatformsSection,
    ProjectConfigurationPlatformsSection,
    NestedProjectsSection,
    GeneralSection,
)


@dataclass(frozen=True)
class _OrderingRule:
    name: str
    required: bool
    matches: Callable[[GlobalSection], bool]


def _general_named(name: str) -> Callable[[GlobalSection], bool]:
    return lambda section: isinstance(section, GeneralSection) and section.name == name


_ORDERING_RULES: tuple[_OrderingRule, ...] = (
    _OrderingRule(
        SOLUTION_CONFIGURATION_PLATFORMS,
        required=True,
        matches=lambda section: isinstance(section, SolutionConfigurationPlatformsSection),
    ),
    _OrderingRule(
        PROJECT_CONFIGURATION_PLATFORMS,
        required=False,
        matches=lambda section: isinstance(section, ProjectConfigurationPlatformsSection),
    ),
    _OrderingRule(SOLUTION_PROPERTIES, required=True, matches=_general_named(SOLUTION_PROPERTIES)),
    _OrderingRule(
        NESTED_PROJECTS,
        required=False,
        matches=lambda section: isinstance(section, NestedProjectsSection),
    ),
    _OrderingRule(EXTENSIBILITY_GLOBALS, required=False, matches=_general_named(EXTENSIBILITY_GLOBALS)),
)


class _IndentedWriter:
    """Prefixes every line with one tab per open scope."""

    def __init__(self, stream: TextIO, newline: str, indent: str = "\t") -> None:
        self._stream = stream
        self._newline = newline
        self._indent = indent
        self._depth = 0

    def increase(self) -> None:
        self._depth += 1

    def decrease(self) -> None:
        if self._depth == 0:
            raise RuntimeError("Indentation decreased below zero")
        self._depth -= 1

    @contextmanager
    def indented(self) -> Iterator[None]:
        self.increase()
        try:
            yield
        finally:
            self.decrease()

    def write_line(self, line: str = "") -> None:
        self._stream.write(self._indent * self._depth + line + self._newline)


def _write_section(writer: _IndentedWriter, section: GlobalSection) -> None:
    writer.write_line(grammar.format_section_header(section.name, section.pre_or_post_solution))
    with writer.indented():
        for line in section_content_lines(section):
            writer.write_line(line)
    writer.write_line(grammar.GLOBAL_SECTION_END)
