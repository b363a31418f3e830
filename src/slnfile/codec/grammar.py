# Copyright 2026 slnfile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line grammar of the solution file format.

Recognizers and field extractors operate on trimmed lines and only check
shape. Token converters turn extracted fields into model values and raise
:class:`ConversionError` for values outside the accepted sets. Line
formatters are the inverse used by the writer.
"""

from __future__ import annotations

import re
import uuid

from slnfile.codec.errors import ConversionError
from slnfile.model.entities import ProjectReference
from slnfile.model.types import (
    BuildConfiguration,
    PlatformTarget,
    PreOrPostSolution,
    ProjectConfigurationIndicator,
    SolutionBuildConfiguration,
    Version,
    format_guid,
    parse_guid,
)

# ###############
# Public Interface
# ###############

FORMAT_VERSION_PREFIX = "Microsoft Visual Studio Solution File, Format Version "
VISUAL_STUDIO_VERSION_KEY = "VisualStudioVersion"
MINIMUM_VISUAL_STUDIO_VERSION_KEY = "MinimumVisualStudioVersion"

PROJECT_END = "EndProject"
GLOBAL = "Global"
GLOBAL_END = "EndGlobal"
GLOBAL_SECTION_END = "EndGlobalSection"

BUILD_CONFIGURATION_SEPARATOR = "|"
PROJECT_CONFIGURATION_SEPARATOR = "."


def is_project_start(line: str) -> bool:
    return _PROJECT_START.match(line) is not None


def is_project_end(line: str) -> bool:
    return _PROJECT_END.match(line) is not None


def is_global_start(line: str) -> bool:
    return _GLOBAL_START.match(line) is not None


def is_global_end(line: str) -> bool:
    return _GLOBAL_END.match(line) is not None


def is_global_section_start(line: str) -> bool:
    return _GLOBAL_SECTION_START.match(line) is not None


def is_global_section_end(line: str) -> bool:
    return _GLOBAL_SECTION_END.match(line) is not None


def is_format_version_line(line: str) -> bool:
    return line.startswith(FORMAT_VERSION_PREFIX)


def is_assignment_line(line: str, key: str) -> bool:
    """Return True if *line* reads ``<key> = <value>``."""
    left, sep, _ = line.partition("=")
    return sep == "=" and left.strip() == key


def last_token(line: str) -> str:
    """Return the last whitespace-separated token of *line* (the version token)."""
    tokens = line.split()
    return tokens[-1] if tokens else ""


def extract_project_fields(line: str) -> tuple[str, str, str, str] | None:
    """Extract the four quoted fields of ``Project("{TYPE}") = "Name", "Path", "{GUID}"``.

    Returns None unless the whole line has that shape.
    """
    match = _PROJECT_LINE.match(line)
    if match is None:
        return None
    return match.group(1), match.group(2), match.group(3), match.group(4)


def extract_section_header(line: str) -> tuple[str, str] | None:
    """Extract ``(name, marker)`` from ``GlobalSection(name) = marker``."""
    match = _GLOBAL_SECTION_HEADER.match(line)
    if match is None:
        return None
    return match.group("name"), match.group("marker")


def split_assignment(line: str) -> tuple[str, str] | None:
    """Split a content line on its first ``=`` into trimmed left and right tokens."""
    left, sep, right = line.partition("=")
    if not sep:
        return None
    return left.strip(), right.strip()


def split_project_configuration_key(token: str) -> tuple[str, str, str] | None:
    """Split ``{GUID}.Cfg|Platform.Indicator`` into its three parts.

    The indicator keeps any further dots (``Build.0``).
    """
    parts = token.split(PROJECT_CONFIGURATION_SEPARATOR, 2)
    if len(parts) != 3:
        return None
    return parts[0], parts[1], parts[2]


def to_guid(token: str) -> uuid.UUID:
    try:
        return parse_guid(token)
    except ValueError:
        raise ConversionError(token, "GUID") from None


def to_version(token: str) -> Version:
    try:
        return Version.parse(token)
    except ValueError:
        raise ConversionError(token, "version") from None


def to_pre_or_post_solution(token: str) -> PreOrPostSolution:
    try:
        return PreOrPostSolution(token)
    except ValueError:
        raise ConversionError(token, "pre/post solution marker") from None


def to_indicator(token: str) -> ProjectConfigurationIndicator:
    try:
        return ProjectConfigurationIndicator(token)
    except ValueError:
        raise ConversionError(token, "project configuration indicator") from None


def to_solution_build_configuration(token: str) -> SolutionBuildConfiguration:
    """Convert ``Cfg|Platform`` into a :class:`SolutionBuildConfiguration`.

    Raises:
        ConversionError: If the separator is missing or either part is unknown.
    """
    parts = token.split(BUILD_CONFIGURATION_SEPARATOR)
    if len(parts) != 2:
        raise ConversionError(token, "solution build configuration")
    configuration_token, platform_token = parts[0].strip(), parts[1].strip()
    try:
        configuration = BuildConfiguration(configuration_token)
    except ValueError:
        raise ConversionError(configuration_token, "build configuration") from None
    try:
        platform = PlatformTarget(platform_token)
    except ValueError:
        raise ConversionError(platform_token, "platform target") from None
    return SolutionBuildConfiguration(build_configuration=configuration, platform_target=platform)


# Line formatters


def format_format_version_line(version: Version) -> str:
    return FORMAT_VERSION_PREFIX + version.format_two_digit_minor()


def format_assignment(left: str, right: str) -> str:
    return f"{left} = {right}"


def format_project_line(project: ProjectReference) -> str:
    return (
        f'Project("{format_guid(project.project_type_guid)}") = '
        f'"{project.name}", "{project.relative_path}", "{format_guid(project.project_guid)}"'
    )


def format_section_header(name: str, pre_or_post_solution: PreOrPostSolution) -> str:
    return f"GlobalSection({name}) = {pre_or_post_solution.value}"


def format_project_configuration_key(
    project_guid: uuid.UUID,
    configuration: SolutionBuildConfiguration,
    indicator: ProjectConfigurationIndicator,
) -> str:
    sep = PROJECT_CONFIGURATION_SEPARATOR
    return f"{format_guid(project_guid)}{sep}{configuration}{sep}{indicator.value}"


# ################
# Implementation
# ################

_PROJECT_START = re.compile(r"^Project\b")
_PROJECT_END = re.compile(r"^EndProject($|\s)")
_GLOBAL_START = re.compile(r"^Global($|\s)")
_GLOBAL_END = re.compile(r"^EndGlobal($|\s)")
_GLOBAL_SECTION_START = re.compile(r"^GlobalSection\(")
_GLOBAL_SECTION_END = re.compile(r"^EndGlobalSection($|\s)")

_PROJECT_LINE = re.compile(r'^Project\(\s*"([^"]*)"\s*\)\s*=\s*"([^"]*)"\s*,\s*"([^"]*)"\s*,\s*"([^"]*)"$')
_GLOBAL_SECTION_HEADER = re.compile(r"^GlobalSection\((?P<name>[^)]*)\)\s*=\s*(?P<marker>\S+)$")
