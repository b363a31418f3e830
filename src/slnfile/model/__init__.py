# Copyright 2026 slnfile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed document model for solution files (projects, global sections, versions)."""

from slnfile.model.entities import (
    EXTENSIBILITY_GLOBALS,
    NESTED_PROJECTS,
    PROJECT_CONFIGURATION_PLATFORMS,
    SOLUTION_CONFIGURATION_PLATFORMS,
    SOLUTION_PROPERTIES,
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

__all__ = [
    # Value types
    "BuildConfiguration",
    "PlatformTarget",
    "PreOrPostSolution",
    "ProjectConfigurationIndicator",
    "SolutionBuildConfiguration",
    "Version",
    "format_guid",
    "parse_guid",
    # Section names
    "SOLUTION_CONFIGURATION_PLATFORMS",
    "PROJECT_CONFIGURATION_PLATFORMS",
    "NESTED_PROJECTS",
    "SOLUTION_PROPERTIES",
    "EXTENSIBILITY_GLOBALS",
    # Entities
    "ProjectReference",
    "SolutionBuildConfigurationMapping",
    "ProjectBuildConfigurationMapping",
    "ProjectNesting",
    "SolutionConfigurationPlatformsSection",
    "ProjectConfigurationPlatformsSection",
    "NestedProjectsSection",
    "GeneralSection",
    "GlobalSection",
    "SolutionFile",
]
