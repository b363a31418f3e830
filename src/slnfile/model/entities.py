# Copyright 2026 slnfile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Document entities for the solution file model."""

from __future__ import annotations

import uuid
from typing import Annotated, Literal, TypeVar

from pydantic import BaseModel
from pydantic import Field as _Field

from slnfile.model.types import (
    PreOrPostSolution,
    ProjectConfigurationIndicator,
    SolutionBuildConfiguration,
    Version,
)

# ###############
# Public Interface
# ###############

SOLUTION_CONFIGURATION_PLATFORMS = "SolutionConfigurationPlatforms"
PROJECT_CONFIGURATION_PLATFORMS = "ProjectConfigurationPlatforms"
NESTED_PROJECTS = "NestedProjects"
SOLUTION_PROPERTIES = "SolutionProperties"
EXTENSIBILITY_GLOBALS = "ExtensibilityGlobals"


class ProjectReference(BaseModel):
    """A ``Project(...) = ...`` declaration."""

    project_type_guid: uuid.UUID
    name: str
    relative_path: str
    project_guid: uuid.UUID


class SolutionBuildConfigurationMapping(BaseModel):
    """One ``Cfg|Platform = Cfg|Platform`` line of the solution configuration section."""

    solution_build_configuration: SolutionBuildConfiguration
    mapped_solution_build_configuration: SolutionBuildConfiguration


class ProjectBuildConfigurationMapping(BaseModel):
    """One ``{GUID}.Cfg|Platform.Indicator = Cfg|Platform`` line."""

    project_guid: uuid.UUID
    solution_build_configuration: SolutionBuildConfiguration
    indicator: ProjectConfigurationIndicator
    mapped_solution_build_configuration: SolutionBuildConfiguration


class ProjectNesting(BaseModel):
    """One ``{Child} = {Parent}`` line of the nested projects section."""

    project_guid: uuid.UUID
    parent_project_guid: uuid.UUID


class SolutionConfigurationPlatformsSection(BaseModel):
    """The solution-level build configurations. Required in every document."""

    kind: Literal["solution_configuration_platforms"] = "solution_configuration_platforms"
    name: Literal["SolutionConfigurationPlatforms"] = SOLUTION_CONFIGURATION_PLATFORMS
    pre_or_post_solution: PreOrPostSolution = PreOrPostSolution.PRE_SOLUTION
    mappings: list[SolutionBuildConfigurationMapping] = _Field(default_factory=list)


class ProjectConfigurationPlatformsSection(BaseModel):
    """Per-project mapping of solution configurations to project configurations."""

    kind: Literal["project_configuration_platforms"] = "project_configuration_platforms"
    name: Literal["ProjectConfigurationPlatforms"] = PROJECT_CONFIGURATION_PLATFORMS
    pre_or_post_solution: PreOrPostSolution = PreOrPostSolution.POST_SOLUTION
    mappings: list[ProjectBuildConfigurationMapping] = _Field(default_factory=list)


class NestedProjectsSection(BaseModel):
    """Solution folder nesting of projects."""

    kind: Literal["nested_projects"] = "nested_projects"
    name: Literal["NestedProjects"] = NESTED_PROJECTS
    pre_or_post_solution: PreOrPostSolution = PreOrPostSolution.PRE_SOLUTION
    nestings: list[ProjectNesting] = _Field(default_factory=list)


class GeneralSection(BaseModel):
    """Any other section, kept as its raw (trimmed) content lines."""

    kind: Literal["general"] = "general"
    name: str
    pre_or_post_solution: PreOrPostSolution
    lines: list[str] = _Field(default_factory=list)


# A global section: one of the structured variants or the raw fallback.
GlobalSection = Annotated[
    SolutionConfigurationPlatformsSection
    | ProjectConfigurationPlatformsSection
    | NestedProjectsSection
    | GeneralSection,
    _Field(discriminator="kind"),
]


class SolutionFile(BaseModel):
    """Top-level model of a parsed solution file.

    ``project_references`` keeps declaration order. ``global_sections`` keeps
    parse order, but the writer emits them in the canonical section order.
    """

    format_version: Version
    visual_studio_moniker: str
    visual_studio_version: Version
    minimum_visual_studio_version: Version
    project_references: list[ProjectReference] = _Field(default_factory=list)
    global_sections: list[GlobalSection] = _Field(default_factory=list)

    def find_section(self, name: str) -> GlobalSection | None:
        """Return the first global section called *name*, or None."""
        for section in self.global_sections:
            if section.name == name:
                return section
        return None

    def get_section(self, name: str) -> GlobalSection:
        """Return the first global section called *name*.

        Raises:
            KeyError: If no such section exists.
        """
        section = self.find_section(name)
        if section is None:
            raise KeyError(name)
        return section

    def has_section(self, name: str) -> bool:
        return self.find_section(name) is not None

    def find_project(self, project_guid: uuid.UUID) -> ProjectReference | None:
        """Return the project reference with the given project GUID, or None."""
        for project in self.project_references:
            if project.project_guid == project_guid:
                return project
        return None

    @property
    def solution_configuration_platforms(self) -> SolutionConfigurationPlatformsSection | None:
        return _first_of(self.global_sections, SolutionConfigurationPlatformsSection)

    @property
    def project_configuration_platforms(self) -> ProjectConfigurationPlatformsSection | None:
        return _first_of(self.global_sections, ProjectConfigurationPlatformsSection)

    @property
    def nested_projects(self) -> NestedProjectsSection | None:
        return _first_of(self.global_sections, NestedProjectsSection)


# ################
# Implementation
# ################


_S = TypeVar("_S")


def _first_of(sections: list[GlobalSection], section_type: type[_S]) -> _S | None:
    for section in sections:
        if isinstance(section, section_type):
            return section
    return None
