# Copyright 2026 slnfile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the solution file document model."""

import uuid

import pytest

from slnfile.model import (
    BuildConfiguration,
    GeneralSection,
    NestedProjectsSection,
    PlatformTarget,
    PreOrPostSolution,
    ProjectBuildConfigurationMapping,
    ProjectConfigurationIndicator,
    ProjectConfigurationPlatformsSection,
    ProjectNesting,
    ProjectReference,
    SolutionBuildConfiguration,
    SolutionBuildConfigurationMapping,
    SolutionConfigurationPlatformsSection,
    SolutionFile,
    Version,
    format_guid,
    parse_guid,
)

# ###############
# Test Helpers
# ###############

_APP_GUID = uuid.UUID("11111111-1111-1111-1111-111111111111")
_LIB_GUID = uuid.UUID("22222222-2222-2222-2222-222222222222")
_CSHARP_GUID = uuid.UUID("FAE04EC0-301F-11D3-BF4B-00C04F79EFBC")

_DEBUG_ANY_CPU = SolutionBuildConfiguration(
    build_configuration=BuildConfiguration.DEBUG,
    platform_target=PlatformTarget.ANY_CPU,
)


def _solution(**kwargs: object) -> SolutionFile:
    """Build a SolutionFile with standard header values."""
    return SolutionFile(
        format_version=Version(major=12, minor=0),
        visual_studio_moniker="# Visual Studio Version 16",
        visual_studio_version=Version.parse("16.0.28701.123"),
        minimum_visual_studio_version=Version.parse("10.0.40219.1"),
        **kwargs,
    )


# ###############
# Version
# ###############


class TestVersion:
    def test_two_component_version(self) -> None:
        version = Version.parse("12.00")
        assert version.major == 12
        assert version.minor == 0
        assert version.build is None
        assert version.revision is None

    def test_four_component_version_renders_all_components(self) -> None:
        assert str(Version.parse("16.0.28701.123")) == "16.0.28701.123"

    def test_three_component_version(self) -> None:
        assert str(Version.parse("17.4.1")) == "17.4.1"

    def test_leading_zeros_are_not_significant(self) -> None:
        assert str(Version.parse("12.00")) == "12.0"

    def test_two_digit_minor(self) -> None:
        assert Version.parse("12.00").format_two_digit_minor() == "12.00"
        assert Version(major=9, minor=5).format_two_digit_minor() == "9.05"

    @pytest.mark.parametrize("text", ["", "16", "16.x", "1.2.3.4.5", "16..0", "-1.0", " 16.0"])
    def test_invalid_versions_rejected(self, text: str) -> None:
        with pytest.raises(ValueError):
            Version.parse(text)

    def test_versions_are_frozen(self) -> None:
        version = Version(major=1, minor=2)
        with pytest.raises(ValueError):
            version.major = 3  # type: ignore[misc]


# ###############
# GUIDs
# ###############


class TestGuids:
    def test_braced_and_unbraced_parse_equal(self) -> None:
        braced = parse_guid("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}")
        assert braced == parse_guid("fae04ec0-301f-11d3-bf4b-00c04f79efbc")

    def test_format_is_braced_upper_case(self) -> None:
        guid = parse_guid("abcdef12-3456-7890-abcd-ef1234567890")
        assert format_guid(guid) == "{ABCDEF12-3456-7890-ABCD-EF1234567890}"

    @pytest.mark.parametrize(
        "text",
        [
            "not-a-guid",
            "{1234}",
            "11111111111111111111111111111111",
            "{11111111-1111-1111-1111-11111111111Z}",
            "11111111-1111-1111-1111-111111111111}",
        ],
    )
    def test_invalid_guids_rejected(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_guid(text)


# ###############
# Build configurations
# ###############


class TestSolutionBuildConfiguration:
    def test_str_joins_with_pipe(self) -> None:
        assert str(_DEBUG_ANY_CPU) == "Debug|Any CPU"

    def test_equality_by_value(self) -> None:
        other = SolutionBuildConfiguration(
            build_configuration=BuildConfiguration.DEBUG,
            platform_target=PlatformTarget.ANY_CPU,
        )
        assert other == _DEBUG_ANY_CPU

    @pytest.mark.parametrize(
        ("platform", "text"),
        [
            (PlatformTarget.X86, "Release|x86"),
            (PlatformTarget.X64, "Release|x64"),
            (PlatformTarget.MIXED_PLATFORMS, "Release|Mixed Platforms"),
        ],
    )
    def test_platform_spelling(self, platform: PlatformTarget, text: str) -> None:
        configuration = SolutionBuildConfiguration(
            build_configuration=BuildConfiguration.RELEASE,
            platform_target=platform,
        )
        assert str(configuration) == text


# ###############
# Global sections
# ###############


class TestGlobalSections:
    def test_structured_sections_have_default_names(self) -> None:
        assert SolutionConfigurationPlatformsSection().name == "SolutionConfigurationPlatforms"
        assert ProjectConfigurationPlatformsSection().name == "ProjectConfigurationPlatforms"
        assert NestedProjectsSection().name == "NestedProjects"

    def test_default_markers(self) -> None:
        assert SolutionConfigurationPlatformsSection().pre_or_post_solution == PreOrPostSolution.PRE_SOLUTION
        assert ProjectConfigurationPlatformsSection().pre_or_post_solution == PreOrPostSolution.POST_SOLUTION
        assert NestedProjectsSection().pre_or_post_solution == PreOrPostSolution.PRE_SOLUTION

    @pytest.mark.parametrize(
        "section_type",
        [SolutionConfigurationPlatformsSection, ProjectConfigurationPlatformsSection, NestedProjectsSection],
    )
    def test_structured_section_name_is_fixed(self, section_type: type) -> None:
        """A structured section under any other name would read back as a general section."""
        with pytest.raises(ValueError):
            section_type(name="Bogus")

    def test_structured_section_keeps_its_name_from_dict(self) -> None:
        section = SolutionConfigurationPlatformsSection.model_validate({"name": "SolutionConfigurationPlatforms"})
        assert section.name == "SolutionConfigurationPlatforms"

    def test_general_section_requires_name_and_marker(self) -> None:
        with pytest.raises(ValueError):
            GeneralSection()  # type: ignore[call-arg]

    def test_discriminated_union_from_dict(self) -> None:
        solution = SolutionFile.model_validate(
            {
                "format_version": {"major": 12, "minor": 0},
                "visual_studio_moniker": "# Visual Studio Version 16",
                "visual_studio_version": {"major": 16, "minor": 0},
                "minimum_visual_studio_version": {"major": 10, "minor": 0},
                "global_sections": [
                    {"kind": "nested_projects", "nestings": []},
                    {"kind": "general", "name": "SolutionProperties", "pre_or_post_solution": "preSolution"},
                ],
            }
        )
        assert isinstance(solution.global_sections[0], NestedProjectsSection)
        assert isinstance(solution.global_sections[1], GeneralSection)
        assert solution.global_sections[1].pre_or_post_solution == PreOrPostSolution.PRE_SOLUTION


# ###############
# SolutionFile
# ###############


class TestSolutionFile:
    def test_defaults_are_empty(self) -> None:
        solution = _solution()
        assert solution.project_references == []
        assert solution.global_sections == []

    def test_find_section_by_name(self) -> None:
        properties = GeneralSection(
            name="SolutionProperties",
            pre_or_post_solution=PreOrPostSolution.PRE_SOLUTION,
            lines=["HideSolutionNode = FALSE"],
        )
        solution = _solution(global_sections=[SolutionConfigurationPlatformsSection(), properties])
        assert solution.find_section("SolutionProperties") == properties
        assert solution.has_section("SolutionConfigurationPlatforms")
        assert solution.find_section("ExtensibilityGlobals") is None
        assert not solution.has_section("ExtensibilityGlobals")

    def test_get_section_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            _solution().get_section("SolutionProperties")

    def test_typed_accessors(self) -> None:
        configurations = SolutionConfigurationPlatformsSection()
        nested = NestedProjectsSection(nestings=[ProjectNesting(project_guid=_APP_GUID, parent_project_guid=_LIB_GUID)])
        solution = _solution(global_sections=[nested, configurations])
        assert solution.solution_configuration_platforms == configurations
        assert solution.nested_projects == nested
        assert solution.project_configuration_platforms is None

    def test_find_project(self) -> None:
        app = ProjectReference(
            project_type_guid=_CSHARP_GUID, name="App", relative_path="App\\App.csproj", project_guid=_APP_GUID
        )
        solution = _solution(project_references=[app])
        assert solution.find_project(_APP_GUID) == app
        assert solution.find_project(_LIB_GUID) is None

    def test_json_roundtrip(self) -> None:
        solution = _solution(
            project_references=[
                ProjectReference(
                    project_type_guid=_CSHARP_GUID, name="App", relative_path="App\\App.csproj", project_guid=_APP_GUID
                )
            ],
            global_sections=[
                SolutionConfigurationPlatformsSection(
                    mappings=[
                        SolutionBuildConfigurationMapping(
                            solution_build_configuration=_DEBUG_ANY_CPU,
                            mapped_solution_build_configuration=_DEBUG_ANY_CPU,
                        )
                    ]
                ),
                ProjectConfigurationPlatformsSection(
                    mappings=[
                        ProjectBuildConfigurationMapping(
                            project_guid=_APP_GUID,
                            solution_build_configuration=_DEBUG_ANY_CPU,
                            indicator=ProjectConfigurationIndicator.BUILD_0,
                            mapped_solution_build_configuration=_DEBUG_ANY_CPU,
                        )
                    ]
                ),
                GeneralSection(
                    name="SolutionProperties",
                    pre_or_post_solution=PreOrPostSolution.PRE_SOLUTION,
                    lines=["HideSolutionNode = FALSE"],
                ),
            ],
        )
        assert SolutionFile.model_validate_json(solution.model_dump_json()) == solution
