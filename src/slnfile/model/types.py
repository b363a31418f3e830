# Copyright 2026 slnfile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value types for the solution file model: versions, GUIDs and closed enumerations."""

from __future__ import annotations

import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict

# ###############
# Public Interface
# ###############


class BuildConfiguration(Enum):
    """Build configuration names accepted in configuration tokens."""

    DEBUG = "Debug"
    RELEASE = "Release"


class PlatformTarget(Enum):
    """Platform targets accepted in configuration tokens."""

    ANY_CPU = "Any CPU"
    X86 = "x86"
    X64 = "x64"
    ARM = "ARM"
    ARM64 = "ARM64"
    MIXED_PLATFORMS = "Mixed Platforms"


class ProjectConfigurationIndicator(Enum):
    """Trailing indicator of a project configuration mapping key."""

    ACTIVE_CFG = "ActiveCfg"
    BUILD_0 = "Build.0"
    DEPLOY_0 = "Deploy.0"


class PreOrPostSolution(Enum):
    """Annotation on a global section header (``= preSolution`` / ``= postSolution``)."""

    PRE_SOLUTION = "preSolution"
    POST_SOLUTION = "postSolution"


class Version(BaseModel):
    """A dotted version number with two to four integer components.

    Only the components present in the source text are kept, so
    ``16.0.28701.123`` and ``12.0`` both render back as written (modulo
    leading zeros, which are not significant).
    """

    model_config = ConfigDict(frozen=True)

    major: int
    minor: int
    build: int | None = None
    revision: int | None = None

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse ``major.minor[.build[.revision]]``.

        Raises:
            ValueError: If the text is not a dotted sequence of 2-4 non-negative integers.
        """
        parts = text.split(".")
        if not 2 <= len(parts) <= 4 or not all(p.isdigit() for p in parts):
            raise ValueError(f"Invalid version: {text!r}")
        numbers = [int(p) for p in parts] + [None, None]
        return cls(major=numbers[0], minor=numbers[1], build=numbers[2], revision=numbers[3])

    def __str__(self) -> str:
        parts = [self.major, self.minor, self.build, self.revision]
        return ".".join(str(p) for p in parts if p is not None)

    def format_two_digit_minor(self) -> str:
        """Render as ``major.minor`` with the minor part zero-padded (``12.00``)."""
        return f"{self.major}.{self.minor:02d}"


class SolutionBuildConfiguration(BaseModel):
    """A build configuration / platform pair such as ``Debug|Any CPU``."""

    model_config = ConfigDict(frozen=True)

    build_configuration: BuildConfiguration
    platform_target: PlatformTarget

    def __str__(self) -> str:
        return f"{self.build_configuration.value}|{self.platform_target.value}"


def parse_guid(text: str) -> uuid.UUID:
    """Parse a GUID with or without enclosing braces, in any letter case.

    Raises:
        ValueError: If the text is not a 128-bit GUID in 8-4-4-4-12 form.
    """
    stripped = text.strip()
    if stripped.startswith("{") and stripped.endswith("}"):
        stripped = stripped[1:-1]
    if len(stripped) != 36 or [len(g) for g in stripped.split("-")] != [8, 4, 4, 4, 12]:
        raise ValueError(f"Invalid GUID: {text!r}")
    return uuid.UUID(stripped)


def format_guid(value: uuid.UUID) -> str:
    """Render a GUID the way solution files spell it: ``{UPPER-CASE}``."""
    return "{" + str(value).upper() + "}"
