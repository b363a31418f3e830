# Copyright 2026 slnfile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Formatting configuration for reading and writing solution files on disk."""

import codecs
from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".slnfile.yaml"


class FormatConfigError(Exception):
    """Raised when the formatting configuration cannot be read or is invalid."""


class NewlineStyle(Enum):
    """Line terminator written to solution files."""

    CRLF = "crlf"
    LF = "lf"

    @property
    def terminator(self) -> str:
        return "\r\n" if self is NewlineStyle.CRLF else "\n"


class FormatConfig(BaseModel):
    """Options applied when solution files are read from or written to disk.

    The defaults match what Visual Studio writes: UTF-8 with a byte order
    mark and CRLF line endings.
    """

    model_config = ConfigDict(extra="forbid")

    newline: NewlineStyle = NewlineStyle.CRLF
    encoding: str = "utf-8-sig"


def load_format_config(path: Path) -> FormatConfig:
    """Load and validate a formatting configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the ``.slnfile.yaml`` file.

    Returns:
        A validated FormatConfig instance.

    Raises:
        FormatConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FormatConfigError(f"Cannot read format config '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise FormatConfigError(f"Invalid YAML in format config '{path}': {exc}") from exc

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise FormatConfigError(f"{path}: format config must be a YAML mapping")

    try:
        config = FormatConfig.model_validate(data)
    except ValidationError as exc:
        raise FormatConfigError(f"Invalid format config '{path}': {exc}") from exc

    _check_encoding(config.encoding, path)
    return config


def find_format_config(start: Path) -> Path | None:
    """Return the nearest ``.slnfile.yaml`` in *start* or one of its parents."""
    directory = start if start.is_dir() else start.parent
    for candidate in [directory, *directory.parents]:
        config_file = candidate / CONFIG_FILE_NAME
        if config_file.is_file():
            return config_file
    return None


def resolve_format_config(explicit: Path | None, start: Path) -> FormatConfig:
    """Load *explicit* if given, else the nearest config above *start*, else defaults."""
    path = explicit if explicit is not None else find_format_config(start)
    if path is None:
        return FormatConfig()
    return load_format_config(path)


# ################
# Implementation
# ################


def _check_encoding(encoding: str, path: Path) -> None:
    """Reject encodings unknown to the codec registry."""
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise FormatConfigError(f"{path}: unknown encoding {encoding!r}") from None
