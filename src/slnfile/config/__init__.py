# Copyright 2026 slnfile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Formatting configuration (newline style, encoding) for solution files on disk."""

from slnfile.config.format import (
    CONFIG_FILE_NAME,
    FormatConfig,
    FormatConfigError,
    NewlineStyle,
    find_format_config,
    load_format_config,
    resolve_format_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "FormatConfig",
    "FormatConfigError",
    "NewlineStyle",
    "find_format_config",
    "load_format_config",
    "resolve_format_config",
]
