# Copyright 2026 slnfile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Text codec for solution files: line grammar, reader and writer."""

from slnfile.codec.errors import (
    ConversionError,
    ErrorKind,
    InvariantError,
    SolutionFileError,
    StructuralError,
    TrailingContentError,
)
from slnfile.codec.reader import parse, read
from slnfile.codec.writer import canonical_section_order, serialize, write

__all__ = [
    "parse",
    "read",
    "serialize",
    "write",
    "canonical_section_order",
    "ErrorKind",
    "SolutionFileError",
    "StructuralError",
    "TrailingContentError",
    "ConversionError",
    "InvariantError",
]
