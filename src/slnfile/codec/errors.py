# Copyright 2026 slnfile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error taxonomy shared by the solution file reader and writer."""

from __future__ import annotations

import enum

# ###############
# Public Interface
# ###############


class ErrorKind(enum.Enum):
    """Category of a codec failure."""

    STRUCTURAL = "structural"
    VALUE = "value"
    INVARIANT = "invariant"
    TRAILING_CONTENT = "trailing-content"


class SolutionFileError(Exception):
    """Base class for every error raised by the codec.

    Attributes:
        kind: The failure category.
    """

    kind: ErrorKind = ErrorKind.STRUCTURAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StructuralError(SolutionFileError):
    """Raised when a line does not have the shape expected at the current position.

    Attributes:
        line_number: 1-based line number of the offending line.
        expected: Description of what the grammar required.
        found: The offending (trimmed) line, or None at end of stream.
    """

    kind = ErrorKind.STRUCTURAL

    def __init__(self, expected: str, found: str | None, line_number: int) -> None:
        shown = "end of stream" if found is None else repr(found)
        super().__init__(f"Line {line_number}: expected {expected}, found {shown}")
        self.expected = expected
        self.found = found
        self.line_number = line_number


class TrailingContentError(StructuralError):
    """Raised when input remains after the terminating line of the document."""

    kind = ErrorKind.TRAILING_CONTENT

    def __init__(self, found: str, line_number: int) -> None:
        super().__init__("end of stream", found, line_number)


class ConversionError(SolutionFileError, ValueError):
    """Raised when a token has the right shape but an invalid value.

    Covers malformed GUIDs and versions, and build configurations, platforms,
    indicators or pre/post markers outside their closed sets.

    Attributes:
        token: The offending token.
        expected: Description of the accepted values.
        line_number: 1-based line number, when known.
    """

    kind = ErrorKind.VALUE

    def __init__(self, token: str, expected: str, line_number: int | None = None) -> None:
        prefix = "" if line_number is None else f"Line {line_number}: "
        super().__init__(f"{prefix}invalid {expected}: {token!r}")
        self.token = token
        self.expected = expected
        self.line_number = line_number


class InvariantError(SolutionFileError):
    """Raised at write time when a document cannot be serialized.

    Either a required global section is missing or a section has no
    registered writer.
    """

    kind = ErrorKind.INVARIANT
