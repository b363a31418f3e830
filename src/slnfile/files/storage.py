# Copyright 2026 slnfile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reading and writing solution files on disk.

The codec itself only sees text streams; this module owns opening files with
the configured encoding. Files are opened with ``newline=""`` so the reader
sees the original line terminators and the writer's terminators reach the
file unchanged.
"""

from pathlib import Path

from slnfile.codec.reader import read
from slnfile.codec.writer import serialize
from slnfile.config.format import FormatConfig
from slnfile.model.entities import SolutionFile

# ###############
# Public Interface
# ###############

SOLUTION_FILE_SUFFIX = ".sln"


def read_solution_file(path: Path, config: FormatConfig | None = None) -> SolutionFile:
    """Read and parse the solution file at *path*."""
    config = config or FormatConfig()
    with path.open("r", encoding=config.encoding, newline="") as stream:
        return read(stream)


def write_solution_file(solution: SolutionFile, path: Path, config: FormatConfig | None = None) -> None:
    """Write *solution* to *path*, creating parent directories as needed.

    The document is serialized in memory first, so a serialization error
    leaves an existing file untouched.
    """
    config = config or FormatConfig()
    text = serialize(solution, newline=config.newline.terminator)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding=config.encoding, newline="") as stream:
        stream.write(text)


def is_canonical(path: Path, config: FormatConfig | None = None) -> bool:
    """Return True if the file at *path* is byte-identical to its re-serialized form."""
    config = config or FormatConfig()
    solution = read_solution_file(path, config)
    expected = serialize(solution, newline=config.newline.terminator).encode(config.encoding)
    return path.read_bytes() == expected
