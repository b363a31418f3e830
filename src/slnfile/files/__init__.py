# Copyright 2026 slnfile Contributors
# SPDX-License-Identifier: Apache-2.0

"""File-system access for solution files."""

from slnfile.files.storage import SOLUTION_FILE_SUFFIX, is_canonical, read_solution_file, write_solution_file

__all__ = [
    "SOLUTION_FILE_SUFFIX",
    "is_canonical",
    "read_solution_file",
    "write_solution_file",
]
