# Copyright 2026 slnfile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the slnfile command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from slnfile.codec.errors import SolutionFileError
from slnfile.config.format import FormatConfig, FormatConfigError, resolve_format_config

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the slnfile CLI."""
    parser = argparse.ArgumentParser(
        prog="slnfile",
        description="slnfile - read, check and format Visual Studio solution files",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Format config file (default: nearest .slnfile.yaml above the solution file)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check that solution files parse",
        description="Parse each solution file and report the first error found in it.",
    )
    check_parser.add_argument("files", nargs="+", type=Path, help="Solution files to check")

    # format subcommand
    format_parser = subparsers.add_parser(
        "format",
        help="Rewrite a solution file in canonical form",
        description="Re-serialize a solution file with global sections in canonical order.",
    )
    format_parser.add_argument("file", type=Path, help="Solution file to format")
    format_parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit with code 1 if the file is not already canonical",
    )
    format_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the result to this path instead of rewriting the file in place",
    )

    # dump subcommand
    dump_parser = subparsers.add_parser(
        "dump",
        help="Print the parsed model as JSON",
        description="Parse a solution file and print its document model as JSON.",
    )
    dump_parser.add_argument("file", type=Path, help="Solution file to dump")

    # projects subcommand
    projects_parser = subparsers.add_parser(
        "projects",
        help="List the projects of a solution file",
        description="Print name, relative path and project GUID of every project reference.",
    )
    projects_parser.add_argument("file", type=Path, help="Solution file to inspect")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "format":
        return _cmd_format(args)
    if args.command == "dump":
        return _cmd_dump(args)
    if args.command == "projects":
        return _cmd_projects(args)
    return 0


def _load_config(args: argparse.Namespace, target: Path) -> FormatConfig | None:
    """Resolve the format config for *target*, printing an error on failure."""
    try:
        return resolve_format_config(args.config, target.resolve())
    except FormatConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    from slnfile.files.storage import read_solution_file

    has_errors = False
    for path in args.files:
        if not path.is_file():
            print(f"Error: file '{path}' does not exist.", file=sys.stderr)
            has_errors = True
            continue
        config = _load_config(args, path)
        if config is None:
            return 1
        try:
            solution = read_solution_file(path, config)
        except SolutionFileError as exc:
            print(f"{path}: {exc.kind.value} error: {exc}", file=sys.stderr)
            has_errors = True
            continue
        except UnicodeDecodeError as exc:
            print(f"{path}: cannot decode as {config.encoding}: {exc}", file=sys.stderr)
            has_errors = True
            continue
        print(
            f"{path}: OK ({len(solution.project_references)} project(s), "
            f"{len(solution.global_sections)} global section(s))"
        )

    return 1 if has_errors else 0


def _cmd_format(args: argparse.Namespace) -> int:
    """Handle the format subcommand."""
    from slnfile.files.storage import is_canonical, read_solution_file, write_solution_file

    path: Path = args.file
    if not path.is_file():
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return 1
    config = _load_config(args, path)
    if config is None:
        return 1

    try:
        if args.check:
            if is_canonical(path, config):
                print(f"{path}: already canonical.")
                return 0
            print(f"{path}: would be reformatted.")
            return 1
        solution = read_solution_file(path, config)
        output = args.output if args.output is not None else path
        write_solution_file(solution, output, config)
    except SolutionFileError as exc:
        print(f"{path}: {exc.kind.value} error: {exc}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as exc:
        print(f"{path}: cannot decode as {config.encoding}: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.debug("Formatted %s into %s", path, output)
    print(f"Formatted '{path}' -> '{output}'.")
    return 0


def _cmd_dump(args: argparse.Namespace) -> int:
    """Handle the dump subcommand."""
    from slnfile.files.storage import read_solution_file

    path: Path = args.file
    if not path.is_file():
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return 1
    config = _load_config(args, path)
    if config is None:
        return 1

    try:
        solution = read_solution_file(path, config)
    except SolutionFileError as exc:
        print(f"{path}: {exc.kind.value} error: {exc}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as exc:
        print(f"{path}: cannot decode as {config.encoding}: {exc}", file=sys.stderr)
        return 1

    print(solution.model_dump_json(indent=2))
    return 0


def _cmd_projects(args: argparse.Namespace) -> int:
    """Handle the projects subcommand."""
    from slnfile.files.storage import read_solution_file
    from slnfile.model.types import format_guid

    path: Path = args.file
    if not path.is_file():
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return 1
    config = _load_config(args, path)
    if config is None:
        return 1

    try:
        solution = read_solution_file(path, config)
    except SolutionFileError as exc:
        print(f"{path}: {exc.kind.value} error: {exc}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as exc:
        print(f"{path}: cannot decode as {config.encoding}: {exc}", file=sys.stderr)
        return 1

    for project in solution.project_references:
        print(f"{project.name}\t{project.relative_path}\t{format_guid(project.project_guid)}")
    return 0
