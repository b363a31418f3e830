#!/usr/bin/env python3
# Copyright 2026 slnfile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the local CI pipeline: format, lint, type check, tests, fixture checks and build."""

import argparse
import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

REPO_ROOT = pathlib.Path(__file__).resolve().parent.parent
FIXTURE_DIR = REPO_ROOT / "tests" / "fixtures"

STEPS: dict[str, list[str]] = {
    "format": ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"],
    "lint": ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"],
    "types": ["uv", "run", "ty", "check", "src/"],
    "tests": ["uv", "run", "pytest", "--cov=slnfile", "--cov-report=term-missing"],
    "fixtures": ["uv", "run", "slnfile", "check", *sorted(str(p) for p in FIXTURE_DIR.glob("*.sln"))],
    "build": ["uv", "build"],
}


def main() -> int:
    """Run the selected CI steps and print a coloured summary."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--skip", action="append", default=[], choices=sorted(STEPS), help="Step to skip")
    parser.add_argument("--fail-fast", action="store_true", help="Stop at the first failing step")
    args = parser.parse_args()

    outcomes: list[tuple[str, bool, float]] = []
    for name, cmd in STEPS.items():
        if name in args.skip:
            print(chalk.yellow(f"\n-- skipping {name}"))
            continue
        _banner(name)
        started = time.monotonic()
        passed = subprocess.run(cmd, cwd=REPO_ROOT).returncode == 0
        outcomes.append((name, passed, time.monotonic() - started))
        if not passed and args.fail_fast:
            break

    _banner("summary")
    for name, passed, elapsed in outcomes:
        label = chalk.green("PASS") if passed else chalk.red("FAIL")
        print(f"  {label}  {name:<10} {elapsed:6.1f}s")
    print()
    return 0 if all(passed for _, passed, _ in outcomes) else 1


# ################
# Implementation
# ################


def _banner(title: str) -> None:
    rule = chalk.blue("-" * 60)
    print(f"\n{rule}\n{chalk.blue(title.upper())}\n{rule}")


if __name__ == "__main__":
    sys.exit(main())
