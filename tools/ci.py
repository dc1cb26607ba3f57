#!/usr/bin/env python3
# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the SDK's CI checks locally: format, lint, type check, tests, docs, and build."""

import argparse
import pathlib
import subprocess
import sys
import time
from typing import NamedTuple

from yachalk import chalk

# ###############
# Public Interface
# ###############


class Step(NamedTuple):
    key: str
    title: str
    command: list[str]


STEPS: list[Step] = [
    Step("format", "Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    Step("lint", "Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    Step("types", "Type check", ["uv", "run", "ty", "check", "src/"]),
    Step(
        "tests",
        "Tests",
        ["uv", "run", "pytest", "--cov=dodopayments", "--cov-report=term-missing", "--cov-fail-under=85"],
    ),
    Step("docs", "Docs", ["uv", "run", "sphinx-build", "-q", "-W", "docs/sphinx", "build/docs"]),
    Step("build", "Build", ["uv", "build"]),
]


def main() -> int:
    """Run the selected CI steps and report results."""
    parser = argparse.ArgumentParser(description="Run the CI checks of the Dodo Payments SDK.")
    parser.add_argument(
        "--skip",
        action="append",
        default=[],
        choices=[step.key for step in STEPS],
        help="Step to skip; may be given several times",
    )
    parser.add_argument("--fail-fast", action="store_true", help="Stop at the first failing step")
    args = parser.parse_args()

    results: list[tuple[str, bool, float]] = []
    for step in STEPS:
        if step.key in args.skip:
            continue
        passed, elapsed = _run_step(step)
        results.append((step.title, passed, elapsed))
        if args.fail_fast and not passed:
            break

    return _print_summary(results)


# ################
# Implementation
# ################

_RULE = "=" * 60


def _run_step(step: Step) -> tuple[bool, float]:
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue(step.title))
    print(chalk.blue(_RULE))
    start = time.monotonic()
    proc = subprocess.run(step.command, cwd=_repo_root())
    return proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[str, bool, float]]) -> int:
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(_RULE))
    for title, passed, elapsed in results:
        if passed:
            print(chalk.green(f"  PASS  {title} ({elapsed:.1f}s)"))
        else:
            print(chalk.red(f"  FAIL  {title} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


def _repo_root() -> str:
    return str(pathlib.Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main())
