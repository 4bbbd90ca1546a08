#!/usr/bin/env python3
# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, tests, and build."""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=dfalex", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main(steps: list[tuple[str, list[str]]] = STEPS) -> int:
    """Run the CI steps in order and print a coloured summary.

    Every step runs even if an earlier one fails, so a single invocation
    shows all problems. Returns 0 only if every step passed.
    """
    results: list[tuple[str, bool, float]] = []

    for name, cmd in steps:
        sep = chalk.blue("=" * 60)
        print(f"\n{sep}")
        print(chalk.blue(name))
        print(sep)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    print(_summary(results))
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _summary(results: list[tuple[str, bool, float]]) -> str:
    sep = chalk.blue("=" * 60)
    lines = ["", sep, chalk.blue("  Summary"), sep]
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        lines.append(colour(f"  {status}  {name} ({elapsed:.1f}s)"))
    lines.append("")
    return "\n".join(lines)


def _repo_root() -> str:
    return str(pathlib.Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main())
