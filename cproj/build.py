"""
build.py

Responsibility: Compile `src/main.c` and relocate the binary into `bin/`.

High-level flow:
1) Run `<cc> src/main.c -Wall -o main` in the project directory
2) Create `bin/` (required; an existing directory is fine)
3) Move the binary into `bin/`

A compiler that cannot be started and a compiler that reports errors are
distinct failures. The binary stays where the compiler left it if the move fails.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from cproj.errors import BuildError, ErrorKind, ScaffoldError
from cproj.scaffold import create_directory

logger = logging.getLogger(__name__)

DEFAULT_COMPILER = "gcc"
SOURCE_PATH = "src/main.c"
COMPILE_FLAGS = ("-Wall",)
BINARY_NAME = "main"
BIN_DIR = "bin"


class CommandRunner(Protocol):
    def run(self, executable: str, args: Sequence[str], *, cwd: Path) -> int:
        """Run `executable` with `args` and return its exit status."""
        ...


class SubprocessRunner:
    """
    Runs commands with `subprocess.run`, letting their output reach the terminal.
    """

    def run(self, executable: str, args: Sequence[str], *, cwd: Path) -> int:
        cmd = [executable, *args]
        logger.debug("+ %s", shlex.join(cmd))
        try:
            completed = subprocess.run(cmd, cwd=str(cwd), check=False)
        except OSError as e:
            raise BuildError(ErrorKind.COMPILER_LAUNCH_FAILED, shlex.join(cmd), e.strerror or str(e)) from e
        return completed.returncode


@dataclass(frozen=True)
class BuildResult:
    binary: Path


def binary_name() -> str:
    return f"{BINARY_NAME}.exe" if os.name == "nt" else BINARY_NAME


def compile_args() -> list[str]:
    return [SOURCE_PATH, *COMPILE_FLAGS, "-o", BINARY_NAME]


def compile_command(compiler: str = DEFAULT_COMPILER) -> list[str]:
    return [compiler, *compile_args()]


def build_project(
    runner: CommandRunner,
    *,
    compiler: str = DEFAULT_COMPILER,
    cwd: str | Path = ".",
) -> BuildResult:
    workdir = Path(cwd)
    command = shlex.join(compile_command(compiler))

    status = runner.run(compiler, compile_args(), cwd=workdir)
    if status != 0:
        raise BuildError(ErrorKind.COMPILE_FAILED, command, f"exit status {status}")

    try:
        bin_dir = create_directory(workdir / BIN_DIR)
    except ScaffoldError as e:
        raise BuildError(e.kind, e.target, e.detail) from e

    source = workdir / binary_name()
    destination = bin_dir / binary_name()
    try:
        shutil.move(str(source), str(destination))
    except OSError as e:
        raise BuildError(
            ErrorKind.BINARY_MOVE_FAILED,
            destination,
            f"{e.strerror or e}; binary left at {source}",
        ) from e

    logger.info("built %s", destination)
    return BuildResult(binary=destination)
