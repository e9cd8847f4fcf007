"""
cli.py

Responsibility: CLI entrypoint for cproj.

Commands:
- `new <name> [--lib <file>]`: scaffold a C project (`scaffold.py`)
- `build [--cc <compiler>]`: compile `src/main.c` into `bin/` (`build.py`)
- `build-run`: reserved; prints a diagnostic and does nothing

Argument parsing is a pure function (`parse_args`) returning a typed command.
It raises instead of exiting so it can be tested on its own; `main` maps
commands and errors to exit codes.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from cproj import __version__
from cproj.build import DEFAULT_COMPILER, SubprocessRunner, build_project
from cproj.errors import CprojError, ScaffoldError
from cproj.renderer import RenderError
from cproj.scaffold import ProjectSpec, scaffold_project

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


class ParseError(ValueError):
    def __init__(self, message: str, usage: str = "") -> None:
        super().__init__(message)
        self.usage = usage


class ParserExit(Exception):
    """Raised when argparse finished on its own (`--help`, `--version`)."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


@dataclass(frozen=True)
class NewCommand:
    spec: ProjectSpec
    verbose: bool = False


@dataclass(frozen=True)
class BuildCommand:
    compiler: str = DEFAULT_COMPILER
    verbose: bool = False


@dataclass(frozen=True)
class BuildRunCommand:
    verbose: bool = False


Command = NewCommand | BuildCommand | BuildRunCommand


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise ParseError(message, usage=self.format_usage())

    def exit(self, status: int = 0, message: str | None = None):  # type: ignore[override]
        if message:
            self._print_message(message, sys.stderr)
        raise ParserExit(status)


def _build_parser(env: Mapping[str, str]) -> _Parser:
    p = _Parser(prog="cproj", description="Command line tool for C projects")
    p.add_argument("--version", action="version", version=f"cproj {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    sub = p.add_subparsers(dest="command", required=True, metavar="{new,build,build-run}")

    # Subcommands also accept -v; SUPPRESS keeps a top-level -v from being reset.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Enable debug logging on stderr"
    )

    n = sub.add_parser("new", parents=[common], help="Scaffold a new C project")
    n.add_argument("project_name", help="Name of the project (used as the directory name)")
    n.add_argument("--lib", default=None, metavar="FILE", help="Also create lib/FILE.c and lib/FILE.h")

    b = sub.add_parser("build", parents=[common], help="Compile src/main.c and move the binary to bin/")
    b.add_argument(
        "--cc",
        default=env.get("CC") or DEFAULT_COMPILER,
        help=f"C compiler to invoke (default: $CC or {DEFAULT_COMPILER})",
    )

    sub.add_parser("build-run", parents=[common], help="Build and run the project (not yet implemented)")
    return p


def parse_args(argv: Sequence[str], env: Mapping[str, str] | None = None) -> Command:
    parser = _build_parser(os.environ if env is None else env)
    args = parser.parse_args(list(argv))

    if args.command == "new":
        try:
            spec = ProjectSpec(name=args.project_name, lib=args.lib)
        except ValueError as e:
            raise ParseError(str(e), usage=parser.format_usage()) from e
        return NewCommand(spec=spec, verbose=args.verbose)
    if args.command == "build":
        return BuildCommand(compiler=args.cc, verbose=args.verbose)
    return BuildRunCommand(verbose=args.verbose)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)


def new_cmd(command: NewCommand) -> int:
    root = scaffold_project(command.spec)
    logger.info("project %s created at %s", command.spec.name, root)
    return EXIT_OK


def build_cmd(command: BuildCommand) -> int:
    build_project(SubprocessRunner(), compiler=command.compiler)
    return EXIT_OK


def build_run_cmd(command: BuildRunCommand) -> int:
    logger.warning("build-run is not yet implemented; nothing was built or run")
    return EXIT_OK


def dispatch(command: Command) -> int:
    if isinstance(command, NewCommand):
        return new_cmd(command)
    if isinstance(command, BuildCommand):
        return build_cmd(command)
    return build_run_cmd(command)


def main(argv: list[str] | None = None) -> int:
    try:
        command = parse_args(sys.argv[1:] if argv is None else argv)
    except ParserExit as e:
        return e.status
    except ParseError as e:
        print(e.usage, end="", file=sys.stderr)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    _configure_logging(command.verbose)

    try:
        return dispatch(command)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except ScaffoldError as e:
        print(f"error: {e}", file=sys.stderr)
        print("note: files created before the failure were left in place", file=sys.stderr)
        return EXIT_FAILURE
    except (CprojError, RenderError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
