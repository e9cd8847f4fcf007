"""
scaffold.py

Responsibility: Lay out a new C project on disk.

Rules:
- Directory creation is idempotent at every depth: an existing directory is fine,
  an existing non-directory is an error.
- Files are created exclusively; an existing file is never overwritten.
- The first failure aborts the remaining steps. Nothing is rolled back, so a
  failed run can leave a partial scaffold behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from cproj.errors import ErrorKind, ScaffoldError
from cproj.renderer import DEFAULT_CONTENT, render_file, render_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectSpec:
    """Project name and optional library base name taken from the command line."""

    name: str
    lib: str | None = None

    def __post_init__(self) -> None:
        _check_component(self.name, "project name")
        if self.lib is not None:
            _check_component(self.lib, "library name")

    def context(self) -> dict[str, Any]:
        return {"project_name": self.name, "lib": self.lib}


def _check_component(value: str, label: str) -> None:
    if not value.strip():
        raise ValueError(f"{label} must not be empty")
    if "/" in value or "\\" in value or value in {".", ".."}:
        raise ValueError(f"{label} must be a single path component: {value!r}")


def create_directory(path: str | Path) -> Path:
    """
    Create `path` and any missing parents. An existing directory is accepted.
    """
    p = Path(path)
    try:
        p.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ScaffoldError(ErrorKind.DIRECTORY_CREATE_FAILED, p, e.strerror or str(e)) from e
    logger.debug("directory ready: %s", p)
    return p


def write_template_file(path: str | Path, context: dict[str, Any], template: str | None = None) -> Path:
    """
    Create `path` (it must not exist yet) and write the body chosen by its file name,
    or `template` when one is given.
    """
    p = Path(path)
    body = render_file(p.name, context) if template is None else render_text(template, context)

    try:
        fh = p.open("x", encoding="utf-8", newline="\n")
    except OSError as e:
        raise ScaffoldError(ErrorKind.FILE_CREATE_FAILED, p, e.strerror or str(e)) from e

    try:
        with fh:
            fh.write(body)
    except OSError as e:
        raise ScaffoldError(ErrorKind.FILE_WRITE_FAILED, p, e.strerror or str(e)) from e

    logger.info("created %s", p)
    return p


def create_library_pair(root: str | Path, base_name: str, context: dict[str, Any]) -> tuple[Path, Path]:
    lib_dir = create_directory(Path(root) / "lib")
    source = write_template_file(lib_dir / f"{base_name}.c", context, DEFAULT_CONTENT)
    header = write_template_file(lib_dir / f"{base_name}.h", context, DEFAULT_CONTENT)
    return source, header


def scaffold_project(spec: ProjectSpec, parent: str | Path = ".") -> Path:
    """
    Generate the project tree for `spec` under `parent` and return its root.

    Layout:
        <name>/src/main.c
        <name>/lib/<lib>.c, <name>/lib/<lib>.h   (only when spec.lib is set)
        <name>/README.md
        <name>/Makefile
    """
    context = spec.context()

    root = create_directory(Path(parent) / spec.name)
    src = create_directory(root / "src")

    if spec.lib is not None:
        create_library_pair(root, spec.lib, context)

    write_template_file(src / "main.c", context)
    write_template_file(root / "README.md", context)
    write_template_file(root / "Makefile", context)

    return root
