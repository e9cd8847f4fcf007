"""
errors.py

Responsibility: Name every way a scaffold or build can fail.

Each failure carries the offending path (or command) and chains the
underlying OS/process error as its cause.
"""

from __future__ import annotations

import enum
from pathlib import Path


class ErrorKind(enum.Enum):
    DIRECTORY_CREATE_FAILED = "directory create failed"
    FILE_CREATE_FAILED = "file create failed"
    FILE_WRITE_FAILED = "file write failed"
    COMPILER_LAUNCH_FAILED = "compiler launch failed"
    COMPILE_FAILED = "compile failed"
    BINARY_MOVE_FAILED = "binary move failed"


class CprojError(RuntimeError):
    def __init__(self, kind: ErrorKind, target: str | Path, detail: str = "") -> None:
        self.kind = kind
        self.target = str(target)
        self.detail = detail
        message = f"{kind.value}: {self.target}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ScaffoldError(CprojError):
    pass


class BuildError(CprojError):
    pass
