"""
renderer.py

Responsibility: Hold the fixed template bodies of a C project and render them.

Rules:
- Bodies are selected by file name: `main.c`, `Makefile`, `README.md`,
  and a one-line placeholder for everything else.
- If Jinja2 markers are present in a body, render it with the provided context.
- Bodies without markers are returned byte-for-byte.

This module intentionally does NOT touch the filesystem or know about CLI parsing.
"""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, StrictUndefined

MAIN_C = (
    "#include <stdio.h>\n"
    "\n"
    "int main() {\n"
    '    printf("Hello, world!\\n");\n'
    "    return 0;\n"
    "}\n"
)

MAKEFILE = (
    "CC = gcc\n"
    "CFLAGS = -Wall\n"
    "\n"
    "main:\n"
    "\t$(CC) $(CFLAGS) -o main ./src/main.c\n"
)

README_MD = """\
# {{ project_name }}

A C project generated by cproj.

## Structure

```
{{ project_name }}/
  src/main.c      program entry point
  lib/            optional library sources
  README.md
  Makefile
```

## Build

With make:

```sh
make
```

Or with cproj, which places the binary in `bin/`:

```sh
cproj build
```

## Run

```sh
./main        # after make
./bin/main    # after cproj build
```
"""

DEFAULT_CONTENT = "// Default content\n"

_BODIES = {
    "main.c": MAIN_C,
    "Makefile": MAKEFILE,
    "README.md": README_MD,
}


class RenderError(RuntimeError):
    pass


def _has_markers(text: str) -> bool:
    return ("{{" in text) or ("{%" in text) or ("{#" in text)


def template_for(file_name: str) -> str:
    """
    Return the raw body for a file name; unknown names get the placeholder.
    """
    return _BODIES.get(file_name, DEFAULT_CONTENT)


def render_text(text: str, context: dict[str, Any]) -> str:
    """
    Render a template body with Jinja2 when it carries markers; otherwise
    return it unchanged.
    """
    if not _has_markers(text):
        return text

    env = Environment(
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    try:
        return env.from_string(text).render(**context)
    except Exception as e:  # noqa: BLE001 - surface as RenderError
        raise RenderError("Failed rendering template body") from e


def render_file(file_name: str, context: dict[str, Any]) -> str:
    return render_text(template_for(file_name), context)
