"""
cproj package

This package implements cproj, a CLI that scaffolds and builds small C projects.

Key responsibilities are split across modules:
- `renderer.py`: fixed template bodies and their Jinja2 rendering
- `scaffold.py`: project directory layout and template file creation
- `build.py`: compiler invocation and binary relocation into `bin/`
- `errors.py`: error kinds shared by scaffold and build
- `cli.py`: CLI entrypoint and dispatch (parse -> scaffold | build)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
