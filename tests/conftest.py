import sys
from pathlib import Path

import pytest  # type: ignore[import-not-found]

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cproj import build  # noqa: E402


class FakeRunner:
    """Stands in for the compiler: records calls, optionally drops a binary."""

    def __init__(self, status=0, produce_binary=True, launch_error=None):
        self.status = status
        self.produce_binary = produce_binary
        self.launch_error = launch_error
        self.calls = []

    def run(self, executable, args, *, cwd):
        self.calls.append((executable, list(args), Path(cwd)))
        if self.launch_error is not None:
            raise self.launch_error
        if self.status == 0 and self.produce_binary:
            (Path(cwd) / build.binary_name()).write_bytes(b"\x7fELF fake")
        return self.status


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def c_project(tmp_path):
    """A directory laid out the way `cproj new` leaves it, minus the docs."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.c").write_text('int main() { return 0; }\n', encoding="utf-8")
    return tmp_path
