"""Pytest configuration and fixtures."""
import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from shellsweep.utils.toolbox import Toolbox


@pytest.fixture
def make_tree(tmp_path):
    """Write a {relative_path: content} mapping under tmp_path.

    Returns the root so tests can hand it straight to the selector.
    """

    def _make(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content.encode("utf-8"))
        return tmp_path

    return _make


@pytest.fixture
def mock_toolbox():
    """Toolbox that resolves shellcheck without touching PATH."""
    toolbox = MagicMock(spec=Toolbox)
    toolbox.get_shellcheck.return_value = "/usr/bin/shellcheck"
    return toolbox


@pytest.fixture
def fake_shellcheck(tmp_path, monkeypatch):
    """Put an executable named shellcheck first on PATH.

    It echoes the file it was given and exits 1 for any file whose name
    starts with "bad", 0 otherwise.
    """
    if sys.platform == "win32":
        pytest.skip("fake shellcheck relies on a POSIX shebang")

    bin_dir = tmp_path / "_bin"
    bin_dir.mkdir()
    script = bin_dir / "shellcheck"
    script.write_text(
        f"#!{sys.executable}\n"
        "import os, sys\n"
        "target = sys.argv[1]\n"
        "print(f'checked {target} {\" \".join(sys.argv[2:])}')\n"
        "sys.exit(1 if os.path.basename(target).startswith('bad') else 0)\n"
    )
    script.chmod(0o755)
    monkeypatch.setenv("PATH", str(bin_dir) + os.pathsep + os.environ.get("PATH", ""))
    return script
