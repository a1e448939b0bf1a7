from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import pytest

from seedbed.errors import CommandFailed
from seedbed.process import run_command


def test_run_command_uses_given_working_directory(tmp_path: Path):
    script = "import pathlib; pathlib.Path('marker.txt').write_text('ok')"
    cwd_before = Path.cwd()

    asyncio.run(run_command([sys.executable, "-c", script], cwd=tmp_path, quiet=True))

    assert (tmp_path / "marker.txt").read_text() == "ok"
    assert Path.cwd() == cwd_before


def test_run_command_failure_captures_output(tmp_path: Path):
    script = "import sys; print('fatal: nope'); sys.exit(3)"

    with pytest.raises(CommandFailed) as info:
        asyncio.run(run_command([sys.executable, "-c", script], cwd=tmp_path, quiet=True))

    assert info.value.returncode == 3
    assert "fatal: nope" in info.value.output


def test_run_command_missing_executable(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        asyncio.run(run_command(["seedbed-definitely-missing-binary"], cwd=tmp_path))
