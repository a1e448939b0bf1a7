from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from seedbed.errors import CommandFailed  # noqa: E402


@dataclass
class RecordingRunner:
    """Command runner double that records invocations instead of spawning them."""

    calls: list[tuple[tuple[str, ...], Path | None, bool]] = field(default_factory=list)
    fail_on: str | None = None
    clone_files: dict[str, str] = field(default_factory=lambda: {"package.json": "{}"})

    async def __call__(self, argv: Sequence[str], /, *, cwd: Path | None = None, quiet: bool = False) -> None:
        self.calls.append((tuple(argv), cwd, quiet))
        if self.fail_on is not None and argv[0] == self.fail_on:
            raise CommandFailed(argv, 128, "fatal: repository not found")
        if list(argv[:2]) == ["git", "clone"]:
            destination = Path(argv[-1])
            (destination / ".git" / "objects").mkdir(parents=True, exist_ok=True)
            for name, content in self.clone_files.items():
                (destination / name).write_text(content, encoding="utf-8")

    def commands(self) -> list[tuple[str, ...]]:
        return [argv for argv, _, _ in self.calls]


@dataclass
class RecordingTelemetry:
    initialised: bool = False
    events: list[tuple[str, dict]] = field(default_factory=list)

    async def init(self) -> None:
        self.initialised = True

    def event(self, name: str, payload: dict) -> None:
        assert self.initialised, "events must only be sent after init()"
        self.events.append((name, dict(payload)))


@dataclass
class RecordingEnvironment:
    roots: list[Path] = field(default_factory=list)

    async def create(self, root: Path) -> None:
        self.roots.append(root)


@pytest.fixture()
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def telemetry() -> RecordingTelemetry:
    return RecordingTelemetry()


@pytest.fixture()
def environment() -> RecordingEnvironment:
    return RecordingEnvironment()


@pytest.fixture()
def starter_dir(tmp_path: Path) -> Path:
    """A local starter theme containing VCS metadata and a dependency cache."""

    starter = tmp_path / "starters" / "basic"
    (starter / "src" / "layout").mkdir(parents=True)
    (starter / "src" / "layout" / "theme.liquid").write_text("<html></html>", encoding="utf-8")
    (starter / "package.json").write_text('{"name": "starter"}', encoding="utf-8")
    (starter / ".git" / "refs").mkdir(parents=True)
    (starter / ".git" / "HEAD").write_text("ref: refs/heads/main", encoding="utf-8")
    (starter / ".hg").mkdir()
    (starter / "node_modules" / "left-pad").mkdir(parents=True)
    (starter / "node_modules" / "left-pad" / "index.js").write_text("", encoding="utf-8")
    (starter / "src" / "node_modules").mkdir()
    (starter / "src" / "node_modules" / "cached.js").write_text("", encoding="utf-8")
    (starter / ".gitignore").write_text("node_modules\n", encoding="utf-8")
    return starter
