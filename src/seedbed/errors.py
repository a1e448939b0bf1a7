"""Exception types raised while bootstrapping a project."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

__all__ = [
    "BootstrapError",
    "CloneFailed",
    "CommandFailed",
    "DirectoryConflict",
    "InstallFailed",
    "InvalidProjectName",
    "StarterNotFound",
]


class BootstrapError(RuntimeError):
    """Base class for fatal bootstrap failures reported by the CLI."""

    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidProjectName(BootstrapError):
    """Raised when a project name violates npm naming restrictions."""

    def __init__(self, name: str, errors: Sequence[str] = (), warnings: Sequence[str] = ()) -> None:
        super().__init__(f'Could not create a project called "{name}" because of npm naming restrictions')
        self.name = name
        self.errors = tuple(errors)
        self.warnings = tuple(warnings)

    @property
    def problems(self) -> tuple[str, ...]:
        return self.errors + self.warnings


class DirectoryConflict(BootstrapError):
    """Raised when the target directory holds files that could be overwritten."""

    def __init__(self, root: Path, conflicts: Sequence[str]) -> None:
        super().__init__(f"The directory {root} contains files that could conflict")
        self.root = root
        self.conflicts = tuple(conflicts)


class StarterNotFound(BootstrapError):
    """Raised when a local starter directory does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"starter {path} doesn't exist")
        self.path = path


class CommandFailed(BootstrapError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, argv: Sequence[str], returncode: int, output: str = "") -> None:
        super().__init__(f"command '{' '.join(argv)}' exited with status {returncode}")
        self.argv = tuple(argv)
        self.returncode = returncode
        self.output = output


class CloneFailed(BootstrapError):
    """Raised when a starter repository cannot be cloned."""

    def __init__(self, url: str, reason: str, output: str = "") -> None:
        super().__init__(f"There was an error while cloning the git repo {url}: {reason}")
        self.url = url
        self.reason = reason
        self.output = output


class InstallFailed(BootstrapError):
    """Raised when the package manager fails to install theme dependencies."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        super().__init__(f"Theme dependency installation failed ({' '.join(command)}): {reason}")
        self.command = tuple(command)
        self.reason = reason
