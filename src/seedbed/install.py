"""Theme dependency installation."""

from __future__ import annotations

import logging
import shutil
from enum import Enum
from pathlib import Path
from typing import Callable

from .config import CreateOptions
from .errors import CommandFailed, InstallFailed
from .process import CommandRunner, run_command

__all__ = [
    "PackageManager",
    "PackageManagerDetector",
    "detect_package_manager",
    "install_dependencies",
]


LOGGER = logging.getLogger(__name__)


class PackageManager(str, Enum):
    """JavaScript package managers able to install theme dependencies."""

    YARN = "yarn"
    NPM = "npm"

    @property
    def command(self) -> list[str]:
        if self is PackageManager.YARN:
            return ["yarnpkg"]
        return ["npm", "install"]


PackageManagerDetector = Callable[[Path], PackageManager]


def detect_package_manager(
    root: Path,
    *,
    which: Callable[[str], str | None] = shutil.which,
) -> PackageManager:
    """Pick the package manager for the project in ``root``.

    A lockfile shipped with the starter wins. Otherwise Yarn is used when it is
    available on ``PATH`` and npm is the fallback.
    """

    if (root / "yarn.lock").exists():
        return PackageManager.YARN
    if (root / "package-lock.json").exists():
        return PackageManager.NPM
    if which("yarnpkg") is not None:
        return PackageManager.YARN
    return PackageManager.NPM


async def install_dependencies(
    root: Path,
    options: CreateOptions,
    *,
    runner: CommandRunner = run_command,
    detector: PackageManagerDetector = detect_package_manager,
) -> PackageManager | None:
    """Install the dependencies of the project in ``root``.

    Returns the package manager that ran, or ``None`` when installation was
    skipped.
    """

    if options.skip_install:
        LOGGER.info("Skipping theme dependency installation...")
        return None

    manager = detector(root)
    command = manager.command
    LOGGER.info("Installing theme dependencies...")

    try:
        await runner(command, cwd=root, quiet=False)
    except CommandFailed as exc:
        raise InstallFailed(command, str(exc)) from exc
    except OSError as exc:
        raise InstallFailed(command, str(exc)) from exc

    return manager
