"""Project bootstrapping from starter themes."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Mapping

from . import __version__
from .config import VALID_FILES, CreateOptions
from .environment import DotEnvInitializer, EnvironmentInitializer
from .errors import DirectoryConflict
from .fetch import fetch_starter
from .install import PackageManagerDetector, detect_package_manager, install_dependencies
from .naming import check_project_name
from .process import CommandRunner, run_command
from .starter import resolve_starter
from .telemetry import JSONValue, LoggingTelemetry, Telemetry

__all__ = ["ProjectBootstrapper", "create_project", "find_conflicts"]


LOGGER = logging.getLogger(__name__)

START_EVENT = "seedbed:start"
SUCCESS_EVENT = "seedbed:success"


def find_conflicts(root: Path) -> list[str]:
    """Return the entries of ``root`` that are not safe to keep next to a scaffold."""

    return sorted(entry.name for entry in root.iterdir() if entry.name not in VALID_FILES)


class ProjectBootstrapper:
    """Create a new theme project from a local or hosted starter.

    Every external collaborator can be replaced, which keeps the flow testable
    without git, a package manager or network access.
    """

    def __init__(
        self,
        *,
        runner: CommandRunner = run_command,
        environment: EnvironmentInitializer | None = None,
        telemetry: Telemetry | None = None,
        detector: PackageManagerDetector = detect_package_manager,
        cwd: Path | None = None,
    ) -> None:
        self.runner = runner
        self.environment = environment or DotEnvInitializer()
        self.telemetry = telemetry or LoggingTelemetry()
        self.detector = detector
        self.cwd = cwd

    def project_root(self, name: str) -> Path:
        base = self.cwd if self.cwd is not None else Path.cwd()
        return (base / name).resolve()

    def prepare_directory(self, root: Path) -> Path:
        """Create ``root`` if needed and make sure it holds no conflicting files."""

        root.mkdir(parents=True, exist_ok=True)
        conflicts = find_conflicts(root)
        if conflicts:
            raise DirectoryConflict(root, conflicts)
        return root

    def _emit(self, name: str, payload: dict[str, JSONValue]) -> None:
        try:
            self.telemetry.event(name, payload)
        except Exception:
            LOGGER.debug("dropped telemetry event %s", name, exc_info=True)

    async def create(
        self,
        name: str,
        starter: str,
        options: CreateOptions | Mapping[str, Any] | None = None,
    ) -> Path:
        """Bootstrap the project ``name`` from ``starter`` and return its root."""

        if not isinstance(options, CreateOptions):
            options = CreateOptions.merged(options)

        check_project_name(name)
        root = self.prepare_directory(self.project_root(name))

        await self.telemetry.init()
        self._emit(
            START_EVENT,
            {
                "version": __version__,
                "starter": starter,
                "skipInstall": options.skip_install,
                "verbose": options.verbose,
            },
        )

        LOGGER.info("Creating a new theme in: %s.", root)

        resolved = resolve_starter(starter, cwd=self.cwd)
        await fetch_starter(resolved, root, runner=self.runner, verbose=options.verbose)
        await self.environment.create(root)
        await install_dependencies(root, options, runner=self.runner, detector=self.detector)

        self._emit(SUCCESS_EVENT, {"version": __version__})
        return root


def create_project(
    name: str,
    starter: str,
    *,
    bootstrapper: ProjectBootstrapper | None = None,
    **overrides: Any,
) -> Path:
    """Synchronous wrapper around :meth:`ProjectBootstrapper.create`."""

    bootstrapper = bootstrapper or ProjectBootstrapper()
    return asyncio.run(bootstrapper.create(name, starter, CreateOptions.merged(overrides)))
