"""Fetch starter content into a project root."""

from __future__ import annotations

import asyncio
import logging
import shutil
from pathlib import Path
from typing import Iterable

from .config import DEPENDENCY_CACHE_DIRS, IGNORED_NAMES, STARTER_DIR_MODE
from .errors import CloneFailed, CommandFailed, StarterNotFound
from .process import CommandRunner, run_command
from .starter import HostedRepository, LocalStarter, RemoteStarter, Starter

__all__ = [
    "build_clone_command",
    "clone_from_git",
    "copy_from_directory",
    "fetch_starter",
]


LOGGER = logging.getLogger(__name__)


def _ignore_entries(directory: str, names: Iterable[str]) -> set[str]:
    return {name for name in names if name in IGNORED_NAMES or name in DEPENDENCY_CACHE_DIRS}


async def copy_from_directory(source: Path, root: Path) -> None:
    """Copy the local starter ``source`` into ``root``.

    Version control directories and dependency caches below ``source`` are
    skipped. Entries already present in ``root`` are left in place, including
    a tolerated ``.git`` or ``.hg``. Errors raised while copying are not
    rolled back.
    """

    source = Path(source)
    if not source.exists():
        raise StarterNotFound(source)

    root.mkdir(mode=STARTER_DIR_MODE, parents=True, exist_ok=True)
    LOGGER.info("Creating new theme from local starter: %s", source)
    await asyncio.to_thread(
        shutil.copytree,
        source,
        root,
        ignore=_ignore_entries,
        dirs_exist_ok=True,
    )
    # copytree copies the starter directory's own mode onto root.
    root.chmod(STARTER_DIR_MODE)


def build_clone_command(repository: HostedRepository, root: Path) -> list[str]:
    """Return the shallow single branch ``git clone`` invocation for ``repository``."""

    command = ["git", "clone", "--depth", "1", "--single-branch"]
    if repository.committish:
        command.extend(["-b", repository.committish])
    command.extend([repository.ssh_url(), str(root)])
    return command


async def clone_from_git(
    repository: HostedRepository,
    root: Path,
    *,
    runner: CommandRunner = run_command,
    verbose: bool = False,
) -> None:
    """Clone ``repository`` into ``root`` and drop its git history."""

    url = repository.ssh_url()
    LOGGER.info("Cloning theme from a git repo: %s", url)

    try:
        await runner(build_clone_command(repository, root), quiet=not verbose)
    except CommandFailed as exc:
        raise CloneFailed(url, str(exc), exc.output) from exc
    except OSError as exc:
        raise CloneFailed(url, str(exc)) from exc

    git_dir = root / ".git"
    if git_dir.exists():
        await asyncio.to_thread(shutil.rmtree, git_dir)


async def fetch_starter(
    starter: Starter,
    root: Path,
    *,
    runner: CommandRunner = run_command,
    verbose: bool = False,
) -> None:
    """Populate ``root`` from ``starter`` using the matching strategy."""

    if isinstance(starter, RemoteStarter):
        await clone_from_git(starter.repository, root, runner=runner, verbose=verbose)
    elif isinstance(starter, LocalStarter):
        await copy_from_directory(starter.path, root)
    else:
        raise TypeError(f"unsupported starter {starter!r}")
