"""Asynchronous execution of external commands."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Protocol, Sequence

from .errors import CommandFailed

__all__ = ["CommandRunner", "run_command"]


LOGGER = logging.getLogger(__name__)


class CommandRunner(Protocol):
    """Callable running ``argv`` inside ``cwd`` and raising on failure."""

    async def __call__(self, argv: Sequence[str], /, *, cwd: Path | None = None, quiet: bool = False) -> None:
        ...


async def run_command(argv: Sequence[str], /, *, cwd: Path | None = None, quiet: bool = False) -> None:
    """Run ``argv`` to completion.

    The working directory is passed to the child process only; the current
    process never changes directory. When ``quiet`` is set the combined output
    is captured and attached to :class:`CommandFailed` instead of being shown.

    Raises :class:`FileNotFoundError` when the executable does not exist.
    """

    LOGGER.debug("+ (%s) %s", cwd or Path.cwd(), " ".join(argv))
    stream = asyncio.subprocess.PIPE if quiet else None
    process = await asyncio.create_subprocess_exec(
        *argv,
        cwd=str(cwd) if cwd is not None else None,
        stdout=stream,
        stderr=asyncio.subprocess.STDOUT if quiet else None,
    )
    stdout, _ = await process.communicate()
    output = stdout.decode("utf-8", errors="replace") if stdout else ""

    if process.returncode != 0:
        raise CommandFailed(argv, process.returncode, output)
