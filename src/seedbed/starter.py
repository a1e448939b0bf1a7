"""Classification of starter references into hosted repositories or local paths."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote, urlsplit

__all__ = [
    "HOSTS",
    "HostedRepository",
    "LocalStarter",
    "RemoteStarter",
    "Starter",
    "resolve_starter",
]


# Shortcut prefix -> domain of the supported git hosts.
HOSTS: dict[str, str] = {
    "github": "github.com",
    "gitlab": "gitlab.com",
    "bitbucket": "bitbucket.org",
}
_DOMAINS = {domain: host for host, domain in HOSTS.items()}

_URL_SCHEMES = {"http", "https", "git", "ssh", "git+ssh", "git+https", "git+http"}
_SCP_STYLE = re.compile(r"^(?:[\w.-]+@)?(?P<domain>[\w.-]+):(?P<path>[^/].*)$")
_SHORTCUT = re.compile(r"^(?P<host>[a-z]+):(?P<path>.+)$")
_BARE_SHORTCUT = re.compile(r"^(?P<owner>[\w.-]+)/(?P<project>[\w.-]+)$")
_SEGMENT = re.compile(r"^[\w.-]+$")


def _split_committish(reference: str) -> tuple[str, str | None]:
    base, _, committish = reference.partition("#")
    return base, (unquote(committish) or None)


def _owner_project(path: str) -> tuple[str, str] | None:
    parts = [part for part in path.strip("/").split("/") if part]
    if len(parts) != 2:
        return None
    owner, project = parts
    if project.endswith(".git"):
        project = project[: -len(".git")]
    if not (_SEGMENT.match(owner) and _SEGMENT.match(project)):
        return None
    return owner, project


@dataclass(frozen=True, slots=True)
class HostedRepository:
    """Repository on one of the supported git hosts."""

    host: str
    owner: str
    project: str
    committish: str | None = None

    @property
    def domain(self) -> str:
        return HOSTS[self.host]

    @classmethod
    def from_url(cls, reference: str) -> HostedRepository | None:
        """Parse ``reference`` or return ``None`` when it is not a hosted locator."""

        reference = reference.strip()
        if not reference:
            return None

        base, committish = _split_committish(reference)

        shortcut = _SHORTCUT.match(base)
        if shortcut and shortcut.group("host") in HOSTS:
            names = _owner_project(shortcut.group("path"))
            if names is None:
                return None
            return cls(shortcut.group("host"), *names, committish=committish)

        if "://" in base:
            parts = urlsplit(base)
            if parts.scheme not in _URL_SCHEMES:
                return None
            host = _DOMAINS.get((parts.hostname or "").lower())
            names = _owner_project(parts.path)
            if host is None or names is None:
                return None
            return cls(host, *names, committish=committish)

        scp = _SCP_STYLE.match(base)
        if scp:
            host = _DOMAINS.get(scp.group("domain").lower())
            names = _owner_project(scp.group("path"))
            if host is None or names is None:
                return None
            return cls(host, *names, committish=committish)

        if base.startswith((".", "/", "~")):
            return None

        bare = _BARE_SHORTCUT.match(base)
        if bare:
            return cls("github", bare.group("owner"), bare.group("project"), committish=committish)

        return None

    def ssh_url(self) -> str:
        """Clone URL over SSH, without the committish."""

        return f"git@{self.domain}:{self.owner}/{self.project}.git"

    def https_url(self) -> str:
        return f"https://{self.domain}/{self.owner}/{self.project}.git"

    def shortcut(self) -> str:
        value = f"{self.host}:{self.owner}/{self.project}"
        if self.committish:
            value = f"{value}#{self.committish}"
        return value


@dataclass(frozen=True, slots=True)
class RemoteStarter:
    """Starter fetched by cloning a hosted repository."""

    repository: HostedRepository


@dataclass(frozen=True, slots=True)
class LocalStarter:
    """Starter copied from a directory on disk."""

    path: Path


Starter = RemoteStarter | LocalStarter


def resolve_starter(reference: str, cwd: str | Path | None = None) -> Starter:
    """Classify ``reference`` as a remote repository or a local directory.

    Local paths are interpreted relative to ``cwd`` which defaults to the
    process working directory.
    """

    repository = HostedRepository.from_url(reference)
    if repository is not None:
        return RemoteStarter(repository)

    base = Path(cwd) if cwd is not None else Path.cwd()
    return LocalStarter((base / Path(reference).expanduser()).resolve())
