"""Package name validation following npm's naming restrictions."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from urllib.parse import quote

from .errors import InvalidProjectName

__all__ = ["NameValidation", "check_project_name", "validate_package_name"]


MAX_NAME_LENGTH = 214

BLACKLISTED_NAMES = frozenset({"node_modules", "favicon.ico"})

# Node core modules cannot be published under their own name.
CORE_MODULE_NAMES = frozenset(
    {
        "assert",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "dns",
        "domain",
        "events",
        "fs",
        "http",
        "http2",
        "https",
        "inspector",
        "module",
        "net",
        "os",
        "path",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "repl",
        "stream",
        "string_decoder",
        "sys",
        "timers",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "v8",
        "vm",
        "worker_threads",
        "zlib",
    }
)

_SCOPED_PACKAGE = re.compile(r"^(?:@([^/]+?)/)?([^/]+?)$")
_SPECIAL_CHARACTERS = re.compile(r"[~'!()*]")
# Characters left untouched by JavaScript's ``encodeURIComponent``.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _is_url_friendly(value: str) -> bool:
    return quote(value, safe=_URI_COMPONENT_SAFE) == value


@dataclass(slots=True)
class NameValidation:
    """Outcome of validating a package name.

    ``errors`` make a name unusable for any package while ``warnings`` only
    affect new packages, which is what a freshly scaffolded project is.
    """

    name: str
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid_for_old_packages(self) -> bool:
        return not self.errors

    @property
    def valid_for_new_packages(self) -> bool:
        return not self.errors and not self.warnings


def validate_package_name(name: str) -> NameValidation:
    """Check ``name`` against the npm package naming rules."""

    result = NameValidation(name=name)
    errors = result.errors
    warnings = result.warnings

    if not name:
        errors.append("name length must be greater than zero")

    if name.startswith("."):
        errors.append("name cannot start with a period")

    if name.startswith("_"):
        errors.append("name cannot start with an underscore")

    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")

    lowered = name.lower()
    for blacklisted in BLACKLISTED_NAMES:
        if lowered == blacklisted:
            errors.append(f"{blacklisted} is a blacklisted name")

    if lowered in CORE_MODULE_NAMES:
        warnings.append(f"{lowered} is a core module name")

    if len(name) > MAX_NAME_LENGTH:
        warnings.append(f"name can no longer contain more than {MAX_NAME_LENGTH} characters")

    if lowered != name:
        warnings.append("name can no longer contain capital letters")

    if _SPECIAL_CHARACTERS.search(name.split("/")[-1]):
        warnings.append("name can no longer contain special characters (\"~'!()*\")")

    if not _is_url_friendly(name):
        match = _SCOPED_PACKAGE.match(name)
        scoped_ok = False
        if match and match.group(1) is not None:
            user, package = match.group(1), match.group(2)
            scoped_ok = _is_url_friendly(user) and _is_url_friendly(package)
        if not scoped_ok:
            errors.append("name can only contain URL-friendly characters")

    return result


def check_project_name(name: str) -> NameValidation:
    """Validate ``name`` for a new package, raising :class:`InvalidProjectName` on failure."""

    result = validate_package_name(name)
    if not result.valid_for_new_packages:
        raise InvalidProjectName(name, result.errors, result.warnings)
    return result
