"""Configuration shared by the bootstrapper and CLI."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "CreateOptions",
    "DEFAULT_OPTIONS",
    "DEPENDENCY_CACHE_DIRS",
    "IGNORED_NAMES",
    "STARTER_DIR_MODE",
    "VALID_FILES",
]


# Files tolerated in an otherwise empty target directory. These are produced
# by hosting services, version control and IDEs rather than by the user.
VALID_FILES = frozenset(
    {
        ".DS_Store",
        "Thumbs.db",
        ".git",
        ".gitignore",
        ".idea",
        "web.iml",
        ".hg",
        ".hgignore",
        ".hgcheck",
    }
)

IGNORED_NAMES = frozenset({".git", ".hg"})
DEPENDENCY_CACHE_DIRS = frozenset({"node_modules"})

STARTER_DIR_MODE = 0o755


class CreateOptions(BaseModel):
    """Flags controlling a single bootstrap run.

    Attributes
    ----------
    skip_install:
        Skip the dependency installation step. Accepts ``skipInstall`` as an
        alias so option mappings written for the JavaScript tooling keep working.
    verbose:
        Stream subprocess output instead of capturing it.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    skip_install: bool = Field(False, alias="skipInstall", description="Skip dependency installation.")
    verbose: bool = Field(False, description="Show output of external commands.")

    @classmethod
    def merged(cls, overrides: Mapping[str, Any] | None = None, /, **kwargs: Any) -> "CreateOptions":
        """Return the defaults updated with ``overrides`` and ``kwargs``.

        The defaults themselves are never modified.
        """

        values: dict[str, Any] = DEFAULT_OPTIONS.model_dump()
        for key, value in {**dict(overrides or {}), **kwargs}.items():
            field_name = "skip_install" if key == "skipInstall" else key
            values[field_name] = value
        return cls.model_validate(values)


DEFAULT_OPTIONS = CreateOptions()
