"""Bootstrap new theme projects from starter templates.

The package validates the project name against npm's naming restrictions,
copies a local starter or clones a hosted one, writes the theme's ``.env`` file
and installs dependencies with Yarn or npm. It can be used programmatically
through :class:`ProjectBootstrapper` or via the ``seedbed`` command line tool.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import CreateOptions
from .errors import BootstrapError
from .naming import check_project_name, validate_package_name
from .scaffold import ProjectBootstrapper, create_project
from .starter import HostedRepository, resolve_starter

__all__ = [
    "BootstrapError",
    "CreateOptions",
    "HostedRepository",
    "ProjectBootstrapper",
    "check_project_name",
    "create_project",
    "resolve_starter",
    "validate_package_name",
]
