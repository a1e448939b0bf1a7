"""Environment file setup for freshly created themes."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Mapping, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "DotEnvInitializer",
    "ENV_FILE_NAME",
    "EnvironmentInitializer",
    "ThemeEnvironment",
]


LOGGER = logging.getLogger(__name__)

ENV_FILE_NAME = ".env"


@runtime_checkable
class EnvironmentInitializer(Protocol):
    """Writes whatever environment configuration a new project needs."""

    async def create(self, root: Path) -> None:
        """Initialise the environment of the project located at ``root``."""


class ThemeEnvironment(BaseModel):
    """Values written to a theme's ``.env`` file."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    store: str = Field(
        "",
        alias="SLATE_STORE",
        description="The myshopify.com URL to your Shopify store.",
    )
    password: str = Field(
        "",
        alias="SLATE_PASSWORD",
        description="The API password generated from a Private App.",
    )
    theme_id: str = Field(
        "",
        alias="SLATE_THEME_ID",
        description="The ID of the theme you wish to upload files to.",
    )
    ignore_files: str = Field(
        "",
        alias="SLATE_IGNORE_FILES",
        description="A list of file patterns to ignore, with each list item separated by ':'.",
    )

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> "ThemeEnvironment":
        """Pick up any values already exported in ``environ``."""

        environ = os.environ if environ is None else environ
        values = {
            field.alias: environ[field.alias]
            for field in cls.model_fields.values()
            if field.alias and field.alias in environ
        }
        return cls.model_validate(values)

    def to_dotenv(self) -> str:
        lines: list[str] = []
        values = self.model_dump(by_alias=True)
        for field in type(self).model_fields.values():
            lines.append(f"# {field.description}")
            lines.append(f"{field.alias}={values[field.alias]}")
            lines.append("")
        return "\n".join(lines)


class DotEnvInitializer:
    """Write a ``.env`` file populated from the current process environment."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    async def create(self, root: Path) -> None:
        environment = ThemeEnvironment.from_environ(self._environ)
        target = Path(root) / ENV_FILE_NAME
        LOGGER.debug("Writing environment file %s", target)
        await asyncio.to_thread(target.write_text, environment.to_dotenv(), encoding="utf-8")
