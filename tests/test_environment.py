from __future__ import annotations

import asyncio
from pathlib import Path

from seedbed.environment import DotEnvInitializer, EnvironmentInitializer, ThemeEnvironment


def test_from_environ_picks_known_variables():
    environment = ThemeEnvironment.from_environ(
        {"SLATE_STORE": "shop.myshopify.com", "SLATE_THEME_ID": "123", "HOME": "/root"}
    )
    assert environment.store == "shop.myshopify.com"
    assert environment.theme_id == "123"
    assert environment.password == ""


def test_to_dotenv_lists_every_variable_with_comment():
    text = ThemeEnvironment(store="shop.myshopify.com").to_dotenv()
    lines = text.splitlines()

    assert "SLATE_STORE=shop.myshopify.com" in lines
    assert "SLATE_PASSWORD=" in lines
    assert "SLATE_THEME_ID=" in lines
    assert "SLATE_IGNORE_FILES=" in lines
    index = lines.index("SLATE_STORE=shop.myshopify.com")
    assert lines[index - 1].startswith("# ")


def test_dotenv_initializer_writes_env_file(tmp_path: Path):
    initializer = DotEnvInitializer({"SLATE_PASSWORD": "secret"})
    assert isinstance(initializer, EnvironmentInitializer)

    asyncio.run(initializer.create(tmp_path))

    content = (tmp_path / ".env").read_text(encoding="utf-8")
    assert "SLATE_PASSWORD=secret" in content.splitlines()
