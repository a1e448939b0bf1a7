from __future__ import annotations

import pytest
from pydantic import ValidationError

from seedbed.config import DEFAULT_OPTIONS, VALID_FILES, CreateOptions


def test_defaults():
    assert DEFAULT_OPTIONS.skip_install is False
    assert DEFAULT_OPTIONS.verbose is False


def test_merged_accepts_alias_and_field_names():
    options = CreateOptions.merged({"skipInstall": True}, verbose=True)
    assert options.skip_install is True
    assert options.verbose is True

    assert CreateOptions.merged({"skip_install": True}).skip_install is True


def test_merged_leaves_defaults_untouched():
    CreateOptions.merged({"skipInstall": True, "verbose": True})
    assert DEFAULT_OPTIONS == CreateOptions()


def test_unknown_option_is_rejected():
    with pytest.raises(ValidationError):
        CreateOptions.merged({"force": True})


def test_options_are_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_OPTIONS.verbose = True


def test_readme_is_not_tolerated_in_target_directory():
    assert ".git" in VALID_FILES
    assert ".idea" in VALID_FILES
    assert "README.md" not in VALID_FILES
