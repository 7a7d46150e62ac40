"""Shared fixtures for timenow tests."""

import pytest

from timenow import config
from timenow.config import ENV_VAR


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """No preference leaks in from the developer's shell or ~/.timenow.env.

    setenv first so monkeypatch restores the original value even when a test
    (e.g. set_timezone) writes os.environ directly.
    """
    monkeypatch.setenv(ENV_VAR, "")
    monkeypatch.delenv(ENV_VAR)
    monkeypatch.setattr(config, "_option", None)


@pytest.fixture()
def profile_file(tmp_path, monkeypatch):
    """Redirect the persisted-preference file to a temp directory."""
    path = tmp_path / ".timenow.env"
    monkeypatch.setattr(config, "PROFILE_FILE", path)
    return path
