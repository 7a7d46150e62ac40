"""Tests for config module."""

import importlib
import os

import pytest

import timenow.config as config_mod


@pytest.fixture()
def home(tmp_path, monkeypatch):
    """Point Path.home() at a temp dir; reload config against the real home afterwards."""
    monkeypatch.setenv("HOME", str(tmp_path))
    yield tmp_path
    monkeypatch.undo()
    importlib.reload(config_mod)


def test_profile_file_lives_in_home(home):
    importlib.reload(config_mod)

    assert config_mod.PROFILE_FILE == home / ".timenow.env"


def test_profile_preference_loaded_into_env(home):
    (home / ".timenow.env").write_text("R_TIMENOW_TZ=Asia/Tokyo\n")

    importlib.reload(config_mod)

    assert os.environ["R_TIMENOW_TZ"] == "Asia/Tokyo"
    assert config_mod.DetectionConfig.from_environment().env_value == "Asia/Tokyo"


def test_existing_env_wins_over_profile(home, monkeypatch):
    (home / ".timenow.env").write_text("R_TIMENOW_TZ=Asia/Tokyo\n")
    monkeypatch.setenv("R_TIMENOW_TZ", "Europe/Berlin")

    importlib.reload(config_mod)

    assert os.environ["R_TIMENOW_TZ"] == "Europe/Berlin"


def test_missing_profile_is_fine(home):
    importlib.reload(config_mod)

    assert "R_TIMENOW_TZ" not in os.environ


def test_option_roundtrip():
    assert config_mod.get_option() is None

    config_mod.set_option("Australia/Hobart")
    assert config_mod.get_option() == "Australia/Hobart"

    config_mod.set_option(None)
    assert config_mod.get_option() is None
