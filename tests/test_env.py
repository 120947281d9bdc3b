"""
Tests for environment configuration.
"""

import logging

import pytest

from snapkit.io.env import ConfigurationError, get_organization_name, load_settings


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SNAPKIT_ORG", "env-org")
    assert load_settings().SNAPKIT_ORG == "env-org"


def test_settings_default_env_file(tmp_path):
    # the working directory is tmp_path, see conftest
    (tmp_path / "snapkit.env").write_text("SNAPKIT_ORG=dotenv-org\nUNRELATED=1\n")
    assert get_organization_name() == "dotenv-org"


def test_environment_beats_env_file(monkeypatch, tmp_path):
    env_file = tmp_path / "other.env"
    env_file.write_text("SNAPKIT_ORG=file-org\n")
    monkeypatch.setenv("SNAPKIT_ORG", "env-org")
    assert get_organization_name(env_file) == "env-org"


def test_missing_organization():
    assert load_settings().SNAPKIT_ORG is None
    with pytest.raises(ConfigurationError, match="^SNAPKIT_ORG environment variable is not set$"):
        get_organization_name()


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)


def test_empty_variable_falls_back_to_next_public_name(monkeypatch):
    monkeypatch.setenv("SNAPKIT_ORG", "")
    monkeypatch.setenv("NEXT_PUBLIC_SNAPKIT_ORG", "next-org")
    assert get_organization_name() == "next-org"


def test_organization_name_is_logged(monkeypatch, caplog):
    caplog.set_level(logging.DEBUG, logger="snapkit.io.env")
    monkeypatch.setenv("SNAPKIT_ORG", "env-org")
    get_organization_name()
    records = [r for r in caplog.records if r.name == "snapkit.io.env"]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG
    assert "env-org" in records[0].getMessage()


if __name__ == "__main__":
    pytest.main()
