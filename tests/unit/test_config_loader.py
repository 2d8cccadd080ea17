"""
Environment configuration loader tests.
"""
import pytest

from app.config.loader import ConfigLoader, load_config_for_environment
from app.config.settings import Environment


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_sample_file_round_trips_into_settings(workdir):
    sample = ConfigLoader.create_sample_env_file("staging")
    assert sample == ".env.staging.sample"

    (workdir / ".env.staging").write_text((workdir / sample).read_text())
    assert ConfigLoader.get_available_environments() == ["staging"]

    settings = load_config_for_environment("staging")
    assert settings.environment == Environment.STAGING
    assert settings.workers == 4


def test_missing_environment_file_uses_defaults(workdir):
    settings = ConfigLoader.load_environment_config("testing")
    assert settings.environment == Environment.TESTING
    assert ConfigLoader.get_available_environments() == []


def test_unknown_environment_is_rejected(workdir):
    with pytest.raises(ValueError):
        ConfigLoader.load_environment_config("moon")
