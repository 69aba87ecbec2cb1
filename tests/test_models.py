"""Tests for ScraperConfig."""

import pytest
from pydantic import ValidationError

from pagescraper import ScraperConfig


ENV_VARS = (
    "PAGESCRAPER_TIMEOUT",
    "PAGESCRAPER_USER_AGENT",
    "PAGESCRAPER_FOLLOW_REDIRECTS",
    "PAGESCRAPER_HEADLESS",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults():
    config = ScraperConfig()

    assert config.headers == {}
    assert config.timeout is None
    assert config.follow_redirects is True
    assert config.headless is True


def test_client_kwargs_omit_timeout_by_default():
    assert ScraperConfig().client_kwargs() == {"headers": {}, "follow_redirects": True}


def test_client_kwargs_include_timeout():
    assert ScraperConfig(timeout=5).client_kwargs()["timeout"] == 5


def test_rejects_non_positive_timeout():
    with pytest.raises(ValidationError):
        ScraperConfig(timeout=0)


def test_from_env_defaults(clean_env):
    assert ScraperConfig.from_env() == ScraperConfig()


def test_from_env_reads_variables(clean_env):
    clean_env.setenv("PAGESCRAPER_TIMEOUT", "12.5")
    clean_env.setenv("PAGESCRAPER_USER_AGENT", "pagescraper-test/1.0")
    clean_env.setenv("PAGESCRAPER_FOLLOW_REDIRECTS", "false")
    clean_env.setenv("PAGESCRAPER_HEADLESS", "false")

    config = ScraperConfig.from_env()

    assert config.timeout == 12.5
    assert config.headers == {"User-Agent": "pagescraper-test/1.0"}
    assert config.follow_redirects is False
    assert config.headless is False


def test_from_env_rejects_garbage(clean_env):
    clean_env.setenv("PAGESCRAPER_TIMEOUT", "soon")

    with pytest.raises(ValidationError):
        ScraperConfig.from_env()
