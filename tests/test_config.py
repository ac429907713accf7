import logging

import pytest

from schoolsite.core.config import DEFAULT_SESSION_SECRET, Settings
from schoolsite.core.logging import configure_logging


def test_reads_environment(clean_env, tmp_path):
    clean_env.setenv("SMTP_PORT", "2525")
    clean_env.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example,")

    settings = Settings()

    assert settings.session_secret == "test-session-secret"
    assert settings.database_path == (tmp_path / "school.db").resolve()
    assert settings.smtp_port == 2525
    assert settings.cors_allow_origins == ["https://a.example", "https://b.example"]


def test_development_falls_back_to_default_secret_with_warning(clean_env, caplog):
    clean_env.delenv("SESSION_SECRET")
    with caplog.at_level(logging.WARNING, logger="schoolsite.core.config"):
        settings = Settings()
    assert settings.session_secret == DEFAULT_SESSION_SECRET
    assert "SESSION_SECRET" in caplog.text


def test_production_requires_secret(clean_env):
    clean_env.delenv("SESSION_SECRET")
    clean_env.setenv("APP_ENV", "production")
    with pytest.raises(RuntimeError, match="SESSION_SECRET"):
        Settings()


def test_invalid_integer_is_reported(clean_env):
    clean_env.setenv("SMTP_PORT", "not-a-number")
    with pytest.raises(RuntimeError, match="SMTP_PORT"):
        Settings()


def test_log_level_defaults_to_info(clean_env):
    assert Settings().log_level == "INFO"


def test_log_level_is_read_from_environment(clean_env):
    clean_env.setenv("LOG_LEVEL", " debug ")
    assert Settings().log_level == "DEBUG"


@pytest.mark.parametrize("level,expected", [("warning", logging.WARNING), ("LOUD", logging.INFO), (None, logging.INFO)])
def test_configure_logging_applies_level(level, expected):
    uvicorn_logger = logging.getLogger("uvicorn")
    previous = uvicorn_logger.level
    try:
        configure_logging(level)
        assert uvicorn_logger.level == expected
    finally:
        uvicorn_logger.setLevel(previous)
