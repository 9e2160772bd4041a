"""
Tests for configuration loading in Postboard Server
"""

import dataclasses

import pytest

from config import ServerConfig, LoadConfig


def test_defaults(monkeypatch):
    for name in [
        "POSTBOARD_JWT_SECRET", "POSTBOARD_DATABASE_URL", "POSTBOARD_JWT_ALGORITHM",
        "POSTBOARD_BCRYPT_ROUNDS", "POSTBOARD_TOKEN_EXPIRATION_HOURS", "POSTBOARD_PORT"
    ]:
        monkeypatch.delenv(name, raising=False)

    config = LoadConfig()

    assert config.jwt_secret  # generated
    assert config.jwt_algorithm == "HS256"
    assert config.password_work_factor == 10
    assert config.token_expiration_hours is None
    assert config.database_url == "sqlite:///database/postboard.db"
    assert config.port == 8000


def test_generated_secret_differs_per_load(monkeypatch):
    monkeypatch.delenv("POSTBOARD_JWT_SECRET", raising=False)

    assert LoadConfig().jwt_secret != LoadConfig().jwt_secret


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("POSTBOARD_JWT_SECRET", "s3cret")
    monkeypatch.setenv("POSTBOARD_DATABASE_URL", "sqlite:///other.db")
    monkeypatch.setenv("POSTBOARD_JWT_ALGORITHM", "HS512")
    monkeypatch.setenv("POSTBOARD_BCRYPT_ROUNDS", "12")
    monkeypatch.setenv("POSTBOARD_TOKEN_EXPIRATION_HOURS", "24")
    monkeypatch.setenv("POSTBOARD_LOG_LEVEL", "debug")

    config = LoadConfig()

    assert config.jwt_secret == "s3cret"
    assert config.database_url == "sqlite:///other.db"
    assert config.jwt_algorithm == "HS512"
    assert config.password_work_factor == 12
    assert config.token_expiration_hours == 24
    assert config.log_level == "DEBUG"


def test_invalid_values_raise(monkeypatch):
    monkeypatch.setenv("POSTBOARD_JWT_SECRET", "s3cret")

    monkeypatch.setenv("POSTBOARD_BCRYPT_ROUNDS", "ten")
    with pytest.raises(ValueError):
        LoadConfig()

    monkeypatch.setenv("POSTBOARD_BCRYPT_ROUNDS", "3")
    with pytest.raises(ValueError):
        LoadConfig()

    monkeypatch.setenv("POSTBOARD_BCRYPT_ROUNDS", "10")
    monkeypatch.setenv("POSTBOARD_JWT_ALGORITHM", "RS256")
    with pytest.raises(ValueError):
        LoadConfig()


def test_config_is_immutable():
    config = ServerConfig(jwt_secret="s3cret")

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.jwt_secret = "changed"


def test_blank_secret_rejected():
    with pytest.raises(ValueError):
        ServerConfig(jwt_secret="")


def test_unknown_log_level_rejected(monkeypatch):
    """An unrecognized log level fails at load time, not when the server starts"""
    monkeypatch.setenv("POSTBOARD_JWT_SECRET", "s3cret")
    monkeypatch.setenv("POSTBOARD_LOG_LEVEL", "verbose")

    with pytest.raises(ValueError):
        LoadConfig()

    with pytest.raises(ValueError):
        ServerConfig(jwt_secret="s3cret", log_level="info")

    for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        assert ServerConfig(jwt_secret="s3cret", log_level=level).log_level == level
