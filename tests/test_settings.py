from __future__ import annotations

import pytest

from receipt_extractor import settings as settings_module
from receipt_extractor.settings import Settings

ENV_NAMES = ["RECEIPT_MAX_LINES", "RECEIPT_MAX_LINE_LENGTH", "API_TOKEN", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_NAMES:
        # setenv first so values loaded from .env files are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings_module, "_ENV_FILE_LOADED", True)
    settings_module.reset_settings_state()
    yield
    settings_module.reset_settings_state()


def test_defaults_when_env_is_empty():
    settings = Settings.load()
    assert settings.max_lines == settings_module.DEFAULT_MAX_LINES
    assert settings.max_line_length == settings_module.DEFAULT_MAX_LINE_LENGTH
    assert settings.api_token is None
    assert settings.log_level == "INFO"


@pytest.mark.parametrize(
    "env_value,expected",
    [
        ("10", 10),
        (" 250 ", 250),
        ("", settings_module.DEFAULT_MAX_LINES),
    ],
)

def test_max_lines_parsed(monkeypatch, env_value, expected):
    monkeypatch.setenv("RECEIPT_MAX_LINES", env_value)
    assert Settings.load().max_lines == expected


@pytest.mark.parametrize("env_value", ["zero", "0", "-3"])
def test_invalid_limits_rejected(monkeypatch, env_value):
    monkeypatch.setenv("RECEIPT_MAX_LINE_LENGTH", env_value)
    with pytest.raises(RuntimeError) as excinfo:
        Settings.load()
    assert "RECEIPT_MAX_LINE_LENGTH" in str(excinfo.value)


def test_invalid_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(RuntimeError):
        Settings.load()


def test_blank_api_token_is_ignored(monkeypatch):
    monkeypatch.setenv("API_TOKEN", "   ")
    assert Settings.load().api_token is None


def test_loads_from_env_file(tmp_path):
    env_content = (
        "RECEIPT_MAX_LINES=42\n"
        "RECEIPT_MAX_LINE_LENGTH=80\n"
        "API_TOKEN=secret\n"
        "LOG_LEVEL=debug\n"
    )
    (tmp_path / ".env").write_text(env_content)

    settings_module.reset_settings_state()
    settings = settings_module.get_settings()

    assert settings.max_lines == 42
    assert settings.max_line_length == 80
    assert settings.api_token == "secret"
    assert settings.log_level == "DEBUG"
