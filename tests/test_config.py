"""
配置默认值测试
"""
import importlib
from unittest.mock import MagicMock

import dotenv
import pytest

import support_magic.config as config_module
from support_magic.llm.openai_assistant import OpenAIAssistantAnalyzer

TIMING_ENV_VARS = (
    "TRANSCRIPT_BUTTON_TIMEOUT_MS",
    "TRANSCRIPT_GRACE_MS",
    "RUN_POLL_INTERVAL",
    "RUN_POLL_MAX_ATTEMPTS",
    "BROWSER_HEADLESS",
    "PORT",
)


@pytest.fixture
def clean_config(monkeypatch):
    """清空相关环境变量并忽略 .env 后重新加载配置模块"""
    for name in TIMING_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(dotenv, "load_dotenv", lambda *args, **kwargs: False)
    yield importlib.reload(config_module)
    monkeypatch.undo()
    importlib.reload(config_module)


def test_settings_defaults(clean_config):
    settings = clean_config.Settings()

    assert settings.port == 3000
    assert settings.browser_headless is True
    assert settings.transcript_button_timeout_ms == 5000
    assert settings.transcript_grace_ms == 5000
    assert settings.run_poll_interval == 1.0
    assert settings.run_poll_max_attempts == 600


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("TRANSCRIPT_GRACE_MS", "2500")
    monkeypatch.setenv("RUN_POLL_MAX_ATTEMPTS", "30")
    monkeypatch.setenv("BROWSER_HEADLESS", "false")
    monkeypatch.setattr(dotenv, "load_dotenv", lambda *args, **kwargs: False)
    try:
        settings = importlib.reload(config_module).Settings()

        assert settings.transcript_grace_ms == 2500
        assert settings.run_poll_max_attempts == 30
        assert settings.browser_headless is False
    finally:
        monkeypatch.undo()
        importlib.reload(config_module)


def test_analyzer_defaults():
    analyzer = OpenAIAssistantAnalyzer(client=MagicMock(), assistant_id="asst")

    assert analyzer.poll_interval == 1.0
    assert analyzer.max_poll_attempts == 600
