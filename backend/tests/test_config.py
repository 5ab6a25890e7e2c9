import pytest
from pydantic import ValidationError

from todo_api.config import Settings
from todo_api.core.domain_types import MailBackend


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.mail_backend == MailBackend.LOG
    assert settings.log_format == "json"


def test_log_level_normalized():
    assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"


def test_log_level_rejects_unknown():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="loud")


def test_http_backend_requires_url():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, mail_backend="http", mail_api_url="")


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("BASE_URL", "https://todo.example.com")
    assert Settings(_env_file=None).base_url == "https://todo.example.com"
