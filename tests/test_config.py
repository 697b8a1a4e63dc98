import logging

from common import config
from common.constants import DEFAULT_SCRIPT_URL, DEFAULT_TIMEOUT


def test_script_url_from_env(monkeypatch):
    monkeypatch.setenv("MTG_SCRIPT_URL", "https://script.example.com/exec")
    assert config.get_script_url() == "https://script.example.com/exec"


def test_script_url_default(monkeypatch):
    monkeypatch.delenv("MTG_SCRIPT_URL", raising=False)
    assert config.get_script_url() == DEFAULT_SCRIPT_URL


def test_secrets_win_over_env(monkeypatch):
    monkeypatch.setenv("MTG_SCRIPT_URL", "https://env.example.com/exec")
    monkeypatch.setattr(config, "_secret", lambda section, key: "https://secret.example.com/exec")
    assert config.get_script_url() == "https://secret.example.com/exec"


def test_timeout(monkeypatch):
    monkeypatch.setenv("MTG_HTTP_TIMEOUT", "7.5")
    assert config.get_timeout() == 7.5
    for bad in ("soon", "0", "-3"):
        monkeypatch.setenv("MTG_HTTP_TIMEOUT", bad)
        assert config.get_timeout() == DEFAULT_TIMEOUT
    monkeypatch.delenv("MTG_HTTP_TIMEOUT")
    assert config.get_timeout() == DEFAULT_TIMEOUT


def test_setup_logging_is_idempotent():
    root = config.setup_logging("DEBUG")
    handlers = list(root.handlers)
    assert config.setup_logging("warning") is root
    assert root.handlers == handlers
    assert root.level == logging.WARNING


def test_dotenv_is_read_by_any_page_entry_point(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("MTG_SCRIPT_URL=http://127.0.0.1:8765/exec\nMTG_HTTP_TIMEOUT=3\n")
    # Register both names with monkeypatch so values loaded from the file are undone afterwards.
    for name in ("MTG_SCRIPT_URL", "MTG_HTTP_TIMEOUT"):
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    monkeypatch.setattr(config, "DOTENV_PATH", str(env_file))

    # No setup_logging() call first: the History and Statistics pages may build the client directly.
    assert config.get_script_url() == "http://127.0.0.1:8765/exec"
    assert config.get_timeout() == 3.0


def test_dotenv_does_not_override_process_env(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("MTG_SCRIPT_URL=http://from-file/exec\n")
    monkeypatch.setenv("MTG_SCRIPT_URL", "http://from-process/exec")
    monkeypatch.setattr(config, "DOTENV_PATH", str(env_file))
    assert config.get_script_url() == "http://from-process/exec"
