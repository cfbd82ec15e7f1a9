from pathlib import Path

import pytest

from mcmessaging.config import Settings, get_settings


def test_settings_read_prefixed_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MCMSG_MESSAGES_FILE", str(tmp_path / "messages.yml"))
    monkeypatch.setenv("MCMSG_HOVER_LINK", "Open")
    monkeypatch.setenv("MCMSG_CAPTURE_STYLE_PREFIX", "false")

    settings = Settings()

    assert settings.messages_file == tmp_path / "messages.yml"
    assert settings.hover_messages() == {"link": "Open"}
    assert settings.capture_style_prefix is False


def test_settings_read_dotenv(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("MCMSG_HOVER_COMMAND=Execute\n", encoding="utf-8")

    settings = Settings()

    assert settings.hover_messages() == {"command": "Execute"}


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("MCMSG_MESSAGES_FILE", "MCMSG_HOVER_LINK", "MCMSG_HOVER_COMMAND", "MCMSG_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.messages_file is None
    assert settings.hover_messages() == {}
    assert settings.capture_style_prefix is True
    assert settings.log_level == "INFO"


def test_get_settings_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)

    settings = get_settings(hover_link="Visit", log_level="DEBUG")

    assert settings.hover_messages()["link"] == "Visit"
    assert settings.log_level == "DEBUG"
