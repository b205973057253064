from __future__ import annotations

from pathlib import Path

import pytest

from tgdialog.platform.config import BotApiClientConfig, load_bot_api_client_config


def _write_bot_api_config(tmp_path: Path, *, body: str) -> Path:
    """
    Write temporary Bot API YAML used by config-loader tests.

    Args:
        tmp_path: pytest temporary path fixture.
        body: Full YAML content.
    Returns:
        Path: Written config path.
    Assumptions:
        Input text is valid UTF-8.
    Raises:
        OSError: If write fails.
    Side Effects:
        Creates one temp file.
    """
    config_path = tmp_path / "bot_api.yaml"
    config_path.write_text(body, encoding="utf-8")
    return config_path


def test_load_bot_api_client_config_reads_yaml_section(tmp_path: Path) -> None:
    """
    Verify loader reads `bot_api` values from YAML and token from env.

    Args:
        tmp_path: pytest temporary path fixture.
    Returns:
        None.
    Assumptions:
        `TGDIALOG_BOT_API_CONFIG` points to explicit YAML path.
    Raises:
        AssertionError: If parsed config fields mismatch YAML payload.
    Side Effects:
        None.
    """
    config_path = _write_bot_api_config(
        tmp_path,
        body="""
schema_version: 1
bot_api:
  api_base_url: "http://localhost:8081/"
  send_timeout_s: 3
  test_environment: true
""".strip(),
    )
    environ = {
        "TGDIALOG_BOT_API_CONFIG": str(config_path),
        "TELEGRAM_BOT_TOKEN": " 123:abc ",
    }

    config = load_bot_api_client_config(environ=environ)

    assert config.bot_token == "123:abc"
    assert config.api_base_url == "http://localhost:8081"
    assert config.send_timeout_s == 3.0
    assert config.test_environment is True


def test_load_bot_api_client_config_env_overrides_have_priority(tmp_path: Path) -> None:
    config_path = _write_bot_api_config(
        tmp_path,
        body="""
bot_api:
  api_base_url: "https://yaml.example"
  send_timeout_s: 3
  test_environment: true
""".strip(),
    )
    environ = {
        "TGDIALOG_BOT_API_CONFIG": str(config_path),
        "TGDIALOG_BOT_TOKEN": "primary",
        "TELEGRAM_BOT_TOKEN": "fallback",
        "TGDIALOG_BOT_API_BASE_URL": "https://env.example",
        "TGDIALOG_BOT_API_TIMEOUT_S": "7.5",
        "TGDIALOG_BOT_API_TEST_ENV": "no",
    }

    config = load_bot_api_client_config(environ=environ)

    assert config.bot_token == "primary"
    assert config.api_base_url == "https://env.example"
    assert config.send_timeout_s == 7.5
    assert config.test_environment is False


def test_load_bot_api_client_config_uses_defaults_without_env_file(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.chdir(tmp_path)

    config = load_bot_api_client_config(environ={"TGDIALOG_BOT_TOKEN": "123:abc"})

    assert config == BotApiClientConfig(bot_token="123:abc")
    assert config.api_base_url == "https://api.telegram.org"
    assert config.send_timeout_s == 10.0
    assert config.test_environment is False


def test_load_bot_api_client_config_requires_token(tmp_path: Path) -> None:
    config_path = _write_bot_api_config(tmp_path, body="bot_api: {}")

    with pytest.raises(ValueError):
        load_bot_api_client_config(environ={"TGDIALOG_BOT_API_CONFIG": str(config_path)})


def test_load_bot_api_client_config_rejects_missing_explicit_file(tmp_path: Path) -> None:
    environ = {
        "TGDIALOG_BOT_API_CONFIG": str(tmp_path / "missing.yaml"),
        "TGDIALOG_BOT_TOKEN": "123:abc",
    }

    with pytest.raises(FileNotFoundError):
        load_bot_api_client_config(environ=environ)


@pytest.mark.parametrize(
    "body",
    [
        "- not\n- a mapping",
        "bot_api: [1, 2]",
        "bot_api:\n  send_timeout_s: 0",
        "bot_api:\n  send_timeout_s: fast",
        "bot_api:\n  test_environment: 'yes'",
        "bot_api:\n  api_base_url: 'ftp://example'",
    ],
)
def test_load_bot_api_client_config_rejects_invalid_yaml(tmp_path: Path, body: str) -> None:
    config_path = _write_bot_api_config(tmp_path, body=body)
    environ = {
        "TGDIALOG_BOT_API_CONFIG": str(config_path),
        "TGDIALOG_BOT_TOKEN": "123:abc",
    }

    with pytest.raises(ValueError):
        load_bot_api_client_config(environ=environ)


def test_load_bot_api_client_config_rejects_invalid_env_name() -> None:
    with pytest.raises(ValueError):
        load_bot_api_client_config(
            environ={"TGDIALOG_ENV": "staging", "TGDIALOG_BOT_TOKEN": "123:abc"}
        )


def test_bot_api_client_config_repr_hides_token() -> None:
    assert "secret-token" not in repr(BotApiClientConfig(bot_token="secret-token"))
