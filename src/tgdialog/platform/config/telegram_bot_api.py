"""
Runtime config loader for Telegram Bot API client.

Related: tgdialog.contexts.dialogs.adapters.outbound.telegram.bot_api_client,
  tgdialog.contexts.dialogs.adapters.outbound.telegram.bot_api_url
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

_ENV_NAME_KEY = "TGDIALOG_ENV"
_CONFIG_PATH_KEY = "TGDIALOG_BOT_API_CONFIG"
_ALLOWED_ENVS = ("dev", "prod", "test")

_TOKEN_ENV_KEYS = ("TGDIALOG_BOT_TOKEN", "TELEGRAM_BOT_TOKEN")
_BASE_URL_ENV_KEYS = ("TGDIALOG_BOT_API_BASE_URL",)
_TIMEOUT_ENV_KEYS = ("TGDIALOG_BOT_API_TIMEOUT_S",)
_TEST_ENV_ENV_KEYS = ("TGDIALOG_BOT_API_TEST_ENV",)

_DEFAULT_API_BASE_URL = "https://api.telegram.org"
_DEFAULT_SEND_TIMEOUT_S = 10.0
_DEFAULT_TEST_ENVIRONMENT = False

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True, slots=True)
class BotApiClientConfig:
    """
    BotApiClientConfig — runtime settings for Telegram Bot API client adapter.

    Related:
      - src/tgdialog/contexts/dialogs/adapters/outbound/telegram/bot_api_client.py
      - configs/dev/bot_api.yaml
    """

    bot_token: str
    api_base_url: str = _DEFAULT_API_BASE_URL
    send_timeout_s: float = _DEFAULT_SEND_TIMEOUT_S
    test_environment: bool = _DEFAULT_TEST_ENVIRONMENT

    def __post_init__(self) -> None:
        """
        Validate Bot API client config invariants.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Bot token is provided through environment and must never be empty.
        Raises:
            ValueError: If one of config values is invalid.
        Side Effects:
            Normalizes token whitespace and trailing slash of base URL.
        """
        normalized_token = self.bot_token.strip()
        normalized_api_base = self.api_base_url.strip()
        if not normalized_token:
            raise ValueError("BotApiClientConfig.bot_token must be non-empty")
        if not normalized_api_base:
            raise ValueError("BotApiClientConfig.api_base_url must be non-empty")
        if not normalized_api_base.startswith(("https://", "http://")):
            raise ValueError(
                "BotApiClientConfig.api_base_url must start with http:// or https://"
            )
        if self.send_timeout_s <= 0:
            raise ValueError("BotApiClientConfig.send_timeout_s must be > 0")
        object.__setattr__(self, "bot_token", normalized_token)
        object.__setattr__(self, "api_base_url", normalized_api_base.rstrip("/"))
        object.__setattr__(self, "send_timeout_s", float(self.send_timeout_s))

    def __repr__(self) -> str:
        # Токен не должен попадать в логи.
        return (
            "BotApiClientConfig(bot_token='***', "
            f"api_base_url={self.api_base_url!r}, "
            f"send_timeout_s={self.send_timeout_s!r}, "
            f"test_environment={self.test_environment!r})"
        )


def load_bot_api_client_config(*, environ: Mapping[str, str]) -> BotApiClientConfig:
    """
    Load Bot API client config from YAML and env overrides.

    Args:
        environ: Environment mapping used to resolve env and override values.
    Returns:
        BotApiClientConfig: Validated runtime settings.
    Assumptions:
        Optional `bot_api` section lives in `configs/<env>/bot_api.yaml`; the bot
        token is read from environment only.
    Raises:
        FileNotFoundError: If explicitly configured YAML path does not exist.
        ValueError: If YAML or environment values are invalid or token is missing.
    Side Effects:
        Reads one YAML file from disk when it exists.
    """
    config_path, explicit = _resolve_bot_api_config_path(environ=environ)
    file_payload = _load_optional_bot_api_payload(path=config_path, required=explicit)

    bot_token = _first_env_value(environ=environ, env_keys=_TOKEN_ENV_KEYS)
    if bot_token is None:
        raise ValueError(f"Telegram bot token must be set via one of {_TOKEN_ENV_KEYS}")

    api_base_url = _resolve_str_setting(
        environ=environ,
        env_keys=_BASE_URL_ENV_KEYS,
        payload=file_payload,
        payload_key="api_base_url",
        default=_DEFAULT_API_BASE_URL,
    )
    send_timeout_s = _resolve_float_setting(
        environ=environ,
        env_keys=_TIMEOUT_ENV_KEYS,
        payload=file_payload,
        payload_key="send_timeout_s",
        default=_DEFAULT_SEND_TIMEOUT_S,
    )
    test_environment = _resolve_bool_setting(
        environ=environ,
        env_keys=_TEST_ENV_ENV_KEYS,
        payload=file_payload,
        payload_key="test_environment",
        default=_DEFAULT_TEST_ENVIRONMENT,
    )

    return BotApiClientConfig(
        bot_token=bot_token,
        api_base_url=api_base_url,
        send_timeout_s=send_timeout_s,
        test_environment=test_environment,
    )


def _resolve_bot_api_config_path(*, environ: Mapping[str, str]) -> tuple[Path, bool]:
    """
    Resolve Bot API YAML path using explicit override or `TGDIALOG_ENV`.

    Args:
        environ: Environment mapping.
    Returns:
        tuple[Path, bool]: YAML path and flag telling whether path was set explicitly.
    Assumptions:
        `TGDIALOG_BOT_API_CONFIG` has priority over env-derived path.
    Raises:
        ValueError: If env value is invalid.
    Side Effects:
        None.
    """
    override = environ.get(_CONFIG_PATH_KEY, "").strip()
    if override:
        return Path(override), True

    env_name = _resolve_env_name(environ=environ)
    return Path("configs") / env_name / "bot_api.yaml", False


def _resolve_env_name(*, environ: Mapping[str, str]) -> str:
    """
    Resolve normalized runtime environment name.

    Args:
        environ: Environment mapping.
    Returns:
        str: One of `dev`, `prod`, `test`.
    Assumptions:
        Missing env falls back to `dev`.
    Raises:
        ValueError: If value is outside allowed set.
    Side Effects:
        None.
    """
    raw_env = environ.get(_ENV_NAME_KEY, "dev").strip().lower()
    if raw_env not in _ALLOWED_ENVS:
        raise ValueError(
            f"{_ENV_NAME_KEY} must be one of {_ALLOWED_ENVS}, got {raw_env!r}"
        )
    return raw_env


def _load_optional_bot_api_payload(*, path: Path, required: bool) -> Mapping[str, Any]:
    """
    Load optional `bot_api` mapping from YAML config.

    Args:
        path: Bot API config path.
        required: Whether a missing file is an error.
    Returns:
        Mapping[str, Any]: `bot_api` mapping, or empty mapping.
    Assumptions:
        Unknown keys are ignored by this loader.
    Raises:
        FileNotFoundError: If required YAML path does not exist.
        ValueError: If YAML structure is invalid.
    Side Effects:
        Reads one UTF-8 file from disk.
    """
    if not path.exists():
        if required:
            raise FileNotFoundError(f"bot api config not found: {path}")
        return {}
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError("bot api config must be a mapping at top-level")

    bot_api_map = raw.get("bot_api")
    if bot_api_map is None:
        return {}
    if not isinstance(bot_api_map, dict):
        raise ValueError("bot_api section must be a mapping")
    return bot_api_map


def _first_env_value(*, environ: Mapping[str, str], env_keys: tuple[str, ...]) -> str | None:
    for env_key in env_keys:
        raw = environ.get(env_key, "").strip()
        if raw:
            return raw
    return None


def _resolve_str_setting(
    *,
    environ: Mapping[str, str],
    env_keys: tuple[str, ...],
    payload: Mapping[str, Any],
    payload_key: str,
    default: str,
) -> str:
    """
    Resolve string setting from env -> payload -> default precedence.

    Args:
        environ: Environment mapping.
        env_keys: Candidate env variable names by priority.
        payload: Parsed YAML subsection.
        payload_key: YAML key name.
        default: Fallback default value.
    Returns:
        str: Resolved non-empty string.
    Assumptions:
        Further validation happens in `BotApiClientConfig`.
    Raises:
        ValueError: If YAML value is blank or non-string.
    Side Effects:
        None.
    """
    env_value = _first_env_value(environ=environ, env_keys=env_keys)
    if env_value is not None:
        return env_value

    payload_value = payload.get(payload_key)
    if payload_value is None:
        return default
    if not isinstance(payload_value, str):
        raise ValueError(
            f"expected string for bot_api.{payload_key}, "
            f"got {type(payload_value).__name__}"
        )
    normalized = payload_value.strip()
    if not normalized:
        raise ValueError(f"bot_api.{payload_key} must be non-empty")
    return normalized


def _resolve_float_setting(
    *,
    environ: Mapping[str, str],
    env_keys: tuple[str, ...],
    payload: Mapping[str, Any],
    payload_key: str,
    default: float,
) -> float:
    """
    Resolve positive float setting from env -> payload -> default precedence.

    Args:
        environ: Environment mapping.
        env_keys: Candidate env variable names by priority.
        payload: Parsed YAML subsection.
        payload_key: YAML key name.
        default: Fallback default value.
    Returns:
        float: Resolved positive value.
    Assumptions:
        YAML ints are accepted as floats.
    Raises:
        ValueError: If value cannot be parsed as positive number.
    Side Effects:
        None.
    """
    env_value = _first_env_value(environ=environ, env_keys=env_keys)
    if env_value is not None:
        return _parse_positive_float(env_value, key=env_keys[0])

    payload_value = payload.get(payload_key)
    if payload_value is None:
        return default
    if isinstance(payload_value, bool) or not isinstance(payload_value, (int, float)):
        raise ValueError(
            f"expected number for bot_api.{payload_key}, "
            f"got {type(payload_value).__name__}"
        )
    if payload_value <= 0:
        raise ValueError(f"bot_api.{payload_key} must be > 0, got {payload_value}")
    return float(payload_value)


def _resolve_bool_setting(
    *,
    environ: Mapping[str, str],
    env_keys: tuple[str, ...],
    payload: Mapping[str, Any],
    payload_key: str,
    default: bool,
) -> bool:
    env_value = _first_env_value(environ=environ, env_keys=env_keys)
    if env_value is not None:
        normalized = env_value.lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ValueError(f"{env_keys[0]} must be a boolean flag, got {env_value!r}")

    payload_value = payload.get(payload_key)
    if payload_value is None:
        return default
    if not isinstance(payload_value, bool):
        raise ValueError(
            f"expected bool for bot_api.{payload_key}, "
            f"got {type(payload_value).__name__}"
        )
    return payload_value


def _parse_positive_float(raw: str, *, key: str) -> float:
    """
    Parse positive float from environment string.

    Args:
        raw: Raw env string.
        key: Env key name for diagnostics.
    Returns:
        float: Parsed positive value.
    Assumptions:
        Input value is stripped before parsing.
    Raises:
        ValueError: If value is not a positive number.
    Side Effects:
        None.
    """
    try:
        parsed = float(raw)
    except ValueError as error:
        raise ValueError(f"{key} must be a number, got {raw!r}") from error
    if not parsed > 0:
        raise ValueError(f"{key} must be > 0, got {parsed}")
    return parsed


__all__ = [
    "BotApiClientConfig",
    "load_bot_api_client_config",
]
