from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Protocol, cast

import requests

from tgdialog.contexts.dialogs.application import dialog_send_params
from tgdialog.contexts.dialogs.domain import Dialog
from tgdialog.platform.config import BotApiClientConfig

from .bot_api_client_hooks import BotApiClientHooks
from .bot_api_errors import BotApiError, BotApiTransportError
from .bot_api_url import BotApiUrl

log = logging.getLogger(__name__)


class BotApiHttpResponse(Protocol):
    """
    BotApiHttpResponse — minimal HTTP response contract used by Bot API client.

    Related:
      - src/tgdialog/contexts/dialogs/adapters/outbound/telegram/bot_api_client.py
      - tests/unit/contexts/dialogs/adapters/test_bot_api_client.py
    """

    status_code: int

    def json(self) -> Any:
        """
        Parse HTTP response payload as JSON.

        Args:
            None.
        Returns:
            Any: Parsed payload.
        Assumptions:
            Bot API returns JSON object payload for every status code.
        Raises:
            Exception: Adapter-specific JSON parsing errors.
        Side Effects:
            None.
        """
        ...


class BotApiHttpSession(Protocol):
    """
    BotApiHttpSession — minimal HTTP session contract for Bot API client testability.

    Related:
      - src/tgdialog/contexts/dialogs/adapters/outbound/telegram/bot_api_client.py
      - tests/unit/contexts/dialogs/adapters/test_bot_api_client.py
    """

    def post(
        self,
        *,
        url: str,
        json: Mapping[str, Any],
        timeout: float,
    ) -> BotApiHttpResponse:
        """
        Execute HTTP POST request.

        Args:
            url: Full request URL.
            json: JSON payload mapping.
            timeout: Request timeout seconds.
        Returns:
            BotApiHttpResponse: HTTP response object.
        Assumptions:
            Timeout is always positive and provided by caller.
        Raises:
            Exception: Transport-level failures.
        Side Effects:
            Performs outbound HTTP request.
        """
        ...


class BotApiClient:
    """
    BotApiClient — синхронный JSON-клиент Bot API без повторов и загрузки файлов.

    Related:
      - src/tgdialog/contexts/dialogs/application/services/dialog_send_params.py
      - src/tgdialog/platform/config/telegram_bot_api.py
      - tests/unit/contexts/dialogs/adapters/test_bot_api_client.py
    """

    def __init__(
        self,
        *,
        config: BotApiClientConfig,
        session: BotApiHttpSession | None = None,
        hooks: BotApiClientHooks | None = None,
    ) -> None:
        """
        Initialize Bot API client dependencies.

        Args:
            config: Validated Bot API client config.
            session: Optional injected HTTP session for tests.
            hooks: Optional metrics callbacks.
        Returns:
            None.
        Assumptions:
            One client instance may be shared by one process.
        Raises:
            ValueError: If config is missing.
        Side Effects:
            Creates `requests.Session` when no custom session is injected.
        """
        if config is None:  # type: ignore[truthy-bool]
            raise ValueError("BotApiClient requires config")
        self._config = config
        self._url = BotApiUrl.from_config(config)
        self._session = (
            session
            if session is not None
            else cast(BotApiHttpSession, requests.Session())
        )
        self._hooks = hooks if hooks is not None else BotApiClientHooks()

    def call(self, method: str, params: Mapping[str, Any] | None = None) -> Any:
        """
        Call one Bot API method with JSON body.

        Args:
            method: Bot API method name.
            params: Method parameters; `None` values are dropped.
        Returns:
            Any: `result` field of successful response.
        Assumptions:
            Bot API responses are trusted and not validated beyond `ok` envelope.
        Raises:
            BotApiTransportError: If request fails or body is not a JSON object.
            BotApiError: If Bot API returns `ok=false`.
        Side Effects:
            Performs one outbound HTTP request and emits logs and hooks.
        """
        url = self._url.method_url(method)
        body = {key: value for key, value in (params or {}).items() if value is not None}
        try:
            response = self._session.post(
                url=url,
                json=body,
                timeout=self._config.send_timeout_s,
            )
            payload = response.json()
        except Exception as error:  # noqa: BLE001
            # Текст ошибок requests содержит URL с токеном бота.
            details = _redact_token(
                f"{type(error).__name__}: {error}",
                bot_token=self._config.bot_token,
            )
            _emit_hook(self._hooks.on_call_error, method)
            log.warning(
                "bot api call failed reason=transport method=%s error=%s",
                method,
                details,
            )
            raise BotApiTransportError(
                f"bot api call {method} failed: {details}",
                method=method,
            ) from None

        if not isinstance(payload, dict):
            _emit_hook(self._hooks.on_call_error, method)
            log.warning(
                "bot api call failed reason=non_object_payload method=%s status_code=%s",
                method,
                response.status_code,
            )
            raise BotApiTransportError(
                f"bot api call {method} returned non-object payload",
                method=method,
            )

        if payload.get("ok") is not True:
            api_error = _error_from_payload(payload=payload, status_code=response.status_code)
            _emit_hook(self._hooks.on_call_error, method)
            log.warning(
                "bot api call failed reason=api_error method=%s code=%s description=%s",
                method,
                api_error.code,
                api_error.description,
            )
            raise api_error

        _emit_hook(self._hooks.on_call_ok, method)
        log.debug("bot api call ok method=%s", method)
        return payload.get("result")

    def send_message(self, *, dialog: Dialog, text: str, **options: Any) -> Any:
        """
        Send text message to dialog via `sendMessage`.

        Args:
            dialog: Target dialog value object.
            text: Message text.
            **options: Extra `sendMessage` parameters (e.g. `parse_mode`).
        Returns:
            Any: Sent `Message` object as returned by Bot API.
        Assumptions:
            Dialog-addressing fields always win over same-named options.
        Raises:
            ValueError: If text is empty.
            BotApiTransportError: If request fails.
            BotApiError: If Bot API rejects the call.
        Side Effects:
            Performs one outbound HTTP request.
        """
        if not text:
            raise ValueError("BotApiClient.send_message requires non-empty text")
        params: dict[str, Any] = dict(options)
        params["text"] = text
        params.update(dialog_send_params(dialog))
        return self.call("sendMessage", params)


def _error_from_payload(*, payload: Mapping[str, Any], status_code: int) -> BotApiError:
    """
    Build Bot API error from unsuccessful response envelope.

    Args:
        payload: Parsed response body.
        status_code: HTTP status code used when `error_code` is missing.
    Returns:
        BotApiError: Error with code, description and parameters.
    Assumptions:
        `parameters` is optional and must be a mapping when present.
    Raises:
        None.
    Side Effects:
        None.
    """
    raw_code = payload.get("error_code")
    code = status_code
    if isinstance(raw_code, int) and not isinstance(raw_code, bool):
        code = raw_code
    description = payload.get("description")
    parameters = payload.get("parameters")
    return BotApiError(
        code=code,
        description=str(description) if description is not None else "",
        parameters=parameters if isinstance(parameters, Mapping) else None,
    )


def _redact_token(text: str, *, bot_token: str) -> str:
    """
    Mask bot token in diagnostic text.

    Args:
        text: Raw diagnostic text, e.g. transport exception message.
        bot_token: Configured bot token.
    Returns:
        str: Text with every token occurrence replaced by `***`.
    Assumptions:
        Token is non-empty (validated by `BotApiClientConfig`).
    Raises:
        None.
    Side Effects:
        None.
    """
    return text.replace(bot_token, "***")


def _emit_hook(callback: Callable[[str], None] | None, method: str) -> None:
    if callback is not None:
        callback(method)
