"""
Bot API error types and narrowing of known error responses.

Known errors are detected by error code and description text returned from
the Bot API server. The server may change these texts without notice; in that
case narrowing falls back to the generic `BotApiError`.

Related: tgdialog.contexts.dialogs.adapters.outbound.telegram.bot_api_client
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Mapping


class BotApiTransportError(RuntimeError):
    """
    Raised when Bot API request fails before a well-formed JSON response is received.
    """

    def __init__(self, message: str, *, method: str) -> None:
        super().__init__(message)
        self.method = method


class BotApiError(Exception):
    """
    BotApiError — ошибка, которую вернул сервер Bot API на неуспешный вызов метода.

    Related:
      - src/tgdialog/contexts/dialogs/adapters/outbound/telegram/bot_api_client.py
      - tests/unit/contexts/dialogs/adapters/test_bot_api_errors.py
    """

    def __init__(
        self,
        *,
        code: int,
        description: str,
        parameters: Mapping[str, Any] | None = None,
    ) -> None:
        """
        Build Bot API error from response fields.

        Args:
            code: `error_code` from Bot API response.
            description: `description` from Bot API response.
            parameters: Optional `parameters` (`ResponseParameters`) mapping.
        Returns:
            None.
        Assumptions:
            Fields are copied from response as-is.
        Raises:
            None.
        Side Effects:
            None.
        """
        self.code = code
        self.description = description
        self.parameters: dict[str, Any] = dict(parameters) if parameters is not None else {}
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"({self.code}) {self.description}"

    @property
    def retry_after(self) -> int | None:
        value = self.parameters.get("retry_after")
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value


class KnownBotApiError(Exception):
    """
    Base for narrowed Bot API errors; original error is kept in `cause`.
    """

    def __init__(self, cause: BotApiError) -> None:
        super().__init__(cause.message)
        self.cause = cause


class TooManyRequests(KnownBotApiError):
    """
    Flood limit exceeded; caller must wait `retry_after` before retrying.
    """

    def __init__(self, cause: BotApiError, *, retry_after: timedelta) -> None:
        super().__init__(cause)
        self.retry_after = retry_after


class BotBlockedByUser(KnownBotApiError):
    """Bot was blocked by the user."""


class MessageNotModified(KnownBotApiError):
    """New message content and reply markup equal the current ones."""


class ReplyMarkupTooLong(KnownBotApiError):
    """Message reply markup is too long."""


class QueryIdInvalid(KnownBotApiError):
    """Callback/inline query has expired or its id is invalid."""


class MediaGroupedInvalid(KnownBotApiError):
    """Invalid combination of media types in the media group."""


def narrow_bot_api_error(error: BotApiError) -> KnownBotApiError | BotApiError:
    """
    Narrow generic Bot API error to one of known error types.

    Args:
        error: Error built from Bot API response.
    Returns:
        KnownBotApiError | BotApiError: Known error wrapping `error`, or `error` itself.
    Assumptions:
        Description matching is case-insensitive substring matching.
    Raises:
        None.
    Side Effects:
        None.
    """
    code = error.code
    text = error.message.lower()
    if code == 429 and error.retry_after is not None:
        return TooManyRequests(error, retry_after=timedelta(seconds=error.retry_after))
    if code == 403:
        if "bot was blocked by the user" in text:
            return BotBlockedByUser(error)
    if code == 400:
        if "message is not modified" in text:
            return MessageNotModified(error)
        if "reply markup too long" in text:
            return ReplyMarkupTooLong(error)
        if "query is too old" in text and "query id is invalid" in text:
            return QueryIdInvalid(error)
        if "can't use the media of the specified type in the album" in text:
            return MediaGroupedInvalid(error)
    return error


__all__ = [
    "BotApiError",
    "BotApiTransportError",
    "BotBlockedByUser",
    "KnownBotApiError",
    "MediaGroupedInvalid",
    "MessageNotModified",
    "QueryIdInvalid",
    "ReplyMarkupTooLong",
    "TooManyRequests",
    "narrow_bot_api_error",
]
