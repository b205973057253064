from .bot_api_client import BotApiClient
from .bot_api_client_hooks import BotApiClientHooks
from .bot_api_errors import (
    BotApiError,
    BotApiTransportError,
    BotBlockedByUser,
    KnownBotApiError,
    MediaGroupedInvalid,
    MessageNotModified,
    QueryIdInvalid,
    ReplyMarkupTooLong,
    TooManyRequests,
    narrow_bot_api_error,
)
from .bot_api_url import BotApiUrl

__all__ = [
    "BotApiClient",
    "BotApiClientHooks",
    "BotApiError",
    "BotApiTransportError",
    "BotApiUrl",
    "BotBlockedByUser",
    "KnownBotApiError",
    "MediaGroupedInvalid",
    "MessageNotModified",
    "QueryIdInvalid",
    "ReplyMarkupTooLong",
    "TooManyRequests",
    "narrow_bot_api_error",
]
