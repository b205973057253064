from .telegram import (
    BotApiClient,
    BotApiClientHooks,
    BotApiError,
    BotApiTransportError,
    BotApiUrl,
    narrow_bot_api_error,
)

__all__ = [
    "BotApiClient",
    "BotApiClientHooks",
    "BotApiError",
    "BotApiTransportError",
    "BotApiUrl",
    "narrow_bot_api_error",
]
