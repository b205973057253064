from .telegram_bot_api import BotApiClientConfig, load_bot_api_client_config

__all__ = [
    "BotApiClientConfig",
    "load_bot_api_client_config",
]
