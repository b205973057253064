from __future__ import annotations

from dataclasses import dataclass

from tgdialog.platform.config import BotApiClientConfig


@dataclass(frozen=True, slots=True)
class BotApiUrl:
    """
    BotApiUrl — построитель URL методов и файлов Bot API (prod или test окружение).

    Related:
      - src/tgdialog/contexts/dialogs/adapters/outbound/telegram/bot_api_client.py
      - src/tgdialog/platform/config/telegram_bot_api.py
    """

    bot_token: str
    api_base_url: str = "https://api.telegram.org"
    test_environment: bool = False

    @classmethod
    def from_config(cls, config: BotApiClientConfig) -> BotApiUrl:
        return cls(
            bot_token=config.bot_token,
            api_base_url=config.api_base_url,
            test_environment=config.test_environment,
        )

    def method_url(self, method: str) -> str:
        """
        Build URL of one Bot API method.

        Args:
            method: Bot API method name, e.g. `sendMessage`.
        Returns:
            str: Full method URL.
        Assumptions:
            Test environment methods live under `/test/` path segment.
        Raises:
            ValueError: If method name is blank.
        Side Effects:
            None.
        """
        normalized = method.strip()
        if not normalized:
            raise ValueError("BotApiUrl.method_url requires non-empty method")
        base = f"{self.api_base_url.rstrip('/')}/bot{self.bot_token}"
        if self.test_environment:
            return f"{base}/test/{normalized}"
        return f"{base}/{normalized}"

    def file_url(self, file_path: str) -> str:
        # TODO: check file download path against the test environment server.
        return f"{self.api_base_url.rstrip('/')}/file/bot{self.bot_token}/{file_path.lstrip('/')}"

    def __repr__(self) -> str:
        return (
            f"BotApiUrl(bot_token='***', api_base_url={self.api_base_url!r}, "
            f"test_environment={self.test_environment!r})"
        )
