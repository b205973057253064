from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class BotApiClientHooks:
    """
    BotApiClientHooks — optional callbacks for Bot API call counters.

    Related:
      - src/tgdialog/contexts/dialogs/adapters/outbound/telegram/bot_api_client.py
    """

    on_call_ok: Callable[[str], None] | None = None
    on_call_error: Callable[[str], None] | None = None
