from __future__ import annotations

from enum import Enum


class PeerKind(str, Enum):
    """
    PeerKind — закрытый набор видов peer, между которыми делится диапазон dialog id.

    Related:
      - src/tgdialog/shared_kernel/primitives/peer_ref.py
      - src/tgdialog/contexts/dialogs/domain/services/dialog_id_ranges.py
    """

    USER = "user"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    SECRET_CHAT = "secret-chat"
    MONOFORUM = "monoforum"

    @classmethod
    def parse(cls, raw_value: PeerKind | str) -> PeerKind:
        """
        Parse peer kind from enum member or its wire tag.

        Args:
            raw_value: `PeerKind` member or tag string such as `"secret-chat"`.
        Returns:
            PeerKind: Parsed member.
        Assumptions:
            Tags are case-insensitive and surrounding whitespace is ignored.
        Raises:
            ValueError: If value is not one of five known kinds.
        Side Effects:
            None.
        """
        if isinstance(raw_value, PeerKind):
            return raw_value
        if not isinstance(raw_value, str):
            raise ValueError(f"PeerKind requires str tag, got {raw_value!r}")
        normalized = raw_value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(
            f"Unsupported peer kind={normalized!r}. Supported: {[m.value for m in cls]}"
        )

    def __str__(self) -> str:
        return self.value
