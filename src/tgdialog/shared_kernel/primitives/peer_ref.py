from __future__ import annotations

from dataclasses import dataclass

from .peer_kind import PeerKind


@dataclass(frozen=True, slots=True)
class PeerRef:
    """
    PeerRef — декодированная ссылка на peer: вид + id в пространстве этого вида.

    Related:
      - src/tgdialog/shared_kernel/primitives/peer_kind.py
      - src/tgdialog/contexts/dialogs/domain/services/dialog_id_codec.py
    """

    kind: PeerKind
    id: int

    def __str__(self) -> str:
        # Для логов: "supergroup:42".
        return f"{self.kind.value}:{self.id}"
