"""
Dialog id range table: five disjoint bands of Bot API `chat_id` values.

Bands are ordered from the most negative dialog id to the most positive one.
Two values are never assigned to any peer: `0` and `-10**12`.

Related: tgdialog.contexts.dialogs.domain.services.dialog_id_codec,
  tgdialog.shared_kernel.primitives.peer_kind
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from tgdialog.shared_kernel.primitives import PeerKind

# Константы пространства имён Telegram; менять только вместе с платформой.
TRILLION = 10**12
INT32_SPAN = 2**31
USER_ID_LIMIT = 2**40
MONOFORUM_DIALOG_ID_FLOOR = -4 * TRILLION

# 0 и -10**12 не принадлежат ни одному виду peer.
DIALOG_ID_HOLES: tuple[int, ...] = (-TRILLION, 0)


@dataclass(frozen=True, slots=True)
class DialogIdBand:
    """
    DialogIdBand — непрерывный диапазон dialog id, закреплённый за одним видом peer.

    Related:
      - src/tgdialog/contexts/dialogs/domain/services/dialog_id_codec.py
      - tests/unit/contexts/dialogs/domain/test_dialog_id_ranges.py
    """

    kind: PeerKind
    min_dialog_id: int
    max_dialog_id: int
    to_peer_id: Callable[[int], int]
    to_dialog_id: Callable[[int], int]

    def __post_init__(self) -> None:
        """
        Validate band boundaries and transform symmetry on both band edges.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Transforms are monotonic affine functions, so checking edges is enough.
        Raises:
            ValueError: If band is empty or transforms are not mutual inverses on edges.
        Side Effects:
            None.
        """
        if self.min_dialog_id > self.max_dialog_id:
            raise ValueError(
                f"DialogIdBand({self.kind.value}) min_dialog_id must be <= max_dialog_id, "
                f"got {self.min_dialog_id} > {self.max_dialog_id}"
            )
        for edge in (self.min_dialog_id, self.max_dialog_id):
            if self.to_dialog_id(self.to_peer_id(edge)) != edge:
                raise ValueError(
                    f"DialogIdBand({self.kind.value}) transforms are not inverse at {edge}"
                )

    @property
    def min_peer_id(self) -> int:
        """
        Return smallest legal peer id of this band's kind.

        Args:
            None.
        Returns:
            int: Lower bound of peer id domain (inclusive).
        Assumptions:
            Transform may be decreasing, so both edges are compared.
        Raises:
            None.
        Side Effects:
            None.
        """
        return min(self.to_peer_id(self.min_dialog_id), self.to_peer_id(self.max_dialog_id))

    @property
    def max_peer_id(self) -> int:
        """
        Return largest legal peer id of this band's kind.

        Args:
            None.
        Returns:
            int: Upper bound of peer id domain (inclusive).
        Assumptions:
            Transform may be decreasing, so both edges are compared.
        Raises:
            None.
        Side Effects:
            None.
        """
        return max(self.to_peer_id(self.min_dialog_id), self.to_peer_id(self.max_dialog_id))

    def contains_dialog_id(self, dialog_id: int) -> bool:
        return self.min_dialog_id <= dialog_id <= self.max_dialog_id

    def contains_peer_id(self, peer_id: int) -> bool:
        return self.min_peer_id <= peer_id <= self.max_peer_id


DIALOG_ID_BANDS: tuple[DialogIdBand, ...] = (
    DialogIdBand(
        kind=PeerKind.MONOFORUM,
        min_dialog_id=MONOFORUM_DIALOG_ID_FLOOR,
        max_dialog_id=-(2 * TRILLION + INT32_SPAN + 1),
        to_peer_id=lambda dialog_id: -dialog_id - TRILLION,
        to_dialog_id=lambda peer_id: -(TRILLION + peer_id),
    ),
    DialogIdBand(
        kind=PeerKind.SECRET_CHAT,
        min_dialog_id=-(2 * TRILLION + INT32_SPAN),
        max_dialog_id=-(2 * TRILLION - INT32_SPAN + 1),
        to_peer_id=lambda dialog_id: dialog_id + 2 * TRILLION,
        to_dialog_id=lambda peer_id: peer_id - 2 * TRILLION,
    ),
    DialogIdBand(
        kind=PeerKind.SUPERGROUP,
        min_dialog_id=-(2 * TRILLION - INT32_SPAN),
        max_dialog_id=-(TRILLION + 1),
        to_peer_id=lambda dialog_id: -dialog_id - TRILLION,
        to_dialog_id=lambda peer_id: -(TRILLION + peer_id),
    ),
    DialogIdBand(
        kind=PeerKind.GROUP,
        min_dialog_id=-(TRILLION - 1),
        max_dialog_id=-1,
        to_peer_id=lambda dialog_id: -dialog_id,
        to_dialog_id=lambda peer_id: -peer_id,
    ),
    DialogIdBand(
        kind=PeerKind.USER,
        min_dialog_id=1,
        max_dialog_id=USER_ID_LIMIT - 1,
        to_peer_id=lambda dialog_id: dialog_id,
        to_dialog_id=lambda peer_id: peer_id,
    ),
)

_BANDS_BY_KIND: dict[PeerKind, DialogIdBand] = {band.kind: band for band in DIALOG_ID_BANDS}


def find_band_by_dialog_id(dialog_id: int) -> DialogIdBand | None:
    """
    Locate the band containing dialog id.

    Args:
        dialog_id: Exact integer dialog id.
    Returns:
        DialogIdBand | None: Matching band, or None for holes and out-of-range values.
    Assumptions:
        Bands are disjoint, so at most one band matches.
    Raises:
        None.
    Side Effects:
        None.
    """
    for band in DIALOG_ID_BANDS:
        if band.contains_dialog_id(dialog_id):
            return band
    return None


def band_for_kind(kind: PeerKind) -> DialogIdBand:
    """
    Return the band assigned to peer kind.

    Args:
        kind: Peer kind.
    Returns:
        DialogIdBand: Band of the kind.
    Assumptions:
        Every `PeerKind` member owns exactly one band.
    Raises:
        KeyError: If kind is not a `PeerKind` member.
    Side Effects:
        None.
    """
    return _BANDS_BY_KIND[kind]


__all__ = [
    "DIALOG_ID_BANDS",
    "DIALOG_ID_HOLES",
    "DialogIdBand",
    "INT32_SPAN",
    "MONOFORUM_DIALOG_ID_FLOOR",
    "TRILLION",
    "USER_ID_LIMIT",
    "band_for_kind",
    "find_band_by_dialog_id",
]
