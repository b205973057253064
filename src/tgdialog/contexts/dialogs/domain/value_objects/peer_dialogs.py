from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from tgdialog.contexts.dialogs.domain.errors import InvalidPeerIdError
from tgdialog.contexts.dialogs.domain.services import band_for_kind, encode_peer_id
from tgdialog.shared_kernel.primitives import PeerKind, PeerRef, is_safe_integer


@dataclass(frozen=True, slots=True)
class _PeerDialog:
    """
    Base for dialogs addressed by numeric peer id; subclasses pin `peer_kind`.

    Related:
      - src/tgdialog/contexts/dialogs/domain/services/dialog_id_codec.py
      - src/tgdialog/contexts/dialogs/application/services/dialog_send_params.py
    """

    peer_kind: ClassVar[PeerKind]

    id: int

    def __post_init__(self) -> None:
        """
        Validate peer id against id domain of the pinned peer kind.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Domain bounds come from the dialog id range table.
        Raises:
            TypeError: If id is not a safe integer (bool included).
            InvalidPeerIdError: If id is outside kind's id domain.
        Side Effects:
            Normalizes integral float id to `int`.
        """
        name = type(self).__name__
        if not is_safe_integer(self.id):
            raise TypeError(f"{name} requires safe integer id, got {self.id!r}")
        object.__setattr__(self, "id", int(self.id))
        band = band_for_kind(self.peer_kind)
        if not band.contains_peer_id(self.id):
            raise InvalidPeerIdError(
                f"{name} id must be in [{band.min_peer_id}, {band.max_peer_id}], got {self.id}"
            )

    @property
    def dialog_id(self) -> int:
        """
        Return flat Bot API dialog id (`chat_id`) of this peer.

        Args:
            None.
        Returns:
            int: Encoded dialog id.
        Assumptions:
            Id was validated in constructor against the same range table.
        Raises:
            InvalidPeerIdError: If range table no longer encodes validated id.
        Side Effects:
            None.
        """
        encoded = encode_peer_id(self.peer_kind, self.id)
        if encoded is None:
            raise InvalidPeerIdError(
                f"{type(self).__name__} id {self.id} cannot be encoded as dialog id"
            )
        return encoded

    def to_peer_ref(self) -> PeerRef:
        return PeerRef(kind=self.peer_kind, id=self.id)

    def __str__(self) -> str:
        return str(self.dialog_id)


@dataclass(frozen=True, slots=True)
class UserId(_PeerDialog):
    """
    UserId — приватный диалог с пользователем.
    """

    peer_kind: ClassVar[PeerKind] = PeerKind.USER


@dataclass(frozen=True, slots=True)
class GroupId(_PeerDialog):
    """
    GroupId — обычная (basic) группа.
    """

    peer_kind: ClassVar[PeerKind] = PeerKind.GROUP


@dataclass(frozen=True, slots=True)
class SupergroupId(_PeerDialog):
    """
    SupergroupId — супергруппа; делит диапазон id с каналами.
    """

    peer_kind: ClassVar[PeerKind] = PeerKind.SUPERGROUP


@dataclass(frozen=True, slots=True)
class ChannelId(_PeerDialog):
    """
    ChannelId — канал; на уровне dialog id неотличим от супергруппы.
    """

    peer_kind: ClassVar[PeerKind] = PeerKind.SUPERGROUP


def peer_dialog_from_ref(ref: PeerRef | None) -> UserId | GroupId | SupergroupId | None:
    """
    Build numeric dialog value object from decoded peer reference.

    Args:
        ref: Decoded peer reference or None.
    Returns:
        UserId | GroupId | SupergroupId | None: Dialog object, or None for
        secret chats, monoforums and missing reference.
    Assumptions:
        Channel and supergroup share one band, supergroup is returned for both.
    Raises:
        None.
    Side Effects:
        None.
    """
    if ref is None:
        return None
    if ref.kind is PeerKind.USER:
        return UserId(ref.id)
    if ref.kind is PeerKind.GROUP:
        return GroupId(ref.id)
    if ref.kind is PeerKind.SUPERGROUP:
        return SupergroupId(ref.id)
    return None
