from __future__ import annotations

from dataclasses import dataclass

from tgdialog.shared_kernel.primitives import is_safe_integer

from .peer_dialogs import ChannelId, SupergroupId, UserId
from .public_dialogs import PublicChannel, PublicSupergroup


@dataclass(frozen=True, slots=True)
class ForumTopic:
    """
    ForumTopic — тема форума внутри супергруппы.

    Related:
      - src/tgdialog/contexts/dialogs/application/services/dialog_send_params.py
    """

    forum: SupergroupId | PublicSupergroup
    topic_id: int

    def __post_init__(self) -> None:
        """
        Validate forum container and topic identifier.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Forum topics exist only in supergroups (by id or by username).
        Raises:
            TypeError: If forum has wrong type or topic id is not a safe integer.
            ValueError: If topic id is not positive.
        Side Effects:
            Normalizes integral float topic id to `int`.
        """
        if not isinstance(self.forum, (SupergroupId, PublicSupergroup)):
            raise TypeError(
                f"ForumTopic.forum must be SupergroupId or PublicSupergroup, got {self.forum!r}"
            )
        object.__setattr__(
            self,
            "topic_id",
            _positive_id(self.topic_id, field="ForumTopic.topic_id"),
        )


@dataclass(frozen=True, slots=True)
class ChannelDm:
    """
    ChannelDm — личная переписка пользователя с каналом (direct messages topic).

    Related:
      - src/tgdialog/contexts/dialogs/application/services/dialog_send_params.py
    """

    channel: ChannelId | PublicChannel
    user_id: int

    def __post_init__(self) -> None:
        """
        Validate channel container and direct messages topic (user) identifier.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Direct messages topic id equals id of the user writing to the channel.
        Raises:
            TypeError: If channel has wrong type or user id is not a safe integer.
            ValueError: If user id is not positive.
        Side Effects:
            Normalizes integral float user id to `int`.
        """
        if not isinstance(self.channel, (ChannelId, PublicChannel)):
            raise TypeError(
                f"ChannelDm.channel must be ChannelId or PublicChannel, got {self.channel!r}"
            )
        object.__setattr__(
            self,
            "user_id",
            _positive_id(self.user_id, field="ChannelDm.user_id"),
        )


@dataclass(frozen=True, slots=True)
class PrivateThread:
    """
    PrivateThread — тред внутри приватного чата с пользователем.
    """

    user: UserId
    thread_id: int

    def __post_init__(self) -> None:
        if not isinstance(self.user, UserId):
            raise TypeError(f"PrivateThread.user must be UserId, got {self.user!r}")
        object.__setattr__(
            self,
            "thread_id",
            _positive_id(self.thread_id, field="PrivateThread.thread_id"),
        )


def _positive_id(value: object, *, field: str) -> int:
    """
    Validate nested positive identifier.

    Args:
        value: Raw identifier value.
        field: Field name for diagnostics.
    Returns:
        int: Exact positive integer.
    Assumptions:
        Nested ids travel as JSON numbers as well.
    Raises:
        TypeError: If value is not a safe integer.
        ValueError: If value is not positive.
    Side Effects:
        None.
    """
    if not is_safe_integer(value):
        raise TypeError(f"{field} must be a safe integer, got {value!r}")
    exact = int(value)  # type: ignore[call-overload]
    if exact <= 0:
        raise ValueError(f"{field} must be > 0, got {exact}")
    return exact
