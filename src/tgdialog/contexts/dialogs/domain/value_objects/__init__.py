from typing import Union

from .peer_dialogs import ChannelId, GroupId, SupergroupId, UserId, peer_dialog_from_ref
from .public_dialogs import PublicChannel, PublicSupergroup
from .thread_dialogs import ChannelDm, ForumTopic, PrivateThread
from .username import validate_username

Dialog = Union[
    UserId,
    GroupId,
    ChannelId,
    SupergroupId,
    PublicChannel,
    PublicSupergroup,
    ForumTopic,
    ChannelDm,
    PrivateThread,
]

__all__ = [
    "ChannelDm",
    "ChannelId",
    "Dialog",
    "ForumTopic",
    "GroupId",
    "PrivateThread",
    "PublicChannel",
    "PublicSupergroup",
    "SupergroupId",
    "UserId",
    "peer_dialog_from_ref",
    "validate_username",
]
