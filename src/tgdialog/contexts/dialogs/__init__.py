from .application import dialog_from_chat_id, dialog_send_params
from .domain import (
    ChannelDm,
    ChannelId,
    Dialog,
    ForumTopic,
    GroupId,
    PrivateThread,
    PublicChannel,
    PublicSupergroup,
    SupergroupId,
    UserId,
    decode_dialog_id,
    decode_peer_id,
    encode_peer_id,
)

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
    "decode_dialog_id",
    "decode_peer_id",
    "dialog_from_chat_id",
    "dialog_send_params",
    "encode_peer_id",
]
