from .errors import DialogDomainError, InvalidPeerIdError, InvalidUsernameError
from .services import (
    DIALOG_ID_BANDS,
    DIALOG_ID_HOLES,
    DialogIdBand,
    decode_dialog_id,
    decode_peer_id,
    encode_peer_id,
)
from .value_objects import (
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
    peer_dialog_from_ref,
    validate_username,
)

__all__ = [
    "ChannelDm",
    "ChannelId",
    "DIALOG_ID_BANDS",
    "DIALOG_ID_HOLES",
    "Dialog",
    "DialogDomainError",
    "DialogIdBand",
    "ForumTopic",
    "GroupId",
    "InvalidPeerIdError",
    "InvalidUsernameError",
    "PrivateThread",
    "PublicChannel",
    "PublicSupergroup",
    "SupergroupId",
    "UserId",
    "decode_dialog_id",
    "decode_peer_id",
    "encode_peer_id",
    "peer_dialog_from_ref",
    "validate_username",
]
