from __future__ import annotations

from typing import Any

from tgdialog.contexts.dialogs.domain import (
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
    peer_dialog_from_ref,
)

ChatId = int | str


def dialog_send_params(dialog: Dialog) -> dict[str, ChatId]:
    """
    Map dialog value object to Bot API dialog-addressing fields of `send*` methods.

    Args:
        dialog: Target dialog.
    Returns:
        dict[str, int | str]: `chat_id` plus optional `message_thread_id` or
        `direct_messages_topic_id`.
    Assumptions:
        Public chats are addressed by `@username`, numeric peers by dialog id.
    Raises:
        TypeError: If object is not one of known dialog types.
    Side Effects:
        None.
    """
    if isinstance(dialog, ForumTopic):
        return {
            "chat_id": _chat_id(dialog.forum),
            "message_thread_id": dialog.topic_id,
        }
    if isinstance(dialog, ChannelDm):
        return {
            "chat_id": _chat_id(dialog.channel),
            "direct_messages_topic_id": dialog.user_id,
        }
    if isinstance(dialog, PrivateThread):
        return {
            "chat_id": _chat_id(dialog.user),
            "message_thread_id": dialog.thread_id,
        }
    return {"chat_id": _chat_id(dialog)}


def dialog_from_chat_id(chat_id: Any) -> UserId | GroupId | SupergroupId | None:
    """
    Parse numeric `chat_id` from incoming payload into dialog value object.

    Args:
        chat_id: Raw `chat_id` value.
    Returns:
        UserId | GroupId | SupergroupId | None: Dialog, or None when value is not
        a numeric dialog id of a user, group or supergroup/channel.
    Assumptions:
        Channels decode as `SupergroupId`, both share one dialog id band.
    Raises:
        None.
    Side Effects:
        None.
    """
    return peer_dialog_from_ref(decode_dialog_id(chat_id))


def _chat_id(dialog: object) -> ChatId:
    if isinstance(dialog, (UserId, GroupId, ChannelId, SupergroupId)):
        return dialog.dialog_id
    if isinstance(dialog, (PublicChannel, PublicSupergroup)):
        return dialog.chat_id
    raise TypeError(f"unsupported dialog type: {type(dialog).__name__}")
