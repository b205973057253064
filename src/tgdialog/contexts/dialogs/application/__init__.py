from .services import ChatId, dialog_from_chat_id, dialog_send_params

__all__ = [
    "ChatId",
    "dialog_from_chat_id",
    "dialog_send_params",
]
