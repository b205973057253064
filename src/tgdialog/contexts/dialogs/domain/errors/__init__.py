from .dialog_errors import DialogDomainError, InvalidPeerIdError, InvalidUsernameError

__all__ = [
    "DialogDomainError",
    "InvalidPeerIdError",
    "InvalidUsernameError",
]
