from __future__ import annotations


class DialogDomainError(ValueError):
    """
    Base deterministic domain error for dialogs bounded context.

    Related:
      - src/tgdialog/contexts/dialogs/domain/value_objects/
      - src/tgdialog/contexts/dialogs/adapters/outbound/telegram/bot_api_errors.py
    """


class InvalidPeerIdError(DialogDomainError):
    """
    Raised when numeric peer id is outside the id domain of its peer kind.

    Related:
      - src/tgdialog/contexts/dialogs/domain/value_objects/peer_dialogs.py
      - src/tgdialog/contexts/dialogs/domain/services/dialog_id_ranges.py
    """


class InvalidUsernameError(DialogDomainError):
    """
    Raised when public chat username violates Telegram username rules.

    Related:
      - src/tgdialog/contexts/dialogs/domain/value_objects/username.py
      - src/tgdialog/contexts/dialogs/domain/value_objects/public_dialogs.py
    """

    def __init__(self, username: str, *, reason: str) -> None:
        """
        Build username error with machine-readable reason.

        Args:
            username: Rejected raw username.
            reason: Short rule violation description, e.g. `too short`.
        Returns:
            None.
        Assumptions:
            Reason is one of fixed messages emitted by `validate_username`.
        Raises:
            None.
        Side Effects:
            None.
        """
        super().__init__(f"invalid Telegram username {username!r}: {reason}")
        self.username = username
        self.reason = reason
