from __future__ import annotations

import re

from tgdialog.contexts.dialogs.domain.errors import InvalidUsernameError

_MIN_LENGTH = 4
_MAX_LENGTH = 32
_WORD_CHARS = re.compile(r"[A-Za-z0-9_]+")


def validate_username(raw_value: str) -> str:
    """
    Validate public Telegram username and return it without leading `@`.

    Args:
        raw_value: Username, optionally prefixed with `@`.
    Returns:
        str: Normalized username without `@`.
    Assumptions:
        Rules are checked in fixed order, first violation wins.
    Raises:
        InvalidUsernameError: If username violates one of Telegram rules.
    Side Effects:
        None.
    """
    if not isinstance(raw_value, str):
        raise InvalidUsernameError(repr(raw_value), reason="must be a string")
    username = raw_value.strip()
    if username.startswith("@"):
        username = username[1:]

    if len(username) < _MIN_LENGTH:
        raise InvalidUsernameError(raw_value, reason="too short")
    if len(username) > _MAX_LENGTH:
        raise InvalidUsernameError(raw_value, reason="too long")
    if not _WORD_CHARS.fullmatch(username):
        raise InvalidUsernameError(
            raw_value,
            reason="can only contain letters, digits, and underscore",
        )
    if username.startswith("_"):
        raise InvalidUsernameError(raw_value, reason="cannot start with an underscore")
    if username[0].isdigit():
        raise InvalidUsernameError(raw_value, reason="cannot start with a digit")
    if username.endswith("_"):
        raise InvalidUsernameError(raw_value, reason="cannot end with an underscore")
    if "__" in username:
        raise InvalidUsernameError(raw_value, reason="cannot contain consecutive underscores")
    return username
