from __future__ import annotations

from dataclasses import dataclass

from .username import validate_username


@dataclass(frozen=True, slots=True)
class _PublicDialog:
    username: str

    def __post_init__(self) -> None:
        # Храним без "@", добавляем его только при сериализации в chat_id.
        object.__setattr__(self, "username", validate_username(self.username))

    @property
    def chat_id(self) -> str:
        return f"@{self.username}"

    def __str__(self) -> str:
        return self.chat_id


@dataclass(frozen=True, slots=True)
class PublicChannel(_PublicDialog):
    """
    PublicChannel — публичный канал, адресуемый по username.
    """


@dataclass(frozen=True, slots=True)
class PublicSupergroup(_PublicDialog):
    """
    PublicSupergroup — публичная супергруппа, адресуемая по username.
    """
