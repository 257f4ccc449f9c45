from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class Role(StrEnum):
    SYSTEM = "system"
    USER = "user"


@dataclass(frozen=True)
class PromptMessage:
    """A single chat message sent to the completion provider."""

    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role.value, "content": self.content}


Prompt: TypeAlias = tuple[PromptMessage, PromptMessage]
