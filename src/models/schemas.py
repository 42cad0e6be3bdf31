from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ERROR_MESSAGE = "Failed to send message. Please try again later."


class Role(str, Enum):
    """Author of a turn."""

    USER = "user"
    ASSISTANT = "assistant"


class RejectReason(str, Enum):
    """Why a submission was refused without touching session state."""

    EMPTY = "empty"
    BUSY = "busy"


class Turn(BaseModel):
    """One authored message in the conversation.

    Attributes:
        text: Message content, never empty.
        role: Who wrote it.
        sequence: Position assigned at append time, strictly increasing.
        created_at: Local time the turn was appended.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1)
    role: Role
    sequence: int = Field(..., ge=0)
    created_at: datetime = Field(default_factory=datetime.now)


class CompletionError(BaseModel):
    """Error descriptor recorded when a completion request fails.

    Attributes:
        message: Text shown to the user.
        detail: Diagnostic information, e.g. the provider exception text.
    """

    model_config = ConfigDict(frozen=True)

    message: str = DEFAULT_ERROR_MESSAGE
    detail: str | None = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "CompletionError":
        """Build a descriptor carrying the exception type and text."""
        return cls(detail=f"{type(exc).__name__}: {exc}")


class SessionSnapshot(BaseModel):
    """Point-in-time, read-only view of a conversation session."""

    model_config = ConfigDict(frozen=True)

    transcript: tuple[Turn, ...] = ()
    pending: bool = False
    last_error: CompletionError | None = None
