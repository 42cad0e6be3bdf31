"""Pydantic models for conversation state.

Immutable values handed out by the session manager, so observers can
never mutate the state they are shown.

Models:
    - Turn: One authored message with its role and sequence number
    - CompletionError: Descriptor of a failed completion request
    - SessionSnapshot: Read-only view of transcript, pending flag and error
"""

from src.models.schemas import (
    DEFAULT_ERROR_MESSAGE,
    CompletionError,
    RejectReason,
    Role,
    SessionSnapshot,
    Turn,
)

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "CompletionError",
    "RejectReason",
    "Role",
    "SessionSnapshot",
    "Turn",
]
