"""Conversation session management.

Keeps the chat state out of the UI framework: an explicit object owns the
transcript and the single in-flight completion request, and any renderer
observes it through change notifications.

Responsibilities:
    - Ordered, append-only transcript of user and assistant turns
    - Single pending-request guard (busy submissions are rejected)
    - Error slot for failed completions, cleared on the next submission
    - Snapshot notifications for observers
"""

from src.session.conversation import CompletionProvider, ConversationSession, Observer

__all__ = ["CompletionProvider", "ConversationSession", "Observer"]
