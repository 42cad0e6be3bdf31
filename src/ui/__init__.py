"""NiceGUI interface - thin visualization layer for the chat.

Responsibilities:
    - Message bubbles for user and assistant turns
    - Typing indicator while a reply is pending
    - Error banner for failed completions

Contains no conversation logic. Observes a ConversationSession and calls
submit_turn on user action.
"""
