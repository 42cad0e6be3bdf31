"""AI Chat Assistant - single-page chat widget over a generative language model.

Combines NiceGUI for the page, agno for model access, FastAPI for hosting,
and Pydantic for immutable conversation state.

Components:
    - session: Conversation session manager (transcript, pending flag, errors)
    - agent: Completion provider backed by an agno agent
    - models: Turn and snapshot schemas
    - ui: Chat page observing a session
    - api: HTTP host and health endpoint
"""

__version__ = "0.1.0"
