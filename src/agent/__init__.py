"""Agno agent logic for reply generation.

Responsibilities:
    - Agent initialization with Gemini or OpenAI-compatible models
    - Single-turn completion requests for the conversation session

Maintains clean separation from the session and UI layers.
"""

from src.agent.chat_agent import AgentService, get_agent_service
from src.agent.config import AgentConfig, get_agent_config

__all__ = ["AgentConfig", "AgentService", "get_agent_config", "get_agent_service"]
