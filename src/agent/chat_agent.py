"""Agno agent service that answers chat turns.

Implements the completion provider consumed by the conversation session:
one prompt in, one reply out.

Notes:

1. **No storage** - The agent is built without a db, so agno keeps no
   history between runs and every request is single-turn. The session sends
   only the latest user text.

2. **Singleton Pattern** - Building the model client is not free, so one
   service instance is shared across all page visits.

3. **Errors propagate** - ``complete`` does not turn failures into reply
   text. The session records them as a ``CompletionError`` and shows the
   error banner instead of a message bubble.
"""

import logging

from agno.agent import Agent
from agno.models.base import Model
from agno.models.google import Gemini
from agno.models.openai import OpenAIChat

from src.agent.config import AgentConfig, get_agent_config

logger = logging.getLogger(__name__)


class AgentService:
    """Completion provider backed by an agno Agent.

    Wraps agno's Agent with:
    - Gemini or OpenAI-compatible model selection from config
    - Stateless single-turn requests
    - Singleton lifecycle management
    """

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the agent service.

        Args:
            config: Optional agent configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_agent_config()
        self._agent = self._create_agent()

    def _create_model(self) -> Model:
        """Create the vendor model selected by ``config.provider``."""
        if self._config.provider == "openai":
            return OpenAIChat(
                id=self._config.model_name,
                api_key=self._config.api_key,
                base_url=self._config.base_url,
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens,
            )

        return Gemini(
            id=self._config.model_name,
            api_key=self._config.api_key,
            temperature=self._config.temperature,
            max_output_tokens=self._config.max_tokens,
        )

    def _create_agent(self) -> Agent:
        """Create the agno agent instance.

        Returns:
            Configured Agent without storage, so runs share no history.
        """
        model = self._create_model()
        logger.info(
            f"Using {self._config.provider} model {self._config.model_name}"
        )

        return Agent(
            model=model,
            description="A helpful AI chat assistant.",
            instructions=[
                "Provide helpful and accurate responses.",
                "Be concise yet thorough.",
            ],
            # Replies are shown as plain text in the chat bubbles
            markdown=False,
        )

    async def complete(self, prompt: str) -> str:
        """Get the complete reply for a single prompt.

        Args:
            prompt: The user's message.

        Returns:
            Reply text, empty if the model produced no content.

        Raises:
            Exception: Whatever the model client raises; callers record it.
        """
        response = await self._agent.arun(prompt)
        return response.content or ""


# Module-level singleton instance
_agent_service: AgentService | None = None


def get_agent_service() -> AgentService:
    """Get or create the global agent service.

    Returns:
        The AgentService instance.
    """
    global _agent_service
    if _agent_service is None:
        _agent_service = AgentService()
    return _agent_service
