"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - provider: Completion provider whose replies are resolved by the test
    - session: ConversationSession wired to that provider
    - async_client: HTTPX client for API testing
"""

import asyncio
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.api import app
from src.session.conversation import ConversationSession


class ScriptedProvider:
    """Completion provider that blocks until the test answers.

    Each ``complete`` call parks on a future. ``reply``, ``fail`` and
    ``cancel`` resolve the oldest outstanding request.
    """

    def __init__(self) -> None:
        self.prompts: list[str] = []
        self._waiting: list[asyncio.Future[str]] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        future: asyncio.Future[str] = asyncio.get_running_loop().create_future()
        self._waiting.append(future)
        return await future

    async def reply(self, text: str) -> None:
        (await self._next_request()).set_result(text)

    async def fail(self, exc: Exception) -> None:
        (await self._next_request()).set_exception(exc)

    async def cancel(self) -> None:
        (await self._next_request()).cancel()

    async def _next_request(self) -> asyncio.Future[str]:
        # The dispatch task only reaches the provider once the loop runs it
        while not self._waiting:
            await asyncio.sleep(0)
        return self._waiting.pop(0)


@pytest.fixture
def provider() -> ScriptedProvider:
    """Return a provider whose replies are scripted by the test."""
    return ScriptedProvider()


@pytest.fixture
def session(provider: ScriptedProvider) -> ConversationSession:
    """Return an empty session wired to the scripted provider."""
    return ConversationSession(provider)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
