"""Conversation session manager.

Owns the transcript, the pending flag and the error slot for one chat
conversation. The presentation layer drives it through ``submit_turn`` and
observes it through ``subscribe``; the completion provider is called in the
background and its outcome lands on one of the two completion callbacks.

State machine:
    Idle (pending=False) --submit_turn--> AwaitingReply (pending=True)
    AwaitingReply --on_completion_succeeded / on_completion_failed--> Idle

The session is driven from a single asyncio loop and is not thread-safe.
It never raises past its own boundary: rejected submissions are returned
as ``RejectReason`` values and failed completions are recorded in
``last_error``.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

from src.models.schemas import (
    CompletionError,
    RejectReason,
    Role,
    SessionSnapshot,
    Turn,
)

logger = logging.getLogger(__name__)

Observer = Callable[[SessionSnapshot], None]


class CompletionProvider(Protocol):
    """Anything that maps a prompt to generated reply text."""

    async def complete(self, prompt: str) -> str: ...


class ConversationSession:
    """Transcript plus a single in-flight completion request.

    At most one completion is outstanding at a time. Submissions made while
    a reply is pending are rejected, not queued. Callbacks arriving while
    nothing is pending are stale and ignored, so the first outcome for a
    request wins.
    """

    def __init__(self, provider: CompletionProvider) -> None:
        """Create an empty session.

        Args:
            provider: Completion provider called once per accepted turn.
        """
        self._provider = provider
        self._transcript: list[Turn] = []
        self._next_sequence = 0
        self._pending = False
        # Sequence of the user turn whose reply is awaited
        self._outstanding: int | None = None
        self._last_error: CompletionError | None = None
        self._observers: list[Observer] = []
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def transcript(self) -> tuple[Turn, ...]:
        return tuple(self._transcript)

    @property
    def pending(self) -> bool:
        return self._pending

    @property
    def last_error(self) -> CompletionError | None:
        return self._last_error

    def snapshot(self) -> SessionSnapshot:
        """Return an immutable view of the current state."""
        return SessionSnapshot(
            transcript=tuple(self._transcript),
            pending=self._pending,
            last_error=self._last_error,
        )

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register a callable notified with a snapshot after every mutation.

        Args:
            observer: Callable receiving the new ``SessionSnapshot``.

        Returns:
            A function that removes the observer. Calling it twice is harmless.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def submit_turn(self, text: str) -> RejectReason | None:
        """Append a user turn and request a reply in the background.

        Must be called from inside a running event loop. Returns without
        waiting for the provider.

        Args:
            text: The user's message. Stored as given, validated trimmed.

        Returns:
            None if the turn was accepted, otherwise the reason it was
            rejected. A rejection leaves the session untouched.

        Raises:
            RuntimeError: If no event loop is running. Raised before any
                state changes.
        """
        if not text or not text.strip():
            logger.debug("Rejected empty submission")
            return RejectReason.EMPTY

        if self._pending:
            logger.debug("Rejected submission while a reply is pending")
            return RejectReason.BUSY

        loop = asyncio.get_running_loop()

        self._last_error = None
        turn = self._append(Role.USER, text)
        self._pending = True
        self._outstanding = turn.sequence
        logger.info(f"Accepted user turn {turn.sequence}, awaiting reply")
        self._notify()

        # Single-turn context: earlier turns are not sent to the provider.
        task = loop.create_task(self._dispatch(turn.sequence, text))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return None

    def on_completion_succeeded(self, reply_text: str) -> None:
        """Record the provider's reply as an assistant turn.

        Ignored when no request is pending. A blank reply cannot become a
        turn and is recorded as a failure instead.
        """
        if not self._pending:
            logger.debug("Ignoring stale completion reply")
            return

        if not reply_text or not reply_text.strip():
            logger.warning("Completion provider returned an empty reply")
            self.on_completion_failed(
                CompletionError(detail="Empty reply from completion provider")
            )
            return

        turn = self._append(Role.ASSISTANT, reply_text)
        self._pending = False
        self._outstanding = None
        logger.info(f"Recorded assistant turn {turn.sequence}")
        self._notify()

    def on_completion_failed(self, error: CompletionError) -> None:
        """Record a failed completion without appending a turn.

        Ignored when no request is pending.
        """
        if not self._pending:
            logger.debug("Ignoring stale completion failure")
            return

        self._last_error = error
        self._pending = False
        self._outstanding = None
        self._notify()

    async def wait_idle(self) -> None:
        """Wait until every dispatched provider call has finished.

        No timeout is applied: a provider that never answers blocks forever.
        """
        while self._tasks:
            await asyncio.wait(set(self._tasks))

    async def _dispatch(self, request_id: int, prompt: str) -> None:
        try:
            reply = await self._provider.complete(prompt)
        except Exception as e:
            if self._outstanding != request_id:
                logger.debug(f"Ignoring failure for settled request {request_id}")
                return
            logger.error(f"Completion request failed: {e}")
            self.on_completion_failed(CompletionError.from_exception(e))
            return

        if self._outstanding != request_id:
            logger.debug(f"Ignoring reply for settled request {request_id}")
            return
        self.on_completion_succeeded(reply)

    def _append(self, role: Role, text: str) -> Turn:
        turn = Turn(text=text, role=role, sequence=self._next_sequence)
        self._next_sequence += 1
        self._transcript.append(turn)
        return turn

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for observer in list(self._observers):
            try:
                observer(snapshot)
            except Exception:
                logger.exception("Session observer raised while handling a change")
