"""
Completion Router.

Sends chat turns to the backend chosen at construction time and returns a
Success or Failure instead of raising. There is no retry and no fallback to
the other backend: a failed call is final for that request.
"""

import logging
from typing import Optional, Sequence

from configs import Settings, load_settings

from .llm_client import (
    Backend,
    BackendError,
    ChatTurn,
    CompletionResult,
    Failure,
    LLMClient,
    Success,
    create_llm_client,
    select_backend,
)


logger = logging.getLogger("personarelay.router")


class CompletionRouter:
    """
    Stateless front for a single LLMClient.

    Safe to share across threads: the client and backend are fixed when the
    router is built and nothing is written afterwards.
    """

    def __init__(self, client: LLMClient):
        self._client = client

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "CompletionRouter":
        """Select the backend once from the settings and build its client."""
        settings = settings or load_settings()
        backend = select_backend(settings)
        client = create_llm_client(backend, settings)
        logger.info("Completion backend selected: %s (%s)", backend.value, client.model)
        return cls(client)

    @property
    def backend(self) -> Backend:
        return self._client.backend

    @property
    def client(self) -> LLMClient:
        return self._client

    def complete(self, turns: Sequence[ChatTurn]) -> CompletionResult:
        """
        Generate one reply for an ordered sequence of chat turns.

        Never raises: every downstream error becomes
        Failure(kind="BackendError", message=...).
        """
        if not turns:
            return Failure(kind=BackendError.KIND, message="no chat turns supplied")

        try:
            text = self._client.generate(turns)
        except Exception as e:  # noqa: BLE001
            logger.error("%s error: %s", self.backend.value, e)
            return Failure(kind=BackendError.KIND, message=str(e))

        return Success(text=text)
