"""
Conftest for Persona Relay tests.

Ensures the project root is on sys.path so that 'backend' and 'configs'
resolve without installation, and provides stub backends so no test ever
reaches a real LLM provider.
"""

import sys
import threading
from pathlib import Path
from typing import List, Sequence

import pytest

# Add project root to sys.path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from backend.llm_router import Backend, BackendError, ChatTurn, LLMClient  # noqa: E402


class EchoClient(LLMClient):
    """Returns a fixed reply and records every conversation it receives."""

    backend = Backend.OPENAI
    label = "Echo"

    def __init__(self, reply: str = "Hi there"):
        super().__init__(model="echo-model")
        self.reply = reply
        self.calls: List[List[ChatTurn]] = []
        self._lock = threading.Lock()

    @property
    def litellm_model(self) -> str:
        return self.model

    def generate(self, turns: Sequence[ChatTurn]) -> str:
        with self._lock:
            self.calls.append(list(turns))
        return self.reply


class FailingClient(LLMClient):
    """Raises the given exception on every call."""

    backend = Backend.HUGGINGFACE
    label = "Failing"

    def __init__(self, error: Exception = None):
        super().__init__(model="failing-model")
        self.error = error or BackendError("401 Unauthorized: invalid API token")

    @property
    def litellm_model(self) -> str:
        return self.model

    def generate(self, turns: Sequence[ChatTurn]) -> str:
        raise self.error


@pytest.fixture
def echo_client():
    return EchoClient()


@pytest.fixture
def failing_client():
    return FailingClient()


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Start every test without provider credentials."""
    for key in ("HF_API_TOKEN", "OPENAI_API_KEY", "HOST", "PORT", "REQUEST_TIMEOUT_SECONDS", "ALLOWED_ORIGINS"):
        monkeypatch.delenv(key, raising=False)
    yield
