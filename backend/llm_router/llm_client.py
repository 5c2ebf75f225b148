"""
LLM Client Abstraction for the two chat-completion backends.

PURPOSE:
========
Provides one interface ("generate one completion from ordered chat turns")
with two interchangeable implementations, both going through LiteLLM:

- HuggingFaceClient: Hugging Face Inference (DeepSeek-V3 by default)
- OpenAIClient: OpenAI chat completions (gpt-3.5-turbo by default)

Clients raise BackendError on any failure. Turning errors into results is
the router's job (see router.py).
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Sequence, Union

from litellm import completion

from configs import Settings


logger = logging.getLogger("personarelay.llm")


# ============================================================
# DATA MODELS
# ============================================================

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatTurn:
    """One message of a conversation."""
    role: Role
    content: str

    def to_message(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class Success:
    """Generated reply text."""
    text: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Classified failure of a completion request."""
    kind: str
    message: str

    @property
    def ok(self) -> bool:
        return False


CompletionResult = Union[Success, Failure]


class Backend(str, Enum):
    """The two supported text-generation backends."""
    HUGGINGFACE = "huggingface"
    OPENAI = "openai"


class LLMError(Exception):
    """Base exception for LLM errors."""
    pass


class BackendError(LLMError):
    """Raised for any failure of the downstream completion call."""
    KIND = "BackendError"


# ============================================================
# ABSTRACT LLM CLIENT
# ============================================================

class LLMClient(ABC):
    """
    Abstract base class for chat-completion backends.

    Subclasses only declare which backend they are and which LiteLLM model
    string and API key to use; the request shape is shared.
    """

    backend: Backend
    label: str

    def __init__(self, model: str, api_key: Optional[str] = None, timeout: int = 60):
        self.model = model
        self.api_key = api_key
        self.timeout = timeout

    @property
    @abstractmethod
    def litellm_model(self) -> str:
        """Model identifier in LiteLLM's provider/model form."""
        pass

    def generate(self, turns: Sequence[ChatTurn]) -> str:
        """
        Request exactly one completion for the given turns.

        Args:
            turns: Ordered chat turns, forwarded unmodified

        Returns:
            Text content of the first returned choice

        Raises:
            BackendError: On SDK errors or a response without text
        """
        messages = [turn.to_message() for turn in turns]
        try:
            response = completion(
                model=self.litellm_model,
                messages=messages,
                api_key=self.api_key,
                n=1,
                stream=False,
                timeout=self.timeout,
            )
        except Exception as e:
            raise BackendError(f"{self.label} Error: {e}") from e

        return self._extract_text(response)

    def _extract_text(self, response: Any) -> str:
        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise BackendError(f"{self.label} Error: malformed response ({e})") from e

        if not isinstance(content, str) or not content:
            raise BackendError(f"{self.label} Error: response contained no text")
        return content

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.model!r})"


# ============================================================
# HUGGING FACE CLIENT
# ============================================================

class HuggingFaceClient(LLMClient):
    """Hugging Face Inference provider (backend A)."""

    backend = Backend.HUGGINGFACE
    label = "HF"

    def __init__(self, model: str = "deepseek-ai/DeepSeek-V3", api_key: Optional[str] = None, timeout: int = 60):
        super().__init__(model, api_key, timeout)

    @property
    def litellm_model(self) -> str:
        return f"huggingface/{self.model}"


# ============================================================
# OPENAI CLIENT
# ============================================================

class OpenAIClient(LLMClient):
    """OpenAI chat completions provider (backend B)."""

    backend = Backend.OPENAI
    label = "OpenAI"

    def __init__(self, model: str = "gpt-3.5-turbo", api_key: Optional[str] = None, timeout: int = 60):
        super().__init__(model, api_key, timeout)

    @property
    def litellm_model(self) -> str:
        return self.model


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================

def select_backend(settings: Settings) -> Backend:
    """
    Pick the backend for this process.

    A configured Hugging Face token always wins; OpenAI is used otherwise,
    even when both credentials are present.
    """
    if settings.hf_api_token:
        return Backend.HUGGINGFACE
    return Backend.OPENAI


def create_llm_client(backend: Backend, settings: Settings) -> LLMClient:
    """Build the client for a backend from the settings snapshot."""
    if backend == Backend.HUGGINGFACE:
        return HuggingFaceClient(
            model=settings.hf_model,
            api_key=settings.hf_api_token,
            timeout=settings.request_timeout_seconds,
        )
    if backend == Backend.OPENAI:
        if not settings.openai_api_key:
            logger.warning("OPENAI_API_KEY is not set; OpenAI requests will fail until it is configured")
        return OpenAIClient(
            model=settings.openai_model,
            api_key=settings.openai_api_key,
            timeout=settings.request_timeout_seconds,
        )
    raise LLMError(f"Unknown LLM backend: {backend}")


def build_turns(system_prompt: str, user_content: str) -> List[ChatTurn]:
    """Two-turn conversation: system instruction, then the user's text."""
    return [
        ChatTurn(role="system", content=system_prompt),
        ChatTurn(role="user", content=user_content),
    ]
