"""
LLM Router module.

Handles backend selection and chat completion.
Supports Hugging Face (preferred when HF_API_TOKEN is set) and OpenAI.
"""

from .llm_client import (
    Backend,
    BackendError,
    ChatTurn,
    CompletionResult,
    Failure,
    HuggingFaceClient,
    LLMClient,
    LLMError,
    OpenAIClient,
    Success,
    build_turns,
    create_llm_client,
    select_backend,
)
from .router import CompletionRouter

__all__ = [
    "Backend",
    "BackendError",
    "ChatTurn",
    "CompletionResult",
    "CompletionRouter",
    "Failure",
    "HuggingFaceClient",
    "LLMClient",
    "LLMError",
    "OpenAIClient",
    "Success",
    "build_turns",
    "create_llm_client",
    "select_backend",
]
