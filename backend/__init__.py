"""
Persona Relay Backend Package

This package contains the relay service:
- llm_router: Backend selection, LLM clients and the completion router
- api: FastAPI application exposing the persona endpoints
- main: CLI entry point (serve or ask a single question)
"""

from backend.llm_router import (
    Backend,
    ChatTurn,
    CompletionRouter,
    Failure,
    Success,
)

__all__ = [
    "Backend",
    "ChatTurn",
    "CompletionRouter",
    "Failure",
    "Success",
]
