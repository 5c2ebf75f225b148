"""
Shared dependencies for the Persona Relay API.

Provides:
- Structured logging
- The completion router dependency (one router per app)
"""

import logging

from fastapi import Request

from backend.llm_router import CompletionRouter
from configs import LOG_LEVEL


# =============================================================================
# STRUCTURED LOGGING
# =============================================================================

def setup_logging() -> logging.Logger:
    """Configure structured logging for the API."""
    logger = logging.getLogger("personarelay")

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    return logger


logger = setup_logging()


# =============================================================================
# ROUTER DEPENDENCY
# =============================================================================

def get_router(request: Request) -> CompletionRouter:
    """
    FastAPI dependency returning the router owned by the serving app.

    Each app builds its router from its own Settings in create_app, so two
    apps in one process never share a backend choice.
    """
    return request.app.state.completion_router
