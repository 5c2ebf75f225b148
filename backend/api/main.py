"""
Persona Relay FastAPI Application.

This module wires the REST API for the relay. All completion logic lives in
backend.llm_router; route modules only shape requests and responses.

Endpoints:
- POST /api/health, /api/agriculture, /api/finance, /api/general - Persona chat
- GET /api/status - Service status
- GET /* - Bundled front-end (when a build directory exists)
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.llm_router import CompletionRouter
from configs import Settings, VERSION, load_settings

from .deps import logger
from .routers import frontend, personas, system


# ============================================================
# APP FACTORY
# ============================================================

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI app for a settings snapshot.

    The completion router (and with it the backend choice) is built once here
    from these settings, kept on app.state and shared by every request.
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        completion_router = app.state.completion_router
        logger.info(
            "Persona Relay API started. Backend: %s, port %d",
            completion_router.backend.value, settings.port,
        )
        yield
        logger.info("Persona Relay API shutting down.")

    app = FastAPI(
        title="Persona Relay API",
        description="Fixed-persona chat relay over Hugging Face or OpenAI",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.completion_router = CompletionRouter.from_settings(settings)

    allowed_origins = list(settings.allowed_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=allowed_origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(personas.router)
    app.include_router(system.router)
    # Must stay last: it matches every GET path
    app.include_router(frontend.create_frontend_router(settings.static_dir))

    return app


app = create_app()


# ============================================================
# RUN DIRECTLY (for development)
# ============================================================

if __name__ == "__main__":
    import uvicorn
    run_settings = load_settings()
    uvicorn.run(app, host=run_settings.host, port=run_settings.port)
