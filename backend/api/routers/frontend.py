"""
Front-end router — serves the bundled single-page app.

Any GET that no API route claims returns the matching file from the build
directory, or index.html so client-side routing can take over.
"""

from pathlib import Path
from typing import Union

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse


def create_frontend_router(static_dir: Union[str, Path]) -> APIRouter:
    """Build a catch-all router bound to one build directory."""
    root = Path(static_dir).resolve()
    router = APIRouter(tags=["Frontend"], include_in_schema=False)

    @router.get("/{full_path:path}")
    async def serve_frontend(full_path: str):
        # Unknown API paths must not fall through to the SPA
        if full_path == "api" or full_path.startswith("api/"):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

        index = root / "index.html"
        if not index.is_file():
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Front-end build not found",
            )

        if full_path:
            candidate = (root / full_path).resolve()
            if candidate != root and root not in candidate.parents:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
            if candidate.is_file():
                return FileResponse(candidate)

        return FileResponse(index)

    return router
