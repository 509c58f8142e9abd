"""
Static file serving for the bundled frontend.

A local ``public/`` directory is served whenever it exists. In production
with SERVE_FRONTEND enabled the React build is served as well, and unknown
paths fall back to its index.html so client-side routing works.
"""

from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from app.utils.config import Settings


def register_frontend(app: FastAPI, settings: Settings):
    """Attach static file handling after all API routes are registered."""
    public_dir = settings.public_dir if settings.public_dir.is_dir() else None
    if public_dir is not None:
        logger.info(f"Serving static files from {public_dir}")

    if settings.is_production and settings.serve_frontend:
        _register_spa(app, settings.frontend_build_dir, public_dir)
    elif public_dir is not None:
        app.mount("/", StaticFiles(directory=public_dir, html=True), name="public")


def _find_file(directory: Path, relative: str) -> Optional[Path]:
    candidate = (directory / relative).resolve()
    if relative and candidate.is_file() and candidate.is_relative_to(directory):
        return candidate
    return None


def _register_spa(app: FastAPI, build_dir: Path, public_dir: Optional[Path]):
    build_dir = build_dir.resolve()
    index_file = build_dir / "index.html"
    # public/ wins over the build, as it is checked first
    search_dirs = [d.resolve() for d in (public_dir, build_dir) if d is not None]
    logger.info(f"Serving frontend build from {build_dir}")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str):
        for directory in search_dirs:
            found = _find_file(directory, full_path)
            if found is not None:
                return FileResponse(found)
        if not index_file.is_file():
            raise HTTPException(status_code=404, detail="Frontend build not found")
        return FileResponse(index_file)
