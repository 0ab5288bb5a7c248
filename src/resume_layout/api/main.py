"""FastAPI application for storing resumes and exporting them as PDFs.

Run with ``resume-layout-api``. ``RESUME_LAYOUT_HOST`` and
``RESUME_LAYOUT_PORT`` choose the bind address (default ``127.0.0.1:8000``).
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_layout import __version__
from resume_layout.api.routes import health, resumes, templates
from resume_layout.data.db import dispose_db, init_db

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the resume tables on startup and release the pool on shutdown."""
    init_db()
    yield
    dispose_db()


app = FastAPI(
    title="Resume Layout API",
    description="Store resume records and export them as paginated PDF documents",
    version=__version__,
    lifespan=lifespan,
)

# Browsers only expose the download name when it is listed here
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

app.include_router(health.router)
for router in (templates.router, resumes.router):
    app.include_router(router, prefix="/api")


def main() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        app,
        host=os.getenv("RESUME_LAYOUT_HOST", "127.0.0.1"),
        port=int(os.getenv("RESUME_LAYOUT_PORT", "8000")),
    )


if __name__ == "__main__":
    main()
