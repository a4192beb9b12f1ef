"""
Task Management Frontend - Application Entry Point

Server-rendered HTML pages for a remote task-management REST API.
It follows the MVC (Model-View-Controller) pattern.

Architecture Overview:
=====================
- Models (task_frontend/models/): Pydantic schemas for tasks and forms
- Views (task_frontend/views/): Jinja2 templates and template filters
- Controllers (task_frontend/controllers/): FastAPI routers for the pages
- Services (task_frontend/services/): httpx client for the task API

The frontend stores nothing. Every page fetches what it shows from the
task API, and every form is forwarded to it.

Request Flow:
============
1. Request arrives at a Controller endpoint
2. Controller calls the task API client (Service)
3. Controller picks a template and context, or a redirect
4. Jinja2 renders the HTML response

Collaborators:
=============
create_app() receives the settings, the task API client and the
templates explicitly and keeps them on app.state. Tests pass their own
task API implementation; production builds the httpx client from
settings and closes it on shutdown.
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from task_frontend import __version__
from task_frontend.config import Settings, get_settings
from task_frontend.controllers import tasks_router
from task_frontend.services import TaskAPIBase, TaskAPIClient
from task_frontend.views import create_templates

logger = logging.getLogger(__name__)

static_path = os.path.join(os.path.dirname(__file__), "static")


def create_app(
    settings: Optional[Settings] = None,
    task_api: Optional[TaskAPIBase] = None,
    templates: Optional[Jinja2Templates] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings (defaults to environment settings)
        task_api: Task API collaborator (defaults to TaskAPIClient)
        templates: Jinja2 templates (defaults to create_templates(settings))
    """
    settings = settings or get_settings()
    owns_task_api = task_api is None
    task_api = task_api or TaskAPIClient(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Task API at {settings.api_base_url}")
        yield
        # Only close a client this factory created
        if owns_task_api:
            await task_api.aclose()

    app = FastAPI(
        title=settings.app_title,
        version=__version__,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.task_api = task_api
    app.state.templates = templates or create_templates(settings)

    app.include_router(tasks_router)   # /tasks pages

    if os.path.exists(static_path):
        app.mount("/static", StaticFiles(directory=static_path), name="static")

    @app.get("/", include_in_schema=False)
    def root():
        """The task list is the home page."""
        return RedirectResponse("/tasks", status_code=302)

    @app.get("/health", tags=["health"])
    def health_check():
        """
        Basic health check endpoint.

        Reports the frontend itself only; the task API is not called.
        """
        return {
            "status": "healthy",
            "service": settings.app_title,
            "version": __version__
        }

    return app


def main():
    """Run the frontend with uvicorn."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s [%(name)s] %(levelname)s: %(message)s'
    )

    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
