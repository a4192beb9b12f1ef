"""
Jinja2 environment for the task pages.

The environment is built once from Settings by create_templates() and
handed to create_app(), which keeps it on app.state. Nothing here is a
module-level singleton, so tests can build as many apps as they like.
"""

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, select_autoescape

from task_frontend.config import Settings
from task_frontend.models import TaskStatus
from task_frontend.views.filters import format_date, status_colour, status_id, status_label

TEMPLATES_PATH = Path(__file__).parent / "templates"


def page_context(request: Request) -> dict:
    """Values available to every template."""
    return {"page_path": request.url.path}


def create_templates(settings: Settings) -> Jinja2Templates:
    """Configure Jinja2 with the task filters and globals."""
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_PATH)),
        autoescape=select_autoescape(["html"]),
        auto_reload=settings.development_mode,
    )
    env.filters["date"] = format_date
    env.filters["status_label"] = status_label
    env.filters["status_colour"] = status_colour
    env.filters["status_id"] = status_id
    env.globals["app_title"] = settings.app_title
    env.globals["statuses"] = list(TaskStatus)

    return Jinja2Templates(env=env, context_processors=[page_context])
