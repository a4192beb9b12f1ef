"""
FastAPI dependencies for the collaborators stored on app.state.

create_app() puts the settings, the task API client and the Jinja2
templates on app.state; controllers receive them through these functions
instead of importing globals.
"""

from fastapi import Request
from fastapi.templating import Jinja2Templates

from task_frontend.config import Settings
from task_frontend.services import TaskAPIBase


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_task_api(request: Request) -> TaskAPIBase:
    return request.app.state.task_api


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
