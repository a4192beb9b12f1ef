"""
Controllers Package - The 'C' in MVC

Controllers handle HTTP requests and coordinate between:
- Services (the task API client)
- Views (Jinja2 templates)

Each controller is a FastAPI APIRouter that defines the pages for one
resource.
"""

from task_frontend.controllers.tasks import router as tasks_router

__all__ = ["tasks_router"]
