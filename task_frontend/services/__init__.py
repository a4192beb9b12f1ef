"""
Services Package - Collaborators used by the controllers.

- base.py: TaskAPIBase interface and the task API exceptions
- task_api.py: httpx implementation of the task API client
"""

from task_frontend.services.base import TaskAPIBase, TaskAPIError, TaskNotFoundError
from task_frontend.services.task_api import TaskAPIClient

__all__ = [
    "TaskAPIBase",
    "TaskAPIError",
    "TaskNotFoundError",
    "TaskAPIClient",
]
