"""
Base class for the task API collaborator.

Controllers only talk to this interface, so the HTTP implementation can be
replaced with a test double without touching any handler.
"""

from abc import ABC, abstractmethod
from typing import Optional

from task_frontend.models import Task


class TaskAPIError(Exception):
    """The task API call failed (network error, timeout, or error status)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TaskNotFoundError(TaskAPIError):
    """The task API answered 404 for the requested task."""

    def __init__(self, task_id: str):
        super().__init__(f"Task {task_id} not found", status_code=404)
        self.task_id = task_id


class TaskAPIBase(ABC):
    """Abstract base class for task API clients."""

    @abstractmethod
    async def list_tasks(self) -> list[Task]:
        """Fetch every task."""
        pass

    @abstractmethod
    async def get_task(self, task_id: str) -> Task:
        """
        Fetch one task by id.

        Raises:
            TaskNotFoundError: if the API reports the task does not exist
            TaskAPIError: for any other failure
        """
        pass

    @abstractmethod
    async def create_task(self, payload: dict) -> None:
        """Create a task from a {title, description, status, dueDate} body."""
        pass

    @abstractmethod
    async def update_task(self, task_id: str, payload: dict) -> None:
        """Replace the user-editable fields of a task."""
        pass

    @abstractmethod
    async def update_status(self, task_id: str, status: Optional[str]) -> None:
        """Change only the status of a task. None sends no status at all."""
        pass

    @abstractmethod
    async def delete_task(self, task_id: str) -> None:
        """Delete a task."""
        pass

    async def aclose(self) -> None:
        """Release any resources held by the client."""
        pass
