"""
Shared fixtures for the task frontend tests.

FakeTaskAPI stands in for the remote task API: it records every call and
can be told to fail with a given exception.
"""

import pytest
from fastapi.testclient import TestClient

from task_frontend.config import Settings
from task_frontend.main import create_app
from task_frontend.models import Task
from task_frontend.services import TaskAPIBase, TaskAPIError, TaskNotFoundError


def make_task(**overrides) -> Task:
    """Build a Task the way the API would return it."""
    data = {
        "id": 1,
        "title": "Test Task",
        "description": "Test Description",
        "status": "TODO",
        "dueDate": "2025-01-15T10:00:00",
        "createdAt": "2025-01-01T10:00:00",
        "updatedAt": "2025-01-01T10:00:00",
    }
    data.update(overrides)
    return Task.model_validate(data)


class FakeTaskAPI(TaskAPIBase):
    """In-memory task API double."""

    def __init__(self):
        self.tasks: dict[str, Task] = {}
        self.calls: list[tuple] = []
        self.failures: dict[str, Exception] = {}

    def add(self, task: Task) -> Task:
        self.tasks[str(task.id)] = task
        return task

    def fail(self, operation: str, error: Exception):
        """Make the named operation raise error from now on."""
        self.failures[operation] = error

    def _record(self, operation: str, *args):
        self.calls.append((operation, *args))
        if operation in self.failures:
            raise self.failures[operation]

    def _lookup(self, task_id: str) -> Task:
        if task_id not in self.tasks:
            raise TaskNotFoundError(task_id)
        return self.tasks[task_id]

    async def list_tasks(self) -> list[Task]:
        self._record("list_tasks")
        return list(self.tasks.values())

    async def get_task(self, task_id: str) -> Task:
        self._record("get_task", task_id)
        return self._lookup(task_id)

    async def create_task(self, payload: dict) -> None:
        self._record("create_task", payload)
        self.add(make_task(id=len(self.tasks) + 1, **payload))

    async def update_task(self, task_id: str, payload: dict) -> None:
        self._record("update_task", task_id, payload)
        current = self._lookup(task_id)
        self.add(make_task(id=current.id, **payload))

    async def update_status(self, task_id: str, status) -> None:
        self._record("update_status", task_id, status)
        current = self._lookup(task_id)
        self.tasks[task_id] = current.model_copy(update={"status": status})

    async def delete_task(self, task_id: str) -> None:
        self._record("delete_task", task_id)
        self._lookup(task_id)
        del self.tasks[task_id]

    def calls_to(self, operation: str) -> list[tuple]:
        return [call[1:] for call in self.calls if call[0] == operation]


@pytest.fixture
def settings():
    """Settings that do not depend on the environment."""
    return Settings(
        _env_file=None,
        api_base_url="http://api.test/api",
        app_title="Task Management System",
    )


@pytest.fixture
def task_api():
    return FakeTaskAPI()


@pytest.fixture
def client(settings, task_api):
    """Test client wired to the fake task API. Redirects are not followed."""
    app = create_app(settings=settings, task_api=task_api)
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def api_error():
    return TaskAPIError("Task API error (HTTP 500)", status_code=500)
