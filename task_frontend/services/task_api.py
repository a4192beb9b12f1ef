"""
Task API client for the remote task-management service.

Endpoints used (relative to API_BASE_URL):
- GET    /tasks                      - List all tasks
- POST   /tasks                      - Create a task
- GET    /tasks/{id}                 - Get one task
- PUT    /tasks/{id}                 - Update a task
- PATCH  /tasks/{id}/status?status=  - Change only the status
- DELETE /tasks/{id}                 - Delete a task

Every failure is translated into TaskAPIError, or TaskNotFoundError when
the API answers 404, so callers never handle httpx exceptions directly.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from task_frontend.config import Settings, get_settings
from task_frontend.models import Task
from task_frontend.services.base import TaskAPIBase, TaskAPIError, TaskNotFoundError

logger = logging.getLogger(__name__)


class TaskAPIClient(TaskAPIBase):
    """httpx based client for the task API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        self.settings = settings or get_settings()
        self.tasks_url = self.settings.tasks_url
        self._client = client or httpx.AsyncClient(timeout=self.settings.api_timeout)

    async def _request(
        self,
        method: str,
        url: str,
        task_id: Optional[str] = None,
        **kwargs
    ) -> httpx.Response:
        """
        Send a request and raise for any unsuccessful outcome.

        A 404 is reported as TaskNotFoundError only when the call targets a
        single task; everything else becomes TaskAPIError.
        """
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 404 and task_id is not None:
                logger.warning(f"Task {task_id} not found ({method} {url})")
                raise TaskNotFoundError(task_id) from e
            logger.error(f"Task API error: {method} {url} -> {status} - {e.response.text}")
            raise TaskAPIError(f"Task API error (HTTP {status})", status_code=status) from e
        except httpx.TimeoutException as e:
            logger.error(f"Task API request timed out: {method} {url}")
            raise TaskAPIError("Task API request timed out") from e
        except httpx.RequestError as e:
            logger.error(f"Could not reach task API: {method} {url} - {e}")
            raise TaskAPIError(f"Could not reach task API: {e}") from e

    def _parse_task(self, response: httpx.Response) -> Task:
        """Decode a single task from the response body."""
        try:
            return Task.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Unexpected task payload from {response.request.url}: {e}")
            raise TaskAPIError("Task API returned an invalid task") from e

    def _task_url(self, task_id: str) -> str:
        return f"{self.tasks_url}/{task_id}"

    async def list_tasks(self) -> list[Task]:
        response = await self._request("GET", self.tasks_url)
        try:
            return [Task.model_validate(item) for item in response.json()]
        except (TypeError, ValueError, ValidationError) as e:
            logger.error(f"Unexpected task list payload: {e}")
            raise TaskAPIError("Task API returned an invalid task list") from e

    async def get_task(self, task_id: str) -> Task:
        response = await self._request("GET", self._task_url(task_id), task_id=task_id)
        return self._parse_task(response)

    async def create_task(self, payload: dict) -> None:
        # Only the outcome matters; the created task is not read back
        await self._request("POST", self.tasks_url, json=payload)

    async def update_task(self, task_id: str, payload: dict) -> None:
        await self._request(
            "PUT",
            self._task_url(task_id),
            task_id=task_id,
            json=payload
        )

    async def update_status(self, task_id: str, status: Optional[str]) -> None:
        # Status travels as a query parameter, left out when not given;
        # the request has no body
        params = {"status": status} if status is not None else {}
        await self._request(
            "PATCH",
            f"{self._task_url(task_id)}/status",
            task_id=task_id,
            params=params
        )

    async def delete_task(self, task_id: str) -> None:
        await self._request("DELETE", self._task_url(task_id), task_id=task_id)

    async def aclose(self) -> None:
        await self._client.aclose()
