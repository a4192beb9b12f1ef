"""
Models Package - Task data structures.

This package contains the Pydantic models for tasks fetched from the task
API and for the task forms submitted by users.
"""

from task_frontend.models.schemas import (
    Task,
    TaskStatus,
    TaskForm,
)

__all__ = [
    "Task",
    "TaskStatus",
    "TaskForm",
]
