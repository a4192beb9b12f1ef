"""
Pydantic Schemas (Data Transfer Objects)

These schemas describe the task data exchanged with the remote task API
and the raw values submitted through the HTML forms.

Naming Convention:
- Task: a task as returned by the API (server-assigned fields included)
- TaskForm: the fields a user submitted, exactly as received

The API speaks camelCase JSON (dueDate, createdAt, updatedAt). The models
expose snake_case attributes and map them with aliases, so templates and
handlers never deal with the wire names.
"""

from enum import Enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(str, Enum):
    """Task lifecycle states accepted by the task API."""
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


# ============================================
# Task Schemas
# ============================================

class Task(BaseModel):
    """
    A task as returned by the task API.

    The id and the timestamps are assigned by the API; this frontend only
    displays them and never sends them back.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: int | str
    title: str
    description: str | None = None
    status: TaskStatus
    due_date: datetime | None = Field(None, alias="dueDate")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


class TaskForm(BaseModel):
    """
    Task fields as submitted by the create and edit forms.

    No validation happens here: the task API owns the rules and rejects
    bad input itself. The values are kept verbatim so a failed submission
    can be rendered back to the user unchanged.
    """
    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    description: str = ""
    status: str = ""
    due_date: str = Field("", alias="dueDate")

    def to_payload(self) -> dict:
        """
        Build the JSON body for a create or update call.

        An empty due date means "no due date" and is sent as null, never
        as an empty string.
        """
        return {
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "dueDate": self.due_date or None,
        }
