"""
Tasks Controller

Server-rendered pages for the task API. Every route is a pass-through:
call the task API once, then render a template or redirect.

Routes:
- GET  /tasks               - Task list
- GET  /tasks/new           - Blank creation form
- POST /tasks               - Create, then redirect to the list
- GET  /tasks/{id}          - Task details
- GET  /tasks/{id}/edit     - Edit form
- POST /tasks/{id}          - Update, then redirect to the details
- POST /tasks/{id}/status   - Quick status change
- POST /tasks/{id}/delete   - Delete, then redirect to the list

Error Handling:
- TaskNotFoundError (API answered 404) renders the not-found page with
  status 404
- Any other TaskAPIError is shown as an inline message on the best page
  available; status changes and deletes only log it and redirect
- Field validation is left to the task API; its rejections surface as a
  generic message, not per field
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from task_frontend.config import Settings
from task_frontend.dependencies import get_app_settings, get_task_api, get_templates
from task_frontend.models import TaskForm
from task_frontend.services import TaskAPIBase, TaskAPIError, TaskNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])

LIST_ERROR = "Unable to load tasks. Please try again later."
CREATE_ERROR = "Unable to create task. Please check your input and try again."
DETAIL_ERROR = "Unable to load task details."
EDIT_LOAD_ERROR = "Unable to load task for editing."
UPDATE_ERROR = "Unable to update task. Please check your input and try again."


def task_form(
    title: str = Form(""),
    description: str = Form(""),
    status: str = Form(""),
    due_date: str = Form("", alias="dueDate")
) -> TaskForm:
    """Collect the submitted task fields as-is."""
    return TaskForm(
        title=title,
        description=description,
        status=status,
        due_date=due_date
    )


def _not_found(request: Request, templates: Jinja2Templates) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "not-found.html",
        {"title": "Task Not Found"},
        status_code=404
    )


def _error_page(request: Request, templates: Jinja2Templates, message: str) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "error.html",
        {"title": "Error", "error": message}
    )


@router.get("", response_class=HTMLResponse)
async def list_tasks(
    request: Request,
    api: TaskAPIBase = Depends(get_task_api),
    templates: Jinja2Templates = Depends(get_templates),
    settings: Settings = Depends(get_app_settings)
):
    """
    List all tasks.

    If the API cannot be reached the page still renders, with an empty
    list and an inline error.
    """
    try:
        tasks = await api.list_tasks()
    except TaskAPIError as e:
        logger.error(f"Error fetching tasks: {e}")
        return templates.TemplateResponse(
            request,
            "tasks/list.html",
            {"title": settings.app_title, "tasks": [], "error": LIST_ERROR}
        )

    return templates.TemplateResponse(
        request,
        "tasks/list.html",
        {"title": settings.app_title, "tasks": tasks}
    )


@router.get("/new", response_class=HTMLResponse)
async def new_task_form(
    request: Request,
    templates: Jinja2Templates = Depends(get_templates)
):
    """Show a blank task creation form."""
    return templates.TemplateResponse(
        request,
        "tasks/new.html",
        {"title": "Create New Task", "task": TaskForm()}
    )


@router.post("", response_class=HTMLResponse)
async def create_task(
    request: Request,
    form: TaskForm = Depends(task_form),
    api: TaskAPIBase = Depends(get_task_api),
    templates: Jinja2Templates = Depends(get_templates)
):
    """
    Create a task and go back to the list.

    On failure the form is shown again with everything the user typed.
    """
    try:
        await api.create_task(form.to_payload())
    except TaskAPIError as e:
        logger.error(f"Error creating task: {e}")
        return templates.TemplateResponse(
            request,
            "tasks/new.html",
            {"title": "Create New Task", "task": form, "error": CREATE_ERROR}
        )

    return RedirectResponse("/tasks", status_code=302)


@router.get("/{task_id}", response_class=HTMLResponse)
async def view_task(
    task_id: str,
    request: Request,
    api: TaskAPIBase = Depends(get_task_api),
    templates: Jinja2Templates = Depends(get_templates)
):
    """Show a single task with its status and delete controls."""
    try:
        task = await api.get_task(task_id)
    except TaskNotFoundError:
        return _not_found(request, templates)
    except TaskAPIError as e:
        logger.error(f"Error fetching task {task_id}: {e}")
        return _error_page(request, templates, DETAIL_ERROR)

    return templates.TemplateResponse(
        request,
        "tasks/view.html",
        {"title": f"Task: {task.title}", "task": task}
    )


@router.get("/{task_id}/edit", response_class=HTMLResponse)
async def edit_task_form(
    task_id: str,
    request: Request,
    api: TaskAPIBase = Depends(get_task_api),
    templates: Jinja2Templates = Depends(get_templates)
):
    """Show the edit form pre-filled with the current task."""
    try:
        task = await api.get_task(task_id)
    except TaskNotFoundError:
        return _not_found(request, templates)
    except TaskAPIError as e:
        logger.error(f"Error fetching task {task_id} for edit: {e}")
        return _error_page(request, templates, EDIT_LOAD_ERROR)

    return templates.TemplateResponse(
        request,
        "tasks/edit.html",
        {"title": f"Edit Task: {task.title}", "task": task, "task_id": task_id}
    )


@router.post("/{task_id}", response_class=HTMLResponse)
async def update_task(
    task_id: str,
    request: Request,
    form: TaskForm = Depends(task_form),
    api: TaskAPIBase = Depends(get_task_api),
    templates: Jinja2Templates = Depends(get_templates)
):
    """
    Update a task and go to its details.

    When the update fails for any reason other than a missing task, the
    task is fetched again so the form can be re-rendered. If that fetch
    fails too, the submitted values are shown instead so no edits are
    lost.
    """
    try:
        await api.update_task(task_id, form.to_payload())
    except TaskNotFoundError:
        return _not_found(request, templates)
    except TaskAPIError as e:
        logger.error(f"Error updating task {task_id}: {e}")
        try:
            task = await api.get_task(task_id)
        except TaskAPIError as refetch_error:
            logger.warning(f"Could not reload task {task_id} after failed update: {refetch_error}")
            task = form

        return templates.TemplateResponse(
            request,
            "tasks/edit.html",
            {"title": "Edit Task", "task": task, "task_id": task_id, "error": UPDATE_ERROR}
        )

    return RedirectResponse(f"/tasks/{task_id}", status_code=302)


@router.post("/{task_id}/status")
async def update_task_status(
    task_id: str,
    status: Optional[str] = Form(None),
    api: TaskAPIBase = Depends(get_task_api)
):
    """Change only the status. Always returns to the task details."""
    try:
        await api.update_status(task_id, status)
    except TaskAPIError as e:
        logger.error(f"Error updating status of task {task_id}: {e}")

    return RedirectResponse(f"/tasks/{task_id}", status_code=302)


@router.post("/{task_id}/delete")
async def delete_task(
    task_id: str,
    api: TaskAPIBase = Depends(get_task_api)
):
    """Delete a task. On failure the user lands back on its details."""
    try:
        await api.delete_task(task_id)
    except TaskAPIError as e:
        logger.error(f"Error deleting task {task_id}: {e}")
        return RedirectResponse(f"/tasks/{task_id}", status_code=302)

    return RedirectResponse("/tasks", status_code=302)
