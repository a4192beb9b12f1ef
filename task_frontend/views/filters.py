"""
Template filters for task pages.

- date: display formatting for due dates and timestamps
- status_label / status_colour / status_id: presentation of TaskStatus
"""

from datetime import date, datetime, time
from enum import Enum

# Named display formats understood by the date filter
DATE_FORMATS = {
    "DD/MM/YYYY": "%d/%m/%Y",
    "DD/MM/YYYY HH:mm": "%d/%m/%Y %H:%M",
    "YYYY-MM-DDTHH:mm": "%Y-%m-%dT%H:%M",  # <input type="datetime-local">
}

STATUS_COLOURS = {
    "TODO": "blue",
    "IN_PROGRESS": "yellow",
    "COMPLETED": "green",
    "CANCELLED": "red",
}


def format_date(value, format: str | None = None):
    """
    Format a date for display.

    Accepts an ISO-8601 string or a datetime. Anything that cannot be read
    as a date is returned unchanged, so a bad value shows up as-is instead
    of breaking the page. An unknown format falls back to the locale's
    default date representation.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time())
    else:
        try:
            moment = datetime.fromisoformat(str(value))
        except ValueError:
            return value

    # Aware timestamps are shown in the server's local time
    if moment.tzinfo is not None:
        moment = moment.astimezone()

    pattern = DATE_FORMATS.get(format)
    if pattern is None:
        return moment.strftime("%x")
    return moment.strftime(pattern)


def _status_value(status) -> str:
    if isinstance(status, Enum):
        return str(status.value)
    return str(status or "")


def status_label(status) -> str:
    """IN_PROGRESS -> IN PROGRESS"""
    return _status_value(status).replace("_", " ")


def status_colour(status) -> str:
    """Tag colour for a status; unknown values are grey."""
    return STATUS_COLOURS.get(_status_value(status), "grey")


def status_id(status) -> str:
    """Radio input id for a status, e.g. status-inprogress."""
    return "status-" + _status_value(status).lower().replace("_", "")
