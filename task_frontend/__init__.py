"""Server-rendered frontend for the task management API."""

__version__ = "1.0.0"
