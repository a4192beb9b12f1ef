"""
Views Package - The 'V' in MVC

This package contains all presentation code:
- templates/: Jinja2 HTML templates for the task pages
- filters.py: date and status filters used by the templates
- templating.py: builds the Jinja2 environment from settings

Pages are fully rendered on the server; there is no client-side
JavaScript.
"""

from task_frontend.views.templating import create_templates

__all__ = ["create_templates"]
