"""
Views package for the application.

- utils.py: Helper functions shared by views
- menu.py: Menu group toggling
- pages.py: Dashboard and resource list pages
"""

from .menu import toggle_group
from .pages import dashboard, resource_list
from .utils import get_base_template, htmx_redirect

__all__ = [
    "dashboard",
    "get_base_template",
    "htmx_redirect",
    "resource_list",
    "toggle_group",
]
