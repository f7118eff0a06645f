"""
Request-level entry point for the menu.

Ties the registry, the session toggle state and the tree builder together so
templates and views can render the menu from a single source of truth.
"""

from django.conf import settings

from .builder import MenuTreeBuilder
from .registry import get_resources
from .state import MenuState


def build_navigation(request, path=None):
    """Return the ``RenderPlan`` for *request*.

    *path* defaults to ``request.path``. Toggle requests pass the path of the
    page the menu is displayed on instead.
    """
    if path is None:
        path = request.path
    state = MenuState(request.session).as_mapping() if hasattr(request, "session") else {}
    return MenuTreeBuilder(get_resources()).build(path, state)


def menu_context(request, path=None):
    """Template context for rendering the menu."""
    return {
        "menu_plan": build_navigation(request, path),
        "menu_path": path if path is not None else request.path,
        "menu_has_dashboard": getattr(settings, "TREEMENU_HAS_DASHBOARD", False),
        "menu_dense": getattr(settings, "TREEMENU_DENSE", False),
    }


__all__ = [
    "build_navigation",
    "menu_context",
]
