"""
Context processors for treemenu.

Exposes the built menu to templates so every page renders the same tree.
"""

from treemenu.navigation import menu_context


def menu(request):
    """
    Add the menu to the template context.

    Returns ``menu_plan`` (a ``RenderPlan``), ``menu_path`` and the
    dashboard / dense display flags.
    """
    return menu_context(request)
