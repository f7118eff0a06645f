from django import template
from django.utils.translation import gettext
import re

from treemenu.plan import ParentGroup

register = template.Library()

DEFAULT_PARENT_ICON = "label"
DEFAULT_LEAF_ICON = "view_list"


def _current_path(context):
    """The page path the menu is shown for, falling back to the request path."""
    path = context.get('menu_path')
    if path is None:
        request = context.get('request')
        path = request.path if request else None
    return path


@register.simple_tag(takes_context=True)
def active_path(context, base):
    """
    Return "active" when the current page path matches `base`.

    Supported forms for `base`:
      - Single path: "/orders/"
      - Comma-separated list: "/orders/,/invoices/"
      - Regex: "r/REGEX" (e.g. r/^/orders/.*$/)

    Matching behaviour:
      - If a path ends with a slash ("/foo/") it matches any path that starts with that prefix.
      - If a path does not end with a slash ("/foo") it matches either exact equality or a prefix followed by "/" (to avoid false positives like "/foo-old/").
      - Regex is applied via re.search against the path.
    """
    path = _current_path(context)
    if path is None:
        return ""

    # Regex mode: base starts with "r/"
    if isinstance(base, str) and base.startswith('r/'):
        try:
            if re.search(base[2:], path):
                return "active"
        except re.error:
            return ""
        return ""

    for part in (p.strip() for p in str(base).split(',')):
        if not part:
            continue

        if part.endswith('/'):
            if path.startswith(part):
                return "active"
        elif path == part or path.startswith(part + '/'):
            return "active"

    return ""


@register.filter
def menu_label(value):
    """Translate a menu label."""
    if not value:
        return ""
    return gettext(str(value))


@register.filter
def menu_icon(unit):
    """Icon name for a render unit, with a default per unit type."""
    if unit.icon:
        return unit.icon
    return DEFAULT_PARENT_ICON if isinstance(unit, ParentGroup) else DEFAULT_LEAF_ICON


@register.filter
def is_group(unit):
    return isinstance(unit, ParentGroup)


@register.inclusion_tag("treemenu/partials/menu.html", takes_context=True)
def render_menu(context):
    """Render the menu from the context provided by ``core.context_processors.menu``."""
    return {
        "request": context.get("request"),
        "csrf_token": context.get("csrf_token"),
        "menu_plan": context.get("menu_plan", ()),
        "menu_path": _current_path(context),
        "menu_has_dashboard": context.get("menu_has_dashboard", False),
        "menu_dense": context.get("menu_dense", False),
    }
