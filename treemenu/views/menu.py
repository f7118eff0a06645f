"""Menu group toggling."""

import logging
from urllib.parse import urlsplit

from django.conf import settings
from django.http import Http404, HttpResponse
from django.middleware.csrf import get_token
from django.shortcuts import redirect
from django.template.loader import render_to_string
from django.views.decorators.http import require_POST

from ..classifier import is_parent
from ..navigation import menu_context
from ..registry import get_resource
from ..state import MenuState
from .utils import htmx_redirect, safe_next_url

logger = logging.getLogger(__name__)


def _page_path(request):
    """Path of the page the menu is displayed on."""
    path = request.POST.get("path")
    if not path and request.htmx and request.htmx.current_url:
        path = urlsplit(request.htmx.current_url).path
    return path or "/"


@require_POST
def toggle_group(request, name):
    """Flip the expanded state of the menu group *name*.

    HTMX requests get the re-rendered menu back for an in-place swap.
    Regular requests are redirected to ``next``, the referer, or the
    dashboard.
    """
    descriptor = get_resource(name)
    if descriptor is None or not is_parent(descriptor):
        raise Http404(f"No menu group named {name!r}")

    exclusive = getattr(settings, "TREEMENU_EXCLUSIVE_TOGGLE", False)
    state = MenuState(request.session).toggle(name, exclusive=exclusive)
    logger.debug("Menu group %r toggled, state is now %r", name, state)

    if request.htmx:
        context = menu_context(request, _page_path(request))
        context["csrf_token"] = get_token(request)
        return HttpResponse(render_to_string("treemenu/partials/menu.html", context))

    next_url = safe_next_url(request, request.POST.get("next")) or safe_next_url(
        request, request.META.get("HTTP_REFERER")
    )
    if next_url:
        return redirect(next_url)
    return htmx_redirect(request, "treemenu:dashboard")
