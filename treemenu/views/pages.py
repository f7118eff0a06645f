"""Dashboard and resource list pages."""

from django.http import Http404
from django.shortcuts import render

from ..classifier import is_navigable
from ..registry import get_resource, get_resources
from .utils import get_base_template


def dashboard(request):
    context = {
        "resource_count": len(get_resources()),
        "base_template": get_base_template(request),
    }
    return render(request, "treemenu/dashboard.html", context)


def resource_list(request, name):
    """List screen for a navigable resource."""
    descriptor = get_resource(name)
    if descriptor is None or not is_navigable(descriptor):
        raise Http404(f"No list view for {name!r}")

    context = {
        "resource": descriptor,
        "base_template": get_base_template(request),
    }
    return render(request, "treemenu/resource_list.html", context)
