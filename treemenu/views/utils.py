"""Utility functions for views."""

from django.shortcuts import redirect
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django_htmx.http import HttpResponseClientRedirect


def get_base_template(request):
    """Return partial base for HTMX requests, full base otherwise."""
    if request.htmx:
        return "partials/partial_base.html"
    return "base.html"


def htmx_redirect(request, viewname, *args, **kwargs):
    """Redirect that works correctly for both HTMX and regular requests.

    For HTMX requests, sends an HX-Redirect header so the browser does a
    proper client-side navigation (URL bar updates, full page load).
    For regular requests, returns a normal Django redirect.
    """
    url = reverse(viewname, args=args, kwargs=kwargs)
    if request.htmx:
        return HttpResponseClientRedirect(url)
    return redirect(url)


def safe_next_url(request, candidate):
    """Return *candidate* if it is a local URL for this host, else ``None``."""
    if candidate and url_has_allowed_host_and_scheme(
        candidate,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return candidate
    return None
