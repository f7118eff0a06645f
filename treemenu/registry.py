"""
Resource registry: the ordered list of descriptors the menu is built from.

Resources come from ``settings.TREEMENU_RESOURCES`` when it is set, otherwise
from the TOML file named by ``settings.TREEMENU_CONFIG`` (default
``<BASE_DIR>/menu_resources.toml``)::

    [[resource]]
    name = "sales"
    label = "Sales"
    [resource.options]
    is_menu_parent = true

    [[resource]]
    name = "orders"
    has_list_view = true
    [resource.options]
    menu_parent = "sales"

The file's mtime is checked on every call so edits take effect without
restarting the server.
"""

import logging
import tomllib
from pathlib import Path

from django.conf import settings as django_settings

from .checks import find_descriptor_issues
from .descriptors import coerce_descriptors

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# File loading & caching
# ---------------------------------------------------------------------------
_resources_cache: tuple | None = None
_resources_mtime: float = 0.0


def _config_path() -> Path:
    configured = getattr(django_settings, "TREEMENU_CONFIG", None)
    if configured:
        return Path(configured)
    return Path(django_settings.BASE_DIR) / "menu_resources.toml"


def _load_file(*, force_reload: bool = False) -> tuple:
    global _resources_cache, _resources_mtime

    path = _config_path()

    if not path.exists():
        logger.debug("Menu resource file not found at %s, menu is empty.", path)
        _resources_cache = ()
        _resources_mtime = 0.0
        return _resources_cache

    try:
        current_mtime = path.stat().st_mtime
    except OSError:
        current_mtime = 0.0

    if _resources_cache is not None and not force_reload and current_mtime == _resources_mtime:
        return _resources_cache

    try:
        with open(path, "rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError):
        logger.exception("Failed to parse %s, menu is empty.", path)
        _resources_cache = ()
        _resources_mtime = 0.0
        return _resources_cache

    _resources_cache = coerce_descriptors(data.get("resource", ()))
    _resources_mtime = current_mtime
    logger.info("Loaded %d menu resources from %s", len(_resources_cache), path)
    _log_issues(_resources_cache)
    return _resources_cache


def _log_issues(descriptors) -> None:
    for issue in find_descriptor_issues(descriptors):
        logger.warning("%s (%s)", issue.msg, issue.id)


def get_resources(*, force_reload: bool = False) -> tuple:
    """Return the registered descriptors in declaration order."""
    configured = getattr(django_settings, "TREEMENU_RESOURCES", None)
    if configured is not None:
        return coerce_descriptors(configured)
    return _load_file(force_reload=force_reload)


def get_resource(name):
    """Return the descriptor called *name*, or ``None``."""
    for descriptor in get_resources():
        if descriptor.name == name:
            return descriptor
    return None


def clear_registry_cache(**kwargs) -> None:
    """Reset the cached resources. Connected to ``setting_changed``."""
    global _resources_cache, _resources_mtime
    _resources_cache = None
    _resources_mtime = 0.0
