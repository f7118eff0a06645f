"""Find the parent group that owns the current navigation path."""

from .classifier import is_parent


def find_active_parent(descriptors, path):
    """
    Return the ``menu_parent`` of the child whose path prefixes *path*.

    Matching is a raw string prefix on ``"/" + name``. The scan does not stop
    at the first hit, so when several children match the last one declared
    wins. Returns ``None`` when nothing matches.
    """
    path = path or ""
    active = None
    for descriptor in descriptors:
        if is_parent(descriptor) or not descriptor.name:
            continue
        options = descriptor.options
        if options is None or options.menu_parent is None:
            continue
        if path.startswith(f"/{descriptor.name}"):
            active = options.menu_parent
    return active
