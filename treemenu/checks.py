"""
System checks for the registered menu resources.

None of these conditions break rendering, so they are reported as warnings:

- ``treemenu.W001``: ``menu_parent`` names no parent resource; the child is
  never shown.
- ``treemenu.W002``: a resource is flagged both as a parent and as a child;
  it is rendered as a parent.
- ``treemenu.W003``: two resources share a name.
"""

from django.core import checks

from .classifier import is_parent


def find_descriptor_issues(descriptors):
    """Return a list of ``checks.Warning`` for *descriptors*."""
    issues = []
    parent_names = {d.name for d in descriptors if is_parent(d)}
    seen = set()

    for descriptor in descriptors:
        options = descriptor.options
        if descriptor.name in seen:
            issues.append(
                checks.Warning(
                    f"Menu resource {descriptor.name!r} is declared more than once.",
                    hint="Resource names must be unique.",
                    obj=descriptor.name,
                    id="treemenu.W003",
                )
            )
        seen.add(descriptor.name)

        if options is None or options.menu_parent is None:
            continue

        if is_parent(descriptor):
            issues.append(
                checks.Warning(
                    f"Menu resource {descriptor.name!r} is both a menu parent and a child of "
                    f"{options.menu_parent!r}; it is rendered as a parent.",
                    hint="Remove either is_menu_parent or menu_parent.",
                    obj=descriptor.name,
                    id="treemenu.W002",
                )
            )
        elif options.menu_parent not in parent_names:
            issues.append(
                checks.Warning(
                    f"Menu resource {descriptor.name!r} refers to unknown menu parent "
                    f"{options.menu_parent!r} and will not be shown.",
                    hint="Declare a resource with is_menu_parent = true and that name.",
                    obj=descriptor.name,
                    id="treemenu.W001",
                )
            )
    return issues


def check_menu_resources(app_configs=None, **kwargs):
    from .registry import get_resources

    return find_descriptor_issues(get_resources())
