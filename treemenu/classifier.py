"""
Classification of resource descriptors into menu roles.

A descriptor is exactly one of:

- a **parent**: a non-navigable group header (``is_menu_parent`` set),
- a **child**: attached to a parent through ``menu_parent``,
- an **orphan**: no menu options at all, rendered as a top-level entry.

A descriptor carrying both flags is a parent; ``classify`` checks the parent
flag first.
"""

from enum import Enum


class Classification(Enum):
    PARENT = "parent"
    CHILD = "child"
    ORPHAN = "orphan"


def is_parent(descriptor) -> bool:
    options = descriptor.options
    return options is not None and bool(options.is_menu_parent)


def is_orphan(descriptor) -> bool:
    options = descriptor.options
    return options is None or (options.menu_parent is None and options.is_menu_parent is None)


def is_child_of(descriptor, parent) -> bool:
    options = descriptor.options
    return options is not None and options.menu_parent is not None and options.menu_parent == parent.name


def is_navigable(descriptor) -> bool:
    return descriptor.has_list_view is True


def classify(descriptor) -> Classification:
    """Resolve the menu role of *descriptor*."""
    if is_parent(descriptor):
        return Classification.PARENT
    if is_orphan(descriptor):
        return Classification.ORPHAN
    # Flags present but not a parent: either a real child, or
    # ``is_menu_parent=False`` with no parent reference (never rendered).
    return Classification.CHILD
