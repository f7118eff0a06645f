"""
Typed resource descriptors consumed by the menu tree builder.

Descriptors usually come from configuration (a TOML file or a settings list),
so this module also coerces loosely-shaped mappings into the typed form.
Both snake_case and camelCase option keys are accepted::

    {"name": "orders", "hasList": True, "options": {"menuParent": "sales"}}
    {"name": "orders", "has_list_view": True, "options": {"menu_parent": "sales"}}
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def _first(mapping, *keys, default=None):
    """Return the value of the first key present in *mapping*."""
    for key in keys:
        if key in mapping:
            return mapping[key]
    return default


@dataclass(frozen=True)
class MenuOptions:
    """Menu metadata flags. ``None`` means the flag is absent."""
    is_menu_parent: bool | None = None
    menu_parent: str | None = None
    label: str | None = None

    @classmethod
    def from_mapping(cls, data):
        if not isinstance(data, Mapping):
            return None
        is_menu_parent = _first(data, "is_menu_parent", "isMenuParent")
        menu_parent = _first(data, "menu_parent", "menuParent")
        return cls(
            is_menu_parent=None if is_menu_parent is None else bool(is_menu_parent),
            menu_parent=None if menu_parent is None else str(menu_parent),
            label=_first(data, "label"),
        )


@dataclass(frozen=True)
class ResourceDescriptor:
    """A single registered resource as seen by the menu."""
    name: str
    has_list_view: bool = False
    label: str = ""
    icon: str | None = None
    options: MenuOptions | None = None

    @property
    def path(self):
        return f"/{self.name}"

    @classmethod
    def from_mapping(cls, data):
        """Build a descriptor from a plain mapping, tolerating missing keys."""
        name = str(data.get("name") or "")
        options = MenuOptions.from_mapping(data.get("options"))
        label = data.get("label") or (options.label if options else None) or name
        return cls(
            name=name,
            has_list_view=bool(_first(data, "has_list_view", "hasListView", "hasList", default=False)),
            label=str(label),
            icon=data.get("icon"),
            options=options,
        )


def coerce_descriptors(entries):
    """
    Return a tuple of descriptors from *entries*, preserving order.

    Entries may already be ``ResourceDescriptor`` instances or mappings.
    Anything else is skipped with a warning.
    """
    descriptors = []
    for index, entry in enumerate(entries or ()):
        if isinstance(entry, ResourceDescriptor):
            descriptors.append(entry)
        elif isinstance(entry, Mapping):
            descriptors.append(ResourceDescriptor.from_mapping(entry))
        else:
            logger.warning("Skipping menu resource #%d: expected a mapping, got %r", index, entry)
    return tuple(descriptors)


__all__ = [
    "MenuOptions",
    "ResourceDescriptor",
    "coerce_descriptors",
]
