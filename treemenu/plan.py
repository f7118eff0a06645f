"""
Render plan types handed from the tree builder to the presentation layer.

A plan is an ordered sequence of units. Each unit is either a standalone
link (``LeafEntry``) or a collapsible group of links (``ParentGroup``).
``as_dict`` returns plain dictionaries suitable for templates or JSON.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LeafEntry:
    """A single navigable menu entry."""
    key: str
    path: str
    label: str
    icon: str = None

    @classmethod
    def for_descriptor(cls, descriptor):
        return cls(
            key=descriptor.name,
            path=descriptor.path,
            label=descriptor.label,
            icon=descriptor.icon,
        )

    def as_dict(self):
        return {
            "type": "leaf",
            "key": self.key,
            "path": self.path,
            "label": self.label,
            "icon": self.icon,
        }


@dataclass(frozen=True)
class ParentGroup:
    """A collapsible group header with its child entries."""
    key: str
    label: str
    icon: str = None
    children: tuple = field(default_factory=tuple)
    expanded: bool = False

    def as_dict(self):
        return {
            "type": "parent",
            "key": self.key,
            "label": self.label,
            "icon": self.icon,
            "children": tuple(child.as_dict() for child in self.children),
            "expanded": self.expanded,
        }


@dataclass(frozen=True)
class RenderPlan:
    """
    The built menu.

    ``expansion`` is the merged toggle state (every parent key present) and
    does not include the path-derived default; ``active_parent`` carries that.
    """
    units: tuple = field(default_factory=tuple)
    expansion: dict = field(default_factory=dict)
    active_parent: str = None

    def __iter__(self):
        return iter(self.units)

    def __len__(self):
        return len(self.units)

    @property
    def groups(self):
        return tuple(unit for unit in self.units if isinstance(unit, ParentGroup))

    def as_dict(self):
        return {
            "units": tuple(unit.as_dict() for unit in self.units),
            "expansion": dict(self.expansion),
            "active_parent": self.active_parent,
        }


__all__ = [
    "LeafEntry",
    "ParentGroup",
    "RenderPlan",
]
