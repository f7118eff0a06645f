"""
Menu tree builder.

Turns the flat, ordered list of resource descriptors into a ``RenderPlan``:
parent groups (with their navigable children nested inside) and orphan
entries, in declaration order.

Usage::

    from treemenu.builder import MenuTreeBuilder, toggle

    builder = MenuTreeBuilder(descriptors)
    plan = builder.build("/orders/12/", state)
    state = toggle(plan.expansion, "sales")

The builder never mutates the toggle state it is given. ``toggle`` returns a
new mapping, and the caller decides where to keep it.
"""

import logging

from .classifier import Classification, classify, is_child_of, is_navigable
from .descriptors import coerce_descriptors
from .locator import find_active_parent
from .plan import LeafEntry, ParentGroup, RenderPlan

logger = logging.getLogger(__name__)


def initial_expansion_state(descriptors, state=None):
    """
    Return the expansion mapping for *descriptors*.

    Every parent gets a key defaulting to ``False``; values already present
    in *state* for those keys are kept. Keys in *state* that name no parent
    are dropped.
    """
    state = state or {}
    return {
        descriptor.name: bool(state.get(descriptor.name, False))
        for descriptor in coerce_descriptors(descriptors)
        if classify(descriptor) is Classification.PARENT
    }


def toggle(state, parent_name, *, exclusive=False):
    """
    Return a copy of *state* with ``parent_name`` flipped.

    A missing key counts as collapsed. With ``exclusive=True`` only the
    toggled key is kept, so every other group falls back to collapsed.
    """
    state = dict(state or {})
    flipped = not state.get(parent_name, False)
    if exclusive:
        return {parent_name: flipped}
    state[parent_name] = flipped
    return state


class MenuTreeBuilder:
    """Classifies descriptors once and builds render plans from them."""

    def __init__(self, descriptors):
        self.descriptors = coerce_descriptors(descriptors)
        self._classes = tuple(classify(d) for d in self.descriptors)

    def children_of(self, parent):
        """Navigable children of *parent*, in declaration order.

        Descriptors classified as parents are never folded into another
        group, even when they also carry a ``menu_parent`` reference.
        """
        return tuple(
            LeafEntry.for_descriptor(descriptor)
            for descriptor, kind in zip(self.descriptors, self._classes)
            if kind is Classification.CHILD and is_child_of(descriptor, parent) and is_navigable(descriptor)
        )

    def build(self, path, state=None) -> RenderPlan:
        active_parent = find_active_parent(self.descriptors, path)
        if active_parent is not None:
            logger.debug("Path %r expands menu group %r", path, active_parent)

        expansion = initial_expansion_state(self.descriptors, state)

        units = []
        for descriptor, kind in zip(self.descriptors, self._classes):
            if kind is Classification.PARENT:
                units.append(
                    ParentGroup(
                        key=descriptor.name,
                        label=descriptor.label,
                        icon=descriptor.icon,
                        children=self.children_of(descriptor),
                        expanded=expansion[descriptor.name] or active_parent == descriptor.name,
                    )
                )
            elif kind is Classification.ORPHAN:
                # Orphans are emitted whether or not they have a list view.
                units.append(LeafEntry.for_descriptor(descriptor))

        return RenderPlan(units=tuple(units), expansion=expansion, active_parent=active_parent)


def build_render_plan(descriptors, path, state=None) -> RenderPlan:
    """Build a plan in one call."""
    return MenuTreeBuilder(descriptors).build(path, state)


__all__ = [
    "MenuTreeBuilder",
    "build_render_plan",
    "initial_expansion_state",
    "toggle",
]
