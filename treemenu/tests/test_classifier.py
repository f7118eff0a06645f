"""
Tests for descriptor classification.

Covers:
- is_parent / is_orphan / is_child_of / is_navigable predicates
- classify: parent precedence for dual-flag descriptors
- Partition property over a mixed descriptor list
- Descriptors with missing or empty options
"""

from django.test import SimpleTestCase

from treemenu.classifier import (
    Classification,
    classify,
    is_child_of,
    is_navigable,
    is_orphan,
    is_parent,
)
from treemenu.descriptors import ResourceDescriptor, coerce_descriptors


def _d(**data):
    return ResourceDescriptor.from_mapping(data)


MIXED = coerce_descriptors([
    {"name": "users", "hasList": True},
    {"name": "sales", "options": {"isMenuParent": True}},
    {"name": "orders", "hasList": True, "options": {"menuParent": "sales"}},
    {"name": "invoices", "hasList": False, "options": {"menuParent": "sales"}},
    {"name": "hybrid", "options": {"isMenuParent": True, "menuParent": "sales"}},
    {"name": "plain", "options": {}},
    {"name": "stray", "hasList": True, "options": {"menuParent": "nowhere"}},
    {"name": "disabled", "options": {"isMenuParent": False}},
    {},
])


class PredicateTests(SimpleTestCase):
    def test_parent_flag_makes_parent(self):
        self.assertTrue(is_parent(_d(name="sales", options={"isMenuParent": True})))

    def test_false_parent_flag_is_not_parent(self):
        self.assertFalse(is_parent(_d(name="sales", options={"isMenuParent": False})))

    def test_missing_options_is_orphan_not_parent(self):
        descriptor = _d(name="users")
        self.assertIsNone(descriptor.options)
        self.assertTrue(is_orphan(descriptor))
        self.assertFalse(is_parent(descriptor))

    def test_empty_options_is_orphan(self):
        self.assertTrue(is_orphan(_d(name="users", options={})))

    def test_unrelated_options_are_orphan(self):
        self.assertTrue(is_orphan(_d(name="users", options={"label": "People"})))

    def test_child_is_not_orphan(self):
        self.assertFalse(is_orphan(_d(name="orders", options={"menuParent": "sales"})))

    def test_present_but_false_parent_flag_is_not_orphan(self):
        self.assertFalse(is_orphan(_d(name="x", options={"isMenuParent": False})))

    def test_is_child_of_matches_parent_name(self):
        parent = _d(name="sales", options={"isMenuParent": True})
        child = _d(name="orders", options={"menuParent": "sales"})
        other = _d(name="products", options={"menuParent": "catalog"})
        self.assertTrue(is_child_of(child, parent))
        self.assertFalse(is_child_of(other, parent))
        self.assertFalse(is_child_of(_d(name="users"), parent))

    def test_is_navigable(self):
        self.assertTrue(is_navigable(_d(name="orders", hasList=True)))
        self.assertFalse(is_navigable(_d(name="orders", hasList=False)))
        self.assertFalse(is_navigable(_d(name="orders")))


class ClassifyTests(SimpleTestCase):
    def test_basic_roles(self):
        self.assertIs(classify(_d(name="users")), Classification.ORPHAN)
        self.assertIs(classify(_d(name="sales", options={"isMenuParent": True})), Classification.PARENT)
        self.assertIs(classify(_d(name="orders", options={"menuParent": "sales"})), Classification.CHILD)

    def test_dual_flag_descriptor_is_parent(self):
        """A descriptor carrying both flags is intentionally classified as a parent."""
        descriptor = _d(name="hybrid", options={"isMenuParent": True, "menuParent": "sales"})
        self.assertIs(classify(descriptor), Classification.PARENT)

    def test_false_parent_flag_without_parent_reference_is_unattached_child(self):
        descriptor = _d(name="disabled", options={"isMenuParent": False})
        self.assertIs(classify(descriptor), Classification.CHILD)

    def test_missing_name_degrades_to_orphan(self):
        descriptor = ResourceDescriptor.from_mapping({})
        self.assertEqual(descriptor.name, "")
        self.assertIs(classify(descriptor), Classification.ORPHAN)


class PartitionPropertyTests(SimpleTestCase):
    def test_every_descriptor_has_exactly_one_role(self):
        for descriptor in MIXED:
            with self.subTest(name=descriptor.name):
                self.assertIn(classify(descriptor), set(Classification))
                self.assertFalse(is_parent(descriptor) and is_orphan(descriptor))

    def test_classify_agrees_with_predicates(self):
        for descriptor in MIXED:
            with self.subTest(name=descriptor.name):
                kind = classify(descriptor)
                self.assertEqual(kind is Classification.PARENT, is_parent(descriptor))
                if not is_parent(descriptor):
                    self.assertEqual(kind is Classification.ORPHAN, is_orphan(descriptor))
