"""
Tests for descriptor coercion from configuration mappings.

Covers:
- camelCase and snake_case keys
- Label fallback (top level, options.label, name)
- Missing options, missing name, non-mapping entries
"""

from django.test import SimpleTestCase

from treemenu.descriptors import MenuOptions, ResourceDescriptor, coerce_descriptors


class FromMappingTests(SimpleTestCase):
    def test_camel_case_keys(self):
        descriptor = ResourceDescriptor.from_mapping(
            {"name": "orders", "hasList": True, "options": {"menuParent": "sales"}}
        )
        self.assertTrue(descriptor.has_list_view)
        self.assertEqual(descriptor.options, MenuOptions(menu_parent="sales"))

    def test_snake_case_keys(self):
        descriptor = ResourceDescriptor.from_mapping(
            {"name": "sales", "has_list_view": False, "options": {"is_menu_parent": True}}
        )
        self.assertFalse(descriptor.has_list_view)
        self.assertTrue(descriptor.options.is_menu_parent)
        self.assertIsNone(descriptor.options.menu_parent)

    def test_label_falls_back_to_options_then_name(self):
        self.assertEqual(ResourceDescriptor.from_mapping({"name": "a", "label": "Top"}).label, "Top")
        self.assertEqual(
            ResourceDescriptor.from_mapping({"name": "a", "options": {"label": "Nested"}}).label, "Nested"
        )
        self.assertEqual(ResourceDescriptor.from_mapping({"name": "a"}).label, "a")

    def test_missing_fields_default(self):
        descriptor = ResourceDescriptor.from_mapping({})
        self.assertEqual(descriptor.name, "")
        self.assertFalse(descriptor.has_list_view)
        self.assertIsNone(descriptor.icon)
        self.assertIsNone(descriptor.options)

    def test_non_mapping_options_are_absent(self):
        self.assertIsNone(ResourceDescriptor.from_mapping({"name": "a", "options": "junk"}).options)

    def test_path(self):
        self.assertEqual(ResourceDescriptor(name="orders").path, "/orders")


class CoerceDescriptorsTests(SimpleTestCase):
    def test_preserves_order_and_accepts_instances(self):
        typed = ResourceDescriptor(name="b")
        result = coerce_descriptors([{"name": "a"}, typed, {"name": "c"}])
        self.assertEqual([d.name for d in result], ["a", "b", "c"])
        self.assertIs(result[1], typed)

    def test_skips_non_mappings_with_warning(self):
        with self.assertLogs("treemenu.descriptors", level="WARNING") as logs:
            result = coerce_descriptors([{"name": "a"}, "oops", 3])
        self.assertEqual([d.name for d in result], ["a"])
        self.assertEqual(len(logs.output), 2)

    def test_none_is_empty(self):
        self.assertEqual(coerce_descriptors(None), ())
