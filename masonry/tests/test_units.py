from django.test import SimpleTestCase

from masonry.choices import ColumnUnit
from masonry.units import UnitSelector, coerce_unit
from masonry.viewports import ViewportValueSet


class UnitSelectorTests(SimpleTestCase):
    def setUp(self):
        self.pixels = ViewportValueSet(ColumnUnit.PIXEL)
        self.percents = ViewportValueSet(ColumnUnit.PERCENT)

    def _selector(self, unit):
        return UnitSelector(unit=unit, pixel_widths=self.pixels, percent_widths=self.percents)

    def test_percent_mode(self):
        selector = self._selector("percent")
        self.assertTrue(selector.is_percent_mode())
        self.assertEqual(selector.css_unit_suffix(), "%")
        self.assertIs(selector.active_value_set(), self.percents)

    def test_pixel_mode(self):
        selector = self._selector(ColumnUnit.PIXEL)
        self.assertFalse(selector.is_percent_mode())
        self.assertEqual(selector.css_unit_suffix(), "px")
        self.assertIs(selector.active_value_set(), self.pixels)

    def test_unrecognised_unit_falls_back_to_pixels(self):
        for unit in ("em", "", None):
            with self.subTest(unit=unit):
                selector = self._selector(unit)
                self.assertFalse(selector.is_percent_mode())
                self.assertEqual(selector.css_unit_suffix(), "px")

    def test_value_sets_must_match_their_unit(self):
        with self.assertRaises(ValueError):
            UnitSelector(pixel_widths=self.percents, percent_widths=self.percents)
        with self.assertRaises(ValueError):
            UnitSelector(pixel_widths=self.pixels, percent_widths=self.pixels)

    def test_selector_does_not_touch_value_sets(self):
        self.pixels.set("sm", 200)
        selector = self._selector("percent")
        selector.active_value_set()
        self.assertEqual(self.pixels.as_dict(), {"sm": 200})
        self.assertEqual(self.percents.as_dict(), {})

    def test_coerce_unit(self):
        self.assertIs(coerce_unit("percent"), ColumnUnit.PERCENT)
        self.assertIs(coerce_unit(ColumnUnit.PERCENT), ColumnUnit.PERCENT)
        self.assertIs(coerce_unit("pixel"), ColumnUnit.PIXEL)
