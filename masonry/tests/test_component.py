import json

from django.core.exceptions import ValidationError
from django.test import SimpleTestCase, override_settings

from masonry.choices import ColumnUnit
from masonry.component import MasonryComponent
from masonry.services.widths import ColumnWidth
from masonry.viewports import ViewportValueSet


class MasonryComponentTests(SimpleTestCase):
    def test_defaults(self):
        component = MasonryComponent()
        self.assertIs(component.column_unit, ColumnUnit.PIXEL)
        self.assertEqual(component.gutter, 10)
        self.assertTrue(component.is_horizontal_order())
        self.assertEqual(component.pixel_width.as_dict(), {})
        self.assertEqual(component.percent_width.as_dict(), {})

    @override_settings(MASONRY_COLUMN_UNIT="percent", MASONRY_GUTTER=0, MASONRY_HORIZONTAL_ORDER=False)
    def test_defaults_follow_settings(self):
        component = MasonryComponent()
        self.assertTrue(component.is_percent_position())
        self.assertEqual(component.gutter, 0)
        self.assertFalse(component.is_horizontal_order())

    def test_pixel_scenario(self):
        component = MasonryComponent(
            column_unit="pixel",
            gutter=15,
            horizontal_order=True,
            pixel_width=ViewportValueSet.from_dict(ColumnUnit.PIXEL, {"sm": 200, "lg": 300}),
            percent_width=ViewportValueSet.from_dict(ColumnUnit.PERCENT, {"sm": 50}),
        )
        self.assertEqual(
            component.masonry_config(),
            {
                "columnWidth": ".masonry-grid-sizer",
                "itemSelector": ".masonry-grid-item",
                "percentPosition": False,
                "horizontalOrder": True,
                "gutter": 15,
            },
        )
        self.assertEqual(
            component.column_widths(),
            [
                ColumnWidth(width="200px", breakpoint="(min-width: 576px)"),
                ColumnWidth(width="300px", breakpoint="(min-width: 992px)"),
            ],
        )
        self.assertEqual(component.column_unit_css(), "px")

    def test_percent_scenario_without_gutter(self):
        component = MasonryComponent(
            column_unit=ColumnUnit.PERCENT,
            gutter=0,
            pixel_width=ViewportValueSet.from_dict(ColumnUnit.PIXEL, {"md": 250}),
        )
        config = json.loads(component.masonry_config_json())
        self.assertNotIn("gutter", config)
        self.assertTrue(config["percentPosition"])
        self.assertEqual(component.column_widths(), [])
        self.assertEqual(component.column_unit_css(), "%")
        self.assertIs(component.column_width_data(), component.percent_width)

    def test_switching_unit_keeps_both_width_sets(self):
        component = MasonryComponent(
            pixel_width=ViewportValueSet.from_dict(ColumnUnit.PIXEL, {"xs": 100}),
            percent_width=ViewportValueSet.from_dict(ColumnUnit.PERCENT, {"xs": 50}),
        )
        self.assertEqual([r.width for r in component.column_widths()], ["100px"])
        component.column_unit = ColumnUnit.PERCENT
        self.assertEqual([r.width for r in component.column_widths()], ["50%"])
        self.assertEqual(component.pixel_width.as_dict(), {"xs": 100})

    def test_grid_class_names_accept_hooks(self):
        component = MasonryComponent()
        classes = component.grid_class_names(hooks=[lambda c: c.append("gallery")])
        self.assertEqual(classes, ["masonry-grid", "gallery"])

    def test_negative_gutter_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            MasonryComponent(gutter=-5)
        self.assertEqual(ctx.exception.code, "min_value")

    def test_gutter_digit_string_coerced(self):
        component = MasonryComponent(gutter="15")
        self.assertEqual(component.gutter, 15)
        self.assertEqual(component.masonry_config()["gutter"], 15)
