import logging

from django import forms
from crispy_forms.helper import FormHelper
from crispy_forms.layout import Column, Field, Fieldset, Layout, Row

from masonry.choices import Breakpoint, ColumnUnit
from masonry.component import MasonryComponent
from masonry.conf import settings
from masonry.units import coerce_unit
from masonry.viewports import ViewportValueSet, breakpoints_in_order

logger = logging.getLogger(__name__)


def width_field_name(unit: ColumnUnit, breakpoint: Breakpoint) -> str:
    return f"{ColumnUnit(unit).value}_{Breakpoint(breakpoint).value}"


class MasonryComponentForm(forms.Form):
    column_unit = forms.ChoiceField(
        choices=ColumnUnit.choices,
        initial=ColumnUnit.PIXEL,
        label="Column widths",
        widget=forms.RadioSelect,
    )
    gutter = forms.IntegerField(
        required=False,
        min_value=0,
        label="Gutter (in pixels)",
    )
    horizontal_order = forms.BooleanField(
        required=False,
        initial=True,
        label="Order items horizontally",
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["column_unit"].initial = coerce_unit(settings.MASONRY_COLUMN_UNIT)
        self.fields["gutter"].initial = settings.MASONRY_GUTTER
        self.fields["horizontal_order"].initial = bool(settings.MASONRY_HORIZONTAL_ORDER)
        # One optional width per breakpoint and unit; blank leaves it unset.
        for unit in ColumnUnit:
            for bp in breakpoints_in_order():
                self.fields[width_field_name(unit, bp)] = forms.IntegerField(
                    required=False,
                    min_value=0,
                    label=bp.label,
                    widget=forms.NumberInput(attrs={"class": "form-control form-control-sm"}),
                )
        self.fields["gutter"].widget.attrs.update({"class": "form-control"})

        self.helper = FormHelper()
        self.helper.form_tag = False  # outer form tag is in template
        self.helper.layout = Layout(
            Field("column_unit"),
            Fieldset(
                ColumnUnit.PIXEL.label,
                Row(*self._width_columns(ColumnUnit.PIXEL)),
            ),
            Fieldset(
                ColumnUnit.PERCENT.label,
                Row(*self._width_columns(ColumnUnit.PERCENT)),
            ),
            Row(
                Column(Field("gutter"), css_class="col-md-4"),
                Column(Field("horizontal_order"), css_class="col-md-8"),
            ),
        )

    @staticmethod
    def _width_columns(unit):
        return [
            Column(Field(width_field_name(unit, bp)), css_class="col")
            for bp in breakpoints_in_order()
        ]

    def clean(self):
        cleaned = super().clean()
        if self.errors:
            logger.warning("Masonry component form invalid: %s", self.errors.as_json())
        return cleaned

    def _value_set(self, unit) -> ViewportValueSet:
        widths = ViewportValueSet(unit)
        for bp in breakpoints_in_order():
            widths.set(bp, self.cleaned_data.get(width_field_name(unit, bp)))
        return widths

    def to_component(self) -> MasonryComponent:
        if not self.is_valid():
            raise ValueError("Cannot build a component from an invalid form")
        return MasonryComponent(
            column_unit=self.cleaned_data["column_unit"],
            gutter=self.cleaned_data.get("gutter") or 0,
            horizontal_order=self.cleaned_data.get("horizontal_order", False),
            pixel_width=self._value_set(ColumnUnit.PIXEL),
            percent_width=self._value_set(ColumnUnit.PERCENT),
        )

    @classmethod
    def from_component(cls, component: MasonryComponent, **kwargs):
        initial = {
            "column_unit": component.column_unit.value,
            "gutter": component.gutter,
            "horizontal_order": component.is_horizontal_order(),
        }
        for widths in (component.pixel_width, component.percent_width):
            for bp, value in widths.items():
                initial[width_field_name(widths.unit, bp)] = value
        kwargs.setdefault("initial", initial)
        return cls(**kwargs)
