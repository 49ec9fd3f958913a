"""Configured masonry component as seen by page templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from masonry.choices import ColumnUnit
from masonry.conf import settings
from masonry.services.classes import ClassNameHook, grid_class_names
from masonry.services.config import build_masonry_config, masonry_config_json
from masonry.services.widths import ColumnWidth, project_column_widths
from masonry.units import UnitSelector, coerce_unit
from masonry.viewports import ViewportValueSet, coerce_width


def _default_unit() -> ColumnUnit:
    return coerce_unit(settings.MASONRY_COLUMN_UNIT)


def _default_gutter() -> int:
    return int(settings.MASONRY_GUTTER or 0)


def _default_horizontal_order() -> bool:
    return bool(settings.MASONRY_HORIZONTAL_ORDER)


@dataclass
class MasonryComponent:
    """Column unit, widths and layout flags for one masonry grid."""

    column_unit: ColumnUnit = field(default_factory=_default_unit)
    gutter: Optional[int] = field(default_factory=_default_gutter)
    horizontal_order: bool = field(default_factory=_default_horizontal_order)
    pixel_width: ViewportValueSet = field(
        default_factory=lambda: ViewportValueSet(ColumnUnit.PIXEL)
    )
    percent_width: ViewportValueSet = field(
        default_factory=lambda: ViewportValueSet(ColumnUnit.PERCENT)
    )

    def __post_init__(self) -> None:
        self.column_unit = coerce_unit(self.column_unit)
        # Raises ValidationError for negative or non-numeric gutters.
        self.gutter = coerce_width(self.gutter)

    def unit_selector(self) -> UnitSelector:
        return UnitSelector(
            unit=self.column_unit,
            pixel_widths=self.pixel_width,
            percent_widths=self.percent_width,
        )

    def is_percent_position(self) -> bool:
        return self.unit_selector().is_percent_mode()

    def is_horizontal_order(self) -> bool:
        return bool(self.horizontal_order)

    def column_unit_css(self) -> str:
        return self.unit_selector().css_unit_suffix()

    def column_width_data(self) -> ViewportValueSet:
        return self.unit_selector().active_value_set()

    def column_widths(self) -> list[ColumnWidth]:
        return project_column_widths(self.column_width_data())

    def masonry_config(self) -> dict[str, Any]:
        return build_masonry_config(
            self.unit_selector(),
            gutter=self.gutter,
            horizontal_order=self.horizontal_order,
        )

    def masonry_config_json(self) -> str:
        return masonry_config_json(self.masonry_config())

    def grid_class_names(self, hooks: Iterable[ClassNameHook] = ()) -> list[str]:
        return grid_class_names(self, hooks=hooks)
