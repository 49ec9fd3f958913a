from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from masonry.choices import ColumnUnit
from masonry.viewports import ViewportValueSet

__all__ = ["UnitSelector", "coerce_unit"]


def coerce_unit(value: Union[ColumnUnit, str, None]) -> ColumnUnit:
    """Anything other than ``"percent"`` selects pixels."""
    return ColumnUnit.PERCENT if value == ColumnUnit.PERCENT else ColumnUnit.PIXEL


@dataclass(frozen=True)
class UnitSelector:
    """Chooses which of the two sibling width sets is active."""

    unit: ColumnUnit = ColumnUnit.PIXEL
    pixel_widths: ViewportValueSet = field(
        default_factory=lambda: ViewportValueSet(ColumnUnit.PIXEL)
    )
    percent_widths: ViewportValueSet = field(
        default_factory=lambda: ViewportValueSet(ColumnUnit.PERCENT)
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit", coerce_unit(self.unit))
        if self.pixel_widths.unit is not ColumnUnit.PIXEL:
            raise ValueError("pixel_widths must be bound to the pixel unit")
        if self.percent_widths.unit is not ColumnUnit.PERCENT:
            raise ValueError("percent_widths must be bound to the percent unit")

    def is_percent_mode(self) -> bool:
        return self.unit is ColumnUnit.PERCENT

    def active_value_set(self) -> ViewportValueSet:
        return self.percent_widths if self.is_percent_mode() else self.pixel_widths

    def css_unit_suffix(self) -> str:
        return self.unit.css_suffix
