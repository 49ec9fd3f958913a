"""Per-breakpoint value storage for responsive column widths.

A :class:`ViewportValueSet` holds at most one non-negative integer per
:class:`~masonry.choices.Breakpoint` and is bound to a single
:class:`~masonry.choices.ColumnUnit`. Values are independent: reading an unset
breakpoint never falls back to a neighbouring tier.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional, Union

from django.core.exceptions import ValidationError

from masonry.choices import Breakpoint, ColumnUnit
from masonry.conf import settings

logger = logging.getLogger(__name__)

__all__ = [
    "BreakpointDescriptor",
    "ViewportValueSet",
    "breakpoint_descriptor",
    "breakpoints_in_order",
    "coerce_width",
]

# Bootstrap grid tier thresholds, in pixels.
DEFAULT_BREAKPOINT_WIDTHS = {
    Breakpoint.XS: 0,
    Breakpoint.SM: 576,
    Breakpoint.MD: 768,
    Breakpoint.LG: 992,
    Breakpoint.XL: 1200,
}

BreakpointLike = Union[Breakpoint, str]


@dataclass(frozen=True)
class BreakpointDescriptor:
    """Media-query lower bound attached to a breakpoint."""

    name: Breakpoint
    min_width: int

    @property
    def css(self) -> str:
        return f"{self.min_width}px"

    @property
    def media_query(self) -> str:
        return f"(min-width: {self.css})"


def _coerce_breakpoint(value: BreakpointLike) -> Breakpoint:
    try:
        return Breakpoint(value)
    except ValueError:
        raise ValueError(f"Unknown breakpoint {value!r}") from None


def breakpoints_in_order() -> tuple[Breakpoint, ...]:
    """Fixed smallest-to-largest order used by every consumer."""
    return tuple(Breakpoint)


def breakpoint_descriptor(breakpoint: BreakpointLike) -> BreakpointDescriptor:
    bp = _coerce_breakpoint(breakpoint)
    overrides = getattr(settings, "MASONRY_BREAKPOINT_WIDTHS", None) or {}
    min_width = overrides.get(bp.value, DEFAULT_BREAKPOINT_WIDTHS[bp])
    return BreakpointDescriptor(name=bp, min_width=int(min_width))


def coerce_width(value: Any) -> Optional[int]:
    """Normalise ``value`` into ``None`` (unset) or a non-negative ``int``."""

    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return None
        try:
            value = int(value)
        except ValueError:
            raise ValidationError(
                "Enter a whole number.", code="invalid", params={"value": value}
            ) from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            "Enter a whole number.", code="invalid", params={"value": value}
        )
    if value < 0:
        raise ValidationError(
            "Ensure this value is greater than or equal to 0.",
            code="min_value",
            params={"value": value},
        )
    return value


@dataclass
class ViewportValueSet:
    """Mapping of breakpoint to an optional width, bound to one unit."""

    unit: ColumnUnit
    _values: dict[Breakpoint, int] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.unit = ColumnUnit(self.unit)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def get(self, breakpoint: BreakpointLike) -> Optional[int]:
        return self._values.get(_coerce_breakpoint(breakpoint))

    def is_set(self, breakpoint: BreakpointLike) -> bool:
        return _coerce_breakpoint(breakpoint) in self._values

    def set(self, breakpoint: BreakpointLike, value: Any) -> None:
        """Assign ``value`` to ``breakpoint``; ``None`` or ``""`` clears it.

        Raises :class:`ValidationError` for negative or non-numeric input and
        leaves the stored value untouched in that case.
        """
        bp = _coerce_breakpoint(breakpoint)
        width = coerce_width(value)
        if width is None:
            self._values.pop(bp, None)
        else:
            self._values[bp] = width
        logger.debug("Set %s width for %s to %r", self.unit.value, bp.value, width)

    def clear(self, breakpoint: BreakpointLike) -> None:
        self._values.pop(_coerce_breakpoint(breakpoint), None)

    def items(self) -> Iterator[tuple[Breakpoint, int]]:
        """Yield ``(breakpoint, value)`` for set breakpoints in fixed order."""
        for bp in breakpoints_in_order():
            if bp in self._values:
                yield bp, self._values[bp]

    # Static lookups exposed on the instance for convenience.
    breakpoints_in_order = staticmethod(breakpoints_in_order)
    breakpoint_descriptor = staticmethod(breakpoint_descriptor)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def as_dict(self) -> dict[str, int]:
        return {bp.value: value for bp, value in self.items()}

    @classmethod
    def from_dict(
        cls, unit: ColumnUnit, values: Optional[Mapping[str, Any]] = None
    ) -> "ViewportValueSet":
        instance = cls(unit=unit)
        for name, value in (values or {}).items():
            instance.set(name, value)
        return instance

    def copy(self) -> "ViewportValueSet":
        clone = type(self)(unit=self.unit)
        clone._values = dict(self._values)
        return clone

    def __len__(self) -> int:
        return len(self._values)
