"""Per-breakpoint column width rows for stylesheet generation."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

from masonry.viewports import ViewportValueSet, breakpoint_descriptor, breakpoints_in_order

logger = logging.getLogger(__name__)

__all__ = ["ColumnWidth", "project_column_widths"]


@dataclass(frozen=True)
class ColumnWidth:
    """One CSS column width rule: a length and the media query it applies to."""

    width: str
    breakpoint: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


def project_column_widths(value_set: ViewportValueSet) -> list[ColumnWidth]:
    """Rows for every breakpoint with a set value, in breakpoint order.

    Unset breakpoints are skipped; ``0`` counts as set. The unit suffix comes
    from the unit the value set is bound to. Returns a new list on each call.
    """

    suffix = value_set.unit.css_suffix
    rows: list[ColumnWidth] = []
    for bp in breakpoints_in_order():
        value = value_set.get(bp)
        if value is None:
            continue
        rows.append(
            ColumnWidth(
                width=f"{value:d}{suffix}",
                breakpoint=breakpoint_descriptor(bp).media_query,
            )
        )
    logger.debug("Projected %d column widths (%s)", len(rows), value_set.unit.value)
    return rows
