"""Shared choice enumerations for the masonry component."""

from django.db import models


class ColumnUnit(models.TextChoices):
    """Unit applied to configured column widths."""

    PIXEL = "pixel", "Pixels"
    PERCENT = "percent", "Percentages"

    @property
    def css_suffix(self) -> str:
        return "%" if self is ColumnUnit.PERCENT else "px"


class Breakpoint(models.TextChoices):
    """Responsive tiers, declared smallest to largest."""

    XS = "xs", "Extra small"
    SM = "sm", "Small"
    MD = "md", "Medium"
    LG = "lg", "Large"
    XL = "xl", "Extra large"
