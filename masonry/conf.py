"""Masonry settings with package defaults.

Any ``MASONRY_*`` name missing from the project's Django settings resolves to
the default below; other names are read straight from Django settings.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from django.conf import settings as django_settings

__all__ = ["settings", "MasonrySettings"]


@dataclass
class MasonrySettings:
    """Read-through view of Django settings for the masonry app."""

    defaults: dict[str, Any]

    def __getattr__(self, attr: str) -> Any:
        # Looked up on every access so override_settings takes effect.
        if attr in self.defaults:
            return getattr(django_settings, attr, self.defaults[attr])
        return getattr(django_settings, attr)


settings = MasonrySettings(
    defaults={
        "MASONRY_COLUMN_UNIT": "pixel",
        "MASONRY_GUTTER": 10,
        "MASONRY_HORIZONTAL_ORDER": True,
        "MASONRY_BREAKPOINT_WIDTHS": {},
        "MASONRY_GRID_CLASS_HOOKS": [],
    }
)
