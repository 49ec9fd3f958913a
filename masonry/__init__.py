"""Responsive masonry image-grid component for Django."""

from .apps import MasonryConfig
from .conf import settings

__all__ = ["settings", "MasonryConfig"]
