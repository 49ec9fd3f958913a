"""Configuration payload for the client-side masonry engine."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from masonry.constants import COLUMN_WIDTH_SELECTOR, ITEM_SELECTOR
from masonry.units import UnitSelector

logger = logging.getLogger(__name__)

__all__ = ["build_masonry_config", "masonry_config_json"]


def build_masonry_config(
    selector: UnitSelector,
    gutter: Optional[int] = None,
    horizontal_order: Any = True,
) -> dict[str, Any]:
    """Return the engine options for ``selector`` and the scalar flags.

    ``gutter`` is only emitted when positive; a zero gutter and a missing
    gutter produce the same payload.
    """

    config: dict[str, Any] = {
        "columnWidth": COLUMN_WIDTH_SELECTOR,
        "itemSelector": ITEM_SELECTOR,
        "percentPosition": selector.is_percent_mode(),
        "horizontalOrder": bool(horizontal_order),
    }
    if gutter and int(gutter) > 0:
        config["gutter"] = int(gutter)
    logger.debug("Built masonry config: %s", config)
    return config


def masonry_config_json(config: dict[str, Any]) -> str:
    return json.dumps(config)
