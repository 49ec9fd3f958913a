from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from masonry.constants import GRID_CLASS_NAME
from masonry.signals import update_grid_class_names

__all__ = ["grid_class_names"]

ClassNameHook = Callable[[list], Any]


def grid_class_names(
    component: Optional[Any] = None,
    hooks: Iterable[ClassNameHook] = (),
) -> list[str]:
    """Class names for the grid container element.

    Starts from the base class, then lets signal receivers and ``hooks``
    append to the list in place. Order is kept and duplicates are not removed.
    """

    classes = [GRID_CLASS_NAME]
    sender = type(component) if component is not None else None
    update_grid_class_names.send(sender=sender, classes=classes, component=component)
    for hook in hooks:
        hook(classes)
    return classes
