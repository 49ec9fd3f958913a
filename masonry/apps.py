import logging
from importlib import import_module

from django.apps import AppConfig

from masonry.conf import settings

logger = logging.getLogger(__name__)


class MasonryConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "masonry"
    verbose_name = "Masonry"

    def ready(self):
        # Grid class hooks: "module" entries connect their own receivers,
        # "module:callable" entries are connected here.
        from .signals import update_grid_class_names

        hooks = getattr(settings, "MASONRY_GRID_CLASS_HOOKS", [])
        for entry in hooks:
            try:
                module_path, callable_name = entry.split(":", 1)
            except ValueError:
                import_module(entry)
                logger.debug("Imported grid class hook module %s", entry)
            else:
                module = import_module(module_path)
                receiver = getattr(module, callable_name)
                update_grid_class_names.connect(receiver, dispatch_uid=entry)
                logger.debug("Connected grid class hook %s", entry)
