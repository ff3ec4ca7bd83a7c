# entry_tracker/views/__init__.py
from importlib import import_module

from entry_tracker.core.models import DISPLAY_NAMES, DisplayOption

VIEW_NAMES = {option: name for name, option in DISPLAY_NAMES.items()}


def get_view(option, config):
    name = VIEW_NAMES[DisplayOption(option)]
    path = config['display_modules'][name]
    module_name, cls_name = path.rsplit('.', 1)
    mod = import_module(module_name)
    return getattr(mod, cls_name)(config)
