# entry_tracker/storage/__init__.py
from importlib import import_module


def get_repository(name, config):
    path = config['storage_backends'][name]
    module_name, cls_name = path.rsplit('.', 1)
    mod = import_module(module_name)
    return getattr(mod, cls_name).from_config(config)
