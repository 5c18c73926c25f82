from clictx.storage.context_storage import ContextStorage
from clictx.storage.default_pointer import DefaultPointer
from clictx.storage.paths import PathPolicy, name_from_path

__all__ = ["ContextStorage", "DefaultPointer", "PathPolicy", "name_from_path"]
