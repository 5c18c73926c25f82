import os
from pathlib import Path
from typing import Union

CONTEXT_EXTENSION = ".hcl"
RESERVED_PREFIX = "_"
DEFAULT_FILENAME = RESERVED_PREFIX + "default" + CONTEXT_EXTENSION


def name_from_path(path: Union[str, Path]) -> str:
    """Return the context name for a path: its base name up to the last dot"""
    base = os.path.basename(os.fspath(path))
    dot = base.rfind(".")
    if dot >= 0:
        return base[:dot]
    return base


def is_context_entry(entry: str) -> bool:
    """Whether a directory entry is a user-visible context file"""
    if not entry or entry.startswith(RESERVED_PREFIX):
        return False
    return entry.endswith(CONTEXT_EXTENSION)


class PathPolicy:
    """Maps context names to files inside the storage directory. No I/O."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def config_path(self, name: str) -> Path:
        """Return the file path holding the named context"""
        return self.directory / f"{name}{CONTEXT_EXTENSION}"

    def default_path(self) -> Path:
        """Return the reserved path of the default indicator"""
        return self.directory / DEFAULT_FILENAME

    @staticmethod
    def name_from_path(path: Union[str, Path]) -> str:
        return name_from_path(path)

    def __repr__(self):
        return f"<PathPolicy directory={self.directory}>"
