import os
from pathlib import Path
from typing import List, Union

from clictx.codec import Codec, RawCodec
from clictx.errors import ContextExistsError, ContextNotFoundError
from clictx.logger import logger
from clictx.models import Config
from clictx.storage.default_pointer import DefaultPointer
from clictx.storage.paths import PathPolicy, is_context_entry, name_from_path


class ContextStorage:
    """Filesystem storage for named contexts, one file per context.

    One context may be marked as the default through the ``_default.hcl``
    indicator. The storage directory does not have to exist yet; it is
    created by the first ``set_context``. No locking is done, so callers
    must not run mutations concurrently against the same directory.
    """

    def __init__(self, storage_dir: Union[str, Path], disable_symlinks: bool = False, codec: Codec = None):
        """Initialize storage over ``storage_dir``"""
        if storage_dir is None:
            raise ValueError("storage_dir is required")
        self.paths = PathPolicy(storage_dir)
        self.codec = codec or RawCodec()
        self.pointer = DefaultPointer(disable_symlinks=disable_symlinks)

    @property
    def storage_dir(self) -> Path:
        return self.paths.directory

    @property
    def disable_symlinks(self) -> bool:
        return self.pointer.disable_symlinks

    def list_contexts(self) -> List[str]:
        """List context names. A missing directory has no contexts."""
        try:
            entries = os.listdir(self.storage_dir)
        except FileNotFoundError:
            return []

        # _-prefixed entries are bookkeeping, anything else must be .hcl
        return [name_from_path(entry) for entry in entries if is_context_entry(entry)]

    def has_context(self, name: str) -> bool:
        """Check whether a context file exists for ``name``"""
        return self.paths.config_path(name).exists()

    def load_context(self, name: str) -> Config:
        """Load a context by name"""
        try:
            return self.codec.load(self.paths.config_path(name))
        except FileNotFoundError as e:
            raise ContextNotFoundError(name) from e

    def set_context(self, name: str, config: Config):
        """Save a context, overwriting any existing one of the same name.

        The first context saved while no default exists becomes the default.
        A failure while promoting it leaves the written file in place.
        """
        path = self.paths.config_path(name)
        path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)

        with open(path, "wb") as f:
            self.codec.write(config, f)
        logger.debug("Saved context {} to {}", name, path)

        if not self.get_default():
            self.set_default(name)

    def rename_context(self, old: str, new: str, overwrite: bool = True):
        """Rename a context, moving the default along with it.

        An existing ``new`` context is replaced unless ``overwrite`` is False.
        If ``new`` was the default, the default is cleared and not restored.
        """
        old_path = self.paths.config_path(old)
        try:
            os.stat(old_path)
        except FileNotFoundError as e:
            raise ContextNotFoundError(old) from e

        if old == new:
            return

        new_path = self.paths.config_path(new)
        if not overwrite and os.path.lexists(new_path):
            raise ContextExistsError(new)

        self.delete_context(new)
        os.rename(old_path, new_path)
        logger.debug("Renamed context {} to {}", old, new)

        if self.get_default() == old:
            self.set_default(new)

    def delete_context(self, name: str):
        """Delete a context. Deleting a missing context is not an error."""
        try:
            os.remove(self.paths.config_path(name))
            logger.debug("Deleted context {}", name)
        except FileNotFoundError:
            pass

        if self.get_default() == name:
            self.unset_default()

    def set_default(self, name: str):
        """Mark an existing context as the default"""
        src = self.paths.config_path(name)
        try:
            os.stat(src)
        except FileNotFoundError as e:
            raise ContextNotFoundError(name) from e

        self.pointer.set(src, self.paths.default_path(), name)
        logger.debug("Default context set to {}", name)

    def unset_default(self):
        """Clear the default context, if any"""
        self.pointer.clear(self.paths.default_path())

    def get_default(self) -> str:
        """Return the default context name, or "" when none is set.

        The name is not checked against an existing file; ``load_context``
        reports a missing one.
        """
        return self.pointer.read(self.paths.default_path()) or ""

    def __repr__(self):
        return f"<ContextStorage dir={self.storage_dir} disable_symlinks={self.disable_symlinks}>"
