import os
import stat
from pathlib import Path
from typing import Optional, Union

from clictx.logger import logger
from clictx.storage.paths import name_from_path

PathLike = Union[str, Path]


def _remove_if_exists(path: PathLike):
    """Remove a file or link, treating a missing path as success"""
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


class DefaultPointer:
    """Reads and writes the indicator naming the default context.

    A symlink to the context file is preferred. When symlinks are disabled,
    or creating one fails, a regular file holding the bare context name is
    written instead. Both forms are accepted on read.
    """

    def __init__(self, disable_symlinks: bool = False):
        self.disable_symlinks = disable_symlinks

    def set(self, src_path: PathLike, indicator_path: PathLike, name: str):
        """Point the indicator at ``src_path``, the file of context ``name``"""
        if not self.disable_symlinks:
            try:
                self._create_symlink(src_path, indicator_path)
                return
            except (OSError, NotImplementedError) as e:
                logger.warning("Symlink for default context failed ({}), using a plain file", e)

        # Plain-file fallback. Not atomic.
        # fsencode keeps names that came from listdir or readlink intact.
        data = os.fsencode(name)
        if os.path.islink(indicator_path):
            os.remove(indicator_path)
        with open(indicator_path, "wb") as f:
            f.write(data)
        logger.debug("Default context written as plain file: {}", name)

    def clear(self, indicator_path: PathLike):
        """Remove the indicator; a missing indicator is not an error"""
        _remove_if_exists(indicator_path)

    def read(self, indicator_path: PathLike) -> Optional[str]:
        """Return the default context name, or None when there is none.

        The link target is never followed, so a dangling default still
        reports its name.
        """
        try:
            st = os.lstat(indicator_path)
        except FileNotFoundError:
            return None

        if stat.S_ISLNK(st.st_mode):
            return name_from_path(os.readlink(indicator_path))

        with open(indicator_path, "rb") as f:
            return os.fsdecode(f.read())

    def _create_symlink(self, src_path: PathLike, dst_path: PathLike):
        src = os.fspath(src_path)
        _remove_if_exists(dst_path)

        error = None
        try:
            os.symlink(src, dst_path)
        except (OSError, NotImplementedError) as e:
            error = e

        # Some platforms report failure even though the link was created,
        # so the readback decides.
        try:
            target = os.readlink(dst_path)
        except OSError:
            target = None

        if target == src:
            if error is not None:
                logger.debug("Ignoring symlink error, link exists: {}", error)
            logger.debug("Default context linked to {}", src)
            return
        if error is None:
            # The create call succeeded, so trust it even without a readback.
            logger.debug("Default context linked to {} (readback gave {!r})", src, target)
            return
        raise error

    def __repr__(self):
        return f"<DefaultPointer disable_symlinks={self.disable_symlinks}>"
