"""
Filesystem helpers.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


def folder_size(folder_path: Optional[Union[str, os.PathLike]]) -> int:
    """
    Sum the sizes of a directory tree.

    Walks the tree synchronously. Directories count their own entry size plus
    their children; symbolic links are neither counted nor followed.

    Args:
        folder_path: Root of the walk; a falsy value returns 0

    Returns:
        Total size in bytes

    Raises:
        FileNotFoundError: If ``folder_path`` does not exist
        OSError: Any other error from ``lstat``/``scandir``
    """
    if not folder_path:
        return 0

    total = 0
    pending = [Path(folder_path)]
    while pending:
        path = pending.pop()
        st = path.lstat()
        if stat.S_ISLNK(st.st_mode):
            continue
        total += st.st_size
        if stat.S_ISDIR(st.st_mode):
            with os.scandir(path) as entries:
                pending.extend(Path(entry.path) for entry in entries)

    logger.debug(f"Folder size of {folder_path}: {total} bytes")
    return total
