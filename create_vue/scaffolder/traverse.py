"""Recursive directory walkers with caller-supplied callbacks.

Both walkers list a directory once, then dispatch every child to either the
directory callback or the file callback.  Symbolic links are never followed:
a link to a directory is reported as a file.  Entries removed by an earlier
callback are skipped.

- ``pre_order_directory_traverse`` calls ``dir_callback`` *before* descending
  and skips the descent when the callback removed the directory.
- ``post_order_directory_traverse`` descends first, so ``dir_callback`` sees
  an already-processed subtree.  This is what ``empty_dir`` builds on.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

PathCallback = Callable[[Path], None]


def _list_children(directory: Path) -> list[Path]:
    # Materialised up front: callbacks may delete or rename siblings.
    return [directory / name for name in os.listdir(directory)]


def _is_real_dir(path: Path) -> bool:
    return stat.S_ISDIR(path.lstat().st_mode)


def pre_order_directory_traverse(
    directory: str | Path,
    dir_callback: PathCallback,
    file_callback: PathCallback,
) -> None:
    """Walk *directory*, visiting each subdirectory before its contents.

    Raises:
        FileNotFoundError: If *directory* does not exist.
        NotADirectoryError: If *directory* is not a directory.
    """
    root = Path(os.path.abspath(directory))

    for fullpath in _list_children(root):
        if not os.path.lexists(fullpath):
            logger.debug("Skipping removed entry %s", fullpath)
            continue
        if _is_real_dir(fullpath):
            dir_callback(fullpath)
            if fullpath.exists():
                pre_order_directory_traverse(fullpath, dir_callback, file_callback)
            else:
                logger.debug("Skipping removed directory %s", fullpath)
            continue

        file_callback(fullpath)


def post_order_directory_traverse(
    directory: str | Path,
    dir_callback: PathCallback,
    file_callback: PathCallback,
) -> None:
    """Walk *directory*, visiting each subdirectory after its contents.

    Raises:
        FileNotFoundError: If *directory* does not exist.
        NotADirectoryError: If *directory* is not a directory.
    """
    root = Path(os.path.abspath(directory))

    for fullpath in _list_children(root):
        if not os.path.lexists(fullpath):
            logger.debug("Skipping removed entry %s", fullpath)
            continue
        if _is_real_dir(fullpath):
            post_order_directory_traverse(fullpath, dir_callback, file_callback)
            dir_callback(fullpath)
            continue

        file_callback(fullpath)


def empty_dir(directory: str | Path) -> None:
    """Delete everything inside *directory*, leaving the directory itself."""
    logger.debug("Emptying %s", directory)
    post_order_directory_traverse(
        directory,
        lambda path: path.rmdir(),
        lambda path: path.unlink(),
    )
