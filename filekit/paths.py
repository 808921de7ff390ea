"""Path and directory helpers.

Each helper makes a single best-effort attempt against the host filesystem
and reports the outcome as a small integer status code instead of raising:

- ensure_directory(path): create a directory (and parents) if missing
- ensure_parent_directory(path): same, for the parent of ``path``
- create_file_if_absent(path): create an empty file if missing
- ensure_file(path, on_create): create an empty file and initialize it
- delete(path): remove a file or a directory tree
- is_file_name_valid(name): reject names with reserved characters
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Union

from filekit.config import CODE_SUCCESS, get_config
from filekit.errors import ParentDirectoryError

PathLike = Union[str, os.PathLike]

_LOGGER = logging.getLogger(__name__)


def ensure_directory(path: PathLike) -> int:
    """Create directory ``path`` and any missing parents.

    Returns
    -------
    int
        ``0`` if the directory exists already or was created,
        ``-1`` if ``path`` exists but is not a directory,
        ``-2`` if the directory could not be checked or created.
    """

    p = Path(path)
    try:
        if p.exists():
            return CODE_SUCCESS if p.is_dir() else -1
        p.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as e:
        _LOGGER.warning("Failed to create directory %s: %s", p, e)
        return -2
    return CODE_SUCCESS


def ensure_parent_directory(path: PathLike) -> int:
    """Create the parent directory of ``path`` if it does not exist.

    Returns
    -------
    int
        ``0`` if the parent exists already or was created,
        ``-1`` if ``path`` has no parent (filesystem root or ``.``),
        ``-2`` if the parent could not be created,
        ``-3`` if the parent exists but is not a directory.
    """

    p = Path(path)
    parent = p.parent
    if parent == p:
        return -1
    code = ensure_directory(parent)
    if code == -1:
        return -3
    return code


def create_file_if_absent(path: PathLike) -> int:
    """Create an empty file at ``path`` unless something exists there already.

    Returns
    -------
    int
        ``0`` if the file exists already or was created,
        ``-1`` if the file could not be created because it appeared meanwhile,
        ``-2`` if an OS error occurred while checking or creating the file,
        ``-3`` if the parent directory could not be created.
    """

    p = Path(path)
    try:
        if p.exists():
            return CODE_SUCCESS
    except (OSError, ValueError) as e:
        _LOGGER.warning("Failed to check %s: %s", p, e)
        return -2

    # A path without a parent is created relative to the working directory.
    code = ensure_parent_directory(p)
    if code not in (CODE_SUCCESS, -1):
        return -3

    try:
        p.touch(exist_ok=False)
    except FileExistsError:
        return -1
    except (OSError, ValueError) as e:
        _LOGGER.warning("Failed to create file %s: %s", p, e)
        return -2
    return CODE_SUCCESS


def ensure_file(path: PathLike, on_create: Callable[[Path], None]) -> Path:
    """Create an empty file at ``path`` and pass it to ``on_create``.

    If the file exists already it is returned as is and ``on_create`` is not
    called. ``on_create`` receives the freshly created path and may write
    initial contents.

    Raises
    ------
    ParentDirectoryError
        If the parent directory could not be created.
    OSError
        If the file itself could not be created.
    """

    p = Path(path)
    if p.exists():
        return p

    code = ensure_parent_directory(p)
    if code not in (CODE_SUCCESS, -1):
        raise ParentDirectoryError(p, code)

    p.touch(exist_ok=False)
    on_create(p)
    return p


def delete(path: PathLike) -> bool:
    """Delete a file or a directory tree.

    Returns ``True`` if nothing is left at ``path``, ``False`` as soon as one
    entry could not be removed.
    """

    p = Path(path)
    if not p.exists() and not p.is_symlink():
        return True

    try:
        if p.is_dir() and not p.is_symlink():
            for child in p.iterdir():
                if not delete(child):
                    return False
            p.rmdir()
        else:
            p.unlink()
    except OSError as e:
        _LOGGER.warning("Failed to delete %s: %s", p, e)
        return False
    return True


def is_file_name_valid(name: str) -> bool:
    """Return whether ``name`` avoids characters reserved on Windows or Unix."""

    return not any(ch in name for ch in get_config().INVALID_FILE_NAME_CHARS)
