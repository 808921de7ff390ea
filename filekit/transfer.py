"""Copy and move files or directory trees with a destination-exists policy."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import IO, Optional

from tqdm import tqdm

from filekit.config import CODE_SUCCESS
from filekit.paths import PathLike, delete, ensure_directory, ensure_parent_directory
from filekit.streams import close_quietly, copy_stream

_LOGGER = logging.getLogger(__name__)


class ExistPolicy(Enum):
    """What to do when the destination of a write, copy or move exists."""

    OVERWRITE = "overwrite"
    GIVE_UP = "give_up"
    RAISE = "raise"


def resolve_existing(destination: Path, policy: ExistPolicy) -> Optional[int]:
    """Apply ``policy`` to ``destination``.

    Returns ``None`` when the caller should go on writing, otherwise the status
    code to return: ``0`` for ``GIVE_UP`` and ``-2`` when an existing
    destination could not be deleted.
    """

    if not destination.exists() and not destination.is_symlink():
        return None
    if policy is ExistPolicy.GIVE_UP:
        return CODE_SUCCESS
    if policy is ExistPolicy.RAISE:
        raise FileExistsError(f"The destination already exists: {destination}")
    if not delete(destination):
        return -2
    return None


def open_input(path: PathLike) -> Optional[IO[bytes]]:
    """Open ``path`` for binary reading, or return ``None``."""

    try:
        return Path(path).open("rb")
    except OSError as e:
        _LOGGER.warning("Failed to open %s for reading: %s", path, e)
        return None


def open_output(path: PathLike) -> Optional[IO[bytes]]:
    """Open ``path`` for binary writing, creating its parent first, or return ``None``."""

    code = ensure_parent_directory(path)
    if code not in (CODE_SUCCESS, -1):
        return None
    try:
        return Path(path).open("wb")
    except OSError as e:
        _LOGGER.warning("Failed to open %s for writing: %s", path, e)
        return None


def _copy_file(source: Path, destination: Path, policy: ExistPolicy, progress: bool) -> int:
    early = resolve_existing(destination, policy)
    if early is not None:
        return early

    if ensure_parent_directory(destination) in (-2, -3):
        return -3

    fin = open_input(source)
    fout = open_output(destination)
    if fin is None or fout is None:
        close_quietly(fin, fout)
        return -4

    try:
        if progress:
            total = source.stat().st_size
            with tqdm(total=total, unit="B", unit_scale=True, desc=source.name) as pbar:
                copy_stream(fin, fout, progress=pbar.update)
        else:
            copy_stream(fin, fout)
        # Closing flushes; a failure there means the copy is incomplete.
        fout.close()
    except OSError as e:
        _LOGGER.warning("Failed to copy %s to %s: %s", source, destination, e)
        return -5
    finally:
        close_quietly(fin, fout)
    return CODE_SUCCESS


def copy_path(
    source: PathLike,
    destination: PathLike,
    policy: ExistPolicy = ExistPolicy.OVERWRITE,
    *,
    progress: bool = False,
) -> int:
    """Copy a file or a directory tree from ``source`` to ``destination``.

    Parameters
    ----------
    source:
        File or directory to copy.
    destination:
        Target path; directories are mirrored entry by entry beneath it.
    policy:
        What to do with destination files that exist already.
    progress:
        Show a byte progress bar for every copied file.

    Returns
    -------
    int
        ``0`` on success,
        ``-1`` if ``source`` does not exist,
        ``-2`` if an existing destination could not be deleted,
        ``-3`` if a destination directory could not be created,
        ``-4`` if a file stream could not be opened or a source directory
        could not be listed,
        ``-5`` if an error occurred while copying bytes.
    """

    src = Path(source)
    dst = Path(destination)
    if not src.exists():
        return -1

    if not src.is_dir():
        return _copy_file(src, dst, policy, progress)

    try:
        children = sorted(src.iterdir())
    except OSError as e:
        _LOGGER.warning("Failed to list %s: %s", src, e)
        return -4

    if not children:
        return CODE_SUCCESS if ensure_directory(dst) == CODE_SUCCESS else -3

    for child in children:
        code = copy_path(child, dst / child.name, policy, progress=progress)
        if code != CODE_SUCCESS:
            return code
    return CODE_SUCCESS


def move_by_copy_then_delete(source: PathLike, destination: PathLike) -> int:
    """Copy ``source`` over ``destination`` and delete ``source`` afterwards.

    Returns ``0`` on success, ``-1`` if the copy failed, ``-2`` if ``source``
    could not be deleted.
    """

    if copy_path(source, destination, ExistPolicy.OVERWRITE) != CODE_SUCCESS:
        return -1
    if not delete(source):
        return -2
    return CODE_SUCCESS


def rename(
    source: PathLike,
    destination: PathLike,
    policy: ExistPolicy = ExistPolicy.OVERWRITE,
) -> int:
    """Move ``source`` to ``destination``.

    Falls back to copy-then-delete when the OS refuses the rename, e.g.
    across filesystems.

    Returns
    -------
    int
        ``0`` on success (or destination exists and policy is ``GIVE_UP``),
        ``-1`` if ``source`` does not exist,
        ``-2`` if an existing destination could not be deleted,
        ``-3`` if the destination directory could not be created,
        ``-5`` if both the rename and the copy-then-delete fallback failed.
    """

    src = Path(source)
    dst = Path(destination)
    if not src.exists():
        return -1

    early = resolve_existing(dst, policy)
    if early is not None:
        return early

    if ensure_parent_directory(dst) in (-2, -3):
        return -3

    try:
        src.replace(dst)
        return CODE_SUCCESS
    except OSError as e:
        _LOGGER.warning("Rename %s -> %s failed, copying instead: %s", src, dst, e)

    if move_by_copy_then_delete(src, dst) != CODE_SUCCESS:
        return -5
    return CODE_SUCCESS
