"""Read and write whole text files with status codes instead of exceptions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from filekit.config import CODE_SUCCESS, Config
from filekit.paths import PathLike, ensure_parent_directory
from filekit.transfer import ExistPolicy, resolve_existing

_LOGGER = logging.getLogger(__name__)


def read_text(path: PathLike, encoding: str = Config.DEFAULT_ENCODING) -> Optional[str]:
    """Return the contents of ``path``, or ``None`` if it is not a readable file."""

    p = Path(path)
    if not p.is_file():
        return None
    try:
        return p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        _LOGGER.warning("Failed to read %s: %s", p, e)
        return None


def write_text(
    path: PathLike,
    text: str,
    policy: ExistPolicy = ExistPolicy.OVERWRITE,
    encoding: str = Config.DEFAULT_ENCODING,
) -> int:
    """Write ``text`` to a new file at ``path``.

    Returns
    -------
    int
        ``0`` on success, or if the file exists and policy is ``GIVE_UP``,
        ``-1`` if the parent directory could not be ensured,
        ``-2`` if the existing file could not be deleted,
        ``-3`` if the file could not be created,
        ``-4`` if an error occurred while writing.
    """

    p = Path(path)
    if ensure_parent_directory(p) != CODE_SUCCESS:
        return -1

    early = resolve_existing(p, policy)
    if early is not None:
        return early

    try:
        f = p.open("x", encoding=encoding)
    except OSError as e:
        _LOGGER.warning("Failed to create %s: %s", p, e)
        return -3

    try:
        with f:
            f.write(text)
    except (OSError, UnicodeEncodeError) as e:
        _LOGGER.warning("Failed to write %s: %s", p, e)
        return -4
    return CODE_SUCCESS
