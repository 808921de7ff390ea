"""Exceptions raised by the stream copier and the callback file helper."""

from __future__ import annotations

import os
from typing import Union


class CopyError(OSError):
    """Base class for stream copy failures.

    ``copied`` is the number of bytes fully written to the output before the
    failure.
    """

    def __init__(self, message: str, copied: int) -> None:
        super().__init__(message)
        self.copied = copied


class ShortReadError(CopyError):
    """The input stream ended before the requested length was read."""

    def __init__(self, copied: int, expected: int) -> None:
        super().__init__(
            f"Input ended after {copied} of {expected} bytes", copied
        )
        self.expected = expected


class ReadError(CopyError):
    """Reading from the input stream failed."""


class WriteError(CopyError):
    """Writing to the output stream failed."""


class ParentDirectoryError(OSError):
    """The parent directory of ``path`` could not be ensured.

    ``code`` is the status returned by ``ensure_parent_directory``.
    """

    def __init__(self, path: Union[str, os.PathLike], code: int) -> None:
        super().__init__(f"Cannot ensure parent directory of {path} (code {code})")
        self.path = path
        self.code = code
