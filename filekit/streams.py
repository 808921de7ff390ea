"""Stream copying through a fixed-size reusable buffer.

``copy`` transfers an exact number of bytes; ``copy_stream`` transfers
everything until the input is exhausted. Neither flushes nor closes the
streams it is given, their lifecycle stays with the caller.
"""

from __future__ import annotations

import io
import logging
from typing import IO, Any, Callable, Optional

from filekit.config import Config
from filekit.errors import ReadError, ShortReadError, WriteError

_LOGGER = logging.getLogger(__name__)


def _read_into(stream: IO[bytes], view: memoryview) -> int:
    """Read up to ``len(view)`` bytes into ``view`` and return the count."""

    readinto = getattr(stream, "readinto", None)
    if readinto is not None:
        return readinto(view) or 0
    data = stream.read(len(view))
    n = len(data)
    view[:n] = data
    return n


def _write_all(stream: IO[bytes], view: memoryview, copied: int) -> None:
    written = 0
    size = len(view)
    while written < size:
        try:
            n = stream.write(view[written:])
        except OSError as e:
            raise WriteError(f"Write failed after {copied} bytes: {e}", copied) from e
        # Raw streams return None when non-blocking and nothing was written;
        # other file-likes returning None have taken the whole chunk.
        if n is None:
            if isinstance(stream, io.RawIOBase):
                raise WriteError(f"Output would block after {copied} bytes", copied)
            return
        if n == 0:
            raise WriteError(f"Output accepted no data after {copied} bytes", copied)
        written += n


def _fill(stream: IO[bytes], view: memoryview, copied: int, length: int) -> None:
    filled = 0
    size = len(view)
    while filled < size:
        try:
            n = _read_into(stream, view[filled:])
        except OSError as e:
            raise ReadError(f"Read failed after {copied} bytes: {e}", copied) from e
        if n == 0:
            raise ShortReadError(copied, length)
        filled += n


def copy(
    input: IO[bytes],
    output: IO[bytes],
    length: int,
    buffer_size: int = Config.DEFAULT_BUFFER_SIZE,
) -> int:
    """Copy exactly ``length`` bytes from ``input`` to ``output``.

    Data moves in chunks of at most ``buffer_size`` bytes through a single
    buffer, so ``ceil(length / buffer_size)`` writes are issued. A read that
    returns part of a chunk is continued until the chunk is full; a chunk is
    only written once it is complete.

    Parameters
    ----------
    input:
        Readable binary stream.
    output:
        Writable binary stream.
    length:
        Number of bytes to copy (``>= 0``).
    buffer_size:
        Size of the intermediate buffer (``> 0``).

    Returns
    -------
    int
        ``length``.

    Raises
    ------
    ShortReadError
        If ``input`` ends before ``length`` bytes were read.
    ReadError, WriteError
        If the underlying stream raises ``OSError``. ``copied`` on the
        exception tells how many bytes reached ``output`` before the failure.
    """

    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be > 0, got {buffer_size}")
    if length == 0:
        return 0

    buffer = bytearray(min(buffer_size, length))
    view = memoryview(buffer)
    copied = 0
    while copied < length:
        chunk = min(buffer_size, length - copied)
        _fill(input, view[:chunk], copied, length)
        _write_all(output, view[:chunk], copied)
        copied += chunk
    return copied


def copy_stream(
    input: IO[bytes],
    output: IO[bytes],
    buffer_size: int = Config.DEFAULT_BUFFER_SIZE,
    progress: Optional[Callable[[int], Any]] = None,
) -> int:
    """Copy everything left in ``input`` to ``output`` and return the byte count.

    ``progress`` is called with the size of each chunk once it is written.
    """

    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be > 0, got {buffer_size}")

    view = memoryview(bytearray(buffer_size))
    copied = 0
    while True:
        try:
            n = _read_into(input, view)
        except OSError as e:
            raise ReadError(f"Read failed after {copied} bytes: {e}", copied) from e
        if n == 0:
            return copied
        _write_all(output, view[:n], copied)
        copied += n
        if progress is not None:
            progress(n)


def close_quietly(*closeables: Any) -> None:
    """Close every non-``None`` argument, logging instead of raising on failure."""

    for c in closeables:
        if c is None:
            continue
        try:
            c.close()
        except Exception as e:
            _LOGGER.warning("Failed to close %r: %s", c, e)


def read_stream_text(stream: IO[bytes], encoding: str = Config.DEFAULT_ENCODING) -> str:
    """Read the rest of a binary stream and decode it."""

    return stream.read().decode(encoding)
