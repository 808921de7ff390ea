"""
filekit: small helpers on top of the host filesystem.

Ensures directories and files exist, copies exact byte ranges between
streams, and copies, moves or writes files with status codes instead of
exceptions.
"""

__all__ = [
    "Config",
    "CODE_SUCCESS",
    "get_config",
    "__version__",
    # Paths
    "ensure_directory",
    "ensure_parent_directory",
    "create_file_if_absent",
    "ensure_file",
    "delete",
    "is_file_name_valid",
    # Streams
    "copy",
    "copy_stream",
    "close_quietly",
    "read_stream_text",
    # Transfer
    "ExistPolicy",
    "copy_path",
    "rename",
    "move_by_copy_then_delete",
    "open_input",
    "open_output",
    # Text
    "read_text",
    "write_text",
    # Errors
    "CopyError",
    "ShortReadError",
    "ReadError",
    "WriteError",
    "ParentDirectoryError",
]

__version__ = "0.1.0"

from filekit.config import CODE_SUCCESS, Config, get_config
from filekit.errors import (
    CopyError,
    ParentDirectoryError,
    ReadError,
    ShortReadError,
    WriteError,
)
from filekit.paths import (
    create_file_if_absent,
    delete,
    ensure_directory,
    ensure_file,
    ensure_parent_directory,
    is_file_name_valid,
)
from filekit.streams import close_quietly, copy, copy_stream, read_stream_text
from filekit.transfer import (
    ExistPolicy,
    copy_path,
    move_by_copy_then_delete,
    open_input,
    open_output,
    rename,
)
from filekit.text import read_text, write_text
