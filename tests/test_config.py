import pytest

import filekit
from filekit.config import (
    CODE_SUCCESS,
    DEFAULT_BUFFER_SIZE,
    Config,
    get_config,
)


def test_code_success_is_zero():
    """CODE_SUCCESS convenience constant should match Config defaults."""

    assert CODE_SUCCESS == 0 == Config.CODE_SUCCESS


def test_config_singleton():
    """get_config should return the same singleton instance across calls."""

    c1 = get_config()
    c2 = get_config()
    assert c1 is c2
    assert isinstance(c1, Config)


def test_config_is_frozen():
    with pytest.raises(Exception):
        get_config().DEFAULT_BUFFER_SIZE = 1  # type: ignore[misc]


def test_default_buffer_size():
    assert DEFAULT_BUFFER_SIZE == 8 * 1024


def test_invalid_file_name_chars():
    """Both Windows and Unix reserved characters are listed."""

    chars = Config.INVALID_FILE_NAME_CHARS
    for ch in ('"', "*", "<", ">", "?", "|", "\0", ":"):
        assert ch in chars


def test_public_api_exports():
    for name in filekit.__all__:
        assert hasattr(filekit, name), name
