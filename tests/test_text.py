from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from filekit.text import read_text, write_text
from filekit.transfer import ExistPolicy


def test_write_then_read_utf8(tmp_path: Path):
    target = tmp_path / "notes" / "ro.txt"

    assert write_text(target, "Bună ziua, țară!\n") == 0
    assert read_text(target) == "Bună ziua, țară!\n"


def test_write_overwrites_by_default(tmp_path: Path):
    target = tmp_path / "f.txt"
    target.write_text("old")

    assert write_text(target, "new") == 0
    assert read_text(target) == "new"


def test_write_give_up_keeps_file(tmp_path: Path):
    target = tmp_path / "f.txt"
    target.write_text("old")

    assert write_text(target, "new", ExistPolicy.GIVE_UP) == 0
    assert read_text(target) == "old"


def test_write_raise_policy(tmp_path: Path):
    target = tmp_path / "f.txt"
    target.write_text("old")

    with pytest.raises(FileExistsError):
        write_text(target, "new", ExistPolicy.RAISE)


def test_write_parent_is_file(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    assert write_text(blocker / "f.txt", "x") == -1


def test_write_delete_failure(tmp_path: Path):
    target = tmp_path / "f.txt"
    target.write_text("old")

    with patch("filekit.transfer.delete", return_value=False):
        assert write_text(target, "new") == -2


def test_write_create_failure(tmp_path: Path):
    with patch.object(Path, "open", side_effect=PermissionError("denied")):
        assert write_text(tmp_path / "f.txt", "x") == -3


def test_write_encoding_failure(tmp_path: Path):
    assert write_text(tmp_path / "f.txt", "țară", encoding="ascii") == -4


def test_read_text_missing_or_directory(tmp_path: Path):
    assert read_text(tmp_path / "missing.txt") is None
    assert read_text(tmp_path) is None


def test_read_text_undecodable(tmp_path: Path):
    target = tmp_path / "bad.txt"
    target.write_bytes(b"\xff\xfe\xfa")

    assert read_text(target) is None
